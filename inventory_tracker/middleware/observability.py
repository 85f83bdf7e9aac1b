from __future__ import annotations

import time
import uuid

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from inventory_tracker.core.logging import get_logger
from inventory_tracker.core.metrics import normalize_path, record_request_metrics

REQUEST_ID_HEADER = "X-Request-ID"


class ObservabilityMiddleware(BaseHTTPMiddleware):
    """Request metrics, a request id echoed back to the client, and logs for 4xx/5xx."""

    def __init__(self, app, *, log_client_errors: bool = True) -> None:
        super().__init__(app)
        self.logger = get_logger("inventory_tracker.requests")
        self.log_client_errors = log_client_errors

    async def dispatch(self, request: Request, call_next) -> Response:
        request_id = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex
        request.state.request_id = request_id
        start = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception:
            elapsed = time.perf_counter() - start
            record_request_metrics(request, 500, elapsed)
            self.logger.exception("Unhandled server error", extra=self._context(request, request_id, 500, elapsed))
            raise

        elapsed = time.perf_counter() - start
        record_request_metrics(request, response.status_code, elapsed)
        response.headers[REQUEST_ID_HEADER] = request_id

        if response.status_code >= 500:
            self.logger.error(
                "Server error response", extra=self._context(request, request_id, response.status_code, elapsed)
            )
        elif response.status_code >= 400 and self.log_client_errors:
            self.logger.warning(
                "Client error response", extra=self._context(request, request_id, response.status_code, elapsed)
            )
        return response

    @staticmethod
    def _context(request: Request, request_id: str, status_code: int, elapsed: float) -> dict:
        return {
            "request_id": request_id,
            "method": request.method,
            "route": normalize_path(request),
            "status_code": status_code,
            "duration_ms": round(elapsed * 1000, 3),
            "client_ip": request.client.host if request.client else None,
        }
