from __future__ import annotations

from typing import Callable

from fastapi import status
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import JSONResponse

from inventory_tracker.core.config import settings
from inventory_tracker.core.logging import get_logger

_BODY_METHODS = frozenset({"POST", "PUT", "PATCH"})


class PayloadLimitMiddleware(BaseHTTPMiddleware):
    """Reject movement payloads larger than ``MAX_REQUEST_SIZE_BYTES`` with 413."""

    def __init__(self, app, max_bytes: int | None = None) -> None:
        super().__init__(app)
        self.max_bytes = max_bytes or settings.MAX_REQUEST_SIZE_BYTES
        self.logger = get_logger("inventory_tracker.request_limit")

    async def dispatch(self, request: Request, call_next: Callable):
        if request.method not in _BODY_METHODS:
            return await call_next(request)

        declared = request.headers.get("content-length", "")
        size = int(declared) if declared.isdigit() else len(await request.body())
        if size > self.max_bytes:
            self.logger.warning(
                "Rejected oversized payload",
                extra={"method": request.method, "path": request.url.path, "size": size, "limit": self.max_bytes},
            )
            return JSONResponse(
                {"detail": f"Request payload exceeds {self.max_bytes} bytes", "code": "payload_too_large"},
                status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
            )
        return await call_next(request)
