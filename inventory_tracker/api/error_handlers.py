from __future__ import annotations

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from inventory_tracker.core.logging import get_logger
from inventory_tracker.services.exceptions import (
    ConflictError,
    DomainValidationError,
    EmptyResultError,
    ResourceNotFoundError,
    ServiceError,
    StorageError,
)

logger = get_logger("inventory_tracker.errors")


def _error_response(status_code: int, exc: ServiceError, **extra) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"detail": exc.detail, "code": exc.code, **extra},
    )


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(ResourceNotFoundError)
    async def handle_not_found(_: Request, exc: ResourceNotFoundError) -> JSONResponse:
        return _error_response(404, exc)

    @app.exception_handler(EmptyResultError)
    async def handle_empty_result(_: Request, exc: EmptyResultError) -> JSONResponse:
        return _error_response(404, exc)

    @app.exception_handler(DomainValidationError)
    async def handle_validation(_: Request, exc: DomainValidationError) -> JSONResponse:
        return _error_response(422, exc)

    @app.exception_handler(ConflictError)
    async def handle_conflict(_: Request, exc: ConflictError) -> JSONResponse:
        return _error_response(409, exc)

    @app.exception_handler(StorageError)
    async def handle_storage(request: Request, exc: StorageError) -> JSONResponse:
        logger.error(
            "Storage error",
            extra={"path": request.url.path, "retryable": exc.retryable, "detail": exc.detail},
        )
        if exc.retryable:
            return _error_response(503, exc, retryable=True)
        return _error_response(500, exc)

    @app.exception_handler(ServiceError)
    async def handle_service_error(_: Request, exc: ServiceError) -> JSONResponse:
        return _error_response(400, exc)
