"""Request middleware: metrics and error logging, payload size limit."""

from .observability import ObservabilityMiddleware
from .request_limit import PayloadLimitMiddleware

__all__ = ["ObservabilityMiddleware", "PayloadLimitMiddleware"]
