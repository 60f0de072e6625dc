"""Request logging middleware."""

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

logger = logging.getLogger(__name__)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Logs one line per request: method, path, status and elapsed time.

    Requests that raise are logged at error level and the exception is
    re-raised for the application's exception handlers.
    """

    def __init__(self, app, exclude_paths: list[str] | None = None):
        super().__init__(app)
        self.exclude_paths = exclude_paths or []

    def _should_skip(self, path: str) -> bool:
        return any(path.startswith(p) for p in self.exclude_paths)

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        path = request.url.path
        if self._should_skip(path):
            return await call_next(request)

        start = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception:
            elapsed_ms = (time.perf_counter() - start) * 1000
            logger.error(
                "HTTP %s %s responded 500 in %.4f ms", request.method, path, elapsed_ms
            )
            raise

        elapsed_ms = (time.perf_counter() - start) * 1000
        logger.info(
            "HTTP %s %s responded %d in %.4f ms",
            request.method,
            path,
            response.status_code,
            elapsed_ms,
        )
        return response
