"""Request logging middleware.

Binds a correlation id into the structlog context for the duration of a
request, logs its outcome with timing, and warns when it runs past the
configured slow-request threshold.
"""
import time
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from core.logging import (
    generate_correlation_id,
    bind_context,
    clear_context,
    api_logger,
)

log = api_logger()

CORRELATION_HEADER = "X-Correlation-ID"


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Logs each request and tags it with a correlation id."""

    def __init__(self, app, slow_threshold_ms: float = 500):
        super().__init__(app)
        self.slow_threshold_ms = slow_threshold_ms

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        correlation_id = request.headers.get(CORRELATION_HEADER) or generate_correlation_id()

        clear_context()
        bind_context(correlation_id=correlation_id, method=request.method, path=request.url.path)
        start = time.perf_counter()

        try:
            response = await call_next(request)
        except Exception as exc:
            log.exception(
                "request_failed",
                error_type=type(exc).__name__,
                duration_ms=self._elapsed_ms(start),
            )
            raise
        else:
            response.headers[CORRELATION_HEADER] = correlation_id
            self._log_completed(response.status_code, self._elapsed_ms(start))
            return response
        finally:
            clear_context()

    @staticmethod
    def _elapsed_ms(start: float) -> float:
        return round((time.perf_counter() - start) * 1000, 2)

    def _log_completed(self, status: int, duration_ms: float) -> None:
        if status >= 500:
            log.error("request_completed", status=status, duration_ms=duration_ms)
        elif status >= 400:
            log.warning("request_completed", status=status, duration_ms=duration_ms)
        else:
            log.info("request_completed", status=status, duration_ms=duration_ms)

        if duration_ms > self.slow_threshold_ms:
            log.warning("slow_request", duration_ms=duration_ms, threshold_ms=self.slow_threshold_ms)
