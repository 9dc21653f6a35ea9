import time
import uuid

import structlog

logger = structlog.get_logger(__name__)


class RequestLogMiddleware:
    """Bind a request id to the log context and log each finished request.

    The id is taken from ``X-Request-ID`` or ``X-Correlation-ID`` when the
    caller sends one, otherwise generated, and is echoed back in the
    response under both names.
    """
    REQUEST_ID_HEADERS = ('X-Request-ID', 'X-Correlation-ID')

    def __init__(self, get_response):
        self.get_response = get_response

    def _resolve_request_id(self, request) -> str:
        for header in self.REQUEST_ID_HEADERS:
            value = (request.headers.get(header) or '').strip()
            if value:
                return value[:128]
        return uuid.uuid4().hex

    def __call__(self, request):
        request_id = self._resolve_request_id(request)
        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(request_id=request_id)
        started = time.perf_counter()
        try:
            response = self.get_response(request)
            logger.info(
                'request_finished',
                method=request.method,
                path=request.path,
                status=response.status_code,
                duration_ms=round((time.perf_counter() - started) * 1000, 2),
            )
        finally:
            structlog.contextvars.clear_contextvars()
        for header in self.REQUEST_ID_HEADERS:
            response.headers.setdefault(header, request_id)
        return response
