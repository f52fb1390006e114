# resell/middleware/request_log.py
import logging
import time
import uuid

from starlette.middleware.base import BaseHTTPMiddleware

from resell.core.error_handlers import generic_exception_handler

logger = logging.getLogger("resell.access")


class RequestLogMiddleware(BaseHTTPMiddleware):
    """Tag every request with an X-Request-ID and log one line per response."""

    async def dispatch(self, request, call_next):
        request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())
        request.state.request_id = request_id
        started = time.perf_counter()

        try:
            response = await call_next(request)
        except Exception as exc:
            # Unhandled errors still get the id header and an access line
            response = await generic_exception_handler(request, exc)

        elapsed_ms = (time.perf_counter() - started) * 1000
        response.headers.setdefault("X-Request-ID", request_id)
        logger.info(
            "%s %s -> %s (%.1f ms) [%s]",
            request.method, request.url.path, response.status_code, elapsed_ms, request_id,
        )
        return response
