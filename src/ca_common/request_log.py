"""Request logging middleware.

Logs every HTTP request with method, path, status code, latency, the cache
path a record read took (when the handler set one) and a short request ID.
The request_id is injected into request.state for ApiResponse and echoed
back in the X-Request-ID header.

Log format:
    INFO [GET] /api/v1/records/emp/1 → 200 (3ms) cache=HIT req_a1b2c3d4e5f6
"""

import logging
import time
import uuid

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

logger = logging.getLogger("ca.request")


class RequestLogMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        request.state.request_id = f"req_{uuid.uuid4().hex[:12]}"

        start = time.perf_counter()
        response: Response = await call_next(request)
        elapsed_ms = (time.perf_counter() - start) * 1000

        response.headers["X-Request-ID"] = request.state.request_id
        logger.info(
            "[%s] %s → %d (%.0fms) cache=%s %s",
            request.method,
            request.url.path,
            response.status_code,
            elapsed_ms,
            getattr(request.state, "cache_status", "-"),
            request.state.request_id,
        )
        return response
