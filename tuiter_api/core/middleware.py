import time
import logging
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from tuiter_api.core.trace import set_trace_id

REQUEST_ID_HEADER = "X-Request-Id"

alog = logging.getLogger("access")


class RequestContextMiddleware(BaseHTTPMiddleware):
    """Binds a trace id per request and writes one access record."""

    async def dispatch(self, request: Request, call_next):
        trace_id = set_trace_id(request.headers.get(REQUEST_ID_HEADER))
        start = time.perf_counter()
        status = 500
        try:
            response = await call_next(request)
            status = response.status_code
            response.headers[REQUEST_ID_HEADER] = trace_id
            return response
        finally:
            dur_ms = int((time.perf_counter() - start) * 1000)
            alog.info(
                "access",
                extra={
                    "method": request.method,
                    "path": request.url.path,
                    "query": str(request.url.query)
                    if request.url.query else "",
                    "status": status,
                    "latency_ms": dur_ms,
                    "user_id": request.headers.get("X-User-Id"),
                    "client_ip": request.client.host
                    if request.client else None,
                },
            )
