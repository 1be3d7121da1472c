import logging
import time
import uuid
from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from biztime.core.ctx import bind_request_ctx, reset_request_ctx


logger = logging.getLogger("biztime.access")


def _client_ip(request: Request) -> str | None:
    xff = request.headers.get("x-forwarded-for")
    return xff.split(",")[0].strip() if xff else (request.client.host if request.client else None)


def _http_route(request: Request) -> str:
    return f"{request.method} {request.url.path}"


class HttpContextMiddleware(BaseHTTPMiddleware):
    """Binds per-request context (request id, route, client ip, redis) and writes the access log line."""

    def __init__(self, app, request_id_header: str = "X-Request-ID"):
        super().__init__(app)
        self.request_id_header = request_id_header

    async def dispatch(self, request: Request, call_next):
        request_id = request.headers.get(self.request_id_header) or str(uuid.uuid4())
        route = _http_route(request)
        client_ip = _client_ip(request)
        tokens = bind_request_ctx(
            request_id=request_id,
            route=route,
            client_ip=client_ip,
            redis_client=getattr(request.app.state, "redis", None)
        )
        t0 = time.perf_counter()
        try:
            response = await call_next(request)
            response.headers.setdefault(self.request_id_header, request_id)
            logger.info(
                "%s -> %s",
                route,
                response.status_code,
                extra={
                    "request_id": request_id,
                    "client_ip": client_ip,
                    "status": response.status_code,
                    "duration_ms": round((time.perf_counter() - t0) * 1000, 2)
                }
            )
            return response
        finally:
            reset_request_ctx(tokens)
