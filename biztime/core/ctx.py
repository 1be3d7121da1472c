from contextvars import ContextVar, Token
from typing import Any

REQUEST_ID_CTX: ContextVar[str | None] = ContextVar("request_id", default=None)
ROUTE_CTX: ContextVar[str | None] = ContextVar("route", default=None)
CLIENT_IP_CTX: ContextVar[str | None] = ContextVar("client_ip", default=None)
REDIS_CTX: ContextVar[Any] = ContextVar("redis", default=None)


def bind_request_ctx(
        *,
        request_id: str,
        route: str,
        client_ip: str | None,
        redis_client: Any = None
) -> list[tuple[ContextVar, Token]]:
    tokens: list[tuple[ContextVar, Token]] = [
        (REQUEST_ID_CTX, REQUEST_ID_CTX.set(request_id)),
        (ROUTE_CTX, ROUTE_CTX.set(route)),
        (CLIENT_IP_CTX, CLIENT_IP_CTX.set(client_ip)),
    ]
    if redis_client is not None:
        tokens.append((REDIS_CTX, REDIS_CTX.set(redis_client)))
    return tokens


def reset_request_ctx(tokens: list[tuple[ContextVar, Token]]) -> None:
    for var, token in reversed(tokens):
        var.reset(token)


def get_request_id() -> str | None:
    return REQUEST_ID_CTX.get()


def get_route() -> str | None:
    return ROUTE_CTX.get()


def get_client_ip() -> str | None:
    return CLIENT_IP_CTX.get()


def get_redis() -> Any:
    return REDIS_CTX.get()
