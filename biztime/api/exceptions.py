import logging
from typing import Any, Sequence
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError, DBAPIError
from starlette.exceptions import HTTPException as StarletteHTTPException
from biztime.domain.exceptions import AppError, NotFound, InvalidInput
from biztime.core.ctx import get_request_id


logger = logging.getLogger("biztime.errors")

_STATUS_BY_CLASS: dict[type[AppError], int] = {
    NotFound: status.HTTP_404_NOT_FOUND,
    InvalidInput: status.HTTP_400_BAD_REQUEST,
    AppError: status.HTTP_400_BAD_REQUEST,
}


def _status_for(exc: AppError) -> int:
    for cls in type(exc).mro():
        if cls in _STATUS_BY_CLASS:
            return _STATUS_BY_CLASS[cls]
    return status.HTTP_400_BAD_REQUEST


def _field_name(loc: Sequence[Any]) -> str:
    parts = [str(p) for p in loc if p not in ("body", "path", "query")]
    return ".".join(parts) or "body"


def describe_validation_errors(errors: Sequence[dict]) -> str:
    missing = [_field_name(e["loc"]) for e in errors if e.get("type") == "missing"]
    invalid = [f"{_field_name(e['loc'])}: {e['msg']}" for e in errors if e.get("type") != "missing"]
    parts = []
    if missing:
        parts.append(f"Require {', '.join(missing)} in request")
    if invalid:
        parts.append(f"Invalid {'; '.join(invalid)}")
    return ". ".join(parts) or "Invalid request"


def _store_message(exc: SQLAlchemyError) -> str:
    if isinstance(exc, DBAPIError) and exc.orig is not None:
        return str(exc.orig)
    return str(exc)


def error_response(http_status: int, message: str, *, ctx: dict | None = None) -> JSONResponse:
    body: dict[str, Any] = {"message": message, "status": http_status}
    if ctx:
        body["context"] = ctx
    headers = {}
    req_id = get_request_id()
    if req_id:
        headers["X-Request-ID"] = req_id
    return JSONResponse(status_code=http_status, content={"error": body}, headers=headers)


def register_error_handler(app: FastAPI) -> None:
    @app.exception_handler(AppError)
    async def _app_error_handler(request: Request, exc: AppError):
        return error_response(_status_for(exc), str(exc), ctx=exc.ctx or None)

    @app.exception_handler(RequestValidationError)
    async def _validation_error_handler(request: Request, exc: RequestValidationError):
        errors = exc.errors()
        logger.info("Rejected %s %s: %s", request.method, request.url.path, errors)
        return error_response(status.HTTP_400_BAD_REQUEST, describe_validation_errors(errors))

    @app.exception_handler(StarletteHTTPException)
    async def _http_error_handler(request: Request, exc: StarletteHTTPException):
        # Unmatched method on a known path falls through like an unmatched route.
        if exc.status_code == status.HTTP_405_METHOD_NOT_ALLOWED:
            return error_response(status.HTTP_404_NOT_FOUND, "Not Found")
        return error_response(exc.status_code, str(exc.detail))

    @app.exception_handler(SQLAlchemyError)
    async def _store_error_handler(request: Request, exc: SQLAlchemyError):
        logger.exception("Store failure on %s %s", request.method, request.url.path)
        return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, _store_message(exc))

    @app.exception_handler(Exception)
    async def _unhandled_error_handler(request: Request, exc: Exception):
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, str(exc) or "Internal Server Error")
