from typing import Any, Optional
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException
from medscribe.common.constants import INTERNAL_ERROR, INVALID_REQUEST_BODY, REQUEST_ID_HEADER, request_id_ctx
from medscribe.common.logging_setup import get_logger
from medscribe.common.utils import build_error, json_error

logger = get_logger("medscribe.errors")


class AppError(Exception):
    """Request-level failure raised from dependencies, rendered as {error, message?, details?}."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, error: str, message: Optional[str] = None, details: Optional[Any] = None):
        super().__init__(error)
        self.error = error
        self.message = message
        self.details = details


class RequestValidationFailed(AppError):
    status_code = status.HTTP_400_BAD_REQUEST


class AuthError(AppError):
    status_code = status.HTTP_401_UNAUTHORIZED


def format_validation_errors(errors) -> list:
    """Flatten pydantic error dicts into [{field, message}] using the client's field names."""
    out = []
    for err in errors:
        loc = [str(p) for p in err.get("loc", ()) if p != "body"]
        out.append({"field": ".".join(loc) or None, "message": err.get("msg", "invalid value")})
    return out


async def app_error_handler(request: Request, exc: AppError):
    logger.info(
        "request.rejected",
        extra={
            "path": request.url.path,
            "status_code": exc.status_code,
            "reason": exc.error,
        },
    )
    payload = build_error(exc.error, message=exc.message, details=exc.details)
    return json_error(payload, status_code=exc.status_code)


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    details = format_validation_errors(exc.errors())
    logger.warning(
        "request.validation_failed",
        extra={
            "errors": details,
            "path": request.url.path,
        },
    )
    payload = build_error(INVALID_REQUEST_BODY, details=details)
    return json_error(payload, status_code=status.HTTP_400_BAD_REQUEST)


async def http_exception_handler(request: Request, exc: HTTPException):
    payload = build_error(str(exc.detail))
    return json_error(payload, status_code=exc.status_code, headers=getattr(exc, "headers", None))


async def fallback_handler(request: Request, exc: Exception):

    # the catch-all runs outside RequestIdMiddleware, so the contextvar is already reset
    rid = (request_id_ctx.get(None)
           or getattr(request.state, "request_id", None)
           or request.headers.get(REQUEST_ID_HEADER))

    logger.error(
        "unexpected.exception",
        extra={
            "path": request.url.path,
            "method": request.method,
            "request_id": rid,
        },
        exc_info=exc,
    )

    payload = build_error(INTERNAL_ERROR, message=str(exc) or None)
    headers = {REQUEST_ID_HEADER: rid} if rid else None
    return json_error(payload, status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, headers=headers)


def register_all_exceptions(app: FastAPI):

    app.add_exception_handler(
        Exception, # catch all unidentified/unhandled exceptions
        fallback_handler
    )

    app.add_exception_handler(
        RequestValidationError,
        validation_exception_handler
    )

    app.add_exception_handler(
        HTTPException,
        http_exception_handler
    )

    app.add_exception_handler(
        AppError,
        app_error_handler
    )
