"""Exception handlers - translate errors into HTTP responses.

Body shape for every error: ``{"error": <exception class name>, "message": ...}``.
"""

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from snapix.application.shared import DispatchError
from snapix.config.logging import get_logger
from snapix.domain.shared import (
    BadRequestError,
    DomainException,
    ForbiddenError,
    NotFoundError,
    UnauthorizedError,
    UpstreamError,
    ValidationError,
)

logger = get_logger(__name__)

# (status, log event kind), most specific class first
_DOMAIN_ERRORS: tuple[tuple[type[DomainException], int, str], ...] = (
    (ValidationError, status.HTTP_422_UNPROCESSABLE_ENTITY, "validation_error"),
    (BadRequestError, status.HTTP_400_BAD_REQUEST, "bad_request"),
    (UnauthorizedError, status.HTTP_401_UNAUTHORIZED, "unauthorized"),
    (ForbiddenError, status.HTTP_403_FORBIDDEN, "forbidden"),
    (NotFoundError, status.HTTP_404_NOT_FOUND, "not_found"),
    (UpstreamError, status.HTTP_502_BAD_GATEWAY, "upstream_error"),
)

_HTTP_ERROR_NAMES = {
    status.HTTP_401_UNAUTHORIZED: "UnauthorizedError",
    status.HTTP_404_NOT_FOUND: "NotFoundError",
    status.HTTP_405_METHOD_NOT_ALLOWED: "MethodNotAllowedError",
    status.HTTP_413_REQUEST_ENTITY_TOO_LARGE: "PayloadTooLargeError",
    status.HTTP_415_UNSUPPORTED_MEDIA_TYPE: "UnsupportedMediaTypeError",
    status.HTTP_422_UNPROCESSABLE_ENTITY: "ValidationError",
}


def _error_body(error: str, message: str) -> dict[str, str]:
    return {"error": error, "message": message}


def _classify(exc: DomainException) -> tuple[int, str]:
    for exc_type, status_code, kind in _DOMAIN_ERRORS:
        if isinstance(exc, exc_type):
            return status_code, kind
    return status.HTTP_500_INTERNAL_SERVER_ERROR, "domain_error"


async def domain_exception_handler(request: Request, exc: DomainException) -> JSONResponse:
    status_code, kind = _classify(exc)
    log = logger.error if status_code >= 500 else logger.warning
    log(
        f"api.{kind}",
        path=request.url.path,
        error=exc.message,
        error_type=type(exc).__name__,
        **exc.context,
    )

    headers = {"WWW-Authenticate": "Bearer"} if status_code == 401 else None
    return JSONResponse(
        status_code=status_code,
        content=_error_body(type(exc).__name__, exc.message),
        headers=headers,
    )


async def dispatch_exception_handler(request: Request, exc: DispatchError) -> JSONResponse:
    """Registration bugs: logged loudly, never described to the client."""
    logger.error(
        "api.dispatch_error",
        path=request.url.path,
        error=str(exc),
        error_type=type(exc).__name__,
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=_error_body("InternalServerError", "An unexpected error occurred"),
    )


def jsonable_errors(exc: RequestValidationError) -> list[dict]:
    # ``ctx`` may hold exception instances, which are not JSON serialisable
    return [
        {k: v for k, v in error.items() if k in ("type", "loc", "msg")}
        for error in exc.errors()
    ]


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    logger.warning("api.validation_error", path=request.url.path, errors=jsonable_errors(exc))
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={
            **_error_body("ValidationError", "Request validation failed"),
            "details": jsonable_errors(exc),
        },
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    logger.warning("api.http_error", path=request.url.path, status_code=exc.status_code)
    return JSONResponse(
        status_code=exc.status_code,
        content=_error_body(
            _HTTP_ERROR_NAMES.get(exc.status_code, "HTTPError"),
            str(exc.detail),
        ),
        headers=getattr(exc, "headers", None),
    )


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(
        "api.unhandled_exception",
        path=request.url.path,
        error=str(exc),
        error_type=type(exc).__name__,
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=_error_body("InternalServerError", "An unexpected error occurred"),
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(DomainException, domain_exception_handler)
    app.add_exception_handler(DispatchError, dispatch_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, generic_exception_handler)
