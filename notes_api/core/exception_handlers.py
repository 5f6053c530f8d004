"""
Exception Handlers.

FastAPI exception handlers that convert application exceptions
to the standard error envelope:

    {"success": false, "error": "<category>", "message": "..."}

All exceptions are logged. Internal failure detail (stack traces) only
reaches the client when features.api_detailed_errors is enabled.

Usage:
    from notes_api.core.exception_handlers import register_exception_handlers

    app = FastAPI()
    register_exception_handlers(app)
"""

import traceback

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from notes_api.core.exceptions import (
    INTERNAL_SERVER_ERROR,
    NOT_FOUND,
    ApplicationError,
    ContentTooLongError,
    EmptyBodyError,
    InternalError,
    InvalidContentError,
    InvalidTitleError,
    MalformedBodyError,
    NoFieldsProvidedError,
    NotFoundError,
    TitleTooLongError,
)
from notes_api.core.logging import get_logger
from notes_api.schemas.base import ErrorResponse

logger = get_logger(__name__)

# Map exception types to HTTP status codes
EXCEPTION_STATUS_MAP: dict[type[ApplicationError], int] = {
    EmptyBodyError: 400,
    MalformedBodyError: 400,
    InvalidTitleError: 400,
    InvalidContentError: 400,
    TitleTooLongError: 400,
    ContentTooLongError: 400,
    NoFieldsProvidedError: 400,
    NotFoundError: 404,
    InternalError: 500,
}


def _get_request_id(request: Request) -> str | None:
    """Extract request ID from request state or headers."""
    # Try request state first (set by middleware)
    if hasattr(request.state, "request_id"):
        return request.state.request_id
    return request.headers.get("x-request-id")


def _detailed_errors_enabled(request: Request) -> bool:
    return bool(getattr(request.app.state, "detailed_errors", False))


def _error_response(status_code: int, body: ErrorResponse) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=body.model_dump(mode="json", exclude_none=True),
    )


async def application_error_handler(
    request: Request,
    exc: ApplicationError,
) -> JSONResponse:
    """
    Handle all ApplicationError subclasses.

    Converts application exceptions to the error envelope with the
    status code and category of the error kind.
    """
    status_code = EXCEPTION_STATUS_MAP.get(type(exc), 500)
    request_id = _get_request_id(request)

    log_extra = {
        "code": exc.code,
        "message": exc.message,
        "status": status_code,
        "path": request.url.path,
        "method": request.method,
    }
    if request_id:
        log_extra["request_id"] = request_id

    if status_code >= 500:
        logger.error("Server error", extra=log_extra)
    else:
        logger.warning("Client error", extra=log_extra)

    return _error_response(
        status_code,
        ErrorResponse(error=exc.category, message=exc.message),
    )


async def http_exception_handler(
    request: Request,
    exc: StarletteHTTPException,
) -> JSONResponse:
    """
    Handle routing-level HTTP errors.

    Unknown routes and unsupported methods on known routes both answer
    404 with the route in the message.
    """
    if exc.status_code in (404, 405):
        logger.warning(
            "Route not found",
            extra={"path": request.url.path, "method": request.method},
        )
        return _error_response(
            404,
            ErrorResponse(error=NOT_FOUND, message=f"Route {request.url.path} not found"),
        )

    logger.warning(
        "HTTP error",
        extra={"status": exc.status_code, "path": request.url.path, "detail": exc.detail},
    )
    return _error_response(
        exc.status_code,
        ErrorResponse(
            error=INTERNAL_SERVER_ERROR if exc.status_code >= 500 else "Bad Request",
            message=str(exc.detail),
        ),
    )


async def unhandled_exception_handler(
    request: Request,
    exc: Exception,
) -> JSONResponse:
    """
    Handle unexpected exceptions.

    Catches all unhandled exceptions and returns a generic error
    response. Details are hidden unless detailed errors are enabled.
    """
    request_id = _get_request_id(request)

    # Always log the full exception for debugging
    logger.exception(
        "Unhandled exception",
        extra={
            "path": request.url.path,
            "method": request.method,
            "exception_type": type(exc).__name__,
            "request_id": request_id,
        },
    )

    internal = InternalError()
    body = ErrorResponse(error=internal.category, message=internal.message)
    if _detailed_errors_enabled(request):
        body.message = str(exc) or internal.message
        body.stack = "".join(traceback.format_exception(exc))

    return _error_response(500, body)


def register_exception_handlers(app: FastAPI) -> None:
    """
    Register all exception handlers with the FastAPI app.

    Call this function after creating the FastAPI app instance
    to enable standardized error handling.

    Args:
        app: FastAPI application instance
    """
    # Validator and store errors
    app.add_exception_handler(ApplicationError, application_error_handler)

    # Unknown routes, unsupported methods
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)

    # Catch-all for unexpected exceptions
    app.add_exception_handler(Exception, unhandled_exception_handler)

    logger.debug("Exception handlers registered")
