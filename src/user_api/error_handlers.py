"""Global exception handlers.

This module maps the error taxonomy, and any other exception reaching the
application edge, onto standardized error responses.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .exceptions import DatabaseError, UserNotFoundError, ValidationError
from .responses import ApiResponse, create_error_response

logger = logging.getLogger(__name__)


def _request_context(request: Request) -> dict:
    return {
        "path": request.url.path,
        "method": request.method,
        "request_id": getattr(request.state, "request_id", None),
    }


async def validation_error_handler(request: Request, exc: ValidationError) -> JSONResponse:
    """Handle invalid caller input."""
    logger.warning(
        f"Validation Error: {exc.message}",
        extra={**_request_context(request), "validation_errors": exc.errors},
    )
    return ApiResponse().bad_request(exc.message, exc.errors)


async def user_not_found_handler(request: Request, exc: UserNotFoundError) -> JSONResponse:
    """Handle lookups of identifiers that do not exist."""
    logger.warning(
        f"User not found: {exc.user_id}",
        extra=_request_context(request),
    )
    return ApiResponse().not_found(exc.message, {"userId": exc.user_id})


async def database_error_handler(request: Request, exc: DatabaseError) -> JSONResponse:
    """Handle storage failures."""
    logger.error(
        f"Database Error: {exc.message}",
        extra=_request_context(request),
    )
    return ApiResponse().internal_server_error(exc.message)


async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Handle request bodies and parameters FastAPI could not parse.

    Each failure becomes one ``"<location>: <message>"`` entry in the details.
    """
    errors = []
    for error in exc.errors():
        field_path = ".".join(str(loc) for loc in error["loc"] if loc != "body")
        errors.append(f"{field_path}: {error['msg']}" if field_path else error["msg"])

    logger.warning(
        f"Validation Error: {len(errors)} field(s) failed validation",
        extra={**_request_context(request), "validation_errors": errors},
    )
    return ApiResponse().bad_request("Invalid user data", errors)


async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """Handle framework HTTP errors such as unknown routes."""
    logger.warning(
        f"HTTP Exception: {exc.status_code} - {exc.detail}",
        extra=_request_context(request),
    )
    response = create_error_response(exc.status_code, str(exc.detail))
    if exc.headers:
        response.headers.update(exc.headers)
    return response


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle unexpected exceptions.

    The exception text only appears in the details, which production mode
    drops.
    """
    logger.error(
        f"Unexpected Exception: {type(exc).__name__} - {str(exc)}",
        exc_info=True,
        extra={**_request_context(request), "exception_type": type(exc).__name__},
    )
    return ApiResponse().internal_server_error("Internal server error", [str(exc) or type(exc).__name__])


def register_exception_handlers(app: FastAPI) -> None:
    """Register every handler on the application.

    Args:
        app: FastAPI application instance
    """
    app.add_exception_handler(ValidationError, validation_error_handler)
    app.add_exception_handler(UserNotFoundError, user_not_found_handler)
    app.add_exception_handler(DatabaseError, database_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    # Must be last
    app.add_exception_handler(Exception, generic_exception_handler)
