"""Standardized API responses.

Every response the API sends, success or error, goes through this module so
that it carries the same fixed header set and a sparse JSON body. Error
bodies look like ``{"error": ..., "message": ..., "details": ...}``; success
bodies spread the data's fields at the top level next to an optional
``message``.

In production, error details are dropped and every 5xx message is replaced
with a generic one. Client errors keep their message.
"""

from typing import Any, Mapping, Optional, Sequence, Union

from fastapi import status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse, Response
from pydantic import BaseModel

from . import config
from .config import Settings

Details = Union[Mapping[str, Any], Sequence[str]]

HTTP_STATUS_NAMES: dict[int, str] = {
    status.HTTP_200_OK: "OK",
    status.HTTP_201_CREATED: "Created",
    status.HTTP_204_NO_CONTENT: "No Content",
    status.HTTP_400_BAD_REQUEST: "Bad Request",
    status.HTTP_401_UNAUTHORIZED: "Unauthorized",
    status.HTTP_403_FORBIDDEN: "Forbidden",
    status.HTTP_404_NOT_FOUND: "Not Found",
    status.HTTP_409_CONFLICT: "Conflict",
    status.HTTP_500_INTERNAL_SERVER_ERROR: "Internal Server Error",
    status.HTTP_503_SERVICE_UNAVAILABLE: "Service Unavailable",
}

UNKNOWN_ERROR = "Unknown Error"
GENERIC_SERVER_ERROR_MESSAGE = "Internal server error"


def default_headers(settings: Optional[Settings] = None) -> dict[str, str]:
    """Build the header set attached to every response.

    Args:
        settings: Application settings, defaults to the global settings

    Returns:
        dict: Content type, CORS and security headers
    """
    settings = settings or config.settings
    return {
        "Content-Type": "application/json",
        "Access-Control-Allow-Origin": settings.cors_origin,
        "Access-Control-Allow-Headers": "Content-Type,X-Amz-Date,Authorization,X-Amz-Security-Token",
        "Access-Control-Allow-Methods": "GET,POST,OPTIONS",
        "Access-Control-Allow-Credentials": "true",
        "X-Content-Type-Options": "nosniff",
        "X-Frame-Options": "DENY",
        "X-XSS-Protection": "1; mode=block",
        "Strict-Transport-Security": "max-age=31536000; includeSubDomains",
        "Content-Security-Policy": "default-src 'self'",
        "Referrer-Policy": "strict-origin-when-cross-origin",
    }


def create_error_response(
    status_code: int,
    message: Optional[str] = None,
    details: Optional[Details] = None,
    settings: Optional[Settings] = None,
) -> JSONResponse:
    """Create standardized error response.

    Args:
        status_code: HTTP status code
        message: Human-readable error message
        details: Flat list of strings or string-keyed mapping
        settings: Application settings, defaults to the global settings

    Returns:
        JSONResponse: Error response with the fixed header set
    """
    settings = settings or config.settings

    if settings.is_production and status_code >= 500:
        message = GENERIC_SERVER_ERROR_MESSAGE

    body: dict[str, Any] = {"error": HTTP_STATUS_NAMES.get(status_code, UNKNOWN_ERROR)}
    if message:
        body["message"] = message
    if details and not settings.suppress_details:
        body["details"] = jsonable_encoder(details)

    return JSONResponse(status_code=status_code, content=body, headers=default_headers(settings))


def create_success_response(
    status_code: int,
    data: Optional[Union[BaseModel, Mapping[str, Any]]] = None,
    message: Optional[str] = None,
    settings: Optional[Settings] = None,
) -> Response:
    """Create standardized success response.

    Args:
        status_code: HTTP status code
        data: Model or mapping whose fields become top-level body fields
        message: Optional message added next to the data fields
        settings: Application settings, defaults to the global settings

    Returns:
        Response: Success response with the fixed header set
    """
    headers = default_headers(settings)

    if status_code == status.HTTP_204_NO_CONTENT:
        # HTTP forbids a body on 204
        return Response(status_code=status_code, headers=headers)

    if isinstance(data, BaseModel):
        data = data.model_dump(mode="json", by_alias=True)

    body: dict[str, Any] = {}
    if data:
        body.update(jsonable_encoder(data))
    if message:
        body["message"] = message

    return JSONResponse(status_code=status_code, content=body, headers=headers)


class ApiResponse:
    """Convenience constructors that bind a status code.

    Example:
        responses = ApiResponse()
        return responses.created(UserResponse.from_user(user))
    """

    def __init__(self, settings: Optional[Settings] = None) -> None:
        self.settings = settings

    # Success responses
    def ok(self, data: Any = None, message: Optional[str] = None) -> Response:
        return create_success_response(status.HTTP_200_OK, data, message, self.settings)

    def created(self, data: Any = None, message: Optional[str] = None) -> Response:
        return create_success_response(status.HTTP_201_CREATED, data, message, self.settings)

    def no_content(self) -> Response:
        return create_success_response(status.HTTP_204_NO_CONTENT, settings=self.settings)

    # Error responses
    def bad_request(self, message: Optional[str] = None, details: Optional[Details] = None) -> JSONResponse:
        return create_error_response(status.HTTP_400_BAD_REQUEST, message, details, self.settings)

    def unauthorized(self, message: Optional[str] = None, details: Optional[Details] = None) -> JSONResponse:
        return create_error_response(status.HTTP_401_UNAUTHORIZED, message, details, self.settings)

    def forbidden(self, message: Optional[str] = None, details: Optional[Details] = None) -> JSONResponse:
        return create_error_response(status.HTTP_403_FORBIDDEN, message, details, self.settings)

    def not_found(self, message: Optional[str] = None, details: Optional[Details] = None) -> JSONResponse:
        return create_error_response(status.HTTP_404_NOT_FOUND, message, details, self.settings)

    def conflict(self, message: Optional[str] = None, details: Optional[Details] = None) -> JSONResponse:
        return create_error_response(status.HTTP_409_CONFLICT, message, details, self.settings)

    def internal_server_error(self, message: Optional[str] = None, details: Optional[Details] = None) -> JSONResponse:
        return create_error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, message, details, self.settings)

    def service_unavailable(self, message: Optional[str] = None, details: Optional[Details] = None) -> JSONResponse:
        return create_error_response(status.HTTP_503_SERVICE_UNAVAILABLE, message, details, self.settings)
