"""Middleware for CORS preflight handling and response headers."""

from typing import Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from .responses import ApiResponse, default_headers


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Middleware that answers preflight requests and completes header sets.

    Responses built by ``responses`` already carry the fixed header set.
    Anything else (docs pages, the OpenAPI schema) gets the missing headers
    added here without overriding its own content type.
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        if request.method == "OPTIONS":
            return ApiResponse().no_content()

        response = await call_next(request)

        for name, value in default_headers().items():
            response.headers.setdefault(name, value)

        return response
