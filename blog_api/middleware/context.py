# blog_api/middleware/context.py
"""
Middleware for binding request correlation data to the log context.

Every request gets an ``X-Request-ID`` (the caller's, when supplied) that
is bound together with the client IP to structlog's context variables
and echoed back on the response.
"""

from re import compile as re_compile
from uuid import uuid4

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from blog_api.monitoring import bind_request_context, clear_context
from blog_api.utils.helpers import host

REQUEST_ID_HEADER = "X-Request-ID"

# Client-supplied ids are echoed into logs and headers
_VALID_REQUEST_ID = re_compile(r"^[\w.-]{1,64}$")


def resolve_request_id(incoming: str | None) -> str:
    if incoming and _VALID_REQUEST_ID.match(incoming):
        return incoming
    return uuid4().hex


class RequestContextMiddleware(BaseHTTPMiddleware):
    """
    Middleware to bind request context for the request lifecycle.

    Uses try/finally so the context is always cleared after the request.

    Examples
    --------
    >>> app.add_middleware(RequestContextMiddleware)
    """

    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        request_id = resolve_request_id(request.headers.get(REQUEST_ID_HEADER))
        request.state.request_id = request_id
        bind_request_context(request_id, host(request))

        try:
            response = await call_next(request)
        finally:
            clear_context()

        response.headers[REQUEST_ID_HEADER] = request_id
        return response
