from blog_api.middleware.context import REQUEST_ID_HEADER, RequestContextMiddleware
from blog_api.middleware.middleware import (
    LoggingMiddleware,
    SecurityHeadersMiddleware,
    configure_cors,
    lifespan,
)

__all__ = [
    "REQUEST_ID_HEADER",
    "LoggingMiddleware",
    "RequestContextMiddleware",
    "SecurityHeadersMiddleware",
    "configure_cors",
    "lifespan",
]
