from collections.abc import Awaitable, Callable
from logging import Logger, getLogger

from fastapi import Request
from fastapi.responses import ORJSONResponse
from starlette.status import HTTP_500_INTERNAL_SERVER_ERROR

from blog_api.configs import file_logger
from blog_api.utils.helpers import host

logger = file_logger(getLogger(__name__))


class BaseAppError(Exception):
    """Base exception class for application errors."""

    def __init__(
        self,
        detail: str = "Internal Server Error",
        status_code: int = HTTP_500_INTERNAL_SERVER_ERROR,
    ) -> None:
        self.detail = detail
        self.status_code = status_code

    def __str__(self) -> str:
        return self.detail


class ConfigurationError(BaseAppError):
    """Raised when a required setting for an external collaborator is missing."""

    def __init__(self, detail: str = "Service is not configured") -> None:
        super().__init__(detail, HTTP_500_INTERNAL_SERVER_ERROR)
        self.error = detail


def create_exception_handler(
    logger: Logger,
) -> Callable[[Request, Exception], Awaitable[ORJSONResponse]]:
    """
    Create a standardized exception handler for the application.

    Args:
        logger: Logger instance to use for logging exceptions.

    Returns:
        A callable exception handler.
    """

    async def handler(request: Request, exc: Exception) -> ORJSONResponse:
        status_code = getattr(exc, "status_code", HTTP_500_INTERNAL_SERVER_ERROR)
        detail = getattr(exc, "detail", "Internal Server Error")

        message = f"{detail} for ip: {host(request)} for endpoint {request.url.path}"
        if status_code >= HTTP_500_INTERNAL_SERVER_ERROR:
            logger.error(message, exc_info=exc)
        else:
            logger.warning(message)

        # Additional exception attributes travel with the response body
        content = {"detail": detail}
        content.update(
            {
                k: v
                for k, v in exc.__dict__.items()
                if k not in ("status_code", "detail") and v is not None
            },
        )

        return ORJSONResponse(content=content, status_code=status_code)

    return handler


async def unhandled_exception_handler(request: Request, exc: Exception) -> ORJSONResponse:
    """Report any failure no other handler claimed as a JSON 500."""
    logger.error(
        f"Unhandled error for ip: {host(request)} for endpoint {request.url.path}",
        exc_info=exc,
    )
    return ORJSONResponse(
        status_code=HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Server Error", "error": str(exc)},
    )
