from logging import getLogger

from fastapi import Request
from fastapi.responses import ORJSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.status import (
    HTTP_404_NOT_FOUND,
    HTTP_409_CONFLICT,
    HTTP_500_INTERNAL_SERVER_ERROR,
)

from blog_api.configs import file_logger
from blog_api.errors.base import BaseAppError, create_exception_handler
from blog_api.utils.helpers import host

logger = file_logger(getLogger(__name__))


class DatabaseError(BaseAppError):
    """Base exception for database errors."""

    def __init__(
        self,
        detail: str = "Database Error",
        status_code: int = HTTP_500_INTERNAL_SERVER_ERROR,
        error: str | None = None,
    ) -> None:
        super().__init__(detail, status_code)
        self.error = error


class DuplicateEntryError(DatabaseError):
    """Exception raised when attempting to create a duplicate entry."""

    def __init__(
        self,
        detail: str = "A record with this value already exists",
    ) -> None:
        super().__init__(detail, HTTP_409_CONFLICT)


class RecordNotFoundError(DatabaseError):
    """Exception raised when a record is not found."""

    def __init__(
        self,
        detail: str = "Record not found",
    ) -> None:
        super().__init__(detail, HTTP_404_NOT_FOUND)


database_exception_handler = create_exception_handler(logger)


async def sqlalchemy_exception_handler(request: Request, exc: Exception) -> ORJSONResponse:
    """Report an unexpected store failure as 500 with the driver's error text."""
    logger.error(
        f"Store failure for ip: {host(request)} for endpoint {request.url.path}",
        exc_info=exc,
    )
    error = error_text(exc)
    return ORJSONResponse(
        status_code=HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Server Error", "error": error},
    )


def error_text(exc: Exception) -> str:
    if isinstance(exc, SQLAlchemyError) and getattr(exc, "orig", None) is not None:
        return str(exc.orig)
    return str(exc)
