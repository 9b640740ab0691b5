"""Input validation errors and the request-validation handler."""

from logging import getLogger
from typing import cast

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import ORJSONResponse
from starlette.status import HTTP_400_BAD_REQUEST

from blog_api.configs import file_logger
from blog_api.errors.base import BaseAppError, create_exception_handler
from blog_api.utils.helpers import host

logger = file_logger(getLogger(__name__))


class InvalidInputError(BaseAppError):
    """Raised for malformed input that passed schema validation."""

    def __init__(self, detail: str = "Invalid input") -> None:
        super().__init__(detail=detail, status_code=HTTP_400_BAD_REQUEST)


class InvalidIdError(InvalidInputError):
    """Raised when a path identifier is not a well-formed id."""

    def __init__(self, detail: str = "Invalid blog ID") -> None:
        super().__init__(detail)


input_exception_handler = create_exception_handler(logger)


async def validation_exception_handler(
    request: Request,
    exc: Exception,
) -> ORJSONResponse:
    """
    Handle Pydantic validation errors with cleaner response format.

    Args:
        request: The incoming request.
        exc: The RequestValidationError exception.

    Returns:
        ORJSONResponse with status 400 and formatted validation errors.
    """
    exec_error = cast(RequestValidationError, exc)

    formatted_errors = []
    for error in exec_error.errors():
        formatted_error = {
            "field": ".".join(str(loc) for loc in error.get("loc", [])[1:]),  # Skip 'body'
            "message": error.get("msg", "Invalid value"),
            "type": error.get("type", "validation_error"),
        }
        # ctx may hold exception instances, which are not JSON serializable
        if "ctx" in error:
            formatted_error["context"] = {
                key: str(value) if isinstance(value, Exception) else value
                for key, value in error["ctx"].items()
            }
        formatted_errors.append(formatted_error)

    logger.warning(
        f"Validation error for ip: {host(request)} at endpoint {request.url.path}: {formatted_errors}",
    )

    return ORJSONResponse(
        status_code=HTTP_400_BAD_REQUEST,
        content={
            "detail": "Validation failed",
            "errors": formatted_errors,
        },
    )
