"""Errors raised by engagement mutations on a blog post."""

from logging import getLogger

from starlette.status import HTTP_400_BAD_REQUEST, HTTP_404_NOT_FOUND

from blog_api.configs import file_logger
from blog_api.errors.base import BaseAppError, create_exception_handler

logger = file_logger(getLogger(__name__))


class EngagementError(BaseAppError):
    """Base exception for like and review errors."""

    def __init__(
        self,
        detail: str = "Engagement update failed",
        status_code: int = HTTP_400_BAD_REQUEST,
    ) -> None:
        super().__init__(detail, status_code)


class AlreadyLikedError(EngagementError):
    """Raised when a user likes a post they have already liked."""

    def __init__(self, detail: str = "Already liked") -> None:
        super().__init__(detail, HTTP_400_BAD_REQUEST)


class ReviewNotFoundError(EngagementError):
    """Raised when the post exists but holds no review with the given id."""

    def __init__(self, detail: str = "Review not found") -> None:
        super().__init__(detail, HTTP_404_NOT_FOUND)


engagement_exception_handler = create_exception_handler(logger)
