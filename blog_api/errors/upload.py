"""
Upload-related error classes.

Failures talking to the external image host are reported as server
errors carrying the underlying error text.
"""

from logging import getLogger

from starlette.status import HTTP_500_INTERNAL_SERVER_ERROR

from blog_api.configs import file_logger
from blog_api.errors.base import BaseAppError, create_exception_handler

logger = file_logger(getLogger(__name__))


class UploadError(BaseAppError):
    """Base exception for upload-related errors."""

    def __init__(
        self,
        detail: str = "Upload failed",
        status_code: int = HTTP_500_INTERNAL_SERVER_ERROR,
    ) -> None:
        super().__init__(detail=detail, status_code=status_code)


class ImageUploadError(UploadError):
    """Exception raised when the image host rejects or fails an upload."""

    def __init__(self, error: str, detail: str = "Upload failed") -> None:
        super().__init__(detail=detail, status_code=HTTP_500_INTERNAL_SERVER_ERROR)
        self.error = error


upload_exception_handler = create_exception_handler(logger)
