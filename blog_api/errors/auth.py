"""Authentication and authorization errors."""

from logging import getLogger

from starlette.status import (
    HTTP_401_UNAUTHORIZED,
    HTTP_403_FORBIDDEN,
    HTTP_500_INTERNAL_SERVER_ERROR,
)

from blog_api.configs import file_logger
from blog_api.errors.base import BaseAppError, create_exception_handler

logger = file_logger(getLogger(__name__))


class AuthError(BaseAppError):
    """Base class for identity and permission errors."""

    def __init__(
        self,
        detail: str = "Authentication failed",
        status_code: int = HTTP_401_UNAUTHORIZED,
    ) -> None:
        super().__init__(detail, status_code)


class UnauthenticatedError(AuthError):
    """Raised when the bearer credential is missing, malformed or rejected."""

    def __init__(self, detail: str = "Invalid or expired token") -> None:
        super().__init__(detail, HTTP_401_UNAUTHORIZED)


class ForbiddenError(AuthError):
    """Raised when an authenticated caller may not perform the operation."""

    def __init__(self, detail: str = "Forbidden") -> None:
        super().__init__(detail, HTTP_403_FORBIDDEN)


class NotOwnerError(ForbiddenError):
    def __init__(self, detail: str = "Forbidden: You can edit only your own blog") -> None:
        super().__init__(detail)


class AdminRequiredError(ForbiddenError):
    def __init__(self, detail: str = "Access denied: Admins only") -> None:
        super().__init__(detail)


class IdentityProviderUnavailableError(AuthError):
    """Raised when the identity provider cannot be reached to verify a token."""

    def __init__(
        self,
        detail: str = "Identity provider unavailable",
        error: str | None = None,
    ) -> None:
        super().__init__(detail, HTTP_500_INTERNAL_SERVER_ERROR)
        self.error = error


auth_exception_handler = create_exception_handler(logger)
