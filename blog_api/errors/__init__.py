from blog_api.errors.auth import (
    AdminRequiredError,
    AuthError,
    ForbiddenError,
    IdentityProviderUnavailableError,
    NotOwnerError,
    UnauthenticatedError,
    auth_exception_handler,
)
from blog_api.errors.base import (
    BaseAppError,
    ConfigurationError,
    create_exception_handler,
    unhandled_exception_handler,
)
from blog_api.errors.blog import (
    AlreadyLikedError,
    EngagementError,
    ReviewNotFoundError,
    engagement_exception_handler,
)
from blog_api.errors.database import (
    DatabaseError,
    DuplicateEntryError,
    RecordNotFoundError,
    database_exception_handler,
    sqlalchemy_exception_handler,
)
from blog_api.errors.upload import ImageUploadError, UploadError, upload_exception_handler
from blog_api.errors.validation import (
    InvalidIdError,
    InvalidInputError,
    input_exception_handler,
    validation_exception_handler,
)

__all__ = [
    "AdminRequiredError",
    "AlreadyLikedError",
    "AuthError",
    "BaseAppError",
    "ConfigurationError",
    "DatabaseError",
    "DuplicateEntryError",
    "EngagementError",
    "ForbiddenError",
    "IdentityProviderUnavailableError",
    "ImageUploadError",
    "InvalidIdError",
    "InvalidInputError",
    "NotOwnerError",
    "RecordNotFoundError",
    "ReviewNotFoundError",
    "UnauthenticatedError",
    "UploadError",
    "auth_exception_handler",
    "create_exception_handler",
    "database_exception_handler",
    "engagement_exception_handler",
    "input_exception_handler",
    "sqlalchemy_exception_handler",
    "unhandled_exception_handler",
    "upload_exception_handler",
    "validation_exception_handler",
]
