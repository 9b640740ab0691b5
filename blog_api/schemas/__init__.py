from blog_api.schemas.activity import ActivityResponse, activity_to_response
from blog_api.schemas.blog import (
    BlogCreate,
    BlogCreatedResponse,
    BlogDetailResponse,
    BlogDocument,
    BlogResponse,
    BlogUpdate,
    LikeRequest,
    LikeResponse,
    blog_to_response,
)
from blog_api.schemas.common import (
    HealthCheckResponse,
    ImageUploadRequest,
    ImageUploadResponse,
    MessageResponse,
    SuccessResponse,
)
from blog_api.schemas.review import (
    ReviewCreate,
    ReviewFeedItem,
    ReviewMutationResponse,
    ReviewResponse,
)
from blog_api.schemas.stats import StatsResponse
from blog_api.schemas.subscriber import (
    ContactCreate,
    ContactResponse,
    SubscriberCreate,
    SubscriberListResponse,
    SubscriberResponse,
)
from blog_api.schemas.user import (
    RoleResponse,
    RoleUpdate,
    UserCreate,
    UserListResponse,
    UserMutationResponse,
    UserResponse,
    UserUpdate,
)

__all__ = [
    "ActivityResponse",
    "BlogCreate",
    "BlogCreatedResponse",
    "BlogDetailResponse",
    "BlogDocument",
    "BlogResponse",
    "BlogUpdate",
    "ContactCreate",
    "ContactResponse",
    "HealthCheckResponse",
    "ImageUploadRequest",
    "ImageUploadResponse",
    "LikeRequest",
    "LikeResponse",
    "MessageResponse",
    "ReviewCreate",
    "ReviewFeedItem",
    "ReviewMutationResponse",
    "ReviewResponse",
    "RoleResponse",
    "RoleUpdate",
    "StatsResponse",
    "SubscriberCreate",
    "SubscriberListResponse",
    "SubscriberResponse",
    "SuccessResponse",
    "UserCreate",
    "UserListResponse",
    "UserMutationResponse",
    "UserResponse",
    "UserUpdate",
    "activity_to_response",
    "blog_to_response",
]
