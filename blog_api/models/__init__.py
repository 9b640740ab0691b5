from blog_api.models.activity import ActivityDB, ActivityType
from blog_api.models.blog import BlogDB, BlogLikeDB, BlogReviewDB
from blog_api.models.subscriber import ContactDB, SubscriberDB
from blog_api.models.user import Role, UserDB

__all__ = [
    "ActivityDB",
    "ActivityType",
    "BlogDB",
    "BlogLikeDB",
    "BlogReviewDB",
    "ContactDB",
    "Role",
    "SubscriberDB",
    "UserDB",
]
