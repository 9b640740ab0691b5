from blog_api.repositories.activity import ActivityRepository
from blog_api.repositories.base import BaseRepository, parse_id
from blog_api.repositories.blog import BlogRepository
from blog_api.repositories.subscriber import ContactRepository, SubscriberRepository
from blog_api.repositories.user import UserRepository

__all__ = [
    "ActivityRepository",
    "BaseRepository",
    "BlogRepository",
    "ContactRepository",
    "SubscriberRepository",
    "UserRepository",
    "parse_id",
]
