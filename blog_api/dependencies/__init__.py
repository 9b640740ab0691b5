# blog_api/dependencies/__init__.py

from blog_api.dependencies.dependencies import (
    ActivityRepoDep,
    BlogOpsDep,
    BlogOpsDeps,
    BlogRepoDep,
    BlogServiceDep,
    ContactRepoDep,
    EngagementDep,
    ImageHostDep,
    SessionDep,
    SubscriberRepoDep,
    UserOpsDep,
    UserOpsDeps,
    UserRepoDep,
    get_activity_repository,
    get_blog_repository,
    get_blog_service,
    get_contact_repository,
    get_engagement_service,
    get_image_host,
    get_subscriber_repository,
    get_user_repository,
)

__all__ = [
    "ActivityRepoDep",
    "BlogOpsDep",
    "BlogOpsDeps",
    "BlogRepoDep",
    "BlogServiceDep",
    "ContactRepoDep",
    "EngagementDep",
    "ImageHostDep",
    "SessionDep",
    "SubscriberRepoDep",
    "UserOpsDep",
    "UserOpsDeps",
    "UserRepoDep",
    "get_activity_repository",
    "get_blog_repository",
    "get_blog_service",
    "get_contact_repository",
    "get_engagement_service",
    "get_image_host",
    "get_subscriber_repository",
    "get_user_repository",
]
