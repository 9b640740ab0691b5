# blog_api/dependencies/dependencies.py

"""Application dependencies: repositories, services and shared clients."""

from dataclasses import dataclass
from typing import Annotated

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from blog_api.auth import Identity, IdentityDep, RoleResolver, RoleResolverDep
from blog_api.clients import ImageHostClient
from blog_api.configs import settings
from blog_api.db import get_session
from blog_api.repositories import (
    ActivityRepository,
    BlogRepository,
    ContactRepository,
    SubscriberRepository,
    UserRepository,
)
from blog_api.services import BlogService, EngagementService

SessionDep = Annotated[AsyncSession, Depends(get_session)]


def get_blog_repository(session: SessionDep) -> BlogRepository:
    """
    Resolve the `BlogRepository` dependency.

    Parameters
    ----------
    session : AsyncSession
        Database session.

    Returns
    -------
    BlogRepository
        Repository instance bound to the session.
    """
    return BlogRepository(session)


def get_user_repository(session: SessionDep) -> UserRepository:
    """
    Resolve the `UserRepository` dependency.

    Parameters
    ----------
    session : AsyncSession
        Database session.

    Returns
    -------
    UserRepository
        Repository instance bound to the session.
    """
    return UserRepository(session)


def get_activity_repository(session: SessionDep) -> ActivityRepository:
    return ActivityRepository(session)


def get_subscriber_repository(session: SessionDep) -> SubscriberRepository:
    return SubscriberRepository(session)


def get_contact_repository(session: SessionDep) -> ContactRepository:
    return ContactRepository(session)


BlogRepoDep = Annotated[BlogRepository, Depends(get_blog_repository)]
UserRepoDep = Annotated[UserRepository, Depends(get_user_repository)]
ActivityRepoDep = Annotated[ActivityRepository, Depends(get_activity_repository)]
SubscriberRepoDep = Annotated[SubscriberRepository, Depends(get_subscriber_repository)]
ContactRepoDep = Annotated[ContactRepository, Depends(get_contact_repository)]


def get_blog_service(blogs: BlogRepoDep, activities: ActivityRepoDep) -> BlogService:
    """Blog writes and their audit entries share the request session."""
    return BlogService(blogs, activities)


def get_engagement_service(blogs: BlogRepoDep, users: UserRepoDep) -> EngagementService:
    return EngagementService(blogs, users, default_avatar_url=settings.DEFAULT_AVATAR_URL)


BlogServiceDep = Annotated[BlogService, Depends(get_blog_service)]
EngagementDep = Annotated[EngagementService, Depends(get_engagement_service)]


def get_image_host(request: Request) -> ImageHostClient:
    """Dependency to get the shared image host client."""
    return request.app.state.image_host


ImageHostDep = Annotated[ImageHostClient, Depends(get_image_host)]


@dataclass(frozen=True)
class BlogOpsDeps:
    """Identity plus the blog repository, the pair every blog mutation needs."""

    identity: Identity
    repo: BlogRepository


def get_blog_ops_deps(identity: IdentityDep, repo: BlogRepoDep) -> BlogOpsDeps:
    return BlogOpsDeps(identity=identity, repo=repo)


BlogOpsDep = Annotated[BlogOpsDeps, Depends(get_blog_ops_deps)]


@dataclass(frozen=True)
class UserOpsDeps:
    """Identity, role lookup and the user repository for profile changes."""

    identity: Identity
    roles: RoleResolver
    repo: UserRepository


def get_user_ops_deps(
    identity: IdentityDep,
    roles: RoleResolverDep,
    repo: UserRepoDep,
) -> UserOpsDeps:
    return UserOpsDeps(identity=identity, roles=roles, repo=repo)


UserOpsDep = Annotated[UserOpsDeps, Depends(get_user_ops_deps)]
