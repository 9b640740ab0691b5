"""Role-based access control for admin-only resources."""

from logging import getLogger
from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from blog_api.auth.identity import Identity, IdentityDep
from blog_api.configs import file_logger
from blog_api.db import get_session
from blog_api.errors.auth import AdminRequiredError
from blog_api.models.user import Role
from blog_api.repositories.user import UserRepository

logger = file_logger(getLogger(__name__))


class RoleResolver:
    """
    Look up a caller's stored role by e-mail.

    Unknown e-mails and unrecognised stored roles resolve to ``Role.USER``;
    lookups never create users. E-mails are compared case-insensitively.
    """

    def __init__(self, users: UserRepository) -> None:
        self.users = users

    async def resolve(self, email: str | None) -> Role:
        if not email:
            return Role.USER
        user = await self.users.get_by_email(email)
        if user is None:
            return Role.USER
        if user.role not in Role:
            logger.warning(f"User {user.id} has unknown role {user.role!r}, treating as user")
            return Role.USER
        return Role(user.role)

    async def is_admin(self, identity: Identity) -> bool:
        return await self.resolve(identity.email) == Role.ADMIN


def get_role_resolver(session: Annotated[AsyncSession, Depends(get_session)]) -> RoleResolver:
    return RoleResolver(UserRepository(session))


RoleResolverDep = Annotated[RoleResolver, Depends(get_role_resolver)]


async def require_admin(identity: IdentityDep, resolver: RoleResolverDep) -> Identity:
    """
    Dependency that requires the admin role.

    Parameters
    ----------
    identity : Identity
        Authenticated caller.
    resolver : RoleResolver
        Role lookup bound to the request session.

    Returns
    -------
    Identity
        The caller, if they are an admin.

    Raises
    ------
    AdminRequiredError
        If the caller's stored role is not admin.
    """
    if not await resolver.is_admin(identity):
        logger.warning(f"Admin access denied for {identity.uid}")
        raise AdminRequiredError()
    return identity


AdminDep = Annotated[Identity, Depends(require_admin)]
