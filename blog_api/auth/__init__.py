"""Authentication and authorization module."""

from blog_api.auth.identity import (
    DEV_IDENTITY,
    AuthorSnapshot,
    FirebaseTokenVerifier,
    Identity,
    IdentityDep,
    IdentityGate,
    TokenVerifier,
    get_current_identity,
)
from blog_api.auth.roles import (
    AdminDep,
    Role,
    RoleResolver,
    RoleResolverDep,
    get_role_resolver,
    require_admin,
)

__all__ = [
    "DEV_IDENTITY",
    "AdminDep",
    "AuthorSnapshot",
    "FirebaseTokenVerifier",
    "Identity",
    "IdentityDep",
    "IdentityGate",
    "Role",
    "RoleResolver",
    "RoleResolverDep",
    "TokenVerifier",
    "get_current_identity",
    "get_role_resolver",
    "require_admin",
]
