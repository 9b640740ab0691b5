# blog_api/routes/user.py

"""
User Routes.

Registration after sign-in, role lookup and profile management.

Summary
-------
Endpoints include:
  - Register or touch a user
  - Look up a role by e-mail
  - List users (admin)
  - Update a profile (self or admin)
  - Change a role (admin)
"""

from logging import getLogger
from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Query
from fastapi.responses import ORJSONResponse
from starlette.status import HTTP_200_OK, HTTP_201_CREATED

from blog_api.auth import AdminDep, IdentityDep, RoleResolverDep
from blog_api.configs import file_logger
from blog_api.dependencies import UserOpsDep, UserRepoDep
from blog_api.errors import ForbiddenError
from blog_api.models import UserDB
from blog_api.schemas import (
    RoleResponse,
    RoleUpdate,
    UserCreate,
    UserListResponse,
    UserMutationResponse,
    UserResponse,
    UserUpdate,
)

router = APIRouter(prefix="/users", tags=["👤 Users"])

logger = file_logger(getLogger(__name__))


def user_to_response(db_user: UserDB) -> UserResponse:
    return UserResponse.model_validate(db_user, from_attributes=True)


@router.post(
    "",
    response_model=UserMutationResponse,
    status_code=HTTP_201_CREATED,
    summary="Register or touch a user",
    description=(
        "Create a user for a new e-mail, or refresh `lastLogIn` for an existing one. "
        "Returns 201 on creation and 200 otherwise."
    ),
    operation_id="users_register",
)
async def register_user(user: UserCreate, repo: UserRepoDep) -> ORJSONResponse:
    db_user, created = await repo.register(user)
    if created:
        logger.info(f"User {db_user.id} registered")
    body = UserMutationResponse(
        message="User created" if created else "User already exists",
        user=user_to_response(db_user),
    )
    return ORJSONResponse(
        content=body.model_dump(mode="json", by_alias=True),
        status_code=HTTP_201_CREATED if created else HTTP_200_OK,
    )


@router.get(
    "/role",
    response_model=RoleResponse,
    summary="Look up a user's role by e-mail",
    description="Unknown e-mails resolve to `user`; no record is created.",
    operation_id="users_get_role",
)
async def get_role(
    email: Annotated[str, Query(min_length=1, description="E-mail to look up")],
    identity: IdentityDep,
    roles: RoleResolverDep,
) -> RoleResponse:
    return RoleResponse(role=await roles.resolve(email))


@router.get(
    "",
    response_model=UserListResponse,
    summary="List all users",
    responses={
        403: {
            "description": "Caller is not an admin",
            "content": {"application/json": {"example": {"detail": "Access denied: Admins only"}}},
        },
    },
    operation_id="users_list",
)
async def list_users(admin: AdminDep, repo: UserRepoDep) -> UserListResponse:
    return UserListResponse(data=[user_to_response(u) for u in await repo.get_all()])


@router.patch(
    "/{user_id}",
    response_model=UserMutationResponse,
    summary="Update a user profile",
    description="Callers may update their own profile; admins may update anyone's.",
    operation_id="users_update",
)
async def update_user(user_id: UUID, changes: UserUpdate, deps: UserOpsDep) -> UserMutationResponse:
    """
    Update `displayName` and `photoURL`.

    Parameters
    ----------
    user_id : UUID
        Target user.
    changes : UserUpdate
        Profile fields to change.
    deps : UserOpsDeps
        Caller identity, role lookup and repository.

    Returns
    -------
    UserMutationResponse
        The updated profile.

    Raises
    ------
    RecordNotFoundError
        If the user does not exist.
    ForbiddenError
        If the caller is neither the user nor an admin.
    """
    db_user = await deps.repo.get_or_raise(user_id)
    identity = deps.identity
    is_self = db_user.uid == identity.uid or (
        identity.email is not None and db_user.email.lower() == identity.email.lower()
    )
    if not is_self and not await deps.roles.is_admin(identity):
        raise ForbiddenError("Forbidden: You can edit only your own profile")

    db_user = await deps.repo.update_profile(user_id, changes)
    return UserMutationResponse(
        message="User profile updated successfully",
        user=user_to_response(db_user),
    )


@router.patch(
    "/{user_id}/role",
    response_model=UserMutationResponse,
    summary="Change a user's role",
    operation_id="users_set_role",
)
async def set_user_role(
    user_id: UUID,
    role: RoleUpdate,
    admin: AdminDep,
    repo: UserRepoDep,
) -> UserMutationResponse:
    db_user = await repo.set_role(user_id, role.role)
    logger.info(f"User {user_id} role set to {role.role} by {admin.uid}")
    return UserMutationResponse(message="User role updated", user=user_to_response(db_user))
