"""
Admin Routes.

Administrative operations that bypass ownership checks.
"""

from logging import getLogger
from uuid import UUID

from fastapi import APIRouter

from blog_api.auth import AdminDep
from blog_api.configs import file_logger
from blog_api.dependencies import BlogRepoDep, UserRepoDep
from blog_api.errors import RecordNotFoundError
from blog_api.schemas import BlogDetailResponse, BlogUpdate, SuccessResponse, blog_to_response

router = APIRouter(prefix="/admin", tags=["🛡️ Admin"])

logger = file_logger(getLogger(__name__))


@router.patch(
    "/blogs/{blog_id}",
    response_model=BlogDetailResponse,
    summary="Update any blog",
    description="Merge the supplied fields into a blog regardless of its author.",
    operation_id="admin_blogs_update",
)
async def admin_update_blog(
    blog_id: str,
    changes: BlogUpdate,
    admin: AdminDep,
    repo: BlogRepoDep,
) -> BlogDetailResponse:
    document = await repo.update_unowned(blog_id, changes)
    logger.info(f"Blog {blog_id} updated by admin {admin.uid}")
    return BlogDetailResponse(blog=blog_to_response(document))


@router.delete(
    "/users/{user_id}",
    response_model=SuccessResponse,
    summary="Delete a user",
    operation_id="admin_users_delete",
)
async def admin_delete_user(user_id: UUID, admin: AdminDep, repo: UserRepoDep) -> SuccessResponse:
    if not await repo.delete(user_id):
        raise RecordNotFoundError(repo.not_found_detail)
    logger.info(f"User {user_id} deleted by admin {admin.uid}")
    return SuccessResponse(message="User deleted successfully")
