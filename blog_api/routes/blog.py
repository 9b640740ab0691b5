# blog_api/routes/blog.py

"""
Blog Routes.

Provides CRUD endpoints for blog posts plus the like action.

Summary
-------
Endpoints include:
  - List blogs
  - List blogs by author e-mail
  - Get blog by id
  - Create blog (records a CREATE activity)
  - Update blog (PUT and PATCH, author only)
  - Delete blog (author only)
  - Like blog

Dependencies
------------
  - `BlogOpsDeps`: Bundles the blog repository and the caller's identity
    for authenticated operations.
"""

from logging import getLogger
from typing import Annotated

from fastapi import APIRouter, Body
from starlette.status import HTTP_201_CREATED

from blog_api.auth import IdentityDep
from blog_api.configs import file_logger
from blog_api.dependencies import BlogOpsDep, BlogRepoDep, BlogServiceDep
from blog_api.schemas import (
    BlogCreate,
    BlogCreatedResponse,
    BlogDetailResponse,
    BlogResponse,
    BlogUpdate,
    LikeRequest,
    LikeResponse,
    MessageResponse,
    blog_to_response,
)

router = APIRouter(prefix="/blogs", tags=["📝 Blogs"])

logger = file_logger(getLogger(__name__))

NOT_FOUND_RESPONSE = {
    "description": "Not found",
    "content": {"application/json": {"example": {"detail": "Blog not found"}}},
}
FORBIDDEN_RESPONSE = {
    "description": "Caller is not the author",
    "content": {
        "application/json": {
            "example": {"detail": "Forbidden: You can edit only your own blog"},
        },
    },
}
INVALID_ID_RESPONSE = {
    "description": "Malformed blog id",
    "content": {"application/json": {"example": {"detail": "Invalid blog ID"}}},
}


@router.get(
    "",
    response_model=list[BlogResponse],
    summary="List all blogs",
    operation_id="blogs_list",
)
async def list_blogs(repo: BlogRepoDep) -> list[BlogResponse]:
    return [blog_to_response(document) for document in await repo.list_all()]


@router.get(
    "/user/{email}",
    response_model=list[BlogResponse],
    summary="List blogs by author e-mail",
    description="Return every blog whose author e-mail matches, ignoring case.",
    operation_id="blogs_list_by_author",
)
async def list_blogs_by_author(email: str, repo: BlogRepoDep) -> list[BlogResponse]:
    return [blog_to_response(document) for document in await repo.list_by_author_email(email)]


@router.get(
    "/{blog_id}",
    response_model=BlogDetailResponse,
    summary="Get blog by ID",
    responses={404: NOT_FOUND_RESPONSE},
    operation_id="blogs_get_by_id",
)
async def get_blog(blog_id: str, repo: BlogRepoDep) -> BlogDetailResponse:
    """
    Get a blog with its likes and reviews.

    A malformed id is reported as not found.
    """
    return BlogDetailResponse(blog=blog_to_response(await repo.get(blog_id)))


@router.post(
    "",
    response_model=BlogCreatedResponse,
    status_code=HTTP_201_CREATED,
    summary="Create a new blog post",
    description=(
        "Create a blog authored by the caller. Any author, likes or reviews in the "
        "payload are ignored."
    ),
    responses={
        201: {
            "content": {
                "application/json": {
                    "example": {
                        "message": "Blog added",
                        "blogId": "123e4567-e89b-12d3-a456-426614174000",
                    },
                },
            },
        },
        401: {
            "description": "Missing or invalid credential",
            "content": {"application/json": {"example": {"detail": "No token provided"}}},
        },
    },
    operation_id="blogs_create",
)
async def create_blog(
    blog: Annotated[
        BlogCreate,
        Body(
            examples=[
                {
                    "title": "Ten Days in Kyoto",
                    "content": "Kyoto rewards slow travellers...",
                    "category": "Travel",
                },
            ],
        ),
    ],
    identity: IdentityDep,
    service: BlogServiceDep,
) -> BlogCreatedResponse:
    """
    Create a new blog post.

    Parameters
    ----------
    blog : BlogCreate
        Blog input payload.
    identity : Identity
        Authenticated caller; becomes the author.
    service : BlogService
        Creates the post and its audit entry in one transaction.

    Returns
    -------
    BlogCreatedResponse
        Acknowledgement with the new blog id.
    """
    db_blog = await service.create(blog, identity)
    return BlogCreatedResponse(blog_id=str(db_blog.id))


async def _update_blog(blog_id: str, changes: BlogUpdate, deps: BlogOpsDep) -> MessageResponse:
    await deps.repo.update_owned(blog_id, changes, caller_email=deps.identity.email)
    logger.info(f"Blog {blog_id} updated by {deps.identity.uid}")
    return MessageResponse(message="Blog updated successfully")


@router.put(
    "/{blog_id}",
    response_model=MessageResponse,
    summary="Update a blog",
    description="Merge the supplied fields into a blog the caller authored.",
    responses={400: INVALID_ID_RESPONSE, 403: FORBIDDEN_RESPONSE, 404: NOT_FOUND_RESPONSE},
    operation_id="blogs_update_put",
)
async def put_blog(blog_id: str, changes: BlogUpdate, deps: BlogOpsDep) -> MessageResponse:
    return await _update_blog(blog_id, changes, deps)


@router.patch(
    "/{blog_id}",
    response_model=MessageResponse,
    summary="Partially update a blog",
    description="Merge the supplied fields into a blog the caller authored.",
    responses={400: INVALID_ID_RESPONSE, 403: FORBIDDEN_RESPONSE, 404: NOT_FOUND_RESPONSE},
    operation_id="blogs_update_patch",
)
async def patch_blog(blog_id: str, changes: BlogUpdate, deps: BlogOpsDep) -> MessageResponse:
    return await _update_blog(blog_id, changes, deps)


@router.delete(
    "/{blog_id}",
    response_model=MessageResponse,
    summary="Delete a blog",
    responses={400: INVALID_ID_RESPONSE, 403: FORBIDDEN_RESPONSE, 404: NOT_FOUND_RESPONSE},
    operation_id="blogs_delete",
)
async def delete_blog(blog_id: str, deps: BlogOpsDep) -> MessageResponse:
    """Delete a blog the caller authored, together with its likes and reviews."""
    await deps.repo.delete_owned(blog_id, caller_email=deps.identity.email)
    return MessageResponse(message="Blog deleted successfully")


@router.post(
    "/{blog_id}/like",
    response_model=LikeResponse,
    summary="Like a blog",
    description="Record a like from `userId`. A second like from the same user is rejected.",
    responses={
        400: {
            "description": "Already liked",
            "content": {"application/json": {"example": {"detail": "Already liked"}}},
        },
        404: NOT_FOUND_RESPONSE,
    },
    operation_id="blogs_like",
)
async def like_blog(blog_id: str, like: LikeRequest, repo: BlogRepoDep) -> LikeResponse:
    return LikeResponse(likes=await repo.like(blog_id, like.user_id))
