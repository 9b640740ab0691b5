"""
Subscriber Routes.

Public mailing-list sign-up plus admin-only listing and removal.
"""

from logging import getLogger
from uuid import UUID

from fastapi import APIRouter
from starlette.status import HTTP_201_CREATED

from blog_api.auth import AdminDep
from blog_api.configs import file_logger
from blog_api.dependencies import SubscriberRepoDep
from blog_api.errors import RecordNotFoundError
from blog_api.schemas import (
    SubscriberCreate,
    SubscriberListResponse,
    SubscriberResponse,
    SuccessResponse,
)

router = APIRouter(prefix="/subscribers", tags=["📬 Subscribers"])

logger = file_logger(getLogger(__name__))

ADMIN_ONLY_RESPONSE = {
    "description": "Caller is not an admin",
    "content": {"application/json": {"example": {"detail": "Access denied: Admins only"}}},
}


@router.post(
    "",
    response_model=SuccessResponse,
    status_code=HTTP_201_CREATED,
    summary="Subscribe to the newsletter",
    responses={
        409: {
            "description": "Already subscribed",
            "content": {"application/json": {"example": {"detail": "Email already subscribed"}}},
        },
    },
    operation_id="subscribers_create",
)
async def subscribe(subscriber: SubscriberCreate, repo: SubscriberRepoDep) -> SuccessResponse:
    await repo.subscribe(subscriber)
    return SuccessResponse(message="Subscribed successfully")


@router.get(
    "",
    response_model=SubscriberListResponse,
    summary="List subscribers",
    responses={403: ADMIN_ONLY_RESPONSE},
    operation_id="subscribers_list",
)
async def list_subscribers(admin: AdminDep, repo: SubscriberRepoDep) -> SubscriberListResponse:
    subscribers = await repo.get_all()
    return SubscriberListResponse(
        subscribers=[SubscriberResponse.model_validate(s, from_attributes=True) for s in subscribers],
    )


@router.delete(
    "/{subscriber_id}",
    response_model=SuccessResponse,
    summary="Remove a subscriber",
    responses={403: ADMIN_ONLY_RESPONSE},
    operation_id="subscribers_delete",
)
async def delete_subscriber(
    subscriber_id: UUID,
    admin: AdminDep,
    repo: SubscriberRepoDep,
) -> SuccessResponse:
    if not await repo.delete(subscriber_id):
        raise RecordNotFoundError(repo.not_found_detail)
    logger.info(f"Subscriber {subscriber_id} removed by {admin.uid}")
    return SuccessResponse(message="Subscriber deleted")
