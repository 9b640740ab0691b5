"""
Contact Routes.

Public contact form plus admin-only inbox.
"""

from logging import getLogger
from uuid import UUID

from fastapi import APIRouter
from starlette.status import HTTP_201_CREATED

from blog_api.auth import AdminDep
from blog_api.configs import file_logger
from blog_api.dependencies import ContactRepoDep
from blog_api.errors import RecordNotFoundError
from blog_api.schemas import ContactCreate, ContactResponse, MessageResponse

router = APIRouter(prefix="/contacts", tags=["✉️ Contacts"])

logger = file_logger(getLogger(__name__))


@router.post(
    "",
    response_model=MessageResponse,
    status_code=HTTP_201_CREATED,
    summary="Send a contact message",
    description="`name`, `email` and `message` are all required.",
    operation_id="contacts_create",
)
async def submit_contact(contact: ContactCreate, repo: ContactRepoDep) -> MessageResponse:
    await repo.submit(contact)
    return MessageResponse(message="Message received!")


@router.get(
    "",
    response_model=list[ContactResponse],
    summary="List contact messages",
    operation_id="contacts_list",
)
async def list_contacts(admin: AdminDep, repo: ContactRepoDep) -> list[ContactResponse]:
    return [ContactResponse.model_validate(c, from_attributes=True) for c in await repo.get_all()]


@router.delete(
    "/{contact_id}",
    response_model=MessageResponse,
    summary="Delete a contact message",
    responses={
        404: {
            "description": "Not found",
            "content": {"application/json": {"example": {"detail": "Message not found"}}},
        },
    },
    operation_id="contacts_delete",
)
async def delete_contact(
    contact_id: UUID,
    admin: AdminDep,
    repo: ContactRepoDep,
) -> MessageResponse:
    if not await repo.delete(contact_id):
        raise RecordNotFoundError(repo.not_found_detail)
    logger.info(f"Contact message {contact_id} deleted by {admin.uid}")
    return MessageResponse(message="Message deleted successfully!")
