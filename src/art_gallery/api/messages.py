"""Contact message endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003

from fastapi import APIRouter, Depends, Query, Request, status

from art_gallery.api.dependencies import get_container, require_admin
from art_gallery.api.models import ContactMessageIn
from art_gallery.api.serializers import serialize_message
from art_gallery.domain.errors import ValidationError

if TYPE_CHECKING:
    from art_gallery.containers import AppContainer

router = APIRouter(prefix="/messages", tags=["messages"])


@router.post("", status_code=status.HTTP_201_CREATED)
async def submit_message(
    payload: ContactMessageIn, request: Request
) -> dict[str, object]:
    """Store a contact form message."""
    container: AppContainer = get_container(request)
    message = container.message_service.submit(
        name=payload.name or "",
        email=payload.email or "",
        message=payload.message or "",
    )
    return serialize_message(message)


@router.get("", dependencies=[Depends(require_admin)])
async def list_messages(request: Request) -> list[dict[str, object]]:
    """Return the contact inbox, newest first."""
    container: AppContainer = get_container(request)
    return [serialize_message(m) for m in container.message_service.list_messages()]


@router.delete("", dependencies=[Depends(require_admin)])
async def delete_message(
    request: Request,
    message_id: UUID | None = Query(default=None, alias="id"),
) -> dict[str, str]:
    """Delete a contact message."""
    if message_id is None:
        raise ValidationError("id", "Message ID is required")
    container: AppContainer = get_container(request)
    container.message_service.delete(message_id)
    return {"message": "Message deleted successfully"}
