"""Artwork catalog endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003

from fastapi import APIRouter, Depends, Query, Request, status

from art_gallery.api.dependencies import get_container, require_admin
from art_gallery.api.models import (
    ArtworkCreate,
    ArtworkDetailsUpdate,
    ArtworkStatusUpdate,
)
from art_gallery.api.serializers import serialize_artwork
from art_gallery.domain.errors import ValidationError

if TYPE_CHECKING:
    from art_gallery.containers import AppContainer

router = APIRouter(prefix="/gallery", tags=["gallery"])


@router.get("")
async def list_artworks(
    request: Request,
    status_filter: str | None = Query(default=None, alias="status"),
    state: str | None = None,
) -> list[dict[str, object]]:
    """Return artworks newest first, filtered by status and state."""
    container: AppContainer = get_container(request)
    artworks = container.artwork_service.list_artworks(status_filter, state)
    return [serialize_artwork(artwork) for artwork in artworks]


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_admin)],
)
async def create_artwork(payload: ArtworkCreate, request: Request) -> dict[str, object]:
    """Add an artwork to the catalog."""
    container: AppContainer = get_container(request)
    artwork = container.artwork_service.create(payload.model_dump())
    return serialize_artwork(artwork)


@router.patch("", dependencies=[Depends(require_admin)])
async def update_artwork_status(
    change: ArtworkStatusUpdate,
    request: Request,
    artwork_id: UUID | None = Query(default=None, alias="id"),
) -> dict[str, object]:
    """Change an artwork's status or state."""
    container: AppContainer = get_container(request)
    artwork = container.artwork_service.update_status(
        _require_id(artwork_id), status=change.status, state=change.state
    )
    return serialize_artwork(artwork)


@router.put("", dependencies=[Depends(require_admin)])
async def update_artwork_details(
    change: ArtworkDetailsUpdate,
    request: Request,
    artwork_id: UUID | None = Query(default=None, alias="id"),
) -> dict[str, object]:
    """Edit an artwork's details."""
    container: AppContainer = get_container(request)
    artwork = container.artwork_service.update_details(
        _require_id(artwork_id), change.model_dump()
    )
    return serialize_artwork(artwork)


@router.delete("", dependencies=[Depends(require_admin)])
async def delete_artwork(
    request: Request,
    artwork_id: UUID | None = Query(default=None, alias="id"),
) -> dict[str, str]:
    """Remove an artwork from the catalog."""
    container: AppContainer = get_container(request)
    container.artwork_service.delete(_require_id(artwork_id))
    return {"message": "Deleted successfully"}


def _require_id(artwork_id: UUID | None) -> UUID:
    if artwork_id is None:
        raise ValidationError("id", "ID required")
    return artwork_id
