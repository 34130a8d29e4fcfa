"""Artwork catalog service."""

import logging
import re
from collections.abc import Callable
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Protocol
from uuid import UUID

from art_gallery.domain.artworks import (
    ARTWORK_STATES,
    ARTWORK_STATUSES,
    SALE_MARKED,
    STATE_IN_PROGRESS,
    STATUS_AVAILABLE,
    STATUS_SOLD,
    TYPE_CODES,
    UNKNOWN_TYPE_CODE,
    Artwork,
)
from art_gallery.domain.errors import ConflictError, NotFoundError, ValidationError

_logger = logging.getLogger(__name__)

_REQUIRED_FIELDS = ("src", "title", "price")
_DETAIL_FIELDS = (
    "title",
    "price",
    "status",
    "state",
    "materials",
    "duration",
    "type",
    "inspiration",
    "src",
)
_SERIAL_PATTERN = re.compile(r"-(\d+)$")
_FILTER_ALL = "all"


class ArtworkRepository(Protocol):
    """Persistence interface for artworks."""

    def create_artwork(self, payload: dict[str, object]) -> Artwork:
        """Create an artwork and return it."""

    def get_artwork(self, artwork_id: UUID) -> Artwork | None:
        """Return an artwork by id, if present."""

    def get_by_uid(self, uid: str) -> Artwork | None:
        """Return an artwork by its catalog uid, if present."""

    def list_artworks(self, status: str | None, state: str | None) -> list[Artwork]:
        """Return artworks newest first, optionally filtered."""

    def list_uids(self) -> list[str]:
        """Return every uid in the catalog."""

    def update_artwork(
        self, artwork_id: UUID, payload: dict[str, object]
    ) -> Artwork | None:
        """Apply a partial update and return the artwork, if present."""

    def delete_artwork(self, artwork_id: UUID) -> bool:
        """Delete an artwork and return whether it existed."""

    def mark_sold(self, uid: str, order_id: str, sold_at: datetime) -> str:
        """Mark an Available artwork as Sold and return the sale outcome."""


def _utcnow() -> datetime:
    return datetime.now(tz=UTC)


@dataclass
class ArtworkService:
    """Application service for catalog operations."""

    repository: ArtworkRepository
    default_artist: str = "bt"
    clock: Callable[[], datetime] = _utcnow

    def create(self, fields: dict[str, object]) -> Artwork:
        """Validate and store a new artwork."""
        for name in _REQUIRED_FIELDS:
            if _is_blank(fields.get(name)):
                raise ValidationError(name)
        status = str(fields.get("status") or STATUS_AVAILABLE)
        state = str(fields.get("state") or STATE_IN_PROGRESS)
        _check_status(status)
        _check_state(state)

        artist = str(fields.get("artist") or self.default_artist)
        type_code = str(
            fields.get("type_code")
            or TYPE_CODES.get(str(fields.get("type") or ""), UNKNOWN_TYPE_CODE)
        )
        uid = str(fields.get("uid") or "").strip()
        if not uid:
            uid = self.next_uid(artist, type_code)
        elif self.repository.get_by_uid(uid) is not None:
            raise ConflictError(f"Artwork uid already exists: {uid}")

        payload: dict[str, object] = {
            "uid": uid,
            "src": fields["src"],
            "title": fields["title"],
            "price": str(fields["price"]),
            "status": status,
            "state": state,
            "artist": artist,
            "type_code": type_code,
        }
        for name in ("materials", "duration", "type", "inspiration"):
            if fields.get(name) is not None:
                payload[name] = fields[name]
        if status == STATUS_SOLD:
            payload["sold_date"] = self.clock().isoformat()
        artwork = self.repository.create_artwork(payload)
        _logger.info("Artwork created: uid=%s", artwork.uid)
        return artwork

    def list_artworks(
        self, status: str | None = None, state: str | None = None
    ) -> list[Artwork]:
        """Return artworks newest first. "All" disables a filter."""
        return self.repository.list_artworks(_filter(status), _filter(state))

    def get(self, artwork_id: UUID) -> Artwork:
        """Return an artwork or raise NotFoundError."""
        artwork = self.repository.get_artwork(artwork_id)
        if artwork is None:
            raise NotFoundError("Artwork not found")
        return artwork

    def update_status(
        self, artwork_id: UUID, status: str | None = None, state: str | None = None
    ) -> Artwork:
        """Change an artwork's status and/or state."""
        payload: dict[str, object] = {}
        if status:
            _check_status(status)
            payload["status"] = status
        if state:
            _check_state(state)
            payload["state"] = state
        if not payload:
            raise ValidationError("status", "Status or state is required")
        return self._apply(artwork_id, payload)

    def update_details(self, artwork_id: UUID, fields: dict[str, object]) -> Artwork:
        """Replace any supplied artwork details. The uid never changes."""
        payload = {
            name: fields[name] for name in _DETAIL_FIELDS if fields.get(name) is not None
        }
        if "status" in payload:
            _check_status(str(payload["status"]))
        if "state" in payload:
            _check_state(str(payload["state"]))
        if "price" in payload:
            payload["price"] = str(payload["price"])
        if not payload:
            return self.get(artwork_id)
        return self._apply(artwork_id, payload)

    def delete(self, artwork_id: UUID) -> None:
        """Delete an artwork or raise NotFoundError."""
        if not self.repository.delete_artwork(artwork_id):
            raise NotFoundError("Artwork not found")
        _logger.info("Artwork deleted: id=%s", artwork_id)

    def mark_sold(self, uid: str, order_id: str) -> str:
        """Mark an artwork sold for an order if it is still available."""
        outcome = self.repository.mark_sold(uid, order_id, self.clock())
        if outcome == SALE_MARKED:
            _logger.info("Artwork sold: uid=%s order_id=%s", uid, order_id)
        return outcome

    def next_uid(self, artist: str, type_code: str) -> str:
        """Build the next catalog uid like bt-PT-25-004."""
        year = self.clock().strftime("%y")
        highest = 0
        for uid in self.repository.list_uids():
            match = _SERIAL_PATTERN.search(uid)
            if match:
                highest = max(highest, int(match.group(1)))
        return f"{artist}-{type_code}-{year}-{highest + 1:03d}"

    def _apply(self, artwork_id: UUID, payload: dict[str, object]) -> Artwork:
        new_status = payload.get("status")
        current = (
            self.repository.get_artwork(artwork_id) if new_status is not None else None
        )
        if current is not None and current.status != new_status:
            if new_status == STATUS_SOLD:
                payload["sold_date"] = self.clock().isoformat()
            elif current.status == STATUS_SOLD:
                # Leaving Sold drops the sale record.
                payload["sold_date"] = None
                payload["order_id"] = None
        updated = self.repository.update_artwork(artwork_id, payload)
        if updated is None:
            raise NotFoundError("Artwork not found")
        return updated


def _check_status(status: str) -> None:
    if status not in ARTWORK_STATUSES:
        raise ValidationError("status", f"Invalid artwork status: {status}")


def _check_state(state: str) -> None:
    if state not in ARTWORK_STATES:
        raise ValidationError("state", f"Invalid artwork state: {state}")


def _filter(value: str | None) -> str | None:
    if not value or value.lower() == _FILTER_ALL:
        return None
    return value


def _is_blank(value: object) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())
