"""Supabase-backed artwork repository."""

from dataclasses import dataclass
from datetime import UTC, datetime
from uuid import UUID

from postgrest.exceptions import APIError
from supabase import Client

from art_gallery.adapters.retry import storage_retry
from art_gallery.adapters.supabase_rows import optional_str, parse_timestamp
from art_gallery.domain.artworks import (
    SALE_ALREADY_SOLD,
    SALE_MARKED,
    SALE_MISSING,
    STATUS_AVAILABLE,
    STATUS_SOLD,
    Artwork,
)
from art_gallery.domain.errors import ConflictError, PersistenceError
from art_gallery.services.artworks import ArtworkRepository

_TABLE = "artworks"
_UNIQUE_VIOLATION = "23505"


@dataclass
class SupabaseArtworkRepository(ArtworkRepository):
    """Supabase implementation for the artwork catalog."""

    client: Client
    retry_attempts: int = 3

    def create_artwork(self, payload: dict[str, object]) -> Artwork:
        """Insert an artwork row and return it."""
        try:
            response = self.client.table(_TABLE).insert(payload).execute()
        except APIError as exc:
            if exc.code == _UNIQUE_VIOLATION:
                raise ConflictError(
                    f"Artwork uid already exists: {payload.get('uid')}"
                ) from exc
            raise
        if not response.data:
            raise PersistenceError("Failed to create artwork")
        return _parse_artwork(response.data[0])

    def get_artwork(self, artwork_id: UUID) -> Artwork | None:
        """Return an artwork by id, if present."""
        response = (
            self.client.table(_TABLE)
            .select("*")
            .eq("id", str(artwork_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_artwork(response.data[0])

    def get_by_uid(self, uid: str) -> Artwork | None:
        """Return an artwork by uid, if present."""
        response = (
            self.client.table(_TABLE).select("*").eq("uid", uid).limit(1).execute()
        )
        if not response.data:
            return None
        return _parse_artwork(response.data[0])

    def list_artworks(self, status: str | None, state: str | None) -> list[Artwork]:
        """Return artworks newest first."""
        query = self.client.table(_TABLE).select("*")
        if status:
            query = query.eq("status", status)
        if state:
            query = query.eq("state", state)
        response = query.order("created_at", desc=True).execute()
        return [_parse_artwork(row) for row in response.data or []]

    def list_uids(self) -> list[str]:
        """Return all catalog uids."""
        response = self.client.table(_TABLE).select("uid").execute()
        return [str(row["uid"]) for row in response.data or []]

    def update_artwork(
        self, artwork_id: UUID, payload: dict[str, object]
    ) -> Artwork | None:
        """Update an artwork row and return it."""
        response = (
            self.client.table(_TABLE)
            .update({**payload, "updated_at": datetime.now(tz=UTC).isoformat()})
            .eq("id", str(artwork_id))
            .execute()
        )
        if not response.data:
            return None
        return _parse_artwork(response.data[0])

    def delete_artwork(self, artwork_id: UUID) -> bool:
        """Delete an artwork row."""
        response = self.client.table(_TABLE).delete().eq("id", str(artwork_id)).execute()
        return bool(response.data)

    def mark_sold(self, uid: str, order_id: str, sold_at: datetime) -> str:
        """Conditionally mark an artwork sold, retrying transient failures."""
        return storage_retry(self.retry_attempts)(
            self._mark_sold_once, uid, order_id, sold_at
        )

    def _mark_sold_once(self, uid: str, order_id: str, sold_at: datetime) -> str:
        # The status predicate makes the update a compare-and-set.
        response = (
            self.client.table(_TABLE)
            .update(
                {
                    "status": STATUS_SOLD,
                    "sold_date": sold_at.isoformat(),
                    "order_id": order_id,
                    "updated_at": sold_at.isoformat(),
                }
            )
            .eq("uid", uid)
            .eq("status", STATUS_AVAILABLE)
            .execute()
        )
        if response.data:
            return SALE_MARKED
        current = self.get_by_uid(uid)
        if current is None:
            return SALE_MISSING
        # A retry after a lost response finds the row already sold to this order.
        if current.status == STATUS_SOLD and current.order_id == order_id:
            return SALE_MARKED
        return SALE_ALREADY_SOLD


def _parse_artwork(row: dict[str, object]) -> Artwork:
    return Artwork(
        id=UUID(str(row["id"])),
        uid=str(row["uid"]),
        src=str(row.get("src") or ""),
        title=str(row.get("title") or ""),
        price=str(row.get("price") or ""),
        status=str(row.get("status") or STATUS_AVAILABLE),
        state=str(row.get("state") or ""),
        artist=optional_str(row.get("artist")),
        type_code=optional_str(row.get("type_code")),
        materials=optional_str(row.get("materials")),
        duration=optional_str(row.get("duration")),
        type=optional_str(row.get("type")),
        inspiration=optional_str(row.get("inspiration")),
        sold_date=parse_timestamp(row.get("sold_date")),
        order_id=optional_str(row.get("order_id")),
        created_at=parse_timestamp(row.get("created_at")),
        updated_at=parse_timestamp(row.get("updated_at")),
    )
