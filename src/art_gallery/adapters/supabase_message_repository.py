"""Supabase-backed contact message repository."""

from dataclasses import dataclass
from uuid import UUID

from supabase import Client

from art_gallery.adapters.supabase_rows import parse_timestamp
from art_gallery.domain.errors import PersistenceError
from art_gallery.domain.messages import ContactMessage
from art_gallery.services.messages import MessageRepository


@dataclass
class SupabaseMessageRepository(MessageRepository):
    """Supabase implementation for contact messages."""

    client: Client

    def create_message(self, name: str, email: str, message: str) -> ContactMessage:
        """Insert a message row and return it."""
        response = (
            self.client.table("messages")
            .insert({"name": name, "email": email, "message": message})
            .execute()
        )
        if not response.data:
            raise PersistenceError("Failed to save message")
        return _parse_message(response.data[0])

    def list_messages(self) -> list[ContactMessage]:
        """Return messages newest first."""
        response = (
            self.client.table("messages")
            .select("id, name, email, message, created_at")
            .order("created_at", desc=True)
            .execute()
        )
        return [_parse_message(row) for row in response.data or []]

    def delete_message(self, message_id: UUID) -> bool:
        """Delete a message row."""
        response = (
            self.client.table("messages").delete().eq("id", str(message_id)).execute()
        )
        return bool(response.data)


def _parse_message(row: dict[str, object]) -> ContactMessage:
    return ContactMessage(
        id=UUID(str(row["id"])),
        name=str(row["name"]),
        email=str(row["email"]),
        message=str(row["message"]),
        created_at=parse_timestamp(row.get("created_at")),
    )
