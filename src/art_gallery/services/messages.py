"""Contact form messages."""

from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from art_gallery.domain.errors import NotFoundError, ValidationError
from art_gallery.domain.messages import ContactMessage


class MessageRepository(Protocol):
    """Persistence interface for contact messages."""

    def create_message(self, name: str, email: str, message: str) -> ContactMessage:
        """Store a message and return it."""

    def list_messages(self) -> list[ContactMessage]:
        """Return messages newest first."""

    def delete_message(self, message_id: UUID) -> bool:
        """Delete a message and return whether it existed."""


@dataclass
class MessageService:
    """Application service for the contact inbox."""

    repository: MessageRepository

    def submit(self, name: str, email: str, message: str) -> ContactMessage:
        """Validate and store a contact message."""
        for field_name, value in (("name", name), ("email", email), ("message", message)):
            if not value or not value.strip():
                raise ValidationError(field_name)
        return self.repository.create_message(
            name=name.strip(), email=email.strip(), message=message.strip()
        )

    def list_messages(self) -> list[ContactMessage]:
        """Return the inbox newest first."""
        return self.repository.list_messages()

    def delete(self, message_id: UUID) -> None:
        """Delete a message or raise NotFoundError."""
        if not self.repository.delete_message(message_id):
            raise NotFoundError("Message not found")
