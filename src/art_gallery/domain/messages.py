"""Domain models for contact messages."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass(frozen=True)
class ContactMessage:
    """A message sent through the contact form."""

    id: UUID
    name: str
    email: str
    message: str
    created_at: datetime | None = None
