"""Domain models for customer and administrator accounts."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass(frozen=True)
class UserAccount:
    """A registered customer."""

    id: UUID
    name: str
    email: str
    password_hash: str
    created_at: datetime | None = None


@dataclass(frozen=True)
class AdminAccount:
    """A dashboard administrator."""

    id: UUID
    username: str
    password_hash: str
    email: str | None = None
