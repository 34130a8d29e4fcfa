"""Supabase-backed customer repository."""

from dataclasses import dataclass
from uuid import UUID

from postgrest.exceptions import APIError
from supabase import Client

from art_gallery.adapters.supabase_rows import parse_timestamp
from art_gallery.domain.accounts import UserAccount
from art_gallery.domain.errors import ConflictError, PersistenceError
from art_gallery.services.users import UserRepository

_UNIQUE_VIOLATION = "23505"


@dataclass
class SupabaseUserRepository(UserRepository):
    """Supabase implementation for customer accounts."""

    client: Client

    def get_by_email(self, email: str) -> UserAccount | None:
        """Return the user with an email address, if present."""
        response = (
            self.client.table("users")
            .select("id, name, email, password_hash, created_at")
            .eq("email", email)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_user(response.data[0])

    def create_user(self, name: str, email: str, password_hash: str) -> UserAccount:
        """Create a user row and return it."""
        try:
            response = (
                self.client.table("users")
                .insert({"name": name, "email": email, "password_hash": password_hash})
                .execute()
            )
        except APIError as exc:
            if exc.code == _UNIQUE_VIOLATION:
                raise ConflictError("User already exists with this email") from exc
            raise
        if not response.data:
            raise PersistenceError("Failed to create user")
        return _parse_user(response.data[0])


def _parse_user(row: dict[str, object]) -> UserAccount:
    return UserAccount(
        id=UUID(str(row["id"])),
        name=str(row["name"]),
        email=str(row["email"]),
        password_hash=str(row["password_hash"]),
        created_at=parse_timestamp(row.get("created_at")),
    )
