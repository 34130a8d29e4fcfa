"""Supabase-backed administrator repository."""

from dataclasses import dataclass
from uuid import UUID

from supabase import Client

from art_gallery.adapters.supabase_rows import optional_str
from art_gallery.domain.accounts import AdminAccount
from art_gallery.domain.errors import PersistenceError
from art_gallery.services.admins import AdminRepository


@dataclass
class SupabaseAdminRepository(AdminRepository):
    """Supabase implementation for administrators."""

    client: Client

    def get_by_username(self, username: str) -> AdminAccount | None:
        """Return the admin with a username, if present."""
        response = (
            self.client.table("admins")
            .select("id, username, email, password_hash")
            .eq("username", username)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_admin(response.data[0])

    def create_admin(
        self, username: str, password_hash: str, email: str | None
    ) -> AdminAccount:
        """Create an admin row and return it."""
        response = (
            self.client.table("admins")
            .insert(
                {"username": username, "password_hash": password_hash, "email": email}
            )
            .execute()
        )
        if not response.data:
            raise PersistenceError("Failed to create admin")
        return _parse_admin(response.data[0])


def _parse_admin(row: dict[str, object]) -> AdminAccount:
    return AdminAccount(
        id=UUID(str(row["id"])),
        username=str(row["username"]),
        password_hash=str(row["password_hash"]),
        email=optional_str(row.get("email")),
    )
