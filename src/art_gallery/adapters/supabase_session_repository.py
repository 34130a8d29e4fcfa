"""Supabase-backed session repository."""

from dataclasses import dataclass
from datetime import datetime

from supabase import Client

from art_gallery.adapters.supabase_rows import parse_timestamp
from art_gallery.domain.errors import PersistenceError
from art_gallery.domain.sessions import SessionRecord
from art_gallery.services.sessions import SessionRepository

_TABLE = "sessions"
_COLUMNS = "token, user_id, role, user_data, expires_at, created_at"


@dataclass
class SupabaseSessionRepository(SessionRepository):
    """Supabase implementation for login sessions."""

    client: Client

    def create_session(  # noqa: PLR0913
        self,
        token: str,
        user_id: str,
        role: str,
        user_data: dict[str, object],
        expires_at: datetime,
    ) -> SessionRecord:
        """Create a session row and return it."""
        response = (
            self.client.table(_TABLE)
            .insert(
                {
                    "token": token,
                    "user_id": user_id,
                    "role": role,
                    "user_data": user_data,
                    "expires_at": expires_at.isoformat(),
                }
            )
            .execute()
        )
        if not response.data:
            raise PersistenceError("Failed to create session")
        return _parse_session(response.data[0])

    def get_active_session(self, token: str, now: datetime) -> SessionRecord | None:
        """Return the session for a token if it has not expired."""
        response = (
            self.client.table(_TABLE)
            .select(_COLUMNS)
            .eq("token", token)
            .gt("expires_at", now.isoformat())
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_session(response.data[0])

    def delete_session(self, token: str) -> None:
        """Delete a session by token."""
        self.client.table(_TABLE).delete().eq("token", token).execute()

    def delete_sessions_for_user(self, user_id: str, role: str) -> int:
        """Delete all sessions for a user and role."""
        response = (
            self.client.table(_TABLE)
            .delete()
            .eq("user_id", user_id)
            .eq("role", role)
            .execute()
        )
        return len(response.data or [])

    def delete_expired(self, now: datetime) -> int:
        """Delete sessions that expired at or before now."""
        response = (
            self.client.table(_TABLE)
            .delete()
            .lte("expires_at", now.isoformat())
            .execute()
        )
        return len(response.data or [])


def _parse_session(row: dict[str, object]) -> SessionRecord:
    return SessionRecord(
        token=str(row["token"]),
        user_id=str(row["user_id"]),
        role=str(row["role"]),
        user_data=row.get("user_data") or {},
        expires_at=datetime.fromisoformat(str(row["expires_at"])),
        created_at=parse_timestamp(row.get("created_at")),
    )
