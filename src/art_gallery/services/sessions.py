"""Login sessions backed by a persistent store."""

import logging
import secrets
from collections.abc import Callable
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from typing import Protocol

from art_gallery.domain.errors import AuthError
from art_gallery.domain.sessions import ROLE_USER, SessionRecord

_logger = logging.getLogger(__name__)


class SessionRepository(Protocol):
    """Persistence interface for login sessions."""

    def create_session(  # noqa: PLR0913
        self,
        token: str,
        user_id: str,
        role: str,
        user_data: dict[str, object],
        expires_at: datetime,
    ) -> SessionRecord:
        """Create a session row and return it."""

    def get_active_session(self, token: str, now: datetime) -> SessionRecord | None:
        """Return the session for a token if it expires after now."""

    def delete_session(self, token: str) -> None:
        """Delete a session by token."""

    def delete_sessions_for_user(self, user_id: str, role: str) -> int:
        """Delete every session for a user and role, returning the count."""

    def delete_expired(self, now: datetime) -> int:
        """Delete sessions that expired at or before now."""


def _utcnow() -> datetime:
    return datetime.now(tz=UTC)


@dataclass
class SessionService:
    """Creates, validates and destroys login sessions."""

    repository: SessionRepository
    clock: Callable[[], datetime] = _utcnow

    def create(
        self,
        user_id: str,
        user_data: dict[str, object],
        ttl_seconds: int,
        role: str = ROLE_USER,
    ) -> SessionRecord:
        """Create a session and return it with its token."""
        now = self.clock()
        self._sweep(now)
        return self.repository.create_session(
            token=secrets.token_urlsafe(32),
            user_id=user_id,
            role=role,
            user_data=user_data,
            expires_at=now + timedelta(seconds=ttl_seconds),
        )

    def validate(self, token: str | None, role: str | None = None) -> SessionRecord:
        """Return the live session for a token or raise AuthError."""
        if not token:
            raise AuthError("No session found")
        now = self.clock()
        session = self.repository.get_active_session(token, now)
        # The sweep may lag behind; expiry is decided here.
        if session is None or session.expires_at <= now:
            raise AuthError("Session expired")
        if role is not None and session.role != role:
            raise AuthError("Session does not grant access")
        return session

    def destroy(self, token: str | None) -> None:
        """Remove a session. Unknown tokens are ignored."""
        if token:
            self.repository.delete_session(token)

    def destroy_all(self, user_id: str, role: str) -> int:
        """Remove every session held by a user in a role."""
        removed = self.repository.delete_sessions_for_user(user_id, role)
        if removed:
            _logger.info("Removed %s prior %s sessions", removed, role)
        return removed

    def purge_expired(self) -> int:
        """Delete expired sessions and return how many were removed."""
        return self.repository.delete_expired(self.clock())

    def _sweep(self, now: datetime) -> None:
        try:
            removed = self.repository.delete_expired(now)
        except Exception:
            _logger.exception("Expired session sweep failed")
            return
        if removed:
            _logger.info("Swept %s expired sessions", removed)
