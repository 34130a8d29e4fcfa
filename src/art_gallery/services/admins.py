"""Administrator login with a single live session per admin."""

import logging
from dataclasses import dataclass
from typing import Protocol

from art_gallery.domain.accounts import AdminAccount
from art_gallery.domain.errors import AuthError, ValidationError
from art_gallery.domain.sessions import ROLE_ADMIN, SessionRecord
from art_gallery.services.passwords import DEFAULT_ROUNDS, hash_password, verify_password
from art_gallery.services.sessions import SessionService

_logger = logging.getLogger(__name__)


class AdminRepository(Protocol):
    """Persistence interface for administrators."""

    def get_by_username(self, username: str) -> AdminAccount | None:
        """Return the admin with a username, if present."""

    def create_admin(
        self, username: str, password_hash: str, email: str | None
    ) -> AdminAccount:
        """Create and return a new admin."""


@dataclass
class AdminService:
    """Application service for dashboard administrators."""

    repository: AdminRepository
    session_service: SessionService
    session_ttl_seconds: int
    hash_rounds: int = DEFAULT_ROUNDS

    def login(self, username: str, password: str) -> tuple[AdminAccount, SessionRecord]:
        """Check credentials and replace any earlier session for the admin."""
        if not username or not password:
            raise ValidationError("username", "Username and password are required")
        admin = self.repository.get_by_username(username)
        if admin is None or not verify_password(password, admin.password_hash):
            _logger.warning("Admin login rejected: username=%s", username)
            raise AuthError("Invalid credentials")

        self.session_service.destroy_all(str(admin.id), ROLE_ADMIN)
        session = self.session_service.create(
            user_id=str(admin.id),
            user_data=admin_session_data(admin),
            ttl_seconds=self.session_ttl_seconds,
            role=ROLE_ADMIN,
        )
        _logger.info("Admin logged in: username=%s", admin.username)
        return admin, session

    def current(self, token: str | None) -> SessionRecord:
        """Return the admin session for a token."""
        return self.session_service.validate(token, role=ROLE_ADMIN)

    def logout(self, token: str | None) -> None:
        """End an admin session."""
        self.session_service.destroy(token)
        if token:
            _logger.info("Admin logged out")

    def ensure_admin(
        self, username: str, password: str, email: str | None = None
    ) -> tuple[AdminAccount, bool]:
        """Create an admin unless one exists. Returns the admin and whether it was new."""
        if not username:
            raise ValidationError("username")
        if not password:
            raise ValidationError("password")
        existing = self.repository.get_by_username(username)
        if existing is not None:
            return existing, False
        admin = self.repository.create_admin(
            username=username,
            password_hash=hash_password(password, rounds=self.hash_rounds),
            email=email,
        )
        _logger.info("Admin created: username=%s", username)
        return admin, True


def admin_session_data(admin: AdminAccount) -> dict[str, object]:
    """Return the admin snapshot stored on a session."""
    return {
        "id": str(admin.id),
        "username": admin.username,
        "email": admin.email,
        "role": ROLE_ADMIN,
    }
