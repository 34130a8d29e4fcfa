"""Customer registration and login."""

import logging
from dataclasses import dataclass
from typing import Protocol

from art_gallery.domain.accounts import UserAccount
from art_gallery.domain.errors import AuthError, ConflictError, ValidationError
from art_gallery.domain.sessions import ROLE_USER, SessionRecord
from art_gallery.services.passwords import (
    DEFAULT_ROUNDS,
    MAX_PASSWORD_BYTES,
    hash_password,
    verify_password,
)
from art_gallery.services.sessions import SessionService

_logger = logging.getLogger(__name__)

MIN_PASSWORD_LENGTH = 6


class UserRepository(Protocol):
    """Persistence interface for customer accounts."""

    def get_by_email(self, email: str) -> UserAccount | None:
        """Return the user with an email address, if present."""

    def create_user(self, name: str, email: str, password_hash: str) -> UserAccount:
        """Create and return a new user."""


@dataclass
class UserService:
    """Application service for customer accounts."""

    repository: UserRepository
    session_service: SessionService
    session_ttl_seconds: int
    hash_rounds: int = DEFAULT_ROUNDS

    def register(self, name: str, email: str, password: str) -> UserAccount:
        """Create a customer account with a hashed password."""
        name = name.strip() if name else ""
        email = _normalize_email(email)
        if not name:
            raise ValidationError("name")
        if not email:
            raise ValidationError("email")
        if not password:
            raise ValidationError("password")
        if len(password) < MIN_PASSWORD_LENGTH:
            raise ValidationError(
                "password",
                f"Password must be at least {MIN_PASSWORD_LENGTH} characters",
            )
        if len(password.encode("utf-8")) > MAX_PASSWORD_BYTES:
            raise ValidationError("password", "Password is too long")
        if self.repository.get_by_email(email) is not None:
            raise ConflictError("User already exists with this email")

        user = self.repository.create_user(
            name=name,
            email=email,
            password_hash=hash_password(password, rounds=self.hash_rounds),
        )
        _logger.info("User registered: id=%s", user.id)
        return user

    def login(self, email: str, password: str) -> tuple[UserAccount, SessionRecord]:
        """Check credentials and open a customer session."""
        email = _normalize_email(email)
        if not email or not password:
            raise ValidationError("email", "Email and password are required")
        user = self.repository.get_by_email(email)
        if user is None or not verify_password(password, user.password_hash):
            raise AuthError("Invalid email or password")
        session = self.session_service.create(
            user_id=str(user.id),
            user_data=user_session_data(user),
            ttl_seconds=self.session_ttl_seconds,
            role=ROLE_USER,
        )
        _logger.info("User logged in: id=%s", user.id)
        return user, session

    def current(self, token: str | None) -> SessionRecord:
        """Return the customer session for a token."""
        return self.session_service.validate(token, role=ROLE_USER)

    def logout(self, token: str | None) -> None:
        """End a customer session."""
        self.session_service.destroy(token)
        if token:
            _logger.info("User logged out")


def user_session_data(user: UserAccount) -> dict[str, object]:
    """Return the user snapshot stored on a session."""
    return {
        "id": str(user.id),
        "name": user.name,
        "email": user.email,
        "createdAt": user.created_at.isoformat() if user.created_at else None,
    }


def _normalize_email(email: str | None) -> str:
    return email.strip().lower() if email else ""
