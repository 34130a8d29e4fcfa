"""Domain models for login sessions."""

from dataclasses import dataclass
from datetime import datetime

ROLE_USER = "user"
ROLE_ADMIN = "admin"


@dataclass(frozen=True)
class SessionRecord:
    """Represents a persisted login session."""

    token: str
    user_id: str
    role: str
    user_data: dict[str, object]
    expires_at: datetime
    created_at: datetime | None = None
