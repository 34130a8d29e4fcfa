"""Error types shared by services and the HTTP layer."""


class GalleryError(Exception):
    """Base class for application errors."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(GalleryError):
    """Raised when a request field is missing or invalid."""

    def __init__(self, field: str, message: str | None = None) -> None:
        super().__init__(message or f"Missing required field: {field}")
        self.field = field


class ConflictError(GalleryError):
    """Raised when a unique value is already taken."""


class NotFoundError(GalleryError):
    """Raised when a referenced record does not exist."""


class PersistenceError(GalleryError):
    """Raised when the storage backend fails a read or write."""


class AuthError(GalleryError):
    """Raised when a session is missing, expired or has the wrong role."""
