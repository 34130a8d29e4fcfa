"""Pydantic models for request bodies."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base model accepting camelCase payload keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class OrderSubmission(CamelModel):
    """Checkout payload.

    Sections are loosely typed on purpose: missing sections are reported by the
    order service with the field name, and ``items`` may arrive as a list, a
    single object or a JSON string.
    """

    user: dict[str, object] | None = None
    items: list[object] | dict[str, object] | str | None = None
    shipping_info: dict[str, object] | None = None
    total: float | None = None


class OrderUpdate(CamelModel):
    """Admin order status change."""

    status: str | None = None
    payment_status: str | None = None


class ArtworkCreate(CamelModel):
    """New artwork listing. ``src`` is the already-uploaded image URL."""

    src: str | None = None
    title: str | None = None
    price: str | int | float | None = None
    uid: str | None = None
    artist: str | None = None
    type_code: str | None = None
    status: str | None = None
    state: str | None = None
    materials: str | None = None
    duration: str | None = None
    type: str | None = None
    inspiration: str | None = None


class ArtworkStatusUpdate(CamelModel):
    """Status and/or state change for an artwork."""

    status: str | None = None
    state: str | None = None


class ArtworkDetailsUpdate(CamelModel):
    """Full artwork edit."""

    src: str | None = None
    title: str | None = None
    price: str | int | float | None = None
    status: str | None = None
    state: str | None = None
    materials: str | None = None
    duration: str | None = None
    type: str | None = None
    inspiration: str | None = None


class ContactMessageIn(CamelModel):
    """Contact form submission."""

    name: str | None = None
    email: str | None = None
    message: str | None = None


class RegisterRequest(CamelModel):
    """Customer registration."""

    name: str | None = None
    email: str | None = None
    password: str | None = None


class LoginRequest(CamelModel):
    """Customer login."""

    email: str | None = None
    password: str | None = None


class AdminLoginRequest(CamelModel):
    """Administrator login."""

    username: str | None = None
    password: str | None = None
