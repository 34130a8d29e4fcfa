"""Shared FastAPI dependencies."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import Request

from art_gallery.domain.sessions import SessionRecord  # noqa: TC001

if TYPE_CHECKING:
    from art_gallery.containers import AppContainer


def get_container(request: Request) -> AppContainer:
    """Return the dependency container attached to the app."""
    return request.app.state.container


async def require_admin(request: Request) -> SessionRecord:
    """Ensure the request carries a live admin session cookie."""
    container = get_container(request)
    token = request.cookies.get(container.settings.admin_session_cookie)
    return container.admin_service.current(token)
