"""Customer and administrator session endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Request, Response, status

from art_gallery.api.dependencies import get_container
from art_gallery.api.models import AdminLoginRequest, LoginRequest, RegisterRequest
from art_gallery.api.serializers import serialize_user

if TYPE_CHECKING:
    from art_gallery.config import Settings
    from art_gallery.containers import AppContainer

router = APIRouter(tags=["auth"])


@router.post("/register", status_code=status.HTTP_201_CREATED)
async def register(payload: RegisterRequest, request: Request) -> dict[str, object]:
    """Create a customer account."""
    container: AppContainer = get_container(request)
    user = container.user_service.register(
        name=payload.name or "",
        email=payload.email or "",
        password=payload.password or "",
    )
    return {"message": "User registered successfully", "user": serialize_user(user)}


@router.post("/login")
async def login(
    payload: LoginRequest, request: Request, response: Response
) -> dict[str, object]:
    """Log a customer in and set the session cookie."""
    container: AppContainer = get_container(request)
    _, session = container.user_service.login(
        email=payload.email or "", password=payload.password or ""
    )
    _set_session_cookie(
        response,
        container.settings,
        container.settings.user_session_cookie,
        session.token,
        container.settings.user_session_ttl_seconds,
    )
    return {"message": "Login successful", "user": session.user_data}


@router.get("/auth/user")
async def current_user(request: Request) -> dict[str, object]:
    """Report whether the request carries a live customer session."""
    container: AppContainer = get_container(request)
    token = request.cookies.get(container.settings.user_session_cookie)
    session = container.user_service.current(token)
    return {"loggedIn": True, "user": session.user_data}


@router.post("/auth/user/logout")
async def logout_user(request: Request, response: Response) -> dict[str, object]:
    """End the customer session and clear its cookie."""
    container: AppContainer = get_container(request)
    cookie_name = container.settings.user_session_cookie
    container.user_service.logout(request.cookies.get(cookie_name))
    response.delete_cookie(cookie_name, path="/")
    return {"success": True, "message": "Logged out successfully"}


@router.post("/auth/admin/login")
async def login_admin(
    payload: AdminLoginRequest, request: Request, response: Response
) -> dict[str, object]:
    """Log an administrator in, replacing any earlier admin session."""
    container: AppContainer = get_container(request)
    _, session = container.admin_service.login(
        username=payload.username or "", password=payload.password or ""
    )
    _set_session_cookie(
        response,
        container.settings,
        container.settings.admin_session_cookie,
        session.token,
        container.settings.admin_session_ttl_seconds,
    )
    return {"message": "Admin login successful", "admin": session.user_data}


@router.get("/auth/admin")
async def current_admin(request: Request) -> dict[str, object]:
    """Report whether the request carries a live admin session."""
    container: AppContainer = get_container(request)
    token = request.cookies.get(container.settings.admin_session_cookie)
    session = container.admin_service.current(token)
    return {"loggedIn": True, "admin": session.user_data}


@router.post("/auth/admin/logout")
async def logout_admin(request: Request, response: Response) -> dict[str, object]:
    """End the admin session and clear its cookie."""
    container: AppContainer = get_container(request)
    cookie_name = container.settings.admin_session_cookie
    container.admin_service.logout(request.cookies.get(cookie_name))
    response.delete_cookie(cookie_name, path="/")
    return {"success": True, "message": "Admin logged out successfully"}


def _set_session_cookie(  # noqa: PLR0913
    response: Response,
    settings: Settings,
    name: str,
    token: str,
    max_age: int,
) -> None:
    response.set_cookie(
        name,
        token,
        max_age=max_age,
        path="/",
        httponly=True,
        secure=settings.secure_cookies,
        samesite="lax",
    )
