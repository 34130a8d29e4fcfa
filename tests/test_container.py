"""Tests for container wiring."""

from art_gallery.adapters.supabase_artwork_repository import (
    SupabaseArtworkRepository,
)
from art_gallery.containers import build_container


def test_build_container_creates_services(settings) -> None:
    container = build_container(settings)

    assert container.order_service.verify_total is True
    assert container.user_service.session_ttl_seconds == 7 * 24 * 60 * 60
    assert container.admin_service.session_ttl_seconds == 24 * 60 * 60
    assert isinstance(
        container.artwork_service.repository, SupabaseArtworkRepository
    )
    assert (
        container.order_service.reconciliation.artwork_service
        is container.artwork_service
    )


def test_settings_defaults(settings) -> None:
    assert settings.user_session_cookie == "session"
    assert settings.admin_session_cookie == "admin-session"
    assert settings.default_country == "Kenya"
    assert settings.storage_retry_attempts == 3
