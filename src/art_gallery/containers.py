"""Dependency container wiring for the application."""

from dataclasses import dataclass

from supabase import create_client

from art_gallery.adapters.supabase_admin_repository import SupabaseAdminRepository
from art_gallery.adapters.supabase_artwork_repository import (
    SupabaseArtworkRepository,
)
from art_gallery.adapters.supabase_message_repository import (
    SupabaseMessageRepository,
)
from art_gallery.adapters.supabase_order_repository import SupabaseOrderRepository
from art_gallery.adapters.supabase_session_repository import (
    SupabaseSessionRepository,
)
from art_gallery.adapters.supabase_user_repository import SupabaseUserRepository
from art_gallery.config import Settings
from art_gallery.services.admins import AdminService
from art_gallery.services.artworks import ArtworkService
from art_gallery.services.messages import MessageService
from art_gallery.services.orders import OrderService
from art_gallery.services.reconciliation import ReconciliationService
from art_gallery.services.sessions import SessionService
from art_gallery.services.users import UserService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    artwork_service: ArtworkService
    order_service: OrderService
    session_service: SessionService
    user_service: UserService
    admin_service: AdminService
    message_service: MessageService


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    artwork_repository = SupabaseArtworkRepository(
        supabase_client, retry_attempts=resolved_settings.storage_retry_attempts
    )
    order_repository = SupabaseOrderRepository(supabase_client)
    session_repository = SupabaseSessionRepository(supabase_client)
    user_repository = SupabaseUserRepository(supabase_client)
    admin_repository = SupabaseAdminRepository(supabase_client)
    message_repository = SupabaseMessageRepository(supabase_client)

    artwork_service = ArtworkService(
        artwork_repository, default_artist=resolved_settings.default_artist_code
    )
    order_service = OrderService(
        repository=order_repository,
        reconciliation=ReconciliationService(artwork_service),
        verify_total=resolved_settings.verify_order_total,
        default_country=resolved_settings.default_country,
    )
    session_service = SessionService(session_repository)
    user_service = UserService(
        repository=user_repository,
        session_service=session_service,
        session_ttl_seconds=resolved_settings.user_session_ttl_seconds,
    )
    admin_service = AdminService(
        repository=admin_repository,
        session_service=session_service,
        session_ttl_seconds=resolved_settings.admin_session_ttl_seconds,
    )
    message_service = MessageService(message_repository)

    return AppContainer(
        settings=resolved_settings,
        artwork_service=artwork_service,
        order_service=order_service,
        session_service=session_service,
        user_service=user_service,
        admin_service=admin_service,
        message_service=message_service,
    )
