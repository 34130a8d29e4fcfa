"""Shared test fixtures."""

import threading
from dataclasses import dataclass, field, replace
from datetime import UTC, datetime, timedelta
from uuid import UUID, uuid4

import pytest
from fastapi.testclient import TestClient

from art_gallery.api.app import create_app
from art_gallery.config import Settings
from art_gallery.containers import AppContainer
from art_gallery.domain.accounts import AdminAccount, UserAccount
from art_gallery.domain.artworks import (
    SALE_ALREADY_SOLD,
    SALE_MARKED,
    SALE_MISSING,
    STATUS_AVAILABLE,
    STATUS_SOLD,
    Artwork,
)
from art_gallery.domain.errors import ConflictError
from art_gallery.domain.messages import ContactMessage
from art_gallery.domain.orders import Order
from art_gallery.domain.sessions import SessionRecord
from art_gallery.services.admins import AdminRepository, AdminService
from art_gallery.services.artworks import ArtworkRepository, ArtworkService
from art_gallery.services.messages import MessageRepository, MessageService
from art_gallery.services.orders import OrderRepository, OrderService
from art_gallery.services.reconciliation import ReconciliationService
from art_gallery.services.sessions import SessionRepository, SessionService
from art_gallery.services.users import UserRepository, UserService

TEST_HASH_ROUNDS = 4
ADMIN_USERNAME = "curator"
ADMIN_PASSWORD = "gallery-secret"


@dataclass
class FixedClock:
    """Clock returning a settable instant."""

    now: datetime = field(
        default_factory=lambda: datetime(2025, 3, 14, 9, 30, tzinfo=UTC)
    )

    def __call__(self) -> datetime:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now = self.now + timedelta(seconds=seconds)


@dataclass
class InMemoryArtworkRepository(ArtworkRepository):
    """In-memory artwork repository for tests.

    ``mark_sold`` holds a lock across the status check and the write so it
    behaves like the conditional update issued against the database.
    """

    artworks: dict[UUID, Artwork] = field(default_factory=dict)
    failing_uids: set[str] = field(default_factory=set)
    _lock: threading.Lock = field(default_factory=threading.Lock)

    def add(self, uid: str, status: str = STATUS_AVAILABLE, **fields) -> Artwork:  # type: ignore[no-untyped-def]
        artwork = Artwork(
            id=uuid4(),
            uid=uid,
            src=fields.pop("src", f"https://cdn.example.com/{uid}.jpg"),
            title=fields.pop("title", f"Artwork {uid}"),
            price=fields.pop("price", "KES 5,000"),
            status=status,
            state=fields.pop("state", "Completed"),
            **fields,
        )
        self.artworks[artwork.id] = artwork
        return artwork

    def create_artwork(self, payload: dict[str, object]) -> Artwork:
        with self._lock:
            if self.get_by_uid(str(payload["uid"])) is not None:
                raise ConflictError(f"Artwork uid already exists: {payload['uid']}")
            values = _artwork_values(payload)
            artwork = Artwork(
                id=uuid4(), created_at=datetime.now(tz=UTC), **values
            )
            self.artworks[artwork.id] = artwork
            return artwork

    def get_artwork(self, artwork_id: UUID) -> Artwork | None:
        return self.artworks.get(artwork_id)

    def get_by_uid(self, uid: str) -> Artwork | None:
        for artwork in self.artworks.values():
            if artwork.uid == uid:
                return artwork
        return None

    def list_artworks(self, status: str | None, state: str | None) -> list[Artwork]:
        return [
            artwork
            for artwork in reversed(list(self.artworks.values()))
            if (status is None or artwork.status == status)
            and (state is None or artwork.state == state)
        ]

    def list_uids(self) -> list[str]:
        return [artwork.uid for artwork in self.artworks.values()]

    def update_artwork(
        self, artwork_id: UUID, payload: dict[str, object]
    ) -> Artwork | None:
        current = self.artworks.get(artwork_id)
        if current is None:
            return None
        updated = replace(
            current, updated_at=datetime.now(tz=UTC), **_artwork_values(payload)
        )
        self.artworks[artwork_id] = updated
        return updated

    def delete_artwork(self, artwork_id: UUID) -> bool:
        return self.artworks.pop(artwork_id, None) is not None

    def mark_sold(self, uid: str, order_id: str, sold_at: datetime) -> str:
        if uid in self.failing_uids:
            raise RuntimeError(f"storage unavailable for {uid}")
        with self._lock:
            current = self.get_by_uid(uid)
            if current is None:
                return SALE_MISSING
            if current.status == STATUS_SOLD and current.order_id == order_id:
                return SALE_MARKED
            if current.status != STATUS_AVAILABLE:
                return SALE_ALREADY_SOLD
            self.artworks[current.id] = replace(
                current, status=STATUS_SOLD, sold_date=sold_at, order_id=order_id
            )
            return SALE_MARKED


def _artwork_values(payload: dict[str, object]) -> dict[str, object]:
    values = dict(payload)
    if isinstance(values.get("sold_date"), str):
        values["sold_date"] = datetime.fromisoformat(str(values["sold_date"]))
    return values


@dataclass
class InMemoryOrderRepository(OrderRepository):
    """In-memory order repository for tests."""

    orders: dict[str, Order] = field(default_factory=dict)
    updates: list[str] = field(default_factory=list)

    def create_order(self, order: Order) -> Order:
        now = datetime.now(tz=UTC)
        stored = replace(order, created_at=now, updated_at=now)
        self.orders[stored.order_id] = stored
        return stored

    def get_order(self, order_id: str) -> Order | None:
        return self.orders.get(order_id)

    def list_orders(
        self, status: str | None, offset: int, limit: int
    ) -> tuple[list[Order], int]:
        matches = [
            order
            for order in reversed(list(self.orders.values()))
            if status is None or order.status == status
        ]
        return matches[offset : offset + limit], len(matches)

    def update_order(
        self, order_id: str, status: str | None, payment_status: str | None
    ) -> Order | None:
        current = self.orders.get(order_id)
        if current is None:
            return None
        self.updates.append(order_id)
        updated = replace(
            current,
            status=status or current.status,
            payment_info=replace(
                current.payment_info,
                status=payment_status or current.payment_info.status,
            ),
            updated_at=datetime.now(tz=UTC),
        )
        self.orders[order_id] = updated
        return updated


@dataclass
class InMemorySessionRepository(SessionRepository):
    """In-memory session repository for tests.

    Setting ``filter_expired`` to False makes lookups return expired rows, as a
    store that has not yet swept them would.
    """

    sessions: dict[str, SessionRecord] = field(default_factory=dict)
    filter_expired: bool = True
    fail_sweep: bool = False

    def create_session(  # noqa: PLR0913
        self,
        token: str,
        user_id: str,
        role: str,
        user_data: dict[str, object],
        expires_at: datetime,
    ) -> SessionRecord:
        session = SessionRecord(
            token=token,
            user_id=user_id,
            role=role,
            user_data=user_data,
            expires_at=expires_at,
        )
        self.sessions[token] = session
        return session

    def get_active_session(self, token: str, now: datetime) -> SessionRecord | None:
        session = self.sessions.get(token)
        if session is None:
            return None
        if self.filter_expired and session.expires_at <= now:
            return None
        return session

    def delete_session(self, token: str) -> None:
        self.sessions.pop(token, None)

    def delete_sessions_for_user(self, user_id: str, role: str) -> int:
        tokens = [
            token
            for token, session in self.sessions.items()
            if session.user_id == user_id and session.role == role
        ]
        for token in tokens:
            del self.sessions[token]
        return len(tokens)

    def delete_expired(self, now: datetime) -> int:
        if self.fail_sweep:
            raise RuntimeError("sweep failed")
        tokens = [
            token
            for token, session in self.sessions.items()
            if session.expires_at <= now
        ]
        for token in tokens:
            del self.sessions[token]
        return len(tokens)


@dataclass
class InMemoryUserRepository(UserRepository):
    """In-memory user repository for tests."""

    users: dict[str, UserAccount] = field(default_factory=dict)

    def get_by_email(self, email: str) -> UserAccount | None:
        return self.users.get(email)

    def create_user(self, name: str, email: str, password_hash: str) -> UserAccount:
        user = UserAccount(
            id=uuid4(),
            name=name,
            email=email,
            password_hash=password_hash,
            created_at=datetime.now(tz=UTC),
        )
        self.users[email] = user
        return user


@dataclass
class InMemoryAdminRepository(AdminRepository):
    """In-memory admin repository for tests."""

    admins: dict[str, AdminAccount] = field(default_factory=dict)

    def get_by_username(self, username: str) -> AdminAccount | None:
        return self.admins.get(username)

    def create_admin(
        self, username: str, password_hash: str, email: str | None
    ) -> AdminAccount:
        admin = AdminAccount(
            id=uuid4(), username=username, password_hash=password_hash, email=email
        )
        self.admins[username] = admin
        return admin


@dataclass
class InMemoryMessageRepository(MessageRepository):
    """In-memory contact message repository for tests."""

    messages: list[ContactMessage] = field(default_factory=list)

    def create_message(self, name: str, email: str, message: str) -> ContactMessage:
        stored = ContactMessage(
            id=uuid4(),
            name=name,
            email=email,
            message=message,
            created_at=datetime.now(tz=UTC),
        )
        self.messages.append(stored)
        return stored

    def list_messages(self) -> list[ContactMessage]:
        return list(reversed(self.messages))

    def delete_message(self, message_id: UUID) -> bool:
        for index, message in enumerate(self.messages):
            if message.id == message_id:
                del self.messages[index]
                return True
        return False


def build_order_service(
    artwork_repository: InMemoryArtworkRepository,
    order_repository: InMemoryOrderRepository | None = None,
    verify_total: bool = True,
) -> OrderService:
    """Wire an order service over in-memory repositories."""
    return OrderService(
        repository=order_repository or InMemoryOrderRepository(),
        reconciliation=ReconciliationService(ArtworkService(artwork_repository)),
        verify_total=verify_total,
    )


@pytest.fixture
def settings() -> Settings:
    return Settings(
        supabase_url="https://example.supabase.co",
        supabase_service_key="test.service.key",
    )


@pytest.fixture
def artwork_repository() -> InMemoryArtworkRepository:
    return InMemoryArtworkRepository()


@pytest.fixture
def container(
    settings: Settings, artwork_repository: InMemoryArtworkRepository
) -> AppContainer:
    artwork_service = ArtworkService(
        artwork_repository, default_artist=settings.default_artist_code
    )
    order_service = OrderService(
        repository=InMemoryOrderRepository(),
        reconciliation=ReconciliationService(artwork_service),
        verify_total=settings.verify_order_total,
        default_country=settings.default_country,
    )
    session_service = SessionService(InMemorySessionRepository())
    user_service = UserService(
        repository=InMemoryUserRepository(),
        session_service=session_service,
        session_ttl_seconds=settings.user_session_ttl_seconds,
        hash_rounds=TEST_HASH_ROUNDS,
    )
    admin_service = AdminService(
        repository=InMemoryAdminRepository(),
        session_service=session_service,
        session_ttl_seconds=settings.admin_session_ttl_seconds,
        hash_rounds=TEST_HASH_ROUNDS,
    )
    admin_service.ensure_admin(ADMIN_USERNAME, ADMIN_PASSWORD)
    return AppContainer(
        settings=settings,
        artwork_service=artwork_service,
        order_service=order_service,
        session_service=session_service,
        user_service=user_service,
        admin_service=admin_service,
        message_service=MessageService(InMemoryMessageRepository()),
    )


@pytest.fixture
def client(container: AppContainer) -> TestClient:
    return TestClient(create_app(container))


@pytest.fixture
def admin_client(client: TestClient) -> TestClient:
    """Test client holding a live admin session cookie."""
    response = client.post(
        "/auth/admin/login",
        json={"username": ADMIN_USERNAME, "password": ADMIN_PASSWORD},
    )
    assert response.status_code == 200
    return client
