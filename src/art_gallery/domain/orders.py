"""Domain models for customer orders."""

from dataclasses import dataclass, field
from datetime import datetime

ORDER_STATUSES = ("pending", "confirmed", "shipped", "delivered", "cancelled")
PAYMENT_STATUSES = ("pending", "paid", "failed")
PAYMENT_METHOD_MPESA = "mpesa"


@dataclass(frozen=True)
class OrderItem:
    """Snapshot of an artwork taken when the order was placed."""

    uid: str = "unknown"
    title: str = "Untitled Artwork"
    artist: str = "Batuk"
    price: str = "0"
    src: str = ""
    type_code: str = "ART"
    materials: str = "Not specified"
    duration: str = "Not specified"
    type: str = "Artwork"
    inspiration: str = "Not specified"


@dataclass(frozen=True)
class OrderCustomer:
    """Customer details copied onto the order."""

    user_id: str | None
    name: str | None
    email: str | None
    phone: str | None


@dataclass(frozen=True)
class ShippingInfo:
    """Delivery address for an order."""

    full_name: str | None
    email: str | None
    phone: str | None
    address: str | None
    city: str | None
    country: str


@dataclass(frozen=True)
class PaymentInfo:
    """Payment confirmation details."""

    method: str
    transaction_code: str | None
    status: str
    amount: float


@dataclass(frozen=True)
class Order:
    """A persisted customer order."""

    order_id: str
    user: OrderCustomer
    items: list[OrderItem]
    shipping_info: ShippingInfo
    payment_info: PaymentInfo
    status: str
    total: float
    created_at: datetime | None = None
    updated_at: datetime | None = None


@dataclass(frozen=True)
class Pagination:
    """Pagination metadata for order listings."""

    current_page: int
    total_pages: int
    total_orders: int
    has_next: bool
    has_prev: bool


@dataclass(frozen=True)
class OrderPage:
    """A page of orders with pagination metadata."""

    orders: list[Order]
    pagination: Pagination


@dataclass
class ReconciliationReport:
    """Per-item outcome of marking an order's artworks as sold."""

    order_id: str
    marked: list[str] = field(default_factory=list)
    already_sold: list[str] = field(default_factory=list)
    missing: list[str] = field(default_factory=list)
    failed: list[str] = field(default_factory=list)
