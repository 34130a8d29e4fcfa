"""Order placement and administration."""

import json
import logging
import math
import re
import secrets
import string
from collections.abc import Callable
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Protocol

from art_gallery.domain.errors import NotFoundError, ValidationError
from art_gallery.domain.orders import (
    ORDER_STATUSES,
    PAYMENT_METHOD_MPESA,
    PAYMENT_STATUSES,
    Order,
    OrderCustomer,
    OrderItem,
    OrderPage,
    Pagination,
    PaymentInfo,
    ShippingInfo,
)
from art_gallery.services.reconciliation import ReconciliationService

_logger = logging.getLogger(__name__)

_ORDER_ID_ALPHABET = string.digits + string.ascii_lowercase
_ORDER_ID_SUFFIX_LENGTH = 9
_PRICE_PATTERN = re.compile(r"\d[\d,]*(?:\.\d+)?")
_TOTAL_TOLERANCE = 0.005
_FILTER_ALL = "all"

# Snapshot fields in payload naming, mapped to OrderItem attributes.
_ITEM_FIELDS = {
    "uid": "uid",
    "title": "title",
    "artist": "artist",
    "price": "price",
    "src": "src",
    "typeCode": "type_code",
    "materials": "materials",
    "duration": "duration",
    "type": "type",
    "inspiration": "inspiration",
}


class OrderRepository(Protocol):
    """Persistence interface for orders."""

    def create_order(self, order: Order) -> Order:
        """Persist a new order and return it."""

    def get_order(self, order_id: str) -> Order | None:
        """Return an order by its order id, if present."""

    def list_orders(
        self, status: str | None, offset: int, limit: int
    ) -> tuple[list[Order], int]:
        """Return a page of orders newest first and the total match count."""

    def update_order(
        self, order_id: str, status: str | None, payment_status: str | None
    ) -> Order | None:
        """Update order and/or payment status and return the order, if present."""


def _utcnow() -> datetime:
    return datetime.now(tz=UTC)


def generate_order_id(now: datetime) -> str:
    """Return an order id like ORD-1735689600000-k3j9x0q2m."""
    suffix = "".join(
        secrets.choice(_ORDER_ID_ALPHABET) for _ in range(_ORDER_ID_SUFFIX_LENGTH)
    )
    return f"ORD-{int(now.timestamp() * 1000)}-{suffix}"


@dataclass
class OrderService:
    """Creates orders and applies admin status changes."""

    repository: OrderRepository
    reconciliation: ReconciliationService
    verify_total: bool = True
    default_country: str = "Kenya"
    clock: Callable[[], datetime] = _utcnow

    def place_order(
        self,
        user: dict[str, object] | None,
        items: object,
        shipping_info: dict[str, object] | None,
        total: float | None,
    ) -> Order:
        """Validate a checkout submission, store it and reconcile if paid."""
        if not user:
            raise ValidationError("user")
        if items is None or items == "":
            raise ValidationError("items")
        if not shipping_info:
            raise ValidationError("shippingInfo")
        if total is None:
            raise ValidationError("total")
        if total <= 0:
            raise ValidationError("total", "Order total must be greater than zero")

        snapshots = [_snapshot(raw) for raw in _coerce_items(items)]
        if not snapshots:
            raise ValidationError("items", "Order must contain at least one item")
        if self.verify_total:
            _check_total(snapshots, total)

        transaction_code = str(shipping_info.get("transactionCode") or "").strip()
        payment_status = "paid" if transaction_code else "pending"
        order_status = "confirmed" if payment_status == "paid" else "pending"

        order = Order(
            order_id=generate_order_id(self.clock()),
            user=OrderCustomer(
                user_id=_optional_str(user.get("id")),
                name=_optional_str(user.get("name")),
                email=_optional_str(user.get("email")),
                phone=_optional_str(shipping_info.get("phone")),
            ),
            items=snapshots,
            shipping_info=ShippingInfo(
                full_name=_optional_str(shipping_info.get("fullName")),
                email=_optional_str(shipping_info.get("email")),
                phone=_optional_str(shipping_info.get("phone")),
                address=_optional_str(shipping_info.get("address")),
                city=_optional_str(shipping_info.get("city")),
                country=str(shipping_info.get("country") or self.default_country),
            ),
            payment_info=PaymentInfo(
                method=PAYMENT_METHOD_MPESA,
                transaction_code=transaction_code or None,
                status=payment_status,
                amount=float(total),
            ),
            status=order_status,
            total=float(total),
        )
        created = self.repository.create_order(order)
        _logger.info(
            "Order created: order_id=%s items=%s payment_status=%s",
            created.order_id,
            len(created.items),
            created.payment_info.status,
        )
        if created.payment_info.status == "paid":
            self._reconcile(created)
        return created

    def get_order(self, order_id: str) -> Order:
        """Return an order or raise NotFoundError."""
        order = self.repository.get_order(order_id)
        if order is None:
            raise NotFoundError("Order not found")
        return order

    def list_orders(
        self, status: str | None = None, page: int = 1, limit: int = 10
    ) -> OrderPage:
        """Return a page of orders newest first."""
        if page < 1:
            raise ValidationError("page", "Page must be at least 1")
        if limit < 1:
            raise ValidationError("limit", "Limit must be at least 1")
        status_filter = None if not status or status == _FILTER_ALL else status
        orders, total_orders = self.repository.list_orders(
            status_filter, (page - 1) * limit, limit
        )
        total_pages = math.ceil(total_orders / limit)
        return OrderPage(
            orders=orders,
            pagination=Pagination(
                current_page=page,
                total_pages=total_pages,
                total_orders=total_orders,
                has_next=page < total_pages,
                has_prev=page > 1,
            ),
        )

    def update_order(
        self,
        order_id: str,
        status: str | None = None,
        payment_status: str | None = None,
    ) -> Order:
        """Apply an admin status change, reconciling when payment becomes paid."""
        if not status and not payment_status:
            raise ValidationError("status", "Status or paymentStatus is required")
        if status and status not in ORDER_STATUSES:
            raise ValidationError("status", f"Invalid status: {status}")
        if payment_status and payment_status not in PAYMENT_STATUSES:
            raise ValidationError(
                "paymentStatus", f"Invalid payment status: {payment_status}"
            )

        current = self.repository.get_order(order_id)
        if current is None:
            raise NotFoundError("Order not found")
        updated = self.repository.update_order(
            order_id, status or None, payment_status or None
        )
        if updated is None:
            raise NotFoundError("Order not found")
        _logger.info(
            "Order updated: order_id=%s status=%s payment_status=%s",
            order_id,
            updated.status,
            updated.payment_info.status,
        )
        if payment_status == "paid" and current.payment_info.status != "paid":
            self._reconcile(updated)
        return updated

    def _reconcile(self, order: Order) -> None:
        report = self.reconciliation.reconcile(order)
        _logger.info(
            "Order reconciled: order_id=%s marked=%s already_sold=%s "
            "missing=%s failed=%s",
            order.order_id,
            len(report.marked),
            len(report.already_sold),
            len(report.missing),
            len(report.failed),
        )


def parse_price(price: str) -> float | None:
    """Extract the numeric amount from a display price like "KES 5,000"."""
    match = _PRICE_PATTERN.search(price)
    if match is None:
        return None
    return float(match.group(0).replace(",", ""))


def _coerce_items(items: object) -> list[object]:
    if isinstance(items, str):
        try:
            items = json.loads(items)
        except json.JSONDecodeError as exc:
            raise ValidationError("items", "Invalid items format") from exc
    if not isinstance(items, list):
        items = [items]
    return items


def _snapshot(raw: object) -> OrderItem:
    if not isinstance(raw, dict):
        raise ValidationError("items", "Each item must be an object")
    values = {
        attribute: str(raw[key])
        for key, attribute in _ITEM_FIELDS.items()
        if raw.get(key) not in (None, "")
    }
    return OrderItem(**values)


def _check_total(items: list[OrderItem], total: float) -> None:
    prices = [parse_price(item.price) for item in items]
    if any(price is None for price in prices):
        return
    expected = sum(prices)
    if abs(expected - total) > _TOTAL_TOLERANCE:
        raise ValidationError(
            "total", f"Order total {total:g} does not match item prices {expected:g}"
        )


def _optional_str(value: object) -> str | None:
    if value is None:
        return None
    return str(value)
