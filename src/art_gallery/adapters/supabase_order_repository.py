"""Supabase-backed order repository."""

from dataclasses import asdict, dataclass
from datetime import UTC, datetime

from postgrest.exceptions import APIError
from supabase import Client

from art_gallery.adapters.supabase_rows import optional_str, parse_timestamp
from art_gallery.domain.errors import PersistenceError
from art_gallery.domain.orders import (
    Order,
    OrderCustomer,
    OrderItem,
    PaymentInfo,
    ShippingInfo,
)
from art_gallery.services.orders import OrderRepository

_TABLE = "orders"
_RANGE_NOT_SATISFIABLE = "PGRST103"


@dataclass
class SupabaseOrderRepository(OrderRepository):
    """Supabase implementation for orders.

    Customer, shipping and item snapshots are stored as JSON columns; payment
    fields are flat columns so a status change is a single-column update.
    """

    client: Client

    def create_order(self, order: Order) -> Order:
        """Insert an order row and return it."""
        response = (
            self.client.table(_TABLE)
            .insert(
                {
                    "order_id": order.order_id,
                    "user_json": asdict(order.user),
                    "items_json": [asdict(item) for item in order.items],
                    "shipping_info_json": asdict(order.shipping_info),
                    "payment_method": order.payment_info.method,
                    "payment_transaction_code": order.payment_info.transaction_code,
                    "payment_status": order.payment_info.status,
                    "payment_amount": order.payment_info.amount,
                    "status": order.status,
                    "total": order.total,
                }
            )
            .execute()
        )
        if not response.data:
            raise PersistenceError("Failed to create order")
        return _parse_order(response.data[0])

    def get_order(self, order_id: str) -> Order | None:
        """Return an order by order id, if present."""
        response = (
            self.client.table(_TABLE)
            .select("*")
            .eq("order_id", order_id)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_order(response.data[0])

    def list_orders(
        self, status: str | None, offset: int, limit: int
    ) -> tuple[list[Order], int]:
        """Return a page of orders newest first with the total count."""
        query = self.client.table(_TABLE).select("*", count="exact")
        if status:
            query = query.eq("status", status)
        try:
            response = (
                query.order("created_at", desc=True)
                .range(offset, offset + limit - 1)
                .execute()
            )
        except APIError as exc:
            # PostgREST answers 416 when an exact-count range starts past the end.
            if exc.code != _RANGE_NOT_SATISFIABLE:
                raise
            return [], self._count_orders(status)
        orders = [_parse_order(row) for row in response.data or []]
        return orders, int(response.count or 0)

    def _count_orders(self, status: str | None) -> int:
        query = self.client.table(_TABLE).select("order_id", count="exact")
        if status:
            query = query.eq("status", status)
        response = query.limit(1).execute()
        return int(response.count or 0)

    def update_order(
        self, order_id: str, status: str | None, payment_status: str | None
    ) -> Order | None:
        """Update status columns and return the order."""
        payload: dict[str, object] = {"updated_at": datetime.now(tz=UTC).isoformat()}
        if status:
            payload["status"] = status
        if payment_status:
            payload["payment_status"] = payment_status
        response = (
            self.client.table(_TABLE).update(payload).eq("order_id", order_id).execute()
        )
        if not response.data:
            return None
        return _parse_order(response.data[0])


def _parse_order(row: dict[str, object]) -> Order:
    user = row.get("user_json") or {}
    shipping = row.get("shipping_info_json") or {}
    items = row.get("items_json") or []
    return Order(
        order_id=str(row["order_id"]),
        user=OrderCustomer(
            user_id=optional_str(user.get("user_id")),
            name=optional_str(user.get("name")),
            email=optional_str(user.get("email")),
            phone=optional_str(user.get("phone")),
        ),
        items=[OrderItem(**item) for item in items if isinstance(item, dict)],
        shipping_info=ShippingInfo(
            full_name=optional_str(shipping.get("full_name")),
            email=optional_str(shipping.get("email")),
            phone=optional_str(shipping.get("phone")),
            address=optional_str(shipping.get("address")),
            city=optional_str(shipping.get("city")),
            country=str(shipping.get("country") or ""),
        ),
        payment_info=PaymentInfo(
            method=str(row.get("payment_method") or ""),
            transaction_code=optional_str(row.get("payment_transaction_code")),
            status=str(row.get("payment_status") or "pending"),
            amount=float(row.get("payment_amount") or 0.0),
        ),
        status=str(row.get("status") or "pending"),
        total=float(row.get("total") or 0.0),
        created_at=parse_timestamp(row.get("created_at")),
        updated_at=parse_timestamp(row.get("updated_at")),
    )
