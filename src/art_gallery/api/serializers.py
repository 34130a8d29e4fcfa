"""JSON shapes returned by the HTTP API."""

from datetime import datetime

from art_gallery.domain.accounts import UserAccount
from art_gallery.domain.artworks import Artwork
from art_gallery.domain.messages import ContactMessage
from art_gallery.domain.orders import Order, OrderItem, OrderPage


def serialize_artwork(artwork: Artwork) -> dict[str, object]:
    return {
        "id": str(artwork.id),
        "uid": artwork.uid,
        "src": artwork.src,
        "title": artwork.title,
        "price": artwork.price,
        "status": artwork.status,
        "state": artwork.state,
        "artist": artwork.artist,
        "typeCode": artwork.type_code,
        "materials": artwork.materials,
        "duration": artwork.duration,
        "type": artwork.type,
        "inspiration": artwork.inspiration,
        "soldDate": _iso(artwork.sold_date),
        "orderId": artwork.order_id,
        "createdAt": _iso(artwork.created_at),
        "updatedAt": _iso(artwork.updated_at),
    }


def serialize_order(order: Order) -> dict[str, object]:
    return {
        "orderId": order.order_id,
        "user": {
            "userId": order.user.user_id,
            "name": order.user.name,
            "email": order.user.email,
            "phone": order.user.phone,
        },
        "items": [_serialize_item(item) for item in order.items],
        "shippingInfo": {
            "fullName": order.shipping_info.full_name,
            "email": order.shipping_info.email,
            "phone": order.shipping_info.phone,
            "address": order.shipping_info.address,
            "city": order.shipping_info.city,
            "country": order.shipping_info.country,
        },
        "paymentInfo": {
            "method": order.payment_info.method,
            "transactionCode": order.payment_info.transaction_code,
            "status": order.payment_info.status,
            "amount": order.payment_info.amount,
        },
        "status": order.status,
        "total": order.total,
        "createdAt": _iso(order.created_at),
        "updatedAt": _iso(order.updated_at),
    }


def serialize_order_page(page: OrderPage) -> dict[str, object]:
    return {
        "orders": [serialize_order(order) for order in page.orders],
        "pagination": {
            "currentPage": page.pagination.current_page,
            "totalPages": page.pagination.total_pages,
            "totalOrders": page.pagination.total_orders,
            "hasNext": page.pagination.has_next,
            "hasPrev": page.pagination.has_prev,
        },
    }


def serialize_message(message: ContactMessage) -> dict[str, object]:
    return {
        "id": str(message.id),
        "name": message.name,
        "email": message.email,
        "message": message.message,
        "createdAt": _iso(message.created_at),
    }


def serialize_user(user: UserAccount) -> dict[str, object]:
    """Public view of a customer; never includes the password hash."""
    return {
        "id": str(user.id),
        "name": user.name,
        "email": user.email,
        "createdAt": _iso(user.created_at),
    }


def _serialize_item(item: OrderItem) -> dict[str, object]:
    return {
        "uid": item.uid,
        "title": item.title,
        "artist": item.artist,
        "price": item.price,
        "src": item.src,
        "typeCode": item.type_code,
        "materials": item.materials,
        "duration": item.duration,
        "type": item.type,
        "inspiration": item.inspiration,
    }


def _iso(value: datetime | None) -> str | None:
    return value.isoformat() if value else None
