"""Checkout and order administration endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Depends, Query, Request, status

from art_gallery.api.dependencies import get_container, require_admin
from art_gallery.api.models import OrderSubmission, OrderUpdate
from art_gallery.api.serializers import serialize_order, serialize_order_page
from art_gallery.domain.errors import ValidationError

if TYPE_CHECKING:
    from art_gallery.containers import AppContainer

router = APIRouter(prefix="/orders", tags=["orders"])


@router.post("", status_code=status.HTTP_201_CREATED)
async def place_order(submission: OrderSubmission, request: Request) -> dict[str, object]:
    """Create an order from a checkout submission."""
    container: AppContainer = get_container(request)
    order = container.order_service.place_order(
        user=submission.user,
        items=submission.items,
        shipping_info=submission.shipping_info,
        total=submission.total,
    )
    return {
        "success": True,
        "message": "Order placed successfully",
        "orderId": order.order_id,
        "order": serialize_order(order),
    }


@router.get("", dependencies=[Depends(require_admin)])
async def list_orders(
    request: Request,
    status_filter: str | None = Query(default=None, alias="status"),
    page: int = 1,
    limit: int = 10,
) -> dict[str, object]:
    """Return a page of orders, newest first."""
    container: AppContainer = get_container(request)
    result = container.order_service.list_orders(status_filter, page=page, limit=limit)
    return serialize_order_page(result)


@router.get("/{order_id}", dependencies=[Depends(require_admin)])
async def order_detail(order_id: str, request: Request) -> dict[str, object]:
    """Return a single order."""
    container: AppContainer = get_container(request)
    order = container.order_service.get_order(order_id)
    return {"success": True, "order": serialize_order(order)}


@router.patch("", dependencies=[Depends(require_admin)])
async def update_order(
    change: OrderUpdate,
    request: Request,
    order_id: str | None = Query(default=None, alias="orderId"),
) -> dict[str, object]:
    """Change an order's status and/or payment status."""
    if not order_id:
        raise ValidationError("orderId", "Order ID required")
    container: AppContainer = get_container(request)
    order = container.order_service.update_order(
        order_id, status=change.status, payment_status=change.payment_status
    )
    return {
        "success": True,
        "message": "Order updated successfully",
        "order": serialize_order(order),
    }
