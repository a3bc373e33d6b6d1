"""Service layer for orders.

Vendors place, cancel and repeat their orders; the supplier of an order
moves it through its statuses. Either side is notified when the other acts.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable

from flask import current_app

from vendormart.errors import AccessDenied, NotFoundError, ValidationError
from vendormart.notifications.models import NotificationType

from .models import Order, OrderStatus

if TYPE_CHECKING:
    from vendormart.notifications.store import NotificationCenter

    from .book import OrderBook

# Builds the link a notification points at, given an order id.
ActionUrlFactory = Callable[[str], "str | None"]


def _no_url(order_id: str) -> str | None:
    return None


class OrderService:
    """Service class for order operations."""

    @staticmethod
    def get_order_or_404(book: OrderBook, order_id: str) -> Order:
        order = book.get(order_id)
        if order is None:
            raise NotFoundError("Order not found.")
        return order

    @staticmethod
    def get_order_for_user(book: OrderBook, order_id: str, user_id: str) -> Order:
        """Fetch an order its vendor or supplier may see."""
        order = OrderService.get_order_or_404(book, order_id)
        if not order.involves(user_id):
            raise AccessDenied("You do not have permission to view this order.")
        return order

    @staticmethod
    def place_order(
        book: OrderBook,
        notifications: NotificationCenter,
        vendor_id: str,
        fields: dict[str, Any],
        action_url: ActionUrlFactory = _no_url,
    ) -> Order:
        """Place an order for the given vendor and notify the supplier."""
        data = dict(fields)
        data["vendorId"] = vendor_id
        data.pop("status", None)
        order = book.add(data)
        notifications.add(
            user_id=order.supplier_id,
            title="New order received",
            message=(
                f"{order.vendor_name} placed order {order.id} "
                f"worth {order.total_amount:g}."
            ),
            type=NotificationType.ORDER,
            action_url=action_url(order.id),
        )
        current_app.logger.info(f"Vendor {vendor_id} placed order {order.id}.")
        return order

    @staticmethod
    def update_status(
        book: OrderBook,
        notifications: NotificationCenter,
        order_id: str,
        user_id: str,
        status: OrderStatus,
        tracking_id: str | None = None,
        action_url: ActionUrlFactory = _no_url,
    ) -> Order:
        """Move an order along; only its supplier may do so."""
        order = OrderService.get_order_or_404(book, order_id)
        if order.supplier_id != user_id:
            raise AccessDenied("Only the supplier can update this order.")
        if order.is_closed:
            raise ValidationError(f"This order is already {order.status.value}.")

        updated = book.update_status(order_id, status, tracking_id or None)
        if updated is None:
            raise NotFoundError("Order not found.")
        notifications.add(
            user_id=updated.vendor_id,
            title="Order updated",
            message=f"Order {updated.id} is now {updated.status.value}.",
            type=NotificationType.ORDER,
            action_url=action_url(updated.id),
        )
        current_app.logger.info(
            f"Supplier {user_id} moved order {order_id} to {updated.status.value}."
        )
        return updated

    @staticmethod
    def cancel_order(
        book: OrderBook,
        notifications: NotificationCenter,
        order_id: str,
        user_id: str,
        action_url: ActionUrlFactory = _no_url,
    ) -> Order:
        """Cancel an open order on behalf of its vendor or supplier."""
        order = OrderService.get_order_for_user(book, order_id, user_id)
        if order.is_closed:
            raise ValidationError(f"This order is already {order.status.value}.")

        cancelled = book.cancel(order_id)
        if cancelled is None:
            raise NotFoundError("Order not found.")
        other_party = (
            order.supplier_id if user_id == order.vendor_id else order.vendor_id
        )
        notifications.add(
            user_id=other_party,
            title="Order cancelled",
            message=f"Order {order.id} was cancelled.",
            type=NotificationType.ORDER,
            action_url=action_url(order.id),
        )
        current_app.logger.info(f"User {user_id} cancelled order {order_id}.")
        return cancelled

    @staticmethod
    def reorder(
        book: OrderBook,
        notifications: NotificationCenter,
        order_id: str,
        user_id: str,
        action_url: ActionUrlFactory = _no_url,
    ) -> Order:
        """Place the same order again; only its vendor may do so."""
        order = OrderService.get_order_or_404(book, order_id)
        if order.vendor_id != user_id:
            raise AccessDenied("Only the vendor who placed this order can reorder it.")

        new_order = book.reorder(order_id)
        if new_order is None:
            raise NotFoundError("Order not found.")
        notifications.add(
            user_id=new_order.supplier_id,
            title="New order received",
            message=(
                f"{new_order.vendor_name} reordered {order.id} as {new_order.id}."
            ),
            type=NotificationType.ORDER,
            action_url=action_url(new_order.id),
        )
        current_app.logger.info(
            f"Vendor {user_id} reordered {order_id} as {new_order.id}."
        )
        return new_order
