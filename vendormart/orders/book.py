"""The in-memory order book."""

from __future__ import annotations

import secrets
import threading
import time
from typing import Any, Callable, Iterable, Mapping

from vendormart.constants import ORDER_ID_PREFIX
from vendormart.errors import ValidationError
from vendormart.utils import utcnow

from .models import Order, OrderStatus, parse_order_status


def generate_order_id() -> str:
    """Return an id of the form ``ORD-<epoch ms>-<6 upper-case hex chars>``."""
    token = secrets.token_hex(3).upper()
    return f"{ORDER_ID_PREFIX}-{int(time.time() * 1000)}-{token}"


class OrderBook:
    """Every order placed on the marketplace, in placement order.

    Orders are never removed; cancelling one only changes its status.
    """

    def __init__(
        self,
        orders: Iterable[Order] = (),
        id_factory: Callable[[], str] = generate_order_id,
    ) -> None:
        self._lock = threading.RLock()
        self._id_factory = id_factory
        self._orders: list[Order] = []
        self._issued_ids: set[str] = set()
        for order in orders:
            self._add(order.copy())

    def __len__(self) -> int:
        with self._lock:
            return len(self._orders)

    def _add(self, order: Order) -> None:
        if order.id in self._issued_ids:
            raise ValidationError(f"Duplicate order id: {order.id}.")
        self._issued_ids.add(order.id)
        self._orders.append(order)

    def _find(self, order_id: str) -> Order | None:
        for order in self._orders:
            if order.id == order_id:
                return order
        return None

    def add(self, data: Mapping[str, Any]) -> Order:
        """Place an order from camelCase fields, stamped with a new id and date."""
        with self._lock:
            order_id = self._id_factory()
            while order_id in self._issued_ids:
                order_id = self._id_factory()
            order = Order.from_dict(data, order_id=order_id, order_date=utcnow())
            self._add(order)
            return order.copy()

    def update_status(
        self, order_id: str, status: OrderStatus, tracking_id: str | None = None
    ) -> Order | None:
        """Move an order to ``status``.

        A tracking id, when given, replaces the current one. Delivery stamps
        the delivery date.
        """
        status = parse_order_status(status)
        with self._lock:
            order = self._find(order_id)
            if order is None:
                return None
            order.status = status
            if tracking_id:
                order.tracking_id = tracking_id
            if status == OrderStatus.DELIVERED:
                order.delivery_date = utcnow()
            return order.copy()

    def cancel(self, order_id: str) -> Order | None:
        return self.update_status(order_id, OrderStatus.CANCELLED)

    def reorder(self, order_id: str) -> Order | None:
        """Place a fresh pending copy of an existing order."""
        with self._lock:
            order = self._find(order_id)
            if order is None:
                return None
            data = order.to_dict()
            data["status"] = OrderStatus.PENDING.value
            for key in ("id", "orderDate", "deliveryDate", "trackingId"):
                data.pop(key, None)
            return self.add(data)

    def get(self, order_id: str) -> Order | None:
        with self._lock:
            order = self._find(order_id)
            return order.copy() if order else None

    def all(self) -> list[Order]:
        with self._lock:
            return [order.copy() for order in self._orders]

    def for_vendor(self, vendor_id: str) -> list[Order]:
        with self._lock:
            return [o.copy() for o in self._orders if o.vendor_id == vendor_id]

    def for_supplier(self, supplier_id: str) -> list[Order]:
        with self._lock:
            return [o.copy() for o in self._orders if o.supplier_id == supplier_id]

    def to_state(self) -> dict[str, Any]:
        with self._lock:
            return {"orders": [order.to_dict() for order in self._orders]}

    @classmethod
    def from_state(cls, state: Mapping[str, Any]) -> OrderBook:
        return cls(Order.from_dict(item) for item in state.get("orders", []))
