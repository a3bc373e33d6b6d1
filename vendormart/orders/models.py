"""Data models for the orders blueprint."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import datetime
from enum import Enum
from typing import Any, Mapping

from vendormart.errors import ValidationError
from vendormart.utils import format_timestamp, parse_amount, parse_timestamp


class OrderStatus(str, Enum):
    """Where an order is in its delivery lifecycle."""

    PENDING = "pending"
    CONFIRMED = "confirmed"
    IN_TRANSIT = "in-transit"
    DELIVERED = "delivered"
    CANCELLED = "cancelled"


# Orders in these states can no longer change.
CLOSED_STATUSES = frozenset({OrderStatus.DELIVERED, OrderStatus.CANCELLED})

# Fields a vendor must supply when placing an order, by wire name.
REQUIRED_ORDER_FIELDS = (
    "vendorId",
    "vendorName",
    "supplierId",
    "supplierName",
    "supplierContact",
    "deliveryAddress",
    "items",
)


def parse_order_status(value: Any) -> OrderStatus:
    try:
        return OrderStatus(value)
    except ValueError as e:
        allowed = ", ".join(status.value for status in OrderStatus)
        raise ValidationError(f"status must be one of: {allowed}.") from e


@dataclass
class OrderItem:
    """One line of an order."""

    id: str
    name: str
    quantity: float
    price: float
    unit: str

    @property
    def line_total(self) -> float:
        return self.quantity * self.price

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "quantity": self.quantity,
            "price": self.price,
            "unit": self.unit,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> OrderItem:
        missing = [
            key
            for key in ("id", "name", "quantity", "price", "unit")
            if data.get(key) is None
        ]
        if missing:
            raise ValidationError(f"Missing order item fields: {', '.join(missing)}.")
        return cls(
            id=str(data["id"]),
            name=str(data["name"]),
            quantity=parse_amount("quantity", data["quantity"]),
            price=parse_amount("price", data["price"], allow_zero=True),
            unit=str(data["unit"]),
        )


@dataclass
class Order:
    """A vendor's purchase from a single supplier."""

    id: str
    vendor_id: str
    vendor_name: str
    supplier_id: str
    supplier_name: str
    supplier_contact: str
    delivery_address: str
    total_amount: float
    status: OrderStatus
    order_date: datetime
    items: list[OrderItem] = field(default_factory=list)
    delivery_date: datetime | None = None
    tracking_id: str | None = None
    group_id: str | None = None

    @property
    def is_closed(self) -> bool:
        return self.status in CLOSED_STATUSES

    def involves(self, user_id: str) -> bool:
        """Whether ``user_id`` is the vendor or the supplier of this order."""
        return user_id in (self.vendor_id, self.supplier_id)

    def copy(self) -> Order:
        return replace(self, items=[replace(item) for item in self.items])

    def to_dict(self) -> dict[str, Any]:
        data = {
            "id": self.id,
            "vendorId": self.vendor_id,
            "vendorName": self.vendor_name,
            "supplierId": self.supplier_id,
            "supplierName": self.supplier_name,
            "items": [item.to_dict() for item in self.items],
            "totalAmount": self.total_amount,
            "status": self.status.value,
            "orderDate": format_timestamp(self.order_date),
            "supplierContact": self.supplier_contact,
            "deliveryAddress": self.delivery_address,
        }
        if self.delivery_date is not None:
            data["deliveryDate"] = format_timestamp(self.delivery_date)
        if self.tracking_id is not None:
            data["trackingId"] = self.tracking_id
        if self.group_id is not None:
            data["groupId"] = self.group_id
        return data

    @classmethod
    def from_dict(
        cls,
        data: Mapping[str, Any],
        order_id: str | None = None,
        order_date: datetime | None = None,
    ) -> Order:
        """Build an order from wire-format keys.

        New orders pass a freshly issued ``order_id`` and ``order_date``;
        snapshots carry their own. Without a ``totalAmount`` the total is the
        sum of the line totals.
        """
        order_id = order_id or data.get("id")
        missing = [key for key in REQUIRED_ORDER_FIELDS if data.get(key) is None]
        if not order_id:
            missing.insert(0, "id")
        if order_date is None and data.get("orderDate") is None:
            missing.append("orderDate")
        if missing:
            raise ValidationError(f"Missing order fields: {', '.join(missing)}.")

        items = [OrderItem.from_dict(item) for item in data["items"]]
        if not items:
            raise ValidationError("An order needs at least one item.")
        if data.get("totalAmount") is None:
            total_amount = parse_amount(
                "totalAmount", sum(item.line_total for item in items), allow_zero=True
            )
        else:
            total_amount = parse_amount(
                "totalAmount", data["totalAmount"], allow_zero=True
            )

        delivery_date = data.get("deliveryDate")
        return cls(
            id=str(order_id),
            vendor_id=str(data["vendorId"]),
            vendor_name=str(data["vendorName"]),
            supplier_id=str(data["supplierId"]),
            supplier_name=str(data["supplierName"]),
            supplier_contact=str(data["supplierContact"]),
            delivery_address=str(data["deliveryAddress"]),
            items=items,
            total_amount=total_amount,
            status=parse_order_status(data.get("status") or OrderStatus.PENDING),
            order_date=order_date or parse_timestamp("orderDate", data["orderDate"]),
            delivery_date=(
                parse_timestamp("deliveryDate", delivery_date)
                if delivery_date is not None
                else None
            ),
            tracking_id=data.get("trackingId"),
            group_id=data.get("groupId"),
        )
