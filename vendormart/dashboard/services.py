"""Figures shown on the vendor and supplier dashboards."""

from __future__ import annotations

import math
from datetime import datetime
from typing import TYPE_CHECKING, Any

from vendormart.constants import (
    ESTIMATED_SAVINGS_RATE,
    RECENT_SUPPLIER_ORDERS,
    RECENT_VENDOR_ORDERS,
    TOP_PRODUCTS,
)
from vendormart.groups.models import GroupBuyStatus
from vendormart.orders.models import Order, OrderStatus
from vendormart.utils import utcnow

if TYPE_CHECKING:
    from vendormart.groups.registry import GroupBuyRegistry
    from vendormart.orders.book import OrderBook
    from vendormart.products.catalog import ProductCatalog


def _round(value: float) -> int:
    """Round half up, the way the dashboards display whole amounts."""
    return math.floor(value + 0.5)


def _in_month(order: Order, now: datetime) -> bool:
    return (order.order_date.year, order.order_date.month) == (now.year, now.month)


def _recent(orders: list[Order], count: int) -> list[dict[str, Any]]:
    """The last ``count`` orders placed, newest first."""
    return [order.to_dict() for order in reversed(orders[-count:])]


class DashboardService:
    """Service class for dashboard figures.

    Every order counts towards the totals, whatever its status.
    """

    @staticmethod
    def vendor_stats(
        book: OrderBook,
        registry: GroupBuyRegistry,
        user_id: str,
        now: datetime | None = None,
    ) -> dict[str, Any]:
        now = now or utcnow()
        orders = book.for_vendor(user_id)
        groups = registry.groups_for_user(user_id)
        total_spent = sum(order.total_amount for order in orders)
        return {
            "totalOrders": len(orders),
            "activeGroups": sum(
                1 for group in groups if group.status == GroupBuyStatus.ACTIVE
            ),
            "totalSavings": _round(total_spent * ESTIMATED_SAVINGS_RATE),
            "avgOrderValue": _round(total_spent / len(orders)) if orders else 0,
            "monthlySpending": sum(
                order.total_amount for order in orders if _in_month(order, now)
            ),
            "recentOrders": _recent(orders, RECENT_VENDOR_ORDERS),
        }

    @staticmethod
    def supplier_stats(
        book: OrderBook,
        catalog: ProductCatalog,
        user_id: str,
        now: datetime | None = None,
    ) -> dict[str, Any]:
        now = now or utcnow()
        orders = book.for_supplier(user_id)
        products = catalog.for_supplier(user_id)
        total_revenue = sum(order.total_amount for order in orders)
        return {
            "totalProducts": len(products),
            "totalOrders": len(orders),
            "monthlyRevenue": sum(
                order.total_amount for order in orders if _in_month(order, now)
            ),
            "pendingOrders": sum(
                1 for order in orders if order.status == OrderStatus.PENDING
            ),
            "avgOrderValue": _round(total_revenue / len(orders)) if orders else 0,
            "totalCustomers": len({order.vendor_id for order in orders}),
            "recentOrders": _recent(orders, RECENT_SUPPLIER_ORDERS),
            "topProducts": [p.to_dict() for p in products[:TOP_PRODUCTS]],
        }
