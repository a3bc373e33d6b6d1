"""Wiring between the Flask app and the marketplace stores.

The group registry, order book, product catalog and notification center are
built once per app in ``init_state`` and kept in ``app.extensions``; request
code reaches them through the accessors below and checkpoints them after
each change.
"""

from __future__ import annotations

from flask import Flask, current_app

from vendormart.constants import (
    GROUPS_EXTENSION,
    GROUPS_STORE_NAME,
    NOTIFICATIONS_EXTENSION,
    NOTIFICATIONS_STORE_NAME,
    ORDERS_EXTENSION,
    ORDERS_STORE_NAME,
    PRODUCTS_EXTENSION,
    PRODUCTS_STORE_NAME,
    SNAPSHOTS_EXTENSION,
)
from vendormart.groups.demo_data import demo_groups
from vendormart.groups.registry import GroupBuyRegistry
from vendormart.notifications.store import NotificationCenter
from vendormart.orders.book import OrderBook
from vendormart.persistence import SnapshotStore, create_snapshot_store
from vendormart.products.catalog import ProductCatalog
from vendormart.products.demo_data import demo_products


def init_state(app: Flask, store: SnapshotStore | None = None) -> None:
    """Restore the stores from their snapshots and attach them to ``app``."""
    store = store or create_snapshot_store(app.config)
    seed = app.config.get("SEED_DEMO_DATA")

    with app.app_context():
        groups_state = store.load(GROUPS_STORE_NAME)
        if groups_state is not None:
            registry = GroupBuyRegistry.from_state(groups_state)
            app.logger.info(f"Restored {len(registry)} group buys from snapshot.")
        elif seed:
            registry = GroupBuyRegistry(demo_groups())
            app.logger.info("Seeded demo group buys.")
        else:
            registry = GroupBuyRegistry()

        products_state = store.load(PRODUCTS_STORE_NAME)
        if products_state is not None:
            catalog = ProductCatalog.from_state(products_state)
            app.logger.info(f"Restored {len(catalog)} products from snapshot.")
        elif seed:
            catalog = ProductCatalog(demo_products())
            app.logger.info("Seeded demo products.")
        else:
            catalog = ProductCatalog()

        orders_state = store.load(ORDERS_STORE_NAME)
        orders = (
            OrderBook.from_state(orders_state)
            if orders_state is not None
            else OrderBook()
        )

        notifications_state = store.load(NOTIFICATIONS_STORE_NAME)
        if notifications_state is not None:
            notifications = NotificationCenter.from_state(notifications_state)
        else:
            notifications = NotificationCenter()

    app.extensions[SNAPSHOTS_EXTENSION] = store
    app.extensions[GROUPS_EXTENSION] = registry
    app.extensions[PRODUCTS_EXTENSION] = catalog
    app.extensions[ORDERS_EXTENSION] = orders
    app.extensions[NOTIFICATIONS_EXTENSION] = notifications


def get_registry() -> GroupBuyRegistry:
    return current_app.extensions[GROUPS_EXTENSION]


def get_catalog() -> ProductCatalog:
    return current_app.extensions[PRODUCTS_EXTENSION]


def get_orders() -> OrderBook:
    return current_app.extensions[ORDERS_EXTENSION]


def get_notifications() -> NotificationCenter:
    return current_app.extensions[NOTIFICATIONS_EXTENSION]


def get_snapshot_store() -> SnapshotStore:
    return current_app.extensions[SNAPSHOTS_EXTENSION]


def _checkpoint(name: str, state: dict, label: str) -> None:
    """Persist one store.

    A failed save is logged; the in-memory store stays authoritative and the
    next checkpoint writes the full state again.
    """
    try:
        get_snapshot_store().save(name, state)
    except Exception as e:
        current_app.logger.error(f"Error saving {label} snapshot: {e}")


def checkpoint_groups() -> None:
    _checkpoint(GROUPS_STORE_NAME, get_registry().to_state(), "group")


def checkpoint_products() -> None:
    _checkpoint(PRODUCTS_STORE_NAME, get_catalog().to_state(), "product")


def checkpoint_orders() -> None:
    _checkpoint(ORDERS_STORE_NAME, get_orders().to_state(), "order")


def checkpoint_notifications() -> None:
    _checkpoint(
        NOTIFICATIONS_STORE_NAME, get_notifications().to_state(), "notification"
    )
