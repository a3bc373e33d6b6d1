"""Shared helpers for the test suite."""

from __future__ import annotations

from typing import Any

from vendormart import create_app

ORGANIZER_ID = "v1"
MEMBER_ID = "v2"
OUTSIDER_ID = "v3"


def group_fields(**overrides: Any) -> dict[str, Any]:
    """Creation fields for a group buy, keyed by wire name."""
    fields = {
        "title": "Bulk Tomato Purchase",
        "description": "300kg of tomatoes straight from Nashik.",
        "organizer": "Raj Kumar",
        "organizerId": ORGANIZER_ID,
        "location": "Andheri, Mumbai",
        "targetAmount": 15000,
        "maxParticipants": 12,
        "category": "vegetables",
        "savings": "25%",
        "status": "active",
        "timeLeft": "2 days",
        "expiresAt": "2026-11-01T10:00:00+00:00",
    }
    fields.update(overrides)
    return fields


SUPPLIER_ID = "s1"


def product_fields(**overrides: Any) -> dict[str, Any]:
    """Listing fields for a product, keyed by wire name."""
    fields = {
        "name": "Premium Red Onions",
        "description": "Fresh red onions from Nashik.",
        "price": 25,
        "unit": "per kg",
        "minOrder": "10 kg",
        "category": "vegetables",
        "freshness": "Harvested 2 days ago",
        "origin": "Nashik, Maharashtra",
        "supplierId": SUPPLIER_ID,
        "supplierName": "Fresh Vegetables Co.",
        "stockQuantity": 500,
        "certifications": ["Organic"],
    }
    fields.update(overrides)
    return fields


def order_fields(**overrides: Any) -> dict[str, Any]:
    """Fields for an order of 10kg onions and 5kg tomatoes (400 in total)."""
    fields = {
        "vendorId": MEMBER_ID,
        "vendorName": "Amit Patel",
        "supplierId": SUPPLIER_ID,
        "supplierName": "Fresh Vegetables Co.",
        "supplierContact": "+91 98200 00000",
        "deliveryAddress": "Stall 12, Andheri Market",
        "items": [
            {"id": "1", "name": "Onions", "quantity": 10, "price": 25, "unit": "kg"},
            {"id": "2", "name": "Tomatoes", "quantity": 5, "price": 30, "unit": "kg"},
        ],
    }
    fields.update(overrides)
    return fields


def make_app(snapshot_folder: str, **config: Any):
    """Create a testing app whose snapshots live in ``snapshot_folder``."""
    test_config = {
        "TESTING": True,
        "WTF_CSRF_ENABLED": False,
        "SERVER_NAME": "localhost",
        "SNAPSHOT_BACKEND": "file",
        "SNAPSHOT_FOLDER": snapshot_folder,
        "SEED_DEMO_DATA": False,
    }
    test_config.update(config)
    return create_app(test_config)


def login(client, user_id: str, name: str = "") -> None:
    with client.session_transaction() as sess:
        sess["user_id"] = user_id
        sess["name"] = name
