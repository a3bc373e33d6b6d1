"""Demo group buys seeded into an empty marketplace."""

from __future__ import annotations

from datetime import timedelta

from vendormart.utils import utcnow

from .models import GroupBuy, GroupBuyStatus


def demo_groups() -> list[GroupBuy]:
    """Return the two sample campaigns shown on a fresh install."""
    now = utcnow()
    return [
        GroupBuy(
            id="1",
            title="Bulk Onion Purchase - Andheri",
            description=(
                "Group buying 500kg onions at wholesale price from trusted "
                "supplier. Premium quality onions sourced directly from "
                "Maharashtra farms."
            ),
            organizer="Raj Kumar",
            organizer_id="vendor1",
            location="Andheri, Mumbai",
            target_amount=15000.0,
            current_amount=12000.0,
            participants=["vendor1", "vendor2", "vendor3"],
            max_participants=12,
            time_left="2 days",
            category="vegetables",
            savings="25%",
            status=GroupBuyStatus.ACTIVE,
            created_at=now - timedelta(days=2),
            expires_at=now + timedelta(days=2),
        ),
        GroupBuy(
            id="2",
            title="Spice Mix Wholesale Deal",
            description=(
                "Premium spices at 30% discount for bulk order. Includes "
                "turmeric, red chili powder, coriander powder, and garam masala."
            ),
            organizer="Priya Sharma",
            organizer_id="vendor2",
            location="Karol Bagh, Delhi",
            target_amount=25000.0,
            current_amount=18500.0,
            participants=["vendor2", "vendor4", "vendor5"],
            max_participants=20,
            time_left="5 days",
            category="spices",
            savings="30%",
            status=GroupBuyStatus.ACTIVE,
            created_at=now - timedelta(days=1),
            expires_at=now + timedelta(days=5),
        ),
    ]
