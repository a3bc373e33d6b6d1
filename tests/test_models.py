"""Tests for the group buy data models."""

from __future__ import annotations

from datetime import datetime, timezone

import pytest

from tests.helpers import ORGANIZER_ID, group_fields
from vendormart.errors import ValidationError
from vendormart.groups.models import (
    GroupBuy,
    GroupBuyPatch,
    GroupBuyStatus,
    progress_percent,
)
from vendormart.groups.registry import GroupBuyRegistry
from vendormart.utils import parse_timestamp


@pytest.fixture
def group():
    return GroupBuyRegistry().create(group_fields())


def test_progress_is_monotonic_and_capped(group):
    readings = []
    for amount in [0, 1500, 7500, 15000, 30000]:
        group.current_amount = amount
        readings.append(progress_percent(group))
    assert readings == sorted(readings)  # nosec B101
    assert readings[:4] == [0, 10, 50, 100]  # nosec B101
    assert readings[-1] == 100  # nosec B101


def test_progress_rejects_zero_target(group):
    group.target_amount = 0
    with pytest.raises(ValueError):
        progress_percent(group)


def test_spots_left_and_is_full(group):
    assert group.spots_left == 11  # nosec B101
    group.participants = [f"v{i}" for i in range(12)]
    assert group.is_full  # nosec B101
    assert group.spots_left == 0  # nosec B101


def test_to_dict_uses_wire_names(group):
    data = group.to_dict()
    assert data["organizerId"] == ORGANIZER_ID  # nosec B101
    assert data["maxParticipants"] == 12  # nosec B101
    assert data["currentAmount"] == 0  # nosec B101
    assert data["status"] == "active"  # nosec B101
    assert data["expiresAt"] == "2026-11-01T10:00:00+00:00"  # nosec B101


def test_from_dict_restores_organizer_membership():
    data = GroupBuyRegistry().create(group_fields()).to_dict()
    data["participants"] = ["v2", "v2"]
    restored = GroupBuy.from_dict(data)
    assert restored.participants == [ORGANIZER_ID, "v2"]  # nosec B101


def test_from_dict_requires_fields():
    with pytest.raises(ValidationError):
        GroupBuy.from_dict({"id": "1", "title": "Onions"})


def test_parse_timestamp_accepts_z_suffix_and_naive_values():
    expected = datetime(2026, 11, 1, 10, 0, tzinfo=timezone.utc)
    parsed = parse_timestamp("expiresAt", "2026-11-01T10:00:00Z")
    assert parsed == expected  # nosec B101
    assert (  # nosec B101
        parse_timestamp("expiresAt", datetime(2026, 11, 1, 10, 0)) == expected
    )
    with pytest.raises(ValidationError):
        parse_timestamp("expiresAt", "next tuesday")


def test_patch_from_dict_coerces_values():
    patch = GroupBuyPatch.from_dict(
        {"status": "completed", "targetAmount": "20000", "timeLeft": "1 day"}
    )
    assert patch.status == GroupBuyStatus.COMPLETED  # nosec B101
    assert patch.target_amount == 20000.0  # nosec B101
    assert patch.changes() == {  # nosec B101
        "status": GroupBuyStatus.COMPLETED,
        "target_amount": 20000.0,
        "time_left": "1 day",
    }


def test_patch_rejects_immutable_fields():
    with pytest.raises(ValidationError) as exc_info:
        GroupBuyPatch.from_dict({"organizerId": "v9", "currentAmount": 10})
    assert "currentAmount" in exc_info.value.message  # nosec B101
    assert "organizerId" in exc_info.value.message  # nosec B101


def test_patch_rejects_invalid_capacity():
    with pytest.raises(ValidationError):
        GroupBuyPatch.from_dict({"maxParticipants": 0})


def test_patch_validates_on_construction():
    patch = GroupBuyPatch(status="upcoming", target_amount="500", max_participants=4)
    assert patch.status == GroupBuyStatus.UPCOMING  # nosec B101
    assert patch.target_amount == 500.0  # nosec B101
    for bad in (
        {"target_amount": 0},
        {"target_amount": float("inf")},
        {"max_participants": 0},
        {"status": "expired"},
    ):
        with pytest.raises(ValidationError):
            GroupBuyPatch(**bad)


def test_from_dict_rejects_non_finite_amounts(group):
    data = group.to_dict()
    data["currentAmount"] = float("inf")
    with pytest.raises(ValidationError):
        GroupBuy.from_dict(data)
    data["currentAmount"] = 10
    data["targetAmount"] = float("nan")
    with pytest.raises(ValidationError):
        GroupBuy.from_dict(data)
