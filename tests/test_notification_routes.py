"""Tests for the notifications blueprint."""

from __future__ import annotations

from tests.helpers import login
from vendormart.notifications.models import NotificationType


def _seed(notifications):
    mine = notifications.add(
        user_id="v1",
        title="New member joined",
        message="A vendor joined your group.",
        type=NotificationType.GROUP,
        action_url="/groups/1",
    )
    theirs = notifications.add(
        user_id="v2",
        title="Payment received",
        message="Your payment went through.",
        type=NotificationType.PAYMENT,
    )
    return mine, theirs


def test_requires_login(client):
    assert client.get("/notifications/").status_code == 401  # nosec B101


def test_lists_only_own_notifications(client, notifications):
    mine, _ = _seed(notifications)
    login(client, "v1")
    data = client.get("/notifications/").get_json()
    assert [n["id"] for n in data["notifications"]] == [mine.id]  # nosec B101
    assert data["unread_count"] == 1  # nosec B101


def test_mark_as_read(client, notifications):
    mine, theirs = _seed(notifications)
    login(client, "v1")
    response = client.post(f"/notifications/{mine.id}/read")
    assert response.status_code == 200  # nosec B101
    assert client.get("/notifications/unread_count").get_json() == {  # nosec B101
        "unread_count": 0
    }

    response = client.post(f"/notifications/{theirs.id}/read")
    assert response.status_code == 404  # nosec B101
    assert notifications.unread_count("v2") == 1  # nosec B101


def test_mark_all_as_read(client, notifications):
    _seed(notifications)
    login(client, "v2")
    response = client.post("/notifications/read_all")
    assert response.get_json()["updated"] == 1  # nosec B101
    assert notifications.unread_count("v1") == 1  # nosec B101


def test_delete_notification(client, notifications):
    mine, theirs = _seed(notifications)
    login(client, "v1")
    response = client.post(f"/notifications/{theirs.id}/delete")
    assert response.status_code == 404  # nosec B101
    response = client.post(f"/notifications/{mine.id}/delete")
    assert response.status_code == 200  # nosec B101
    assert notifications.get(mine.id) is None  # nosec B101
    assert notifications.get(theirs.id) is not None  # nosec B101
