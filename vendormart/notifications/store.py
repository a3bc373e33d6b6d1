"""In-memory notification sink."""

from __future__ import annotations

import secrets
import threading
import time
from typing import Any, Mapping

from vendormart.constants import NOTIFICATION_ID_PREFIX
from vendormart.utils import utcnow

from .models import Notification, NotificationType


def generate_notification_id() -> str:
    return f"{NOTIFICATION_ID_PREFIX}-{int(time.time() * 1000)}-{secrets.token_hex(3)}"


class NotificationCenter:
    """Holds every user's notifications, newest first."""

    def __init__(self, notifications=()):
        self._lock = threading.RLock()
        self._notifications: list[Notification] = [n.copy() for n in notifications]

    def __len__(self) -> int:
        with self._lock:
            return len(self._notifications)

    def add(
        self,
        user_id: str,
        title: str,
        message: str,
        type: NotificationType,
        action_url: str | None = None,
        read: bool = False,
    ) -> Notification:
        """Record a notification for ``user_id`` and return a copy of it."""
        with self._lock:
            notification_id = generate_notification_id()
            while any(n.id == notification_id for n in self._notifications):
                notification_id = generate_notification_id()
            notification = Notification(
                id=notification_id,
                user_id=user_id,
                title=title,
                message=message,
                type=NotificationType(type),
                created_at=utcnow(),
                read=read,
                action_url=action_url,
            )
            self._notifications.insert(0, notification)
            return notification.copy()

    def get(self, notification_id: str) -> Notification | None:
        with self._lock:
            for notification in self._notifications:
                if notification.id == notification_id:
                    return notification.copy()
            return None

    def mark_as_read(self, notification_id: str) -> bool:
        with self._lock:
            for notification in self._notifications:
                if notification.id == notification_id:
                    notification.read = True
                    return True
            return False

    def mark_all_as_read(self, user_id: str) -> int:
        """Mark every unread notification of a user as read; return how many."""
        with self._lock:
            count = 0
            for notification in self._notifications:
                if notification.user_id == user_id and not notification.read:
                    notification.read = True
                    count += 1
            return count

    def delete(self, notification_id: str) -> bool:
        with self._lock:
            before = len(self._notifications)
            self._notifications = [
                n for n in self._notifications if n.id != notification_id
            ]
            return len(self._notifications) != before

    def for_user(self, user_id: str) -> list[Notification]:
        with self._lock:
            return [n.copy() for n in self._notifications if n.user_id == user_id]

    def unread_count(self, user_id: str) -> int:
        with self._lock:
            return sum(
                1
                for n in self._notifications
                if n.user_id == user_id and not n.read
            )

    def to_state(self) -> dict[str, Any]:
        with self._lock:
            return {"notifications": [n.to_dict() for n in self._notifications]}

    @classmethod
    def from_state(cls, state: Mapping[str, Any]) -> NotificationCenter:
        return cls(
            Notification.from_dict(item) for item in state.get("notifications", [])
        )
