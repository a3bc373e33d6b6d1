"""Data models for the notifications blueprint."""

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime
from enum import Enum
from typing import Any, Mapping

from vendormart.errors import ValidationError
from vendormart.utils import format_timestamp, parse_timestamp


class NotificationType(str, Enum):
    """What a notification is about."""

    ORDER = "order"
    GROUP = "group"
    SYSTEM = "system"
    PAYMENT = "payment"


@dataclass
class Notification:
    """A message addressed to a single user."""

    id: str
    user_id: str
    title: str
    message: str
    type: NotificationType
    created_at: datetime
    read: bool = False
    action_url: str | None = None

    def copy(self) -> Notification:
        return replace(self)

    def to_dict(self) -> dict[str, Any]:
        data = {
            "id": self.id,
            "userId": self.user_id,
            "title": self.title,
            "message": self.message,
            "type": self.type.value,
            "read": self.read,
            "createdAt": format_timestamp(self.created_at),
        }
        if self.action_url is not None:
            data["actionUrl"] = self.action_url
        return data

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Notification:
        missing = [
            key
            for key in ("id", "userId", "title", "message", "type", "createdAt")
            if data.get(key) is None
        ]
        if missing:
            raise ValidationError(
                f"Missing notification fields: {', '.join(missing)}."
            )
        return cls(
            id=data["id"],
            user_id=data["userId"],
            title=data["title"],
            message=data["message"],
            type=parse_notification_type(data["type"]),
            created_at=parse_timestamp("createdAt", data["createdAt"]),
            read=bool(data.get("read", False)),
            action_url=data.get("actionUrl"),
        )


def parse_notification_type(value: Any) -> NotificationType:
    try:
        return NotificationType(value)
    except ValueError as e:
        allowed = ", ".join(kind.value for kind in NotificationType)
        raise ValidationError(f"type must be one of: {allowed}.") from e
