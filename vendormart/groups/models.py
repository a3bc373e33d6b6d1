"""Data models for the groups blueprint."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import datetime
from enum import Enum
from typing import Any, Mapping

from vendormart.constants import MAX_PROGRESS_PERCENT
from vendormart.errors import ValidationError
from vendormart.utils import (
    format_timestamp,
    parse_amount,
    parse_timestamp,
    parse_whole_number,
)


class GroupBuyStatus(str, Enum):
    """Lifecycle state of a group buy, set only by its callers."""

    ACTIVE = "active"
    COMPLETED = "completed"
    UPCOMING = "upcoming"


# Fields a caller must supply when creating a group buy, by wire name.
REQUIRED_CREATE_FIELDS = (
    "title",
    "description",
    "organizer",
    "organizerId",
    "location",
    "targetAmount",
    "maxParticipants",
    "category",
    "savings",
    "status",
    "timeLeft",
    "expiresAt",
)


def parse_capacity(name: str, value: Any) -> int:
    """Coerce a participant capacity that must be a positive integer."""
    return parse_whole_number(name, value, minimum=1)


def parse_status(value: Any) -> GroupBuyStatus:
    """Coerce a status string into a GroupBuyStatus."""
    try:
        return GroupBuyStatus(value)
    except ValueError as e:
        allowed = ", ".join(status.value for status in GroupBuyStatus)
        raise ValidationError(f"status must be one of: {allowed}.") from e


# Free-text fields a patch may set, by wire name.
TEXT_PATCH_FIELDS = {
    "title": "title",
    "description": "description",
    "location": "location",
    "category": "category",
    "savings": "savings",
    "timeLeft": "time_left",
}


@dataclass
class GroupBuy:
    """A pooled-purchase campaign.

    Participants always include the organizer. ``current_amount`` is never
    negative but may exceed ``target_amount``.
    """

    id: str
    title: str
    description: str
    organizer: str
    organizer_id: str
    location: str
    target_amount: float
    max_participants: int
    time_left: str
    category: str
    savings: str
    status: GroupBuyStatus
    created_at: datetime
    expires_at: datetime
    current_amount: float = 0.0
    participants: list[str] = field(default_factory=list)

    @property
    def is_full(self) -> bool:
        return len(self.participants) >= self.max_participants

    @property
    def spots_left(self) -> int:
        return max(0, self.max_participants - len(self.participants))

    @property
    def average_share(self) -> float:
        """Estimated contribution of one participant."""
        return self.target_amount / self.max_participants

    def copy(self) -> GroupBuy:
        """Return a detached copy that callers may freely mutate."""
        return replace(self, participants=list(self.participants))

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the camelCase wire format."""
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "organizer": self.organizer,
            "organizerId": self.organizer_id,
            "location": self.location,
            "targetAmount": self.target_amount,
            "currentAmount": self.current_amount,
            "participants": list(self.participants),
            "maxParticipants": self.max_participants,
            "timeLeft": self.time_left,
            "category": self.category,
            "savings": self.savings,
            "status": self.status.value,
            "createdAt": format_timestamp(self.created_at),
            "expiresAt": format_timestamp(self.expires_at),
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> GroupBuy:
        """Rebuild a group buy from its wire format."""
        missing = [
            key
            for key in (*REQUIRED_CREATE_FIELDS, "id", "createdAt")
            if data.get(key) is None
        ]
        if missing:
            raise ValidationError(f"Missing group fields: {', '.join(missing)}.")

        participants: list[str] = []
        for user_id in data.get("participants") or []:
            if user_id not in participants:
                participants.append(user_id)
        if data["organizerId"] not in participants:
            participants.insert(0, data["organizerId"])

        return cls(
            id=str(data["id"]),
            title=data["title"],
            description=data["description"],
            organizer=data["organizer"],
            organizer_id=data["organizerId"],
            location=data["location"],
            target_amount=parse_amount("targetAmount", data["targetAmount"]),
            current_amount=parse_amount(
                "currentAmount", data.get("currentAmount") or 0, allow_zero=True
            ),
            participants=participants,
            max_participants=parse_capacity(
                "maxParticipants", data["maxParticipants"]
            ),
            time_left=data["timeLeft"],
            category=data["category"],
            savings=data["savings"],
            status=parse_status(data["status"]),
            created_at=parse_timestamp("createdAt", data["createdAt"]),
            expires_at=parse_timestamp("expiresAt", data["expiresAt"]),
        )


@dataclass
class GroupBuyPatch:
    """The fields of a group buy that may change after creation.

    ``None`` means "leave unchanged". Identity, ownership, membership and the
    collected amount are not patchable. Values are coerced and validated on
    construction, so a patch never carries a bad amount or capacity.
    """

    title: str | None = None
    description: str | None = None
    location: str | None = None
    category: str | None = None
    savings: str | None = None
    time_left: str | None = None
    status: GroupBuyStatus | None = None
    expires_at: datetime | None = None
    target_amount: float | None = None
    max_participants: int | None = None

    def __post_init__(self) -> None:
        for name in TEXT_PATCH_FIELDS.values():
            value = getattr(self, name)
            if value is not None:
                setattr(self, name, str(value))
        if self.status is not None:
            self.status = parse_status(self.status)
        if self.expires_at is not None:
            self.expires_at = parse_timestamp("expiresAt", self.expires_at)
        if self.target_amount is not None:
            self.target_amount = parse_amount("targetAmount", self.target_amount)
        if self.max_participants is not None:
            self.max_participants = parse_capacity(
                "maxParticipants", self.max_participants
            )

    def changes(self) -> dict[str, Any]:
        """Return only the fields this patch sets."""
        return {
            name: value for name, value in vars(self).items() if value is not None
        }

    def apply_to(self, group: GroupBuy) -> None:
        for name, value in self.changes().items():
            setattr(group, name, value)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> GroupBuyPatch:
        """Build a patch from wire-format keys, rejecting immutable fields."""
        immutable = sorted(
            {
                "id",
                "organizer",
                "organizerId",
                "participants",
                "currentAmount",
                "createdAt",
            }
            & set(data)
        )
        if immutable:
            raise ValidationError(
                f"Fields cannot be changed after creation: {', '.join(immutable)}."
            )

        wire_names = {
            **TEXT_PATCH_FIELDS,
            "status": "status",
            "expiresAt": "expires_at",
            "targetAmount": "target_amount",
            "maxParticipants": "max_participants",
        }
        return cls(
            **{
                attr: data[key]
                for key, attr in wire_names.items()
                if data.get(key) is not None
            }
        )


def progress_percent(group: GroupBuy) -> float:
    """Percentage of the target collected so far, capped at 100."""
    if group.target_amount <= 0:
        raise ValueError(f"Group {group.id} has no positive target amount.")
    return min(
        MAX_PROGRESS_PERCENT, 100.0 * group.current_amount / group.target_amount
    )
