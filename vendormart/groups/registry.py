"""The authoritative in-memory collection of group buys."""

from __future__ import annotations

import math
import secrets
import threading
import time
from typing import Any, Callable, Iterable, Mapping

from vendormart.constants import GROUP_ID_PREFIX
from vendormart.errors import ValidationError
from vendormart.utils import parse_amount, parse_timestamp, utcnow

from .models import (
    REQUIRED_CREATE_FIELDS,
    GroupBuy,
    GroupBuyPatch,
    GroupBuyStatus,
    parse_capacity,
    parse_status,
)


def generate_group_id() -> str:
    """Return an id of the form ``group-<epoch ms>-<6 hex chars>``."""
    return f"{GROUP_ID_PREFIX}-{int(time.time() * 1000)}-{secrets.token_hex(3)}"


class GroupBuyRegistry:
    """Owns the group buys of one process and enforces their invariants.

    Misuse (joining twice, leaving a group you are not in, deleting a group
    you do not own) is a silent no-op; mutators return whether they applied.
    Reads hand out copies, so nothing outside the registry can mutate a
    stored record.
    """

    def __init__(
        self,
        groups: Iterable[GroupBuy] = (),
        id_factory: Callable[[], str] = generate_group_id,
    ) -> None:
        self._lock = threading.RLock()
        self._id_factory = id_factory
        self._groups: list[GroupBuy] = []
        self._issued_ids: set[str] = set()
        for group in groups:
            self._add(group.copy())

    def __len__(self) -> int:
        with self._lock:
            return len(self._groups)

    def _add(self, group: GroupBuy) -> None:
        if group.id in self._issued_ids:
            raise ValidationError(f"Duplicate group id: {group.id}.")
        self._issued_ids.add(group.id)
        self._groups.append(group)

    def _find(self, group_id: str) -> GroupBuy | None:
        for group in self._groups:
            if group.id == group_id:
                return group
        return None

    def _new_id(self) -> str:
        group_id = self._id_factory()
        while group_id in self._issued_ids:
            group_id = self._id_factory()
        return group_id

    # Mutations

    def create(self, data: Mapping[str, Any]) -> GroupBuy:
        """Create a group buy from camelCase creation fields.

        The organizer is the first participant and nothing is collected yet.
        """
        missing = [key for key in REQUIRED_CREATE_FIELDS if data.get(key) is None]
        if missing:
            raise ValidationError(
                f"Missing required group fields: {', '.join(missing)}."
            )

        with self._lock:
            group = GroupBuy(
                id=self._new_id(),
                title=data["title"],
                description=data["description"],
                organizer=data["organizer"],
                organizer_id=data["organizerId"],
                location=data["location"],
                target_amount=parse_amount("targetAmount", data["targetAmount"]),
                max_participants=parse_capacity(
                    "maxParticipants", data["maxParticipants"]
                ),
                time_left=data["timeLeft"],
                category=data["category"],
                savings=data["savings"],
                status=parse_status(data["status"]),
                created_at=utcnow(),
                expires_at=parse_timestamp("expiresAt", data["expiresAt"]),
                current_amount=0.0,
                participants=[data["organizerId"]],
            )
            self._add(group)
            return group.copy()

    def join(self, group_id: str, user_id: str, contribution: float) -> bool:
        """Add a participant and their contribution.

        No-op when the group is missing, the user is already in it, or it is
        full.
        """
        contribution = parse_amount("contribution", contribution, allow_zero=True)
        with self._lock:
            group = self._find(group_id)
            if group is None or user_id in group.participants or group.is_full:
                return False
            total = group.current_amount + contribution
            if not math.isfinite(total):
                raise ValidationError("Contribution is too large.")
            group.participants.append(user_id)
            group.current_amount = total
            return True

    def leave(self, group_id: str, user_id: str) -> bool:
        """Remove a participant.

        Individual contributions are not tracked, so the collected amount
        drops by the group's average share, floored at zero. The organizer
        cannot leave their own group.
        """
        with self._lock:
            group = self._find(group_id)
            if (
                group is None
                or user_id not in group.participants
                or user_id == group.organizer_id
            ):
                return False
            group.participants.remove(user_id)
            group.current_amount = max(
                0.0, group.current_amount - group.average_share
            )
            return True

    def delete(self, group_id: str, user_id: str) -> bool:
        """Delete a group; only its organizer may do so."""
        with self._lock:
            group = self._find(group_id)
            if group is None or group.organizer_id != user_id:
                return False
            self._groups.remove(group)
            return True

    def update(self, group_id: str, patch: GroupBuyPatch) -> GroupBuy | None:
        """Merge a patch into a group. Authorization is up to the caller.

        Raises:
            ValidationError: If the new capacity is below the current number
                of participants.
        """
        with self._lock:
            group = self._find(group_id)
            if group is None:
                return None
            if (
                patch.max_participants is not None
                and patch.max_participants < len(group.participants)
            ):
                raise ValidationError(
                    "Capacity cannot be lower than the current number of "
                    "participants."
                )
            patch.apply_to(group)
            return group.copy()

    # Queries

    def get(self, group_id: str) -> GroupBuy | None:
        with self._lock:
            group = self._find(group_id)
            return group.copy() if group else None

    def all(self) -> list[GroupBuy]:
        with self._lock:
            return [group.copy() for group in self._groups]

    def groups_for_user(self, user_id: str) -> list[GroupBuy]:
        with self._lock:
            return [
                group.copy() for group in self._groups if user_id in group.participants
            ]

    def active_groups(self) -> list[GroupBuy]:
        with self._lock:
            return [
                group.copy()
                for group in self._groups
                if group.status == GroupBuyStatus.ACTIVE
            ]

    def is_member(self, group_id: str, user_id: str) -> bool:
        with self._lock:
            group = self._find(group_id)
            return group is not None and user_id in group.participants

    def can_delete(self, group_id: str, user_id: str) -> bool:
        with self._lock:
            group = self._find(group_id)
            return group is not None and group.organizer_id == user_id

    # Snapshots

    def to_state(self) -> dict[str, Any]:
        """Serialize the whole collection for a snapshot."""
        with self._lock:
            return {"groups": [group.to_dict() for group in self._groups]}

    @classmethod
    def from_state(
        cls,
        state: Mapping[str, Any],
        id_factory: Callable[[], str] = generate_group_id,
    ) -> GroupBuyRegistry:
        """Restore a registry from a snapshot produced by ``to_state``."""
        groups = [GroupBuy.from_dict(item) for item in state.get("groups", [])]
        return cls(groups, id_factory=id_factory)
