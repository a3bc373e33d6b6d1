"""Service layer for group buy operations.

The registry treats misuse as a silent no-op. This layer is the caller the
registry expects: it checks membership, capacity and ownership first so the
user gets a clear error, and it sends the organizer a notification whenever
someone joins or leaves.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from flask import current_app

from vendormart.errors import (
    AccessDenied,
    DuplicateResourceError,
    GroupFullError,
    NotFoundError,
    ValidationError,
)
from vendormart.notifications.models import NotificationType

from .models import GroupBuy, GroupBuyPatch, GroupBuyStatus, progress_percent

if TYPE_CHECKING:
    from vendormart.notifications.store import NotificationCenter

    from .registry import GroupBuyRegistry


def serialize_group(group: GroupBuy, user_id: str | None = None) -> dict[str, Any]:
    """Wire representation of a group plus the figures views display."""
    data = group.to_dict()
    data["progress"] = round(progress_percent(group), 2)
    data["spotsLeft"] = group.spots_left
    if user_id is not None:
        data["isMember"] = user_id in group.participants
        data["canDelete"] = group.organizer_id == user_id
    return data


class GroupBuyService:
    """Service class for group buy operations."""

    @staticmethod
    def get_group_or_404(registry: GroupBuyRegistry, group_id: str) -> GroupBuy:
        group = registry.get(group_id)
        if group is None:
            raise NotFoundError("Group not found.")
        return group

    @staticmethod
    def create_group(
        registry: GroupBuyRegistry,
        organizer_id: str,
        organizer_name: str,
        fields: dict[str, Any],
    ) -> GroupBuy:
        """Create a group buy organized by the given user."""
        data = dict(fields)
        data["organizer"] = organizer_name
        data["organizerId"] = organizer_id
        group = registry.create(data)
        current_app.logger.info(f"User {organizer_id} created group {group.id}.")
        return group

    @staticmethod
    def join_group(
        registry: GroupBuyRegistry,
        notifications: NotificationCenter,
        group_id: str,
        user_id: str,
        contribution: float,
        action_url: str | None = None,
    ) -> GroupBuy:
        """Join a group buy and notify its organizer."""
        group = GroupBuyService.get_group_or_404(registry, group_id)
        if user_id in group.participants:
            raise DuplicateResourceError("You are already part of this group.")
        if group.is_full:
            raise GroupFullError()

        if not registry.join(group_id, user_id, contribution):
            # The group changed between the checks above and the join.
            raise GroupFullError("Could not join this group. Please try again.")

        notifications.add(
            user_id=group.organizer_id,
            title="New member joined",
            message=(
                f"A vendor joined your group '{group.title}' "
                f"with a contribution of {contribution:g}."
            ),
            type=NotificationType.GROUP,
            action_url=action_url,
        )
        current_app.logger.info(f"User {user_id} joined group {group_id}.")
        return GroupBuyService.get_group_or_404(registry, group_id)

    @staticmethod
    def leave_group(
        registry: GroupBuyRegistry,
        notifications: NotificationCenter,
        group_id: str,
        user_id: str,
        action_url: str | None = None,
    ) -> GroupBuy:
        """Leave a group buy and notify its organizer."""
        group = GroupBuyService.get_group_or_404(registry, group_id)
        if user_id == group.organizer_id:
            raise ValidationError(
                "Organizers cannot leave their own group. Delete it instead."
            )
        if user_id not in group.participants:
            raise ValidationError("You are not part of this group.")

        if not registry.leave(group_id, user_id):
            # The membership changed between the checks above and the leave.
            raise ValidationError("You are not part of this group.")

        notifications.add(
            user_id=group.organizer_id,
            title="Member left",
            message=f"A vendor left your group '{group.title}'.",
            type=NotificationType.GROUP,
            action_url=action_url,
        )
        current_app.logger.info(f"User {user_id} left group {group_id}.")
        return GroupBuyService.get_group_or_404(registry, group_id)

    @staticmethod
    def delete_group(registry: GroupBuyRegistry, group_id: str, user_id: str) -> None:
        GroupBuyService.get_group_or_404(registry, group_id)
        if not registry.can_delete(group_id, user_id):
            raise AccessDenied("You do not have permission to delete this group.")
        registry.delete(group_id, user_id)
        current_app.logger.info(f"User {user_id} deleted group {group_id}.")

    @staticmethod
    def update_group(
        registry: GroupBuyRegistry,
        group_id: str,
        user_id: str,
        patch: GroupBuyPatch,
    ) -> GroupBuy:
        """Apply a patch; like deletion, only the organizer may edit."""
        group = GroupBuyService.get_group_or_404(registry, group_id)
        if group.organizer_id != user_id:
            raise AccessDenied("You do not have permission to edit this group.")
        updated = registry.update(group_id, patch)
        if updated is None:
            raise NotFoundError("Group not found.")
        return updated

    @staticmethod
    def get_dashboard_stats(registry: GroupBuyRegistry, user_id: str) -> dict[str, Any]:
        """Group figures shown on a vendor's dashboard."""
        my_groups = registry.groups_for_user(user_id)
        return {
            "joinedGroups": len(my_groups),
            "activeGroups": sum(
                1 for group in my_groups if group.status == GroupBuyStatus.ACTIVE
            ),
            "organizedGroups": sum(
                1 for group in my_groups if group.organizer_id == user_id
            ),
            "totalCollected": sum(group.current_amount for group in my_groups),
        }
