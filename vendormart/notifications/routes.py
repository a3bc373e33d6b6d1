"""Routes for the notifications blueprint."""

from flask import g, jsonify

from vendormart import state
from vendormart.auth.decorators import login_required
from vendormart.errors import NotFoundError

from . import bp


def _get_own_notification(notification_id):
    """Fetch a notification of the current user, or raise NotFoundError."""
    notification = state.get_notifications().get(notification_id)
    if notification is None or notification.user_id != g.user["uid"]:
        raise NotFoundError("Notification not found.")
    return notification


@bp.route("/", methods=["GET"])
@login_required
def view_notifications():
    """List the current user's notifications, newest first."""
    center = state.get_notifications()
    user_id = g.user["uid"]
    return jsonify(
        {
            "notifications": [n.to_dict() for n in center.for_user(user_id)],
            "unread_count": center.unread_count(user_id),
        }
    )


@bp.route("/unread_count", methods=["GET"])
@login_required
def unread_count():
    count = state.get_notifications().unread_count(g.user["uid"])
    return jsonify({"unread_count": count})


@bp.route("/<string:notification_id>/read", methods=["POST"])
@login_required
def mark_as_read(notification_id):
    _get_own_notification(notification_id)
    state.get_notifications().mark_as_read(notification_id)
    state.checkpoint_notifications()
    return jsonify({"status": "success"})


@bp.route("/read_all", methods=["POST"])
@login_required
def mark_all_as_read():
    """Mark all of the current user's notifications as read."""
    updated = state.get_notifications().mark_all_as_read(g.user["uid"])
    state.checkpoint_notifications()
    return jsonify({"status": "success", "updated": updated})


@bp.route("/<string:notification_id>/delete", methods=["POST"])
@login_required
def delete_notification(notification_id):
    _get_own_notification(notification_id)
    state.get_notifications().delete(notification_id)
    state.checkpoint_notifications()
    return jsonify({"status": "success", "message": "Notification deleted."})
