"""Routes for the groups blueprint."""

from flask import g, jsonify, request, url_for

from vendormart import state
from vendormart.auth.decorators import login_required
from vendormart.errors import ValidationError
from vendormart.utils import form_error_message

from . import bp
from .forms import EditGroupBuyForm, GroupBuyForm, JoinGroupForm
from .models import GroupBuyPatch
from .services import GroupBuyService, serialize_group


@bp.route("/", methods=["GET"])
@login_required
def view_groups():
    """List active group buys and the ones the user belongs to."""
    registry = state.get_registry()
    user_id = g.user["uid"]
    category = request.args.get("category", "")

    active_groups = registry.active_groups()
    if category:
        active_groups = [
            group for group in active_groups if group.category == category
        ]

    return jsonify(
        {
            "active_groups": [
                serialize_group(group, user_id) for group in active_groups
            ],
            "my_groups": [
                serialize_group(group, user_id)
                for group in registry.groups_for_user(user_id)
            ],
        }
    )


@bp.route("/dashboard", methods=["GET"])
@login_required
def dashboard():
    """Group figures for the current vendor's dashboard."""
    stats = GroupBuyService.get_dashboard_stats(state.get_registry(), g.user["uid"])
    return jsonify(stats)


@bp.route("/<string:group_id>", methods=["GET"])
@login_required
def view_group(group_id):
    """Display a single group buy."""
    group = GroupBuyService.get_group_or_404(state.get_registry(), group_id)
    return jsonify({"group": serialize_group(group, g.user["uid"])})


@bp.route("/create", methods=["POST"])
@login_required
def create_group():
    """Create a new group buy organized by the current user."""
    form = GroupBuyForm()
    if not form.validate_on_submit():
        raise ValidationError(form_error_message(form))

    group = GroupBuyService.create_group(
        state.get_registry(),
        organizer_id=g.user["uid"],
        organizer_name=form.organizer.data,
        fields=form.to_fields(),
    )
    state.checkpoint_groups()
    return (
        jsonify(
            {
                "status": "success",
                "message": "Group created successfully.",
                "group": serialize_group(group, g.user["uid"]),
            }
        ),
        201,
    )


@bp.route("/<string:group_id>/edit", methods=["POST"])
@login_required
def edit_group(group_id):
    """Edit a group buy. Only its organizer may do this."""
    form = EditGroupBuyForm()
    if not form.validate_on_submit():
        raise ValidationError(form_error_message(form))

    patch = GroupBuyPatch.from_dict(form.to_fields())
    group = GroupBuyService.update_group(
        state.get_registry(), group_id, g.user["uid"], patch
    )
    state.checkpoint_groups()
    return jsonify(
        {
            "status": "success",
            "message": "Group updated successfully.",
            "group": serialize_group(group, g.user["uid"]),
        }
    )


@bp.route("/<string:group_id>/delete", methods=["POST"])
@login_required
def delete_group(group_id):
    """Delete a group buy. Only its organizer may do this."""
    GroupBuyService.delete_group(state.get_registry(), group_id, g.user["uid"])
    state.checkpoint_groups()
    return jsonify({"status": "success", "message": "Group deleted successfully."})


@bp.route("/<string:group_id>/join", methods=["POST"])
@login_required
def join_group(group_id):
    """Join a group buy with a contribution."""
    form = JoinGroupForm()
    if not form.validate_on_submit():
        raise ValidationError(form_error_message(form))

    group = GroupBuyService.join_group(
        state.get_registry(),
        state.get_notifications(),
        group_id,
        g.user["uid"],
        form.contribution.data,
        action_url=url_for(".view_group", group_id=group_id),
    )
    state.checkpoint_groups()
    state.checkpoint_notifications()
    return jsonify(
        {
            "status": "success",
            "message": "Successfully joined the group.",
            "group": serialize_group(group, g.user["uid"]),
        }
    )


@bp.route("/<string:group_id>/leave", methods=["POST"])
@login_required
def leave_group(group_id):
    """Leave a group buy."""
    group = GroupBuyService.leave_group(
        state.get_registry(),
        state.get_notifications(),
        group_id,
        g.user["uid"],
        action_url=url_for(".view_group", group_id=group_id),
    )
    state.checkpoint_groups()
    state.checkpoint_notifications()
    return jsonify(
        {
            "status": "success",
            "message": "You have left the group.",
            "group": serialize_group(group, g.user["uid"]),
        }
    )
