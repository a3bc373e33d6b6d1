"""Routes for the orders blueprint."""

from flask import g, jsonify, request, url_for

from vendormart import state
from vendormart.auth.decorators import login_required
from vendormart.errors import ValidationError
from vendormart.utils import form_error_message

from . import bp
from .forms import OrderForm, OrderStatusForm
from .services import OrderService


def _order_url(order_id):
    return url_for(".view_order", order_id=order_id)


def _checkpoint():
    state.checkpoint_orders()
    state.checkpoint_notifications()


@bp.route("/", methods=["GET"])
@login_required
def view_orders():
    """List the current user's orders as a vendor, or as a supplier."""
    book = state.get_orders()
    user_id = g.user["uid"]
    if request.args.get("role") == "supplier":
        orders = book.for_supplier(user_id)
    else:
        orders = book.for_vendor(user_id)
    return jsonify({"orders": [order.to_dict() for order in orders]})


@bp.route("/<string:order_id>", methods=["GET"])
@login_required
def view_order(order_id):
    order = OrderService.get_order_for_user(
        state.get_orders(), order_id, g.user["uid"]
    )
    return jsonify({"order": order.to_dict()})


@bp.route("/create", methods=["POST"])
@login_required
def create_order():
    """Place an order as the current user."""
    form = OrderForm()
    if not form.validate_on_submit():
        raise ValidationError(form_error_message(form))

    order = OrderService.place_order(
        state.get_orders(),
        state.get_notifications(),
        g.user["uid"],
        form.to_fields(),
        action_url=_order_url,
    )
    _checkpoint()
    return (
        jsonify(
            {
                "status": "success",
                "message": "Order placed successfully.",
                "order": order.to_dict(),
            }
        ),
        201,
    )


@bp.route("/<string:order_id>/status", methods=["POST"])
@login_required
def update_status(order_id):
    """Move an order to a new status. Only its supplier may do this."""
    form = OrderStatusForm()
    if not form.validate_on_submit():
        raise ValidationError(form_error_message(form))

    order = OrderService.update_status(
        state.get_orders(),
        state.get_notifications(),
        order_id,
        g.user["uid"],
        form.status.data,
        tracking_id=form.tracking_id.data,
        action_url=_order_url,
    )
    _checkpoint()
    return jsonify({"status": "success", "order": order.to_dict()})


@bp.route("/<string:order_id>/cancel", methods=["POST"])
@login_required
def cancel_order(order_id):
    order = OrderService.cancel_order(
        state.get_orders(),
        state.get_notifications(),
        order_id,
        g.user["uid"],
        action_url=_order_url,
    )
    _checkpoint()
    return jsonify(
        {
            "status": "success",
            "message": "Order cancelled.",
            "order": order.to_dict(),
        }
    )


@bp.route("/<string:order_id>/reorder", methods=["POST"])
@login_required
def reorder(order_id):
    """Place a fresh copy of one of the current user's orders."""
    order = OrderService.reorder(
        state.get_orders(),
        state.get_notifications(),
        order_id,
        g.user["uid"],
        action_url=_order_url,
    )
    _checkpoint()
    return (
        jsonify(
            {
                "status": "success",
                "message": "Order placed again.",
                "order": order.to_dict(),
            }
        ),
        201,
    )
