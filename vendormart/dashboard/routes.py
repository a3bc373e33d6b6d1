"""Routes for the dashboard blueprint."""

from flask import g, jsonify

from vendormart import state
from vendormart.auth.decorators import login_required

from . import bp
from .services import DashboardService


@bp.route("/vendor", methods=["GET"])
@login_required
def vendor():
    """Order and group figures for the current vendor."""
    stats = DashboardService.vendor_stats(
        state.get_orders(), state.get_registry(), g.user["uid"]
    )
    return jsonify(stats)


@bp.route("/supplier", methods=["GET"])
@login_required
def supplier():
    """Order and catalog figures for the current supplier."""
    stats = DashboardService.supplier_stats(
        state.get_orders(), state.get_catalog(), g.user["uid"]
    )
    return jsonify(stats)
