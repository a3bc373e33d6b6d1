"""Routes for the products blueprint."""

from flask import g, jsonify, request

from vendormart import state
from vendormart.auth.decorators import login_required
from vendormart.errors import ValidationError
from vendormart.utils import form_error_message

from . import bp
from .forms import EditProductForm, ProductForm, StockForm
from .models import ProductPatch
from .services import ProductService


@bp.route("/", methods=["GET"])
@login_required
def view_products():
    """List the catalog, optionally filtered by category or supplier."""
    products = state.get_catalog().all()
    category = request.args.get("category", "")
    supplier = request.args.get("supplier", "")
    if category:
        products = [p for p in products if p.category == category]
    if supplier:
        products = [p for p in products if p.supplier_id == supplier]
    return jsonify({"products": [p.to_dict() for p in products]})


@bp.route("/mine", methods=["GET"])
@login_required
def my_products():
    """List the current supplier's products."""
    products = state.get_catalog().for_supplier(g.user["uid"])
    return jsonify({"products": [p.to_dict() for p in products]})


@bp.route("/<string:product_id>", methods=["GET"])
@login_required
def view_product(product_id):
    product = ProductService.get_product_or_404(state.get_catalog(), product_id)
    return jsonify({"product": product.to_dict()})


@bp.route("/create", methods=["POST"])
@login_required
def create_product():
    """List a new product supplied by the current user."""
    form = ProductForm()
    if not form.validate_on_submit():
        raise ValidationError(form_error_message(form))

    product = ProductService.create_product(
        state.get_catalog(),
        supplier_id=g.user["uid"],
        supplier_name=form.supplier_name.data,
        fields=form.to_fields(),
    )
    state.checkpoint_products()
    return (
        jsonify(
            {
                "status": "success",
                "message": "Product listed successfully.",
                "product": product.to_dict(),
            }
        ),
        201,
    )


@bp.route("/<string:product_id>/edit", methods=["POST"])
@login_required
def edit_product(product_id):
    form = EditProductForm()
    if not form.validate_on_submit():
        raise ValidationError(form_error_message(form))

    product = ProductService.update_product(
        state.get_catalog(),
        product_id,
        g.user["uid"],
        ProductPatch.from_dict(form.to_fields()),
    )
    state.checkpoint_products()
    return jsonify(
        {
            "status": "success",
            "message": "Product updated successfully.",
            "product": product.to_dict(),
        }
    )


@bp.route("/<string:product_id>/delete", methods=["POST"])
@login_required
def delete_product(product_id):
    ProductService.delete_product(state.get_catalog(), product_id, g.user["uid"])
    state.checkpoint_products()
    return jsonify({"status": "success", "message": "Product deleted successfully."})


@bp.route("/<string:product_id>/stock", methods=["POST"])
@login_required
def take_stock(product_id):
    """Take units of a product out of stock."""
    form = StockForm()
    if not form.validate_on_submit():
        raise ValidationError(form_error_message(form))

    product = ProductService.take_stock(
        state.get_catalog(), product_id, g.user["uid"], form.quantity.data
    )
    state.checkpoint_products()
    return jsonify({"status": "success", "product": product.to_dict()})
