"""Forms for the orders blueprint."""

import math

from flask_wtf import FlaskForm
from wtforms import (
    FieldList,
    FloatField,
    Form,
    FormField,
    SelectField,
    StringField,
    ValidationError,
)
from wtforms.validators import DataRequired, InputRequired, NumberRange, Optional

from .models import OrderStatus

STATUS_CHOICES = [(status.value, status.value.title()) for status in OrderStatus]


def _require_finite(form, field):
    if field.data is not None and not math.isfinite(field.data):
        raise ValidationError("Must be a finite number.")


class OrderItemForm(Form):
    """One line of an order. Nested forms carry no CSRF token of their own."""

    product_id = StringField("Product", validators=[DataRequired()])
    name = StringField("Item Name", validators=[DataRequired()])
    quantity = FloatField(
        "Quantity",
        validators=[InputRequired(), NumberRange(min=0.001), _require_finite],
    )
    price = FloatField(
        "Price", validators=[InputRequired(), NumberRange(min=0), _require_finite]
    )
    unit = StringField("Unit", validators=[DataRequired()])


class OrderForm(FlaskForm):
    """Form for placing an order with one supplier."""

    vendor_name = StringField("Vendor Name", validators=[DataRequired()])
    supplier_id = StringField("Supplier", validators=[DataRequired()])
    supplier_name = StringField("Supplier Name", validators=[DataRequired()])
    supplier_contact = StringField("Supplier Contact", validators=[DataRequired()])
    delivery_address = StringField("Delivery Address", validators=[DataRequired()])
    group_id = StringField("Group", validators=[Optional()])
    items = FieldList(FormField(OrderItemForm), label="Items", min_entries=1)

    def to_fields(self):
        """Return the order fields keyed by their wire names."""
        return {
            "vendorName": self.vendor_name.data,
            "supplierId": self.supplier_id.data,
            "supplierName": self.supplier_name.data,
            "supplierContact": self.supplier_contact.data,
            "deliveryAddress": self.delivery_address.data,
            "groupId": self.group_id.data or None,
            "items": [
                {
                    "id": entry.product_id.data,
                    "name": entry.form.name.data,
                    "quantity": entry.quantity.data,
                    "price": entry.price.data,
                    "unit": entry.unit.data,
                }
                for entry in self.items
            ],
        }


class OrderStatusForm(FlaskForm):
    """Form a supplier uses to move an order along."""

    status = SelectField("Status", choices=STATUS_CHOICES)
    tracking_id = StringField("Tracking Id", validators=[Optional()])
