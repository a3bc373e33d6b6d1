"""Forms for the products blueprint."""

import math

from flask_wtf import FlaskForm
from wtforms import (
    FloatField,
    IntegerField,
    SelectField,
    StringField,
    TextAreaField,
    ValidationError,
)
from wtforms.validators import DataRequired, InputRequired, NumberRange, Optional

STOCK_CHOICES = [("true", "In stock"), ("false", "Out of stock")]


class ProductForm(FlaskForm):
    """Form for listing a new product."""

    name = StringField("Name", validators=[DataRequired()])
    description = TextAreaField("Description", validators=[DataRequired()])
    supplier_name = StringField("Supplier Name", validators=[DataRequired()])
    price = FloatField("Price", validators=[InputRequired(), NumberRange(min=0.01)])
    unit = StringField("Unit", validators=[DataRequired()])
    min_order = StringField("Minimum Order", validators=[DataRequired()])
    category = StringField("Category", validators=[DataRequired()])
    freshness = StringField("Freshness", validators=[DataRequired()])
    origin = StringField("Origin", validators=[DataRequired()])
    stock_quantity = IntegerField(
        "Stock Quantity", validators=[InputRequired(), NumberRange(min=0)]
    )
    in_stock = SelectField("Availability", choices=STOCK_CHOICES, default="true")
    images = StringField("Images", validators=[Optional()])
    certifications = StringField("Certifications", validators=[Optional()])

    def validate_price(self, field):
        if field.data is not None and not math.isfinite(field.data):
            raise ValidationError("Must be a finite number.")

    def to_fields(self):
        """Return the listing fields keyed by their wire names."""
        return {
            "name": self.name.data,
            "description": self.description.data,
            "price": self.price.data,
            "unit": self.unit.data,
            "minOrder": self.min_order.data,
            "category": self.category.data,
            "freshness": self.freshness.data,
            "origin": self.origin.data,
            "stockQuantity": self.stock_quantity.data,
            "inStock": self.in_stock.data,
            "images": self.images.data,
            "certifications": self.certifications.data,
        }


class EditProductForm(FlaskForm):
    """Form for editing a product; blank fields are left unchanged."""

    name = StringField("Name", validators=[Optional()])
    description = TextAreaField("Description", validators=[Optional()])
    price = FloatField("Price", validators=[Optional(), NumberRange(min=0.01)])
    unit = StringField("Unit", validators=[Optional()])
    min_order = StringField("Minimum Order", validators=[Optional()])
    category = StringField("Category", validators=[Optional()])
    freshness = StringField("Freshness", validators=[Optional()])
    origin = StringField("Origin", validators=[Optional()])
    stock_quantity = IntegerField(
        "Stock Quantity", validators=[Optional(), NumberRange(min=0)]
    )
    in_stock = SelectField(
        "Availability",
        choices=[("", "")] + STOCK_CHOICES,
        default="",
        validators=[Optional()],
    )
    images = StringField("Images", validators=[Optional()])
    certifications = StringField("Certifications", validators=[Optional()])

    def validate_price(self, field):
        if field.data is not None and not math.isfinite(field.data):
            raise ValidationError("Must be a finite number.")

    def to_fields(self):
        fields = {
            "name": self.name.data,
            "description": self.description.data,
            "price": self.price.data,
            "unit": self.unit.data,
            "minOrder": self.min_order.data,
            "category": self.category.data,
            "freshness": self.freshness.data,
            "origin": self.origin.data,
            "stockQuantity": self.stock_quantity.data,
            "inStock": self.in_stock.data,
            "images": self.images.data,
            "certifications": self.certifications.data,
        }
        return {key: value for key, value in fields.items() if value not in (None, "")}


class StockForm(FlaskForm):
    """Form for taking units out of stock."""

    quantity = IntegerField(
        "Quantity", validators=[InputRequired(), NumberRange(min=0)]
    )
