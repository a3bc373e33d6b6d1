"""Data models for the products blueprint."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Mapping

from vendormart.errors import ValidationError
from vendormart.utils import parse_amount, parse_text_list, parse_whole_number

# Fields a supplier must supply when listing a product, by wire name.
REQUIRED_PRODUCT_FIELDS = (
    "name",
    "description",
    "price",
    "unit",
    "minOrder",
    "category",
    "freshness",
    "origin",
    "supplierId",
    "supplierName",
    "stockQuantity",
)

# Free-text fields, by wire name.
TEXT_PRODUCT_FIELDS = {
    "name": "name",
    "description": "description",
    "unit": "unit",
    "minOrder": "min_order",
    "category": "category",
    "freshness": "freshness",
    "origin": "origin",
}


def parse_flag(name: str, value: Any) -> bool:
    """Coerce a boolean sent as a bool or a form string."""
    if isinstance(value, bool):
        return value
    if isinstance(value, str) and value.lower() in ("true", "1", "t", "yes"):
        return True
    if isinstance(value, str) and value.lower() in ("false", "0", "f", "no"):
        return False
    raise ValidationError(f"{name} must be true or false.")


@dataclass
class Product:
    """An item a supplier offers on the marketplace."""

    id: str
    name: str
    description: str
    price: float
    unit: str
    min_order: str
    category: str
    freshness: str
    origin: str
    supplier_id: str
    supplier_name: str
    stock_quantity: int
    in_stock: bool = True
    images: list[str] = field(default_factory=list)
    certifications: list[str] = field(default_factory=list)

    def copy(self) -> Product:
        return replace(
            self,
            images=list(self.images),
            certifications=list(self.certifications),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "price": self.price,
            "unit": self.unit,
            "minOrder": self.min_order,
            "category": self.category,
            "images": list(self.images),
            "inStock": self.in_stock,
            "freshness": self.freshness,
            "origin": self.origin,
            "certifications": list(self.certifications),
            "supplierId": self.supplier_id,
            "supplierName": self.supplier_name,
            "stockQuantity": self.stock_quantity,
        }

    @classmethod
    def from_dict(
        cls, data: Mapping[str, Any], product_id: str | None = None
    ) -> Product:
        """Build a product from wire-format keys.

        ``product_id`` overrides ``data["id"]``; new listings pass a freshly
        issued id.
        """
        product_id = product_id or data.get("id")
        missing = [key for key in REQUIRED_PRODUCT_FIELDS if data.get(key) is None]
        if not product_id:
            missing.insert(0, "id")
        if missing:
            raise ValidationError(f"Missing product fields: {', '.join(missing)}.")

        stock_quantity = parse_whole_number("stockQuantity", data["stockQuantity"])
        in_stock = data.get("inStock")
        return cls(
            id=str(product_id),
            name=str(data["name"]),
            description=str(data["description"]),
            price=parse_amount("price", data["price"]),
            unit=str(data["unit"]),
            min_order=str(data["minOrder"]),
            category=str(data["category"]),
            freshness=str(data["freshness"]),
            origin=str(data["origin"]),
            supplier_id=str(data["supplierId"]),
            supplier_name=str(data["supplierName"]),
            stock_quantity=stock_quantity,
            in_stock=(
                stock_quantity > 0
                if in_stock is None
                else parse_flag("inStock", in_stock)
            ),
            images=parse_text_list(data.get("images")),
            certifications=parse_text_list(data.get("certifications")),
        )


@dataclass
class ProductPatch:
    """The fields of a product its supplier may change.

    ``None`` means "leave unchanged". The id and the supplier are fixed.
    """

    name: str | None = None
    description: str | None = None
    price: float | None = None
    unit: str | None = None
    min_order: str | None = None
    category: str | None = None
    freshness: str | None = None
    origin: str | None = None
    stock_quantity: int | None = None
    in_stock: bool | None = None
    images: list[str] | None = None
    certifications: list[str] | None = None

    def __post_init__(self) -> None:
        for name in TEXT_PRODUCT_FIELDS.values():
            value = getattr(self, name)
            if value is not None:
                setattr(self, name, str(value))
        if self.price is not None:
            self.price = parse_amount("price", self.price)
        if self.stock_quantity is not None:
            self.stock_quantity = parse_whole_number(
                "stockQuantity", self.stock_quantity
            )
        if self.in_stock is not None:
            self.in_stock = parse_flag("inStock", self.in_stock)
        if self.images is not None:
            self.images = parse_text_list(self.images)
        if self.certifications is not None:
            self.certifications = parse_text_list(self.certifications)

    def changes(self) -> dict[str, Any]:
        return {
            name: value for name, value in vars(self).items() if value is not None
        }

    def apply_to(self, product: Product) -> None:
        for name, value in self.changes().items():
            setattr(product, name, value)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> ProductPatch:
        """Build a patch from wire-format keys, rejecting fixed fields."""
        fixed = sorted({"id", "supplierId", "supplierName"} & set(data))
        if fixed:
            raise ValidationError(
                f"Fields cannot be changed after listing: {', '.join(fixed)}."
            )
        wire_names = {
            **TEXT_PRODUCT_FIELDS,
            "price": "price",
            "stockQuantity": "stock_quantity",
            "inStock": "in_stock",
            "images": "images",
            "certifications": "certifications",
        }
        return cls(
            **{
                attr: data[key]
                for key, attr in wire_names.items()
                if data.get(key) is not None
            }
        )
