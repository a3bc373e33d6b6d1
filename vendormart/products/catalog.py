"""The in-memory product catalog."""

from __future__ import annotations

import secrets
import threading
import time
from typing import Any, Callable, Iterable, Mapping

from vendormart.constants import PRODUCT_ID_PREFIX
from vendormart.errors import ValidationError
from vendormart.utils import parse_whole_number

from .models import Product, ProductPatch


def generate_product_id() -> str:
    return f"{PRODUCT_ID_PREFIX}-{int(time.time() * 1000)}-{secrets.token_hex(3)}"


class ProductCatalog:
    """Every listed product, in listing order.

    Like the group registry, it hands out copies and treats operations on
    unknown products as no-ops.
    """

    def __init__(
        self,
        products: Iterable[Product] = (),
        id_factory: Callable[[], str] = generate_product_id,
    ) -> None:
        self._lock = threading.RLock()
        self._id_factory = id_factory
        self._products: list[Product] = []
        self._issued_ids: set[str] = set()
        for product in products:
            self._add(product.copy())

    def __len__(self) -> int:
        with self._lock:
            return len(self._products)

    def _add(self, product: Product) -> None:
        if product.id in self._issued_ids:
            raise ValidationError(f"Duplicate product id: {product.id}.")
        self._issued_ids.add(product.id)
        self._products.append(product)

    def _find(self, product_id: str) -> Product | None:
        for product in self._products:
            if product.id == product_id:
                return product
        return None

    def add(self, data: Mapping[str, Any]) -> Product:
        """List a new product from camelCase fields and return a copy."""
        with self._lock:
            product_id = self._id_factory()
            while product_id in self._issued_ids:
                product_id = self._id_factory()
            product = Product.from_dict(data, product_id=product_id)
            self._add(product)
            return product.copy()

    def update(self, product_id: str, patch: ProductPatch) -> Product | None:
        with self._lock:
            product = self._find(product_id)
            if product is None:
                return None
            patch.apply_to(product)
            return product.copy()

    def delete(self, product_id: str) -> bool:
        with self._lock:
            product = self._find(product_id)
            if product is None:
                return False
            self._products.remove(product)
            return True

    def update_stock(self, product_id: str, quantity: int) -> Product | None:
        """Take ``quantity`` units out of stock, never going below zero."""
        quantity = parse_whole_number("quantity", quantity)
        with self._lock:
            product = self._find(product_id)
            if product is None:
                return None
            product.stock_quantity = max(0, product.stock_quantity - quantity)
            return product.copy()

    def get(self, product_id: str) -> Product | None:
        with self._lock:
            product = self._find(product_id)
            return product.copy() if product else None

    def all(self) -> list[Product]:
        with self._lock:
            return [product.copy() for product in self._products]

    def for_supplier(self, supplier_id: str) -> list[Product]:
        with self._lock:
            return [
                product.copy()
                for product in self._products
                if product.supplier_id == supplier_id
            ]

    def to_state(self) -> dict[str, Any]:
        with self._lock:
            return {"products": [product.to_dict() for product in self._products]}

    @classmethod
    def from_state(cls, state: Mapping[str, Any]) -> ProductCatalog:
        return cls(Product.from_dict(item) for item in state.get("products", []))
