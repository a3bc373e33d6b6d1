"""Tests for ProductCatalog and the product models."""

from __future__ import annotations

import itertools
import unittest

from tests.helpers import SUPPLIER_ID, product_fields
from vendormart.errors import ValidationError
from vendormart.products.catalog import ProductCatalog
from vendormart.products.demo_data import demo_products
from vendormart.products.models import ProductPatch


def counting_ids():
    counter = itertools.count(1)
    return lambda: f"prod-{next(counter)}"


class ProductCatalogTestCase(unittest.TestCase):
    def setUp(self) -> None:
        self.catalog = ProductCatalog(id_factory=counting_ids())
        self.product = self.catalog.add(product_fields())

    def test_add(self) -> None:
        self.assertEqual(self.product.id, "prod-1")
        self.assertEqual(self.product.price, 25)
        self.assertTrue(self.product.in_stock)
        self.assertEqual(self.product.images, [])
        self.assertEqual(self.product.certifications, ["Organic"])

    def test_add_accepts_form_values(self) -> None:
        product = self.catalog.add(
            product_fields(
                inStock="false", images="/a.jpg, /b.jpg", stockQuantity="0"
            )
        )
        self.assertFalse(product.in_stock)
        self.assertEqual(product.images, ["/a.jpg", "/b.jpg"])
        self.assertEqual(product.stock_quantity, 0)

    def test_add_rejects_bad_products(self) -> None:
        for overrides in (
            {"price": 0},
            {"price": "inf"},
            {"stockQuantity": -1},
            {"stockQuantity": 2.5},
            {"origin": None},
        ):
            with self.assertRaises(ValidationError):
                self.catalog.add(product_fields(**overrides))
        self.assertEqual(len(self.catalog), 1)

    def test_update(self) -> None:
        updated = self.catalog.update(
            self.product.id, ProductPatch(price=28, in_stock=False)
        )
        self.assertEqual(updated.price, 28)
        self.assertFalse(updated.in_stock)
        self.assertEqual(updated.name, self.product.name)
        self.assertIsNone(self.catalog.update("missing", ProductPatch(price=1)))

    def test_patch_validates_values_and_fixed_fields(self) -> None:
        with self.assertRaises(ValidationError):
            ProductPatch(price=float("nan"))
        with self.assertRaises(ValidationError):
            ProductPatch(stock_quantity=-5)
        with self.assertRaises(ValidationError):
            ProductPatch.from_dict({"supplierId": "s9"})
        patch = ProductPatch.from_dict({"stockQuantity": "40", "unit": "per L"})
        self.assertEqual(patch.changes(), {"stock_quantity": 40, "unit": "per L"})

    def test_delete(self) -> None:
        self.assertTrue(self.catalog.delete(self.product.id))
        self.assertIsNone(self.catalog.get(self.product.id))
        self.assertFalse(self.catalog.delete(self.product.id))

    def test_update_stock_floors_at_zero(self) -> None:
        product = self.catalog.update_stock(self.product.id, 120)
        self.assertEqual(product.stock_quantity, 380)
        product = self.catalog.update_stock(self.product.id, 1000)
        self.assertEqual(product.stock_quantity, 0)
        self.assertIsNone(self.catalog.update_stock("missing", 1))
        with self.assertRaises(ValidationError):
            self.catalog.update_stock(self.product.id, -10)

    def test_for_supplier(self) -> None:
        other = self.catalog.add(product_fields(supplierId="s2"))
        self.assertEqual(
            [p.id for p in self.catalog.for_supplier(SUPPLIER_ID)], [self.product.id]
        )
        self.assertEqual([p.id for p in self.catalog.for_supplier("s2")], [other.id])

    def test_reads_return_copies(self) -> None:
        product = self.catalog.get(self.product.id)
        product.certifications.append("Fake")
        self.assertEqual(self.catalog.get(self.product.id).certifications, ["Organic"])

    def test_demo_products_survive_a_snapshot(self) -> None:
        catalog = ProductCatalog(demo_products())
        state = catalog.to_state()
        self.assertEqual(ProductCatalog.from_state(state).to_state(), state)
        self.assertEqual(len(catalog.for_supplier("1")), 2)


if __name__ == "__main__":
    unittest.main()
