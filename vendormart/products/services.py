"""Service layer for product listings."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from flask import current_app

from vendormart.errors import AccessDenied, NotFoundError

from .models import Product, ProductPatch

if TYPE_CHECKING:
    from .catalog import ProductCatalog


class ProductService:
    """Service class for product operations.

    Only the supplier who listed a product may change it.
    """

    @staticmethod
    def get_product_or_404(catalog: ProductCatalog, product_id: str) -> Product:
        product = catalog.get(product_id)
        if product is None:
            raise NotFoundError("Product not found.")
        return product

    @staticmethod
    def _get_own_product(
        catalog: ProductCatalog, product_id: str, user_id: str
    ) -> Product:
        product = ProductService.get_product_or_404(catalog, product_id)
        if product.supplier_id != user_id:
            raise AccessDenied("You do not have permission to manage this product.")
        return product

    @staticmethod
    def create_product(
        catalog: ProductCatalog,
        supplier_id: str,
        supplier_name: str,
        fields: dict[str, Any],
    ) -> Product:
        data = dict(fields)
        data["supplierId"] = supplier_id
        data["supplierName"] = supplier_name
        product = catalog.add(data)
        current_app.logger.info(f"Supplier {supplier_id} listed product {product.id}.")
        return product

    @staticmethod
    def update_product(
        catalog: ProductCatalog, product_id: str, user_id: str, patch: ProductPatch
    ) -> Product:
        ProductService._get_own_product(catalog, product_id, user_id)
        updated = catalog.update(product_id, patch)
        if updated is None:
            raise NotFoundError("Product not found.")
        return updated

    @staticmethod
    def delete_product(catalog: ProductCatalog, product_id: str, user_id: str) -> None:
        ProductService._get_own_product(catalog, product_id, user_id)
        catalog.delete(product_id)
        current_app.logger.info(f"Supplier {user_id} deleted product {product_id}.")

    @staticmethod
    def take_stock(
        catalog: ProductCatalog, product_id: str, user_id: str, quantity: int
    ) -> Product:
        """Reduce a product's stock; it never drops below zero."""
        ProductService._get_own_product(catalog, product_id, user_id)
        updated = catalog.update_stock(product_id, quantity)
        if updated is None:
            raise NotFoundError("Product not found.")
        return updated
