"""Tests for the products blueprint."""

from tests.helpers import OUTSIDER_ID, SUPPLIER_ID, login, product_fields

PRODUCT_FORM = {
    "name": "Fresh Tomatoes",
    "description": "Juicy, ripe tomatoes.",
    "supplier_name": "Fresh Vegetables Co.",
    "price": "30",
    "unit": "per kg",
    "min_order": "5 kg",
    "category": "vegetables",
    "freshness": "Harvested 1 day ago",
    "origin": "Pune, Maharashtra",
    "stock_quantity": "300",
    "in_stock": "true",
    "certifications": "Farm Fresh, Quality Assured",
}


def test_create_product(client, catalog):
    login(client, SUPPLIER_ID)
    response = client.post("/products/create", data=PRODUCT_FORM)
    assert response.status_code == 201  # nosec B101
    product = response.get_json()["product"]
    assert product["supplierId"] == SUPPLIER_ID  # nosec B101
    assert product["certifications"] == [  # nosec B101
        "Farm Fresh",
        "Quality Assured",
    ]
    assert product["images"] == []  # nosec B101
    assert catalog.get(product["id"]) is not None  # nosec B101


def test_create_product_rejects_bad_price(client, catalog):
    login(client, SUPPLIER_ID)
    for price in ("0", "inf", "nan"):
        response = client.post("/products/create", data=dict(PRODUCT_FORM, price=price))
        assert response.status_code == 400  # nosec B101
    assert len(catalog) == 0  # nosec B101


def test_list_and_filter_products(client, catalog):
    catalog.add(product_fields())
    catalog.add(product_fields(category="spices", supplierId="s2"))
    login(client, OUTSIDER_ID)

    assert len(client.get("/products/").get_json()["products"]) == 2  # nosec B101
    data = client.get("/products/?category=spices").get_json()
    assert [p["supplierId"] for p in data["products"]] == ["s2"]  # nosec B101
    data = client.get(f"/products/?supplier={SUPPLIER_ID}").get_json()
    assert len(data["products"]) == 1  # nosec B101

    login(client, SUPPLIER_ID)
    assert len(client.get("/products/mine").get_json()["products"]) == 1  # nosec B101


def test_only_supplier_manages_product(client, catalog):
    product = catalog.add(product_fields())
    login(client, OUTSIDER_ID)
    response = client.post(f"/products/{product.id}/edit", data={"price": "40"})
    assert response.status_code == 403  # nosec B101
    response = client.post(f"/products/{product.id}/delete")
    assert response.status_code == 403  # nosec B101
    assert catalog.get(product.id).price == 25  # nosec B101

    login(client, SUPPLIER_ID)
    response = client.post(
        f"/products/{product.id}/edit", data={"price": "40", "in_stock": "false"}
    )
    assert response.status_code == 200  # nosec B101
    data = response.get_json()["product"]
    assert data["price"] == 40  # nosec B101
    assert data["inStock"] is False  # nosec B101
    assert data["name"] == product.name  # nosec B101

    response = client.post(f"/products/{product.id}/delete")
    assert response.status_code == 200  # nosec B101
    assert catalog.get(product.id) is None  # nosec B101
    assert client.get(f"/products/{product.id}").status_code == 404  # nosec B101


def test_take_stock(client, catalog):
    product = catalog.add(product_fields())
    login(client, SUPPLIER_ID)
    response = client.post(f"/products/{product.id}/stock", data={"quantity": "600"})
    assert response.status_code == 200  # nosec B101
    assert response.get_json()["product"]["stockQuantity"] == 0  # nosec B101

    response = client.post(f"/products/{product.id}/stock", data={"quantity": "-1"})
    assert response.status_code == 400  # nosec B101
