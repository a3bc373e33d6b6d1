"""Demo products seeded into an empty marketplace."""

from .models import Product


def _product(**fields):
    return Product(unit="per kg", in_stock=True, **fields)


def demo_products():
    """Return the sample catalog shown on a fresh install."""
    return [
        _product(
            id="1",
            name="Premium Red Onions",
            description=(
                "Fresh, premium quality red onions sourced from Maharashtra "
                "farms. Perfect for cooking and long storage."
            ),
            price=25.0,
            min_order="10 kg",
            category="vegetables",
            images=["/onions-1.jpg", "/onions-2.jpg"],
            freshness="Harvested 2 days ago",
            origin="Nashik, Maharashtra",
            certifications=["Organic", "Pesticide-free"],
            supplier_id="1",
            supplier_name="Fresh Vegetables Co.",
            stock_quantity=500,
        ),
        _product(
            id="2",
            name="Fresh Tomatoes",
            description=(
                "Juicy, ripe tomatoes perfect for cooking and salads. Grown "
                "using sustainable farming practices."
            ),
            price=30.0,
            min_order="5 kg",
            category="vegetables",
            images=["/fresh-vegetables.png"],
            freshness="Harvested 1 day ago",
            origin="Pune, Maharashtra",
            certifications=["Farm Fresh", "Quality Assured"],
            supplier_id="1",
            supplier_name="Fresh Vegetables Co.",
            stock_quantity=300,
        ),
        _product(
            id="3",
            name="Turmeric Powder",
            description=(
                "Pure turmeric powder with high curcumin content. Perfect for "
                "cooking and health benefits."
            ),
            price=180.0,
            min_order="2 kg",
            category="spices",
            images=["/chilli-turmeric.png"],
            freshness="Ground fresh",
            origin="Erode, Tamil Nadu",
            certifications=["Organic", "FSSAI Approved"],
            supplier_id="2",
            supplier_name="Spice Masters",
            stock_quantity=100,
        ),
        Product(
            id="4",
            name="Sunflower Oil",
            description=(
                "Cold-pressed sunflower oil perfect for cooking and frying. "
                "Rich in vitamin E."
            ),
            price=120.0,
            unit="per L",
            min_order="5 L",
            category="oils",
            images=["/Sunflower.jpg"],
            in_stock=True,
            freshness="Fresh batch",
            origin="Karnataka",
            certifications=["Cold Pressed", "No Preservatives"],
            supplier_id="3",
            supplier_name="Oil & More",
            stock_quantity=200,
        ),
        _product(
            id="5",
            name="Basmati Rice",
            description=(
                "Premium quality basmati rice with long grains and aromatic "
                "fragrance."
            ),
            price=80.0,
            min_order="25 kg",
            category="grains",
            images=["/Rice.jpg"],
            freshness="New harvest",
            origin="Punjab",
            certifications=["Premium Grade", "Export Quality"],
            supplier_id="4",
            supplier_name="Grain Suppliers Ltd.",
            stock_quantity=1000,
        ),
        _product(
            id="6",
            name="Fresh Paneer",
            description=(
                "Fresh homemade paneer made from pure milk. Perfect for "
                "various dishes."
            ),
            price=200.0,
            min_order="1 kg",
            category="dairy",
            images=["/panner-milk.jpg"],
            freshness="Made today",
            origin="Local dairy",
            certifications=["Fresh", "Pure Milk"],
            supplier_id="5",
            supplier_name="Dairy Fresh",
            stock_quantity=50,
        ),
    ]
