from __future__ import annotations
from .models import AttributeDimension, Brand, ColorOption, Product, Workspace


def sample_workspace() -> Workspace:
    return Workspace(
        products=[
            Product(id=9001, name="Men T-shirt", sku="TSHIRT-001"),
            Product(id=9002, name="Ladies Bag", sku="BAG-001"),
            Product(id=9003, name="Sandal", sku="SANDAL-001"),
        ],
        brands=[
            Brand(id=1, name="No Brand", active=True, priority=1),
            Brand(id=2, name="Nike", active=True, priority=3),
            Brand(id=3, name="Adidas", active=True, priority=2),
        ],
        colors=[
            ColorOption(id=1, name="Red", hex="#EF4444", active=True, priority=1),
            ColorOption(id=2, name="Black", hex="#111827", active=True, priority=3),
            ColorOption(id=3, name="White", hex="#F9FAFB", active=True, priority=2),
        ],
        attributes=[
            AttributeDimension(
                id=101, name="Size", type="size", required=True, active=True,
                priority="High", values=["XS", "S", "M", "L", "XL"],
            ),
            AttributeDimension(
                id=102, name="Material", type="material", required=False, active=True,
                priority="Normal", values=["Cotton", "Polyester", "Leather"],
            ),
        ],
    )
