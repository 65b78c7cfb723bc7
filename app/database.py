from decimal import Decimal
from typing import List

from .models import Category, Product

# Fixed in-memory catalogue served by /api/products. Nothing writes to it.

PRODUCTS: List[Product] = [
    Product(
        id=1, name="Laptop", price=Decimal("1200.50"), stock=25,
        category=Category(id=1, name="Electronics", description="Electronic devices and gadgets"),
    ),
    Product(
        id=2, name="Headphones", price=Decimal("50.00"), stock=100,
        category=Category(id=2, name="Audio", description="Audio equipment and accessories"),
    ),
    Product(
        id=3, name="Gaming Mouse", price=Decimal("75.99"), stock=45,
        category=Category(id=3, name="Gaming", description="Gaming peripherals and accessories"),
    ),
    Product(
        id=4, name="Office Chair", price=Decimal("299.99"), stock=12,
        category=Category(id=4, name="Furniture", description="Office and home furniture"),
    ),
]
