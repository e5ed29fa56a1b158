"""
Basket data holders.

Product is compared by identity, not by value: two products with the
same price are still two different products in a basket.
"""

from dataclasses import dataclass, field
from decimal import Decimal


@dataclass(eq=False)
class Product:
    """A product with a price."""
    price: Decimal = field(default_factory=lambda: Decimal("0"))


@dataclass(frozen=True)
class ProductAddedEvent:
    """Notification payload raised after a product lands in a basket."""
    product: Product
