"""
Basket - Ordered product collection with add notifications.

BasketLike is the capability a basket substitute must provide so that
managers can be tested against a double instead of a real list-backed
basket.

Usage:
    basket = Basket()
    basket.subscribe(lambda sender, event: print(event.product.price))
    basket.add_product(Product(price=Decimal("4.50")))
    basket.get_total_price()  # Decimal("4.50")
"""

import logging
from abc import ABC, abstractmethod
from decimal import Decimal
from typing import Any, Callable, List, Optional

from src.models import Product, ProductAddedEvent

logger = logging.getLogger(__name__)

# Signature: handler(sender, event)
ProductAddedHandler = Callable[[Any, ProductAddedEvent], None]


class BasketLike(ABC):
    """Operations a basket (or a test double) must implement."""

    @abstractmethod
    def add_product(self, product: Optional[Product]) -> None:
        """Add a product to the basket."""

    @abstractmethod
    def get_total_price(self) -> Decimal:
        """Return the sum of all product prices."""

    @abstractmethod
    def subscribe(self, handler: ProductAddedHandler) -> None:
        """Register a handler called after each added product."""

    @abstractmethod
    def unsubscribe(self, handler: ProductAddedHandler) -> None:
        """Remove a previously registered handler."""


class Basket(BasketLike):
    """
    List-backed basket.

    Products are kept in insertion order and never removed. Nothing is
    validated on add, so None is stored like any other product.
    """

    def __init__(self):
        self.products: List[Optional[Product]] = []
        self._handlers: List[ProductAddedHandler] = []

    def add_product(self, product: Optional[Product]) -> None:
        """
        Append a product and notify subscribers.

        Args:
            product: Product to append.
        """
        self.products.append(product)
        logger.debug(f"Product added to basket ({len(self.products)} total)")

        if not self._handlers:
            return

        event = ProductAddedEvent(product=product)
        for handler in list(self._handlers):
            handler(self, event)

    def get_total_price(self) -> Decimal:
        """Sum of product prices, 0 for an empty basket."""
        return sum((product.price for product in self.products), Decimal("0"))

    def subscribe(self, handler: ProductAddedHandler) -> None:
        self._handlers.append(handler)
        logger.debug(f"Product added handler registered ({len(self._handlers)} active)")

    def unsubscribe(self, handler: ProductAddedHandler) -> None:
        # Unknown handlers are ignored
        if handler in self._handlers:
            self._handlers.remove(handler)
            logger.debug("Product added handler removed")
