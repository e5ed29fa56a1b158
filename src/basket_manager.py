"""
Basket Managers - Services that front a basket.

Two variants:
    BasketManager: forwards to a concrete Basket, nothing else.
    BasketManagerWithInterface: works against any BasketLike, adds a fixed
        surcharge to the total, listens for added products and translates
        basket failures into ProductAddError.

Usage:
    with BasketManagerWithInterface(Basket()) as manager:
        manager.add_product(Product(price=Decimal("5")))
        manager.get_total_price()  # Decimal("7.00")
"""

import logging
from decimal import Decimal
from typing import Any, Optional

from config import settings
from src.basket import Basket, BasketLike
from src.models import Product, ProductAddedEvent

logger = logging.getLogger(__name__)


class ProductAddError(Exception):
    """Raised when the basket fails to add a product."""

    def __init__(self):
        super().__init__("Fatal error while adding product to basket")


class BasketManager:
    """Forwards product additions to a concrete basket."""

    def __init__(self, basket: Basket):
        self._basket = basket

    def add_product(self, product: Optional[Product]) -> None:
        self._basket.add_product(product)


class BasketManagerWithInterface:
    """
    Basket service built against the BasketLike capability.

    The manager subscribes its on_product_added hook to the basket when
    created and unsubscribes on close().
    """

    def __init__(self, basket: BasketLike, surcharge: Optional[Decimal] = None):
        """
        Initialize the manager and subscribe to basket notifications.

        Args:
            basket: Any BasketLike implementation (real or test double).
            surcharge: Fixed amount added to the basket total
                (default: settings.basket_surcharge).
        """
        self._basket = basket
        self.surcharge = (
            Decimal(str(surcharge)) if surcharge is not None
            else settings.basket_surcharge
        )

        self._basket.subscribe(self.on_product_added)
        self._subscribed = True

        logger.info(f"Basket manager initialized: surcharge={self.surcharge}")

    def add_product(self, product: Optional[Product]) -> None:
        """
        Add a product through the basket.

        Raises:
            ProductAddError: If the basket raises anything. The original
                error is logged but neither chained nor set as context.
        """
        failed = False
        try:
            self._basket.add_product(product)
        except Exception as e:
            logger.warning(f"Basket failed to add product, translating error: {e!r}")
            failed = True

        # Raised outside the except block so no __context__ is attached
        if failed:
            raise ProductAddError()

    def get_total_price(self) -> Decimal:
        """Basket total plus the surcharge (applied once per call)."""
        return self._basket.get_total_price() + self.surcharge

    def on_product_added(self, sender: Any, event: ProductAddedEvent) -> None:
        """Hook called by the basket after each add. No-op by default."""

    def close(self) -> None:
        """Stop listening to the basket. Safe to call more than once."""
        if not self._subscribed:
            return

        self._basket.unsubscribe(self.on_product_added)
        self._subscribed = False
        logger.info("Basket manager closed")

    def __enter__(self) -> "BasketManagerWithInterface":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
