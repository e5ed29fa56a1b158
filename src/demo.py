"""
Demo - Run a real basket through the interface-based manager.

Usage:
    python -m src.demo
    LOG_LEVEL=DEBUG python -m src.demo
"""

import logging
from decimal import Decimal

from config import settings
from src.basket import Basket
from src.basket_manager import BasketManagerWithInterface
from src.models import Product, ProductAddedEvent

logger = logging.getLogger(__name__)


class LoggingBasketManager(BasketManagerWithInterface):
    """Manager that logs every product the basket reports."""

    def on_product_added(self, sender, event: ProductAddedEvent) -> None:
        logger.info(f"Product added: price={event.product.price}")


def main() -> Decimal:
    logging.basicConfig(
        level=getattr(logging, settings.log_level),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    basket = Basket()
    with LoggingBasketManager(basket) as manager:
        manager.add_product(Product(price=Decimal("5")))
        manager.add_product(Product(price=Decimal("3")))
        total = manager.get_total_price()

    logger.info(
        f"Basket total: {total} "
        f"({len(basket.products)} products + {manager.surcharge} surcharge)"
    )
    return total


if __name__ == "__main__":
    main()
