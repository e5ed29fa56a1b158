"""
Pytest fixtures and configuration.

This module provides shared fixtures for all tests:
- Mock settings for testing without an environment
- Mock baskets built against the BasketLike capability
- Real baskets and sample products

Usage:
    def test_something(mock_basket, product):
        # fixtures are automatically injected
        pass
"""

from decimal import Decimal
from unittest.mock import MagicMock, create_autospec

import pytest

from src.basket import Basket, BasketLike
from src.models import Product


# =============================================================================
# Pytest Configuration
# =============================================================================

def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers",
        "real: mark test as a real functionality test (not mock-based)"
    )


# =============================================================================
# Settings Fixtures
# =============================================================================

@pytest.fixture
def mock_settings():
    """
    Provide mock settings for testing.

    Returns a MagicMock with all required settings attributes.
    """
    settings = MagicMock()
    settings.basket_surcharge = Decimal("2.00")
    settings.log_level = "INFO"
    return settings


# =============================================================================
# Basket Fixtures
# =============================================================================

@pytest.fixture
def mock_basket():
    """Provide a strict double of the BasketLike capability."""
    basket = create_autospec(BasketLike, instance=True)
    basket.get_total_price.return_value = Decimal("0")
    return basket


@pytest.fixture
def basket():
    """Provide an empty real basket."""
    return Basket()


# =============================================================================
# Data Fixtures
# =============================================================================

@pytest.fixture
def product():
    """Provide a single product."""
    return Product(price=Decimal("44"))


@pytest.fixture
def products():
    """Provide products priced 5 and 3."""
    return [Product(price=Decimal("5")), Product(price=Decimal("3"))]
