"""Pytest configuration and fixtures for PriceMe tests."""

import pytest

from priceme.models import (
    Attribution,
    ExactQuantity,
    LaborLine,
    LibraryMaterial,
    MaterialLine,
    OtherCostLine,
    PercentageOfStock,
    PricingMethod,
    Product,
    ProductStatus,
)
from priceme.utils.config import reset_config


@pytest.fixture(autouse=True)
def clean_config(monkeypatch):
    """Give every test a fresh configuration singleton and environment."""
    for var in ("PRICEME_ENV", "PRICEME_LOG_LEVEL", "PRICEME_STOCK_WARNING_RATIO"):
        monkeypatch.delenv(var, raising=False)
    reset_config()
    yield
    reset_config()


@pytest.fixture
def wax_line():
    """100 g of wax at 0.05/g making 10 candles (0.50 per unit)."""
    return MaterialLine(
        name="Wax",
        unit="g",
        price_per_unit=0.05,
        quantity_mode=ExactQuantity(quantity=100, units_produced=10),
    )


@pytest.fixture
def pouring_labor():
    """30 minutes of pouring at 20/hour per unit (10.00 per unit)."""
    return LaborLine(activity="Pouring", time_minutes=30, hourly_rate=20)


@pytest.fixture
def shipping_cost():
    """A 25.00 shipping fee paid once per batch."""
    return OtherCostLine(
        item="Shipping", quantity=1, unit_cost=25, attribution=Attribution.PER_BATCH
    )


@pytest.fixture
def fragrance_library():
    """Library material with 500 ml of fragrance oil in stock."""
    return LibraryMaterial(
        id=7,
        name="Fragrance oil",
        unit="ml",
        price=150.0,
        quantity=500,
        price_per_unit=0.3,
        stock_level=500,
        reorder_point=100,
    )


@pytest.fixture
def fragrance_line():
    """10% of the linked fragrance stock, consumed once per batch."""
    return MaterialLine(
        name="Fragrance oil",
        unit="ml",
        price_per_unit=0.3,
        quantity_mode=PercentageOfStock(percentage=10),
        attribution=Attribution.PER_BATCH,
        library_material_id=7,
    )


@pytest.fixture
def candle(wax_line, pouring_labor):
    """Product costing 10.50 per unit, priced at 50% markup."""
    return Product(
        id=1,
        name="Soy candle",
        batch_size=5,
        materials=[wax_line],
        labor=[pouring_labor],
        pricing_method=PricingMethod.MARKUP,
        pricing_value=50,
        status=ProductStatus.IN_PROGRESS,
    )
