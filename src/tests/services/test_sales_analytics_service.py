"""Tests for sales analytics across products on sale."""

import pytest

from priceme.models import LaborLine, PricingMethod, Product, ProductStatus
from priceme.services.sales_analytics_service import summarize_sales, units_remaining


def _product(id, batch_size, cost_minutes, price):
    return Product(
        id=id,
        name=f"Product {id}",
        batch_size=batch_size,
        labor=[LaborLine("Work", cost_minutes, 60)],
        pricing_method=PricingMethod.PRICE,
        pricing_value=price,
        status=ProductStatus.ON_SALE,
    )


class TestSummarizeSales:
    """Tests for summarize_sales function."""

    def test_cogs_totals(self):
        """Cost counts only the units sold by default."""
        products = [_product(1, 10, 5, 10), _product(2, 4, 10, 30)]
        summary = summarize_sales(products, {1: 6, 2: 4})

        # revenue 6 x 10 + 4 x 30, cost 6 x 5 + 4 x 10
        assert summary.total_revenue == pytest.approx(180.0)
        assert summary.total_cost == pytest.approx(70.0)
        assert summary.total_profit == pytest.approx(110.0)
        assert summary.total_investment == pytest.approx(90.0)
        assert summary.total_sold == 10
        assert summary.total_made == 14
        assert summary.average_margin == pytest.approx(110 / 180 * 100)
        assert summary.revenue_goal_progress is None

    def test_full_investment(self):
        """Full investment counts every unit made as cost."""
        summary = summarize_sales([_product(1, 10, 5, 10)], {1: 6}, use_full_investment=True)
        assert summary.total_cost == pytest.approx(50.0)
        assert summary.total_profit == pytest.approx(10.0)

    def test_revenue_goal_progress(self):
        """Goal progress is revenue as a share of the goal."""
        summary = summarize_sales([_product(1, 10, 5, 10)], {1: 5}, revenue_goal=200)
        assert summary.revenue_goal_progress == pytest.approx(25.0)

    def test_no_sales(self):
        """Products without sales contribute no revenue."""
        summary = summarize_sales([_product(1, 10, 5, 10)], {})
        assert summary.total_revenue == 0.0
        assert summary.average_margin == 0.0

    def test_units_remaining(self):
        """Remaining units are the batch less those sold."""
        assert units_remaining(_product(1, 10, 5, 10), 7) == 3
