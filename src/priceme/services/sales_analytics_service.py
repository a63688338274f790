"""
Sales Analytics Service for products on sale.

Aggregates revenue, cost and profit over a set of products given how many
units of each were sold. Sold counts are supplied by the caller, keyed by
product ID; products without an entry count as 0 sold.

Cost basis:
- COGS (default): units sold x unit cost
- Full investment: units made (batch size) x unit cost
"""

from dataclasses import dataclass
from typing import Dict, Iterable, Optional

from priceme.models.product import Product
from priceme.utils.validators import parse_numeric_or_zero

from .product_pricing_service import calculate_product_pricing


@dataclass
class SalesSummary:
    """Totals across a set of products."""

    total_revenue: float
    total_investment: float
    total_cost: float  # investment or COGS, per use_full_investment
    total_profit: float
    total_sold: float
    total_made: float
    average_margin: float
    revenue_goal_progress: Optional[float]  # percentage of the goal reached


def units_sold(product: Product, quantities_sold: Dict[int, float]) -> float:
    """Units sold for a product (0 when not recorded)."""
    return parse_numeric_or_zero(quantities_sold.get(product.id))


def units_remaining(product: Product, sold) -> float:
    """Units of the batch not sold yet (batch size - sold)."""
    return parse_numeric_or_zero(product.batch_size) - parse_numeric_or_zero(sold)


def summarize_sales(
    products: Iterable[Product],
    quantities_sold: Dict[int, float],
    use_full_investment: bool = False,
    revenue_goal: Optional[float] = None,
) -> SalesSummary:
    """
    Summarise sales across products.

    Args:
        products: Products to include (typically the ones on sale)
        quantities_sold: Units sold keyed by product ID
        use_full_investment: Count the whole batch as cost instead of the
                             units sold
        revenue_goal: Optional revenue target to measure progress against

    Returns:
        SalesSummary with totals, average margin and goal progress
    """
    total_revenue = 0.0
    total_investment = 0.0
    total_cogs = 0.0
    total_sold = 0.0
    total_made = 0.0

    for product in products:
        snapshot = calculate_product_pricing(product)
        sold = units_sold(product, quantities_sold)
        made = parse_numeric_or_zero(product.batch_size)

        total_revenue += sold * snapshot.target_price
        total_investment += made * snapshot.product_cost
        total_cogs += sold * snapshot.product_cost
        total_sold += sold
        total_made += made

    total_cost = total_investment if use_full_investment else total_cogs
    total_profit = total_revenue - total_cost
    average_margin = (total_profit / total_revenue) * 100.0 if total_revenue > 0 else 0.0

    goal = parse_numeric_or_zero(revenue_goal)
    goal_progress = (total_revenue / goal) * 100.0 if goal > 0 else None

    return SalesSummary(
        total_revenue=total_revenue,
        total_investment=total_investment,
        total_cost=total_cost,
        total_profit=total_profit,
        total_sold=total_sold,
        total_made=total_made,
        average_margin=average_margin,
        revenue_goal_progress=goal_progress,
    )
