"""Data Transfer Objects for service layer.

This module provides the result structures returned by the pricing
calculations. All values are plain floats; rounding is applied only when a
DTO is rendered for storage via to_dict().
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional

from .dto_utils import cost_to_string, round_percentage


@dataclass(frozen=True)
class PricingResult:
    """Price, profit, margin and markup for one unit.

    Attributes:
        price: Selling price per unit
        profit: price - unit cost
        margin: Profit as a percentage of price (0 when price <= 0)
        markup: Profit as a percentage of unit cost (0 when cost <= 0)

    Examples:
        >>> PricingResult(price=15.0, profit=5.0, margin=33.33, markup=50.0).price
        15.0
    """

    price: float
    profit: float
    margin: float
    markup: float


@dataclass(frozen=True)
class CostBreakdown:
    """Per-unit cost split by line type.

    Attributes:
        materials_cost: Material cost per unit
        labor_cost: Labor cost per unit
        other_cost: Other costs per unit
        unit_cost: Total cost per unit
        batch_size: Batch size the costs were computed for (after the floor of 1)
    """

    materials_cost: float
    labor_cost: float
    other_cost: float
    unit_cost: float
    batch_size: float

    @property
    def batch_cost(self) -> float:
        """Cost of one full production run."""
        return self.unit_cost * self.batch_size


@dataclass(frozen=True)
class ProductPricingSnapshot:
    """Recomputed pricing figures for a product.

    These are the values the owning application stores alongside the
    product's cost lines.

    Attributes:
        product_cost: Cost per unit
        target_price: Price per unit implied by the pricing method
        profit: Profit per unit
        profit_margin: Margin percentage
        markup: Markup percentage
        costs_percentage: Cost as a percentage of price (None when price <= 0)
    """

    product_cost: float
    target_price: float
    profit: float
    profit_margin: float
    markup: float
    costs_percentage: Optional[float]

    def to_dict(self) -> Dict[str, Any]:
        """
        Render the snapshot for storage.

        Returns:
            Dictionary with money as 2-decimal strings and percentages
            rounded to 2 places.

        Examples:
            >>> snap = ProductPricingSnapshot(10.0, 15.0, 5.0, 33.333, 50.0, 66.667)
            >>> snap.to_dict()["target_price"]
            '15.00'
            >>> snap.to_dict()["profit_margin"]
            33.33
        """
        return {
            "product_cost": cost_to_string(self.product_cost),
            "target_price": cost_to_string(self.target_price),
            "profit": cost_to_string(self.profit),
            "profit_margin": round_percentage(self.profit_margin),
            "markup": round_percentage(self.markup),
            "costs_percentage": round_percentage(self.costs_percentage),
        }


@dataclass(frozen=True)
class BatchSummary:
    """Costs and earnings for one full production run.

    Attributes:
        breakdown: Per-unit cost breakdown
        pricing: Per-unit pricing snapshot
        batch_cost: Cost of the whole batch
        batch_revenue: Revenue when the whole batch sells at target price
        batch_profit: batch_revenue - batch_cost
    """

    breakdown: CostBreakdown
    pricing: ProductPricingSnapshot
    batch_cost: float
    batch_revenue: float
    batch_profit: float
