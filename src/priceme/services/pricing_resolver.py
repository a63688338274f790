"""
Price resolution for products.

Any one of price, markup %, profit or margin % can drive a product's price.
Resolution happens in two steps:

1. The driving value is turned into a price with the method's formula:
   - markup: price = cost x (1 + markup / 100)
   - price:  price = value
   - profit: price = cost + profit
   - margin: price = cost / (1 - margin / 100), or 0 when margin >= 100
2. Profit, margin and markup are derived from that price and the cost the
   same way for every method.

Because each step-1 formula inverts the matching step-2 definition,
re-entering a product's margin, markup or profit under its own method gives
back the same price. driving_value_for_method() computes those values.

Nothing here raises; division guards return 0 instead of inf/NaN.
"""

import logging
from typing import Optional, Union

from priceme.models.enums import PricingMethod
from priceme.utils.constants import MARGIN_GUARD_PERCENTAGE
from priceme.utils.validators import parse_numeric_or_zero

from .dto import PricingResult


logger = logging.getLogger(__name__)

MethodLike = Union[PricingMethod, str]


def _coerce_method(method: MethodLike) -> Optional[PricingMethod]:
    """Resolve a method name to a PricingMethod, or None if unknown."""
    try:
        return PricingMethod(method)
    except ValueError:
        logger.warning(f"Unknown pricing method {method!r}; pricing at cost")
        return None


# ============================================================================
# Step 1: Driving Value -> Price
# ============================================================================


def price_from_method(method: MethodLike, driving_value, unit_cost) -> float:
    """
    Compute the price implied by a pricing method and its value.

    Args:
        method: Pricing method (enum member or its string value)
        driving_value: Value entered under the method
        unit_cost: Cost per unit

    Returns:
        Price per unit. Unknown methods price at cost; margins of 100% or
        more return 0.

    Examples:
        >>> price_from_method("markup", 50, 10)
        15.0
        >>> price_from_method("margin", 20, 10)
        12.5
    """
    value = parse_numeric_or_zero(driving_value)
    cost = parse_numeric_or_zero(unit_cost)
    resolved = _coerce_method(method)

    if resolved == PricingMethod.MARKUP:
        return cost * (1 + value / 100.0)
    if resolved == PricingMethod.PRICE:
        return value
    if resolved == PricingMethod.PROFIT:
        return cost + value
    if resolved == PricingMethod.MARGIN:
        if value >= MARGIN_GUARD_PERCENTAGE:
            logger.debug(f"Margin {value}% has no finite price; returning 0")
            return 0.0
        return cost / (1 - value / 100.0)
    return cost


# ============================================================================
# Step 2: Price -> Profit, Margin, Markup
# ============================================================================


def metrics_from_price(price, unit_cost) -> PricingResult:
    """
    Derive profit, margin and markup from a price and a cost.

    Args:
        price: Price per unit
        unit_cost: Cost per unit

    Returns:
        PricingResult; margin is 0 when price <= 0 and markup is 0 when
        cost <= 0
    """
    price = parse_numeric_or_zero(price)
    cost = parse_numeric_or_zero(unit_cost)

    profit = price - cost
    margin = (profit / price) * 100.0 if price > 0 else 0.0
    markup = (profit / cost) * 100.0 if cost > 0 else 0.0

    return PricingResult(price=price, profit=profit, margin=margin, markup=markup)


def resolve_pricing(method: MethodLike, driving_value, unit_cost) -> PricingResult:
    """
    Resolve price, profit, margin and markup from one driving value.

    Args:
        method: Pricing method (markup, price, profit or margin)
        driving_value: Value entered under the method
        unit_cost: Cost per unit

    Returns:
        PricingResult consistent with the driving value

    Examples:
        >>> resolve_pricing("margin", 20, 10)
        PricingResult(price=12.5, profit=2.5, margin=20.0, markup=25.0)
    """
    price = price_from_method(method, driving_value, unit_cost)
    return metrics_from_price(price, unit_cost)


# ============================================================================
# Inverse: Price -> Driving Value
# ============================================================================


def driving_value_for_method(method: MethodLike, price, unit_cost) -> float:
    """
    Compute the value that reproduces a price under a pricing method.

    Used when the user switches an already-priced product to another method.

    Args:
        method: Pricing method to express the price in
        price: Current price per unit
        unit_cost: Cost per unit

    Returns:
        Markup %, price, profit or margin % matching the price. Unknown
        methods return the price.

    Examples:
        >>> driving_value_for_method("markup", 15, 10)
        50.0
        >>> driving_value_for_method("profit", 15, 10)
        5.0
    """
    price = parse_numeric_or_zero(price)
    cost = parse_numeric_or_zero(unit_cost)
    resolved = _coerce_method(method)

    if resolved == PricingMethod.MARKUP:
        return ((price - cost) / cost) * 100.0 if cost > 0 else 0.0
    if resolved == PricingMethod.PROFIT:
        return price - cost
    if resolved == PricingMethod.MARGIN:
        return ((price - cost) / price) * 100.0 if price > 0 else 0.0
    return price


# ============================================================================
# Helpers
# ============================================================================


def break_even_price(unit_cost) -> float:
    """
    Lowest price that does not lose money.

    Examples:
        >>> break_even_price(7.5)
        7.5
        >>> break_even_price(-1)
        0.0
    """
    return max(0.0, parse_numeric_or_zero(unit_cost))


def margin_from_markup(markup) -> float:
    """
    Convert a markup percentage to the equivalent margin percentage.

    margin = markup / (1 + markup / 100)

    Examples:
        >>> margin_from_markup(25)
        20.0
    """
    markup = parse_numeric_or_zero(markup)
    denominator = 1 + markup / 100.0
    if denominator == 0:
        return 0.0
    return markup / denominator


def markup_from_margin(margin) -> float:
    """
    Convert a margin percentage to the equivalent markup percentage.

    markup = margin / (1 - margin / 100); margins of 100% or more return 0.

    Examples:
        >>> markup_from_margin(20)
        25.0
    """
    margin = parse_numeric_or_zero(margin)
    if margin >= MARGIN_GUARD_PERCENTAGE:
        return 0.0
    return margin / (1 - margin / 100.0)
