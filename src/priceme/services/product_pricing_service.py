"""
Product Pricing Service.

The single entry point the product CRUD layer uses to price a product.
Every call recomputes from the product's current lines, batch size and
pricing method; nothing is cached or updated incrementally.

Usage:
    snapshot = calculate_product_pricing(product)
    record.update(snapshot.to_dict())
"""

import logging
from dataclasses import replace

from priceme.models.enums import PricingMethod
from priceme.models.product import Product
from priceme.utils.validators import validate_choice

from .cost_aggregator import compute_cost_breakdown
from .dto import BatchSummary, CostBreakdown, ProductPricingSnapshot
from .exceptions import ValidationError
from .logging_utils import get_service_logger, log_operation
from .pricing_resolver import MethodLike, driving_value_for_method, resolve_pricing


logger = get_service_logger(__name__)


def _coerce_method(method: MethodLike) -> PricingMethod:
    """Resolve a pricing method name, raising ValidationError when it is unknown."""
    is_valid, message = validate_choice(method, PricingMethod, "Pricing method")
    if not is_valid:
        raise ValidationError([message])
    return PricingMethod(method)


def calculate_cost_breakdown(product: Product) -> CostBreakdown:
    """
    Compute the per-unit cost breakdown of a product.

    Args:
        product: Product to cost

    Returns:
        CostBreakdown for the product's lines and batch size
    """
    return compute_cost_breakdown(
        product.batch_size,
        product.materials,
        product.labor,
        product.other_costs,
    )


def _snapshot_from(unit_cost: float, method: MethodLike, value) -> ProductPricingSnapshot:
    result = resolve_pricing(method, value, unit_cost)
    costs_percentage = (unit_cost / result.price) * 100.0 if result.price > 0 else None
    return ProductPricingSnapshot(
        product_cost=unit_cost,
        target_price=result.price,
        profit=result.profit,
        profit_margin=result.margin,
        markup=result.markup,
        costs_percentage=costs_percentage,
    )


def calculate_product_pricing(product: Product) -> ProductPricingSnapshot:
    """
    Recompute cost, price, profit, margin and markup for a product.

    Args:
        product: Product with its cost lines and pricing method/value

    Returns:
        ProductPricingSnapshot with the derived figures

    Example:
        >>> product = Product(
        ...     name="Candle",
        ...     labor=[LaborLine("Pouring", 30, 20)],
        ...     pricing_method=PricingMethod.MARKUP,
        ...     pricing_value=50,
        ... )
        >>> calculate_product_pricing(product).target_price
        15.0
    """
    breakdown = calculate_cost_breakdown(product)
    snapshot = _snapshot_from(breakdown.unit_cost, product.pricing_method, product.pricing_value)

    log_operation(
        logger,
        operation="calculate_product_pricing",
        outcome="success",
        level=logging.DEBUG,
        product_id=product.id,
        product_cost=snapshot.product_cost,
        target_price=snapshot.target_price,
    )
    return snapshot


def set_pricing(product: Product, method: MethodLike, value) -> Product:
    """
    Return a copy of a product priced with a new method and value.

    Args:
        product: Product to reprice
        method: New pricing method
        value: Value under the new method

    Returns:
        New Product; the original is unchanged

    Raises:
        ValidationError: If the method is unknown
    """
    return replace(product, pricing_method=_coerce_method(method), pricing_value=value)


def switch_pricing_method(product: Product, new_method: MethodLike) -> Product:
    """
    Change a product's pricing method without changing its price.

    The current target price is re-expressed under the new method, so
    pricing the returned product gives back the same price.

    Args:
        product: Already-priced product
        new_method: Method to switch to

    Returns:
        New Product with pricing_method=new_method and the matching value

    Raises:
        ValidationError: If the method is unknown
    """
    new_method = _coerce_method(new_method)
    snapshot = calculate_product_pricing(product)
    value = driving_value_for_method(new_method, snapshot.target_price, snapshot.product_cost)

    log_operation(
        logger,
        operation="switch_pricing_method",
        outcome="success",
        level=logging.DEBUG,
        product_id=product.id,
        from_method=product.pricing_method,
        to_method=new_method.value,
        pricing_value=value,
    )
    return replace(product, pricing_method=new_method, pricing_value=value)


def calculate_batch_summary(product: Product) -> BatchSummary:
    """
    Compute costs and earnings for one full production run.

    Args:
        product: Product to summarise

    Returns:
        BatchSummary with per-unit figures and batch totals at target price
    """
    breakdown = calculate_cost_breakdown(product)
    pricing = _snapshot_from(breakdown.unit_cost, product.pricing_method, product.pricing_value)

    batch_cost = breakdown.batch_cost
    batch_revenue = pricing.target_price * breakdown.batch_size

    return BatchSummary(
        breakdown=breakdown,
        pricing=pricing,
        batch_cost=batch_cost,
        batch_revenue=batch_revenue,
        batch_profit=batch_revenue - batch_cost,
    )
