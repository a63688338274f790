"""
Variant Service for product variations.

A variant is priced from its product unless it overrides the price or the
unit cost. Overrides of 0 are honoured; only None falls back to the product.
"""

from typing import List

from priceme.models.product import Product
from priceme.models.product_variant import ProductVariant
from priceme.utils.validators import parse_numeric_or_zero

from .dto import PricingResult
from .pricing_resolver import metrics_from_price
from .product_pricing_service import calculate_product_pricing


def effective_variant_cost(variant: ProductVariant, base_cost: float) -> float:
    """Unit cost of a variant: its cost override, else the product cost."""
    if variant.cost_override is None:
        return base_cost
    return parse_numeric_or_zero(variant.cost_override)


def effective_variant_price(variant: ProductVariant, base_price: float) -> float:
    """Price of a variant: its price override, else the product target price."""
    if variant.price_override is None:
        return base_price
    return parse_numeric_or_zero(variant.price_override)


def calculate_variant_pricing(product: Product, variant: ProductVariant) -> PricingResult:
    """
    Compute price, profit, margin and markup for one variant.

    Args:
        product: Product the variant belongs to
        variant: Variant to price

    Returns:
        PricingResult from the variant's effective price and cost
    """
    snapshot = calculate_product_pricing(product)
    cost = effective_variant_cost(variant, snapshot.product_cost)
    price = effective_variant_price(variant, snapshot.target_price)
    return metrics_from_price(price, cost)


def active_variants(product: Product) -> List[ProductVariant]:
    """Return the product's active variants, preserving order."""
    return [variant for variant in product.variants if variant.is_active]


def total_variant_stock(product: Product) -> int:
    """Total finished units in stock across the product's active variants."""
    return sum(int(parse_numeric_or_zero(v.stock_level)) for v in active_variants(product))
