"""
ProductVariant model for variations of a product (size, colour, scent...).

A variant shares its product's costing and may override the price or the
unit cost.
"""

from dataclasses import dataclass, field
from typing import Dict, Optional


@dataclass(frozen=True)
class ProductVariant:
    """
    One variation of a product.

    Attributes:
        name: Variant name (e.g. "Large / Lavender")
        sku: Optional stock keeping unit
        price_override: Selling price replacing the product's target price
        cost_override: Unit cost replacing the product's computed cost
        stock_level: Finished units in stock
        is_active: Whether the variant is offered
        attributes: Attribute name to value (e.g. {"size": "Large"})
    """

    name: str
    sku: Optional[str] = None
    price_override: Optional[float] = None
    cost_override: Optional[float] = None
    stock_level: int = 0
    is_active: bool = True
    attributes: Dict[str, str] = field(default_factory=dict)
