"""
Product model for a costed and priced product.

A product owns its cost lines (materials, labor, other costs), its batch size
and the pricing method/value the user chose. Cost, price, profit, margin and
markup are derived from these on demand and are never stored on the record.
"""

from dataclasses import dataclass, field
from typing import List, Optional

from .enums import PricingMethod, ProductStatus
from .labor_line import LaborLine
from .material_line import MaterialLine
from .other_cost_line import OtherCostLine
from .product_variant import ProductVariant


@dataclass(frozen=True)
class Product:
    """
    Product record with the fields the pricing calculations use.

    Attributes:
        name: Product name
        batch_size: Finished units one production run yields (>= 1)
        materials: Material lines
        labor: Labor lines
        other_costs: Miscellaneous cost lines
        pricing_method: Method whose value drives the price
        pricing_value: Value under the pricing method (percentage for
                       markup/margin, currency amount for price/profit)
        status: Lifecycle stage
        sku: Optional stock keeping unit
        description: Optional description
        category: Optional category
        variants: Product variations
        id: Identifier assigned by the owning application
    """

    name: str
    batch_size: int = 1
    materials: List[MaterialLine] = field(default_factory=list)
    labor: List[LaborLine] = field(default_factory=list)
    other_costs: List[OtherCostLine] = field(default_factory=list)
    pricing_method: PricingMethod = PricingMethod.MARKUP
    pricing_value: float = 0.0
    status: ProductStatus = ProductStatus.DRAFT
    sku: Optional[str] = None
    description: Optional[str] = None
    category: Optional[str] = None
    variants: List[ProductVariant] = field(default_factory=list)
    id: Optional[int] = None

    @property
    def line_count(self) -> int:
        """Total number of cost lines."""
        return len(self.materials) + len(self.labor) + len(self.other_costs)

    def __repr__(self) -> str:
        """String representation of product."""
        return f"Product(id={self.id}, name='{self.name}', status='{self.status.value}')"
