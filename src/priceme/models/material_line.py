"""
MaterialLine model for materials consumed by a product.

A material line states how much of one material goes into a product and at
what price. The quantity is given in one of two modes:

- ExactQuantity: a fixed quantity of material yields `units_produced`
  finished units (e.g. 100 g of wax makes 10 candles).
- PercentageOfStock: a percentage of the linked library material's current
  stock level is consumed, either per finished unit or once per batch.
"""

from dataclasses import dataclass
from typing import Optional, Union

from .enums import Attribution, QuantityMode


@dataclass(frozen=True)
class ExactQuantity:
    """
    Exact quantity of material.

    Attributes:
        quantity: Amount of material in the line's unit (> 0)
        units_produced: Finished units this quantity yields (>= 1)
    """

    quantity: float
    units_produced: float = 1


@dataclass(frozen=True)
class PercentageOfStock:
    """
    Percentage of a library material's current stock.

    Attributes:
        percentage: Share of the stock consumed, 0-100
        stock_level: Current stock of the linked library material. None when
                     the material is not linked to the library yet.
        units_produced: Finished units the consumed amount yields. Only
                        meaningful for per-unit attribution.
    """

    percentage: float
    stock_level: Optional[float] = None
    units_produced: float = 1


QuantitySpec = Union[ExactQuantity, PercentageOfStock]


@dataclass(frozen=True)
class MaterialLine:
    """
    One material used by a product.

    Attributes:
        name: Material name
        unit: Unit of measurement (opaque to the calculations)
        price_per_unit: Currency per one `unit` of material (>= 0)
        quantity_mode: ExactQuantity or PercentageOfStock
        attribution: Per-unit or per-batch consumption. Exact-quantity lines
                     express their yield through units_produced instead.
        library_material_id: ID of the linked LibraryMaterial, if any
    """

    name: str
    unit: str
    price_per_unit: float
    quantity_mode: QuantitySpec
    attribution: Attribution = Attribution.PER_UNIT
    library_material_id: Optional[int] = None

    @property
    def mode(self) -> QuantityMode:
        """Quantity mode of this line."""
        if isinstance(self.quantity_mode, PercentageOfStock):
            return QuantityMode.PERCENTAGE
        return QuantityMode.EXACT

    @property
    def is_per_batch(self) -> bool:
        """Check if the line is consumed once per batch."""
        return self.attribution == Attribution.PER_BATCH

    def __repr__(self) -> str:
        """String representation of material line."""
        return f"MaterialLine(name='{self.name}', mode='{self.mode.value}')"
