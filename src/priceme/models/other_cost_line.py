"""
OtherCostLine model for miscellaneous product costs (shipping, fees...).
"""

from dataclasses import dataclass

from .enums import Attribution


@dataclass(frozen=True)
class OtherCostLine:
    """
    One miscellaneous cost.

    Attributes:
        item: Description of the cost
        quantity: Number of items (> 0)
        unit_cost: Currency per item (>= 0)
        attribution: Per finished unit, or once per batch
    """

    item: str
    quantity: float
    unit_cost: float
    attribution: Attribution = Attribution.PER_UNIT

    @property
    def is_per_batch(self) -> bool:
        """Check if the cost is incurred once per batch."""
        return self.attribution == Attribution.PER_BATCH
