"""
Cost aggregation for products.

Converts a product's material, labor and other-cost lines into the cost of
one finished unit.

Attribution rules:
- Per-unit labor and other costs count in full for every unit.
- Per-batch labor and other costs are shared across the batch.
- Exact-quantity materials are divided by the units the quantity yields.
- Percentage-of-stock materials consume a share of the linked stock level,
  per unit (divided by units produced) or per batch (divided by batch size).
  Per-batch percentage lines always yield 1, whatever units_produced says.

Nothing here raises: missing or malformed numbers count as 0, batch sizes
and yields below 1 are floored to 1, and no rounding is applied.
"""

import logging
from typing import Iterable, Optional

from priceme.models.enums import Attribution
from priceme.models.labor_line import LaborLine
from priceme.models.material_line import ExactQuantity, MaterialLine, PercentageOfStock
from priceme.models.other_cost_line import OtherCostLine
from priceme.utils.constants import MIN_BATCH_SIZE
from priceme.utils.validators import parse_numeric_or_zero

from .dto import CostBreakdown


logger = logging.getLogger(__name__)

MINUTES_PER_HOUR = 60.0


# ============================================================================
# Guards
# ============================================================================


def effective_batch_size(batch_size) -> float:
    """
    Apply the batch size floor.

    Args:
        batch_size: Batch size as supplied by the caller

    Returns:
        The batch size, or 1 when it is missing, malformed or below 1

    Examples:
        >>> effective_batch_size(12)
        12.0
        >>> effective_batch_size(0)
        1.0
    """
    size = parse_numeric_or_zero(batch_size)
    if size < MIN_BATCH_SIZE:
        logger.debug(f"Batch size {batch_size!r} below {MIN_BATCH_SIZE}; using {MIN_BATCH_SIZE}")
        return float(MIN_BATCH_SIZE)
    return size


def effective_units_produced(units_produced) -> float:
    """Units produced, floored to 1 so it can be divided by."""
    units = parse_numeric_or_zero(units_produced)
    if units <= 0:
        return 1.0
    return units


def _is_per_batch(attribution) -> bool:
    return attribution == Attribution.PER_BATCH


# ============================================================================
# Per-Line Costs
# ============================================================================


def material_line_cost(line: MaterialLine, batch_size) -> float:
    """
    Cost one material line contributes to a single unit.

    Args:
        line: Material line
        batch_size: Product batch size (used by per-batch percentage lines)

    Returns:
        Cost per finished unit

    Examples:
        >>> line = MaterialLine("Wax", "g", 0.05, ExactQuantity(100, 10))
        >>> material_line_cost(line, 5)
        0.5
    """
    price_per_unit = parse_numeric_or_zero(line.price_per_unit)
    spec = line.quantity_mode

    if isinstance(spec, PercentageOfStock):
        if spec.stock_level is None:
            logger.debug(f"Material '{line.name}' has no linked stock level; costing it at 0")
        consumed = parse_numeric_or_zero(spec.stock_level) * (
            parse_numeric_or_zero(spec.percentage) / 100.0
        )
        if _is_per_batch(line.attribution):
            return (consumed * price_per_unit) / effective_batch_size(batch_size)
        return (consumed * price_per_unit) / effective_units_produced(spec.units_produced)

    if isinstance(spec, ExactQuantity):
        quantity = parse_numeric_or_zero(spec.quantity)
        return (quantity * price_per_unit) / effective_units_produced(spec.units_produced)

    logger.debug(f"Material '{line.name}' has no quantity; costing it at 0")
    return 0.0


def labor_line_cost(line: LaborLine, batch_size) -> float:
    """
    Cost one labor line contributes to a single unit.

    Args:
        line: Labor line
        batch_size: Product batch size

    Returns:
        Cost per finished unit (minutes / 60 x hourly rate, shared across the
        batch when per-batch)
    """
    raw_cost = (
        parse_numeric_or_zero(line.time_minutes) / MINUTES_PER_HOUR
    ) * parse_numeric_or_zero(line.hourly_rate)
    if _is_per_batch(line.attribution):
        return raw_cost / effective_batch_size(batch_size)
    return raw_cost


def other_cost_line_cost(line: OtherCostLine, batch_size) -> float:
    """
    Cost one miscellaneous line contributes to a single unit.

    Args:
        line: Other-cost line
        batch_size: Product batch size

    Returns:
        Cost per finished unit (quantity x unit cost, shared across the batch
        when per-batch)
    """
    raw_cost = parse_numeric_or_zero(line.quantity) * parse_numeric_or_zero(line.unit_cost)
    if _is_per_batch(line.attribution):
        return raw_cost / effective_batch_size(batch_size)
    return raw_cost


# ============================================================================
# Totals
# ============================================================================


def compute_cost_breakdown(
    batch_size,
    materials: Optional[Iterable[MaterialLine]] = None,
    labor: Optional[Iterable[LaborLine]] = None,
    other_costs: Optional[Iterable[OtherCostLine]] = None,
) -> CostBreakdown:
    """
    Compute the per-unit cost of a product split by line type.

    Args:
        batch_size: Finished units per production run
        materials: Material lines (None treated as empty)
        labor: Labor lines (None treated as empty)
        other_costs: Other-cost lines (None treated as empty)

    Returns:
        CostBreakdown with materials, labor and other totals and their sum
    """
    materials_cost = sum(
        (material_line_cost(line, batch_size) for line in materials or []), 0.0
    )
    labor_cost = sum((labor_line_cost(line, batch_size) for line in labor or []), 0.0)
    other_cost = sum(
        (other_cost_line_cost(line, batch_size) for line in other_costs or []), 0.0
    )

    return CostBreakdown(
        materials_cost=materials_cost,
        labor_cost=labor_cost,
        other_cost=other_cost,
        unit_cost=materials_cost + labor_cost + other_cost,
        batch_size=effective_batch_size(batch_size),
    )


def compute_unit_cost(
    batch_size,
    materials: Optional[Iterable[MaterialLine]] = None,
    labor: Optional[Iterable[LaborLine]] = None,
    other_costs: Optional[Iterable[OtherCostLine]] = None,
) -> float:
    """
    Compute the total cost of a single finished unit.

    Args:
        batch_size: Finished units per production run
        materials: Material lines
        labor: Labor lines
        other_costs: Other-cost lines

    Returns:
        Sum of every line's per-unit cost

    Examples:
        >>> compute_unit_cost(
        ...     5,
        ...     materials=[MaterialLine("Wax", "g", 0.05, ExactQuantity(100, 10))],
        ...     labor=[LaborLine("Pouring", 30, 20)],
        ... )
        10.5
    """
    return compute_cost_breakdown(batch_size, materials, labor, other_costs).unit_cost
