"""
Inventory Service for the materials library.

Derives stock health, restocks library materials and checks whether the
library holds enough material to make a batch of a product.

Library records are never modified in place; functions that change a
material return an updated copy for the owning application to store.
"""

import logging
from dataclasses import dataclass, replace
from datetime import date
from typing import Dict, Iterable, List, Optional

from priceme.models.enums import Attribution, StockStatus
from priceme.models.library_material import LibraryMaterial
from priceme.models.material_line import ExactQuantity, MaterialLine, PercentageOfStock
from priceme.models.product import Product
from priceme.utils.config import get_config
from priceme.utils.constants import ERROR_INVALID_POSITIVE
from priceme.utils.validators import parse_numeric_or_zero

from .cost_aggregator import effective_batch_size, effective_units_produced
from .exceptions import MaterialNotFound, ValidationError
from .logging_utils import get_service_logger, log_operation


logger = get_service_logger(__name__)


@dataclass
class StockIssue:
    """Material that is short for a planned batch."""

    material: str
    current_stock: float
    required: float
    shortfall: float  # required - current_stock
    unit: str


# =============================================================================
# Stock Health
# =============================================================================


def is_low_stock(material: LibraryMaterial) -> bool:
    """
    Check if a material is at or below its reorder point.

    Args:
        material: Library material

    Returns:
        True when stock_level <= reorder_point
    """
    stock = parse_numeric_or_zero(material.stock_level)
    reorder_point = parse_numeric_or_zero(material.reorder_point)
    return stock <= reorder_point


def stock_status(material: LibraryMaterial, warning_ratio: Optional[float] = None) -> StockStatus:
    """
    Classify a material's stock relative to its reorder point.

    Args:
        material: Library material
        warning_ratio: Multiple of the reorder point below which stock is a
                       warning (default: configured stock_warning_ratio)

    Returns:
        CRITICAL at or below the reorder point, WARNING below
        warning_ratio x reorder point, otherwise OK
    """
    if warning_ratio is None:
        warning_ratio = get_config().stock_warning_ratio

    if is_low_stock(material):
        return StockStatus.CRITICAL

    reorder_point = parse_numeric_or_zero(material.reorder_point)
    if reorder_point <= 0:
        return StockStatus.OK

    ratio = parse_numeric_or_zero(material.stock_level) / reorder_point
    if ratio < warning_ratio:
        return StockStatus.WARNING
    return StockStatus.OK


def low_stock_materials(materials: Iterable[LibraryMaterial]) -> List[LibraryMaterial]:
    """Return the materials at or below their reorder point, preserving order."""
    return [material for material in materials if is_low_stock(material)]


# =============================================================================
# Restocking
# =============================================================================


def add_stock(
    material: LibraryMaterial,
    quantity,
    price_per_unit=None,
    purchased_on: Optional[date] = None,
) -> LibraryMaterial:
    """
    Record a purchase of more material.

    Stock and total quantity grow by the purchased quantity, and the total
    investment grows by quantity x price. The price used is the new price
    when one is given, otherwise the material's current price per unit. A
    new price replaces the current price per unit.

    Args:
        material: Library material being restocked
        quantity: Quantity purchased (> 0)
        price_per_unit: Price paid per unit, if known
        purchased_on: Purchase date (default: today)

    Returns:
        Updated copy of the material

    Raises:
        ValidationError: If quantity is not positive
    """
    added = parse_numeric_or_zero(quantity)
    if added <= 0:
        raise ValidationError([f"Quantity: {ERROR_INVALID_POSITIVE}"])

    new_price = parse_numeric_or_zero(price_per_unit)
    current_price = parse_numeric_or_zero(material.price_per_unit)
    price_used = new_price if new_price > 0 else current_price

    updates = {
        "quantity": parse_numeric_or_zero(material.quantity) + added,
        "stock_level": parse_numeric_or_zero(material.stock_level) + added,
        "price": parse_numeric_or_zero(material.price) + added * price_used,
        "last_purchased_date": purchased_on or date.today(),
        "last_purchased_price": price_used,
        "last_purchased_quantity": added,
    }
    if new_price > 0 and new_price != current_price:
        updates["price_per_unit"] = new_price

    log_operation(
        logger,
        operation="add_stock",
        outcome="success",
        material_id=material.id,
        added_quantity=added,
        new_stock_level=updates["stock_level"],
    )
    return replace(material, **updates)


# =============================================================================
# Library Lookups
# =============================================================================


def _index_library(library: Iterable[LibraryMaterial]) -> Dict[int, LibraryMaterial]:
    return {material.id: material for material in library if material.id is not None}


def get_library_material(library: Iterable[LibraryMaterial], material_id: int) -> LibraryMaterial:
    """
    Find a library material by ID.

    Args:
        library: Library materials to search
        material_id: ID to look for

    Returns:
        The matching LibraryMaterial

    Raises:
        MaterialNotFound: If no material has that ID
    """
    material = _index_library(library).get(material_id)
    if material is None:
        raise MaterialNotFound(material_id)
    return material


def link_stock_levels(
    materials: Iterable[MaterialLine], library: Iterable[LibraryMaterial]
) -> List[MaterialLine]:
    """
    Copy current library stock into percentage-of-stock material lines.

    Lines that are exact-quantity, unlinked, or linked to a missing library
    material are returned unchanged.

    Args:
        materials: Product material lines
        library: Library materials

    Returns:
        New list of material lines
    """
    by_id = _index_library(library)
    linked: List[MaterialLine] = []

    for line in materials:
        spec = line.quantity_mode
        source = by_id.get(line.library_material_id)
        if isinstance(spec, PercentageOfStock) and source is not None:
            spec = replace(spec, stock_level=parse_numeric_or_zero(source.stock_level))
            line = replace(line, quantity_mode=spec)
        linked.append(line)

    return linked


# =============================================================================
# Batch Stock Check
# =============================================================================


def required_quantity_for_batch(line: MaterialLine, batch_size) -> float:
    """
    Quantity of material one batch of the product consumes.

    Args:
        line: Material line
        batch_size: Finished units per batch

    Returns:
        Quantity in the line's unit
    """
    size = effective_batch_size(batch_size)
    spec = line.quantity_mode

    if isinstance(spec, PercentageOfStock):
        consumed = parse_numeric_or_zero(spec.stock_level) * (
            parse_numeric_or_zero(spec.percentage) / 100.0
        )
        if line.attribution == Attribution.PER_BATCH:
            return consumed
        return consumed * size / effective_units_produced(spec.units_produced)

    if isinstance(spec, ExactQuantity):
        quantity = parse_numeric_or_zero(spec.quantity)
        return quantity * size / effective_units_produced(spec.units_produced)

    return 0.0


def check_stock_for_batch(
    product: Product, library: Iterable[LibraryMaterial]
) -> List[StockIssue]:
    """
    List the linked materials that are short for one batch of a product.

    Only lines linked to the library are checked. A line whose library
    material no longer exists is reported with no stock.

    Args:
        product: Product to make
        library: Library materials

    Returns:
        StockIssue per short material (empty when the batch can be made)
    """
    library = list(library)
    issues: List[StockIssue] = []

    for line in link_stock_levels(product.materials, library):
        if line.library_material_id is None:
            continue

        required = required_quantity_for_batch(line, product.batch_size)
        try:
            source = get_library_material(library, line.library_material_id)
            current_stock = parse_numeric_or_zero(source.stock_level)
        except MaterialNotFound as e:
            logger.warning(f"Stock check for '{line.name}': {e}")
            current_stock = 0.0

        if current_stock < required:
            issues.append(
                StockIssue(
                    material=line.name,
                    current_stock=current_stock,
                    required=required,
                    shortfall=required - current_stock,
                    unit=line.unit,
                )
            )

    if issues:
        log_operation(
            logger,
            operation="check_stock_for_batch",
            outcome="insufficient_stock",
            level=logging.WARNING,
            product_id=product.id,
            missing_materials=[issue.material for issue in issues],
        )
    return issues
