"""
Product Form Service.

Turns a submitted product form (a dictionary of raw values) into a Product
record. The form is validated first; numeric fields then pass through
parse_numeric_or_zero so the calculation services only ever see floats.

Form layout:
    {
        "name": "Soy candle",
        "batch_size": 12,
        "pricing_method": "margin",
        "pricing_value": 40,
        "materials": [
            {"name": "Wax", "unit": "g", "price_per_unit": 0.02,
             "quantity_type": "exact", "quantity": 200, "units_made": 1},
            {"name": "Fragrance", "unit": "ml", "price_per_unit": 0.3,
             "quantity_type": "percentage", "quantity_percentage": 10,
             "per_batch": True, "library_material_id": 4},
        ],
        "labor": [{"activity": "Pouring", "time_minutes": 45, "per_batch": True}],
        "other_costs": [{"item": "Label", "quantity": 1, "unit_cost": 0.15}],
    }
"""

from typing import Any, Dict, Optional

from priceme.models.enums import Attribution, PricingMethod, ProductStatus, QuantityMode
from priceme.models.material_line import ExactQuantity, MaterialLine, PercentageOfStock
from priceme.models.other_cost_line import OtherCostLine
from priceme.models.product import Product
from priceme.models.user_settings import UserSettings
from priceme.utils.validators import (
    parse_numeric_or_default,
    parse_numeric_or_zero,
    validate_product_input,
)

from .settings_service import new_labor_line


def _attribution(entry: Dict[str, Any]) -> Attribution:
    return Attribution.PER_BATCH if entry.get("per_batch") else Attribution.PER_UNIT


def material_line_from_form(entry: Dict[str, Any]) -> MaterialLine:
    """
    Build a material line from one form entry.

    Percentage lines consumed per batch always yield 1 unit; any units_made
    on such an entry is ignored.

    Args:
        entry: Material form entry

    Returns:
        MaterialLine
    """
    attribution = _attribution(entry)
    units_made = parse_numeric_or_default(entry.get("units_made"), 1.0)
    quantity_type = QuantityMode(entry.get("quantity_type", QuantityMode.EXACT.value))

    if quantity_type == QuantityMode.PERCENTAGE:
        stock_level = entry.get("stock_level")
        quantity_mode = PercentageOfStock(
            percentage=parse_numeric_or_zero(entry.get("quantity_percentage")),
            stock_level=None if stock_level is None else parse_numeric_or_zero(stock_level),
            units_produced=1.0 if attribution == Attribution.PER_BATCH else units_made,
        )
    else:
        quantity_mode = ExactQuantity(
            quantity=parse_numeric_or_zero(entry.get("quantity")),
            units_produced=units_made,
        )

    return MaterialLine(
        name=entry.get("name", "").strip(),
        unit=entry.get("unit", ""),
        price_per_unit=parse_numeric_or_zero(entry.get("price_per_unit")),
        quantity_mode=quantity_mode,
        attribution=attribution,
        library_material_id=entry.get("library_material_id"),
    )


def other_cost_line_from_form(entry: Dict[str, Any]) -> OtherCostLine:
    """Build an other-cost line from one form entry."""
    return OtherCostLine(
        item=entry.get("item", "").strip(),
        quantity=parse_numeric_or_zero(entry.get("quantity")),
        unit_cost=parse_numeric_or_zero(entry.get("unit_cost")),
        attribution=_attribution(entry),
    )


def parse_product_form(
    data: Dict[str, Any], settings: Optional[UserSettings] = None
) -> Product:
    """
    Validate a product form and convert it to a Product.

    Labor entries without an hourly rate take the settings' labor hourly
    cost.

    Args:
        data: Product form dictionary (see module docstring)
        settings: User settings used to pre-fill labor rates

    Returns:
        Product record

    Raises:
        ValidationError: If the form is invalid
    """
    validate_product_input(data)

    labor = [
        new_labor_line(
            activity=entry.get("activity", "").strip(),
            time_minutes=entry.get("time_minutes"),
            settings=settings,
            attribution=_attribution(entry),
            hourly_rate=entry.get("hourly_rate"),
        )
        for entry in data.get("labor") or []
    ]

    return Product(
        name=data["name"].strip(),
        batch_size=int(parse_numeric_or_default(data.get("batch_size"), 1.0)),
        materials=[material_line_from_form(entry) for entry in data.get("materials") or []],
        labor=labor,
        other_costs=[other_cost_line_from_form(entry) for entry in data.get("other_costs") or []],
        pricing_method=PricingMethod(data.get("pricing_method") or PricingMethod.MARKUP),
        pricing_value=parse_numeric_or_zero(data.get("pricing_value")),
        status=ProductStatus(data.get("status") or ProductStatus.DRAFT),
        sku=data.get("sku"),
        description=data.get("description"),
        category=data.get("category"),
        id=data.get("id"),
    )
