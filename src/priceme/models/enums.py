"""
Enumerations for product pricing and inventory.

This module contains enums used across the pricing models:
- Attribution: Whether a cost line is incurred per unit or per batch
- QuantityMode: How a material line states the quantity it consumes
- PricingMethod: Which pricing figure drives the product price
- ProductStatus: Product lifecycle stage
- StockStatus: Inventory health of a library material
- UnitSystem: Measurement system used for default unit lists
"""

from enum import Enum


class Attribution(str, Enum):
    """
    Cost attribution for a line item.

    Values:
        PER_UNIT: Cost is incurred for every finished unit
        PER_BATCH: Cost is incurred once per production run and shared
                   across the batch
    """

    PER_UNIT = "per_unit"
    PER_BATCH = "per_batch"


class QuantityMode(str, Enum):
    """
    Quantity mode for a material line.

    Values:
        EXACT: A fixed quantity of material yields a number of units
        PERCENTAGE: A percentage of the material's current stock is consumed
    """

    EXACT = "exact"
    PERCENTAGE = "percentage"


class PricingMethod(str, Enum):
    """
    Pricing method selected by the user.

    The pricing value entered under the method drives the price; the other
    figures are derived from it.

    Values:
        MARKUP: Markup percentage over cost
        PRICE: Selling price itself
        PROFIT: Absolute profit per unit
        MARGIN: Margin percentage of price
    """

    MARKUP = "markup"
    PRICE = "price"
    PROFIT = "profit"
    MARGIN = "margin"


class ProductStatus(str, Enum):
    """
    Product lifecycle stage.

    Values:
        DRAFT: Being costed, not yet worked on
        IN_PROGRESS: In production or being refined
        ON_SALE: Listed for sale
        INACTIVE: Retired
    """

    DRAFT = "draft"
    IN_PROGRESS = "in_progress"
    ON_SALE = "on_sale"
    INACTIVE = "inactive"


class StockStatus(str, Enum):
    """
    Stock health of a library material relative to its reorder point.

    Values:
        CRITICAL: At or below the reorder point
        WARNING: Above the reorder point but close to it
        OK: Comfortably above the reorder point
    """

    CRITICAL = "critical"
    WARNING = "warning"
    OK = "ok"


class UnitSystem(str, Enum):
    """Measurement system used to pick the default unit list."""

    METRIC = "metric"
    IMPERIAL = "imperial"
