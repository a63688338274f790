"""
Record types for the PriceMe pricing application.

The calculation services consume these plain records; they carry no
persistence or presentation behaviour.
"""

from .enums import (
    Attribution,
    PricingMethod,
    ProductStatus,
    QuantityMode,
    StockStatus,
    UnitSystem,
)
from .labor_line import LaborLine
from .library_material import LibraryMaterial
from .material_line import ExactQuantity, MaterialLine, PercentageOfStock
from .other_cost_line import OtherCostLine
from .product import Product
from .product_variant import ProductVariant
from .user_settings import UserSettings

__all__ = [
    "Attribution",
    "PricingMethod",
    "ProductStatus",
    "QuantityMode",
    "StockStatus",
    "UnitSystem",
    "ExactQuantity",
    "PercentageOfStock",
    "MaterialLine",
    "LaborLine",
    "OtherCostLine",
    "Product",
    "ProductVariant",
    "LibraryMaterial",
    "UserSettings",
]
