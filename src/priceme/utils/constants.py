"""
Constants for the PriceMe pricing application.

This module defines all system-wide constants including:
- Application metadata
- Default user settings (currency, unit lists)
- Pricing guards and lifecycle defaults
- Validation limits and error messages
"""

from typing import List

# ============================================================================
# Application Metadata
# ============================================================================

APP_NAME = "PriceMe"
APP_VERSION = "0.1.0"

# ============================================================================
# Settings Defaults
# ============================================================================

DEFAULT_CURRENCY = "USD"
DEFAULT_TAX_PERCENTAGE = 0.0

DEFAULT_METRIC_UNITS: List[str] = [
    "ml",
    "L",
    "g",
    "kg",
    "mm",
    "cm",
    "m",
    "m²",
    "pcs",
]

DEFAULT_IMPERIAL_UNITS: List[str] = [
    "fl oz",
    "pt",
    "qt",
    "gal",
    "oz",
    "lb",
    "in",
    "ft",
    "yd",
    "ft²",
    "pcs",
]

CURRENCY_CODE_LENGTH = 3

# ============================================================================
# Pricing
# ============================================================================

# Margins at or above this percentage have no finite price
MARGIN_GUARD_PERCENTAGE = 100.0

# Floor applied to batch sizes and material yields before dividing
MIN_BATCH_SIZE = 1

# ============================================================================
# Inventory
# ============================================================================

# Stock below this multiple of the reorder point is flagged as a warning
DEFAULT_STOCK_WARNING_RATIO = 2.0

# ============================================================================
# Validation Constants
# ============================================================================

MAX_NAME_LENGTH = 200
MAX_SKU_LENGTH = 100
MAX_DESCRIPTION_LENGTH = 500

MIN_PERCENTAGE = 0.0
MAX_PERCENTAGE = 100.0

# Decimal precision
CURRENCY_DECIMAL_PLACES = 2
PERCENTAGE_DECIMAL_PLACES = 2

# ============================================================================
# Error Messages
# ============================================================================

ERROR_REQUIRED_FIELD = "This field is required"
ERROR_INVALID_NUMBER = "Please enter a valid number"
ERROR_INVALID_POSITIVE = "Value must be greater than zero"
ERROR_INVALID_NON_NEGATIVE = "Value must be zero or greater"
ERROR_INVALID_INTEGER = "Value must be a whole number"
ERROR_INVALID_CHOICE = "Invalid choice"
ERROR_INVALID_TEXT = "Please enter text"
