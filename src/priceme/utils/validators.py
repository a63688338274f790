"""
Input validation functions for the PriceMe pricing application.

This module sits at the boundary between the form layer and the pricing core:
- Numeric coercion of raw form values (strings, None, NaN) to floats
- Numeric validation (positive, non-negative, ranges)
- String validation (required fields, length)
- Whole-product validation before a form is turned into records
"""

import math
import numbers
from decimal import Decimal
from typing import Any, Dict, List, Optional, Tuple

from priceme.models.enums import PricingMethod, ProductStatus, QuantityMode

from .constants import (
    MAX_NAME_LENGTH,
    MAX_SKU_LENGTH,
    MAX_DESCRIPTION_LENGTH,
    MIN_PERCENTAGE,
    MAX_PERCENTAGE,
    ERROR_REQUIRED_FIELD,
    ERROR_INVALID_NUMBER,
    ERROR_INVALID_POSITIVE,
    ERROR_INVALID_NON_NEGATIVE,
    ERROR_INVALID_INTEGER,
    ERROR_INVALID_CHOICE,
    ERROR_INVALID_TEXT,
)


# ============================================================================
# Numeric Coercion
# ============================================================================


def parse_numeric_or_default(value: Any, default: float) -> float:
    """
    Convert a raw form value to a finite float.

    Args:
        value: Raw value (number, numeric string, Decimal, None, ...)
        default: Value returned when the input is missing or not a finite number

    Returns:
        The parsed float, or default

    Examples:
        >>> parse_numeric_or_default("12.5", 1.0)
        12.5
        >>> parse_numeric_or_default("", 1.0)
        1.0
    """
    if value is None or isinstance(value, bool):
        return default

    if isinstance(value, str):
        value = value.strip()
        if value == "":
            return default

    if not isinstance(value, (numbers.Real, Decimal, str)):
        return default

    try:
        number = float(value)
    except (ValueError, TypeError, OverflowError):
        return default

    if not math.isfinite(number):
        return default
    return number


def parse_numeric_or_zero(value: Any) -> float:
    """
    Convert a raw form value to a float, falling back to zero.

    Missing, blank, non-numeric and non-finite inputs all become 0.0.

    Examples:
        >>> parse_numeric_or_zero("3")
        3.0
        >>> parse_numeric_or_zero("abc")
        0.0
        >>> parse_numeric_or_zero(float("nan"))
        0.0
    """
    return parse_numeric_or_default(value, 0.0)


# ============================================================================
# Field Validators
# ============================================================================


def validate_required_string(value: Optional[str], field_name: str = "Field") -> Tuple[bool, str]:
    """
    Validate that a string field is not empty.

    Args:
        value: The string value to validate
        field_name: Name of the field for error messages

    Returns:
        Tuple of (is_valid, error_message)
    """
    if value is None or (isinstance(value, str) and value.strip() == ""):
        return False, f"{field_name}: {ERROR_REQUIRED_FIELD}"
    if not isinstance(value, str):
        return False, f"{field_name}: {ERROR_INVALID_TEXT}"
    return True, ""


def validate_string_length(
    value: Optional[str], max_length: int, field_name: str = "Field"
) -> Tuple[bool, str]:
    """
    Validate that a string doesn't exceed maximum length.

    Args:
        value: The string value to validate
        max_length: Maximum allowed length
        field_name: Name of the field for error messages

    Returns:
        Tuple of (is_valid, error_message)
    """
    if value is None:
        return True, ""
    if not isinstance(value, str):
        return False, f"{field_name}: {ERROR_INVALID_TEXT}"
    if len(value) > max_length:
        return False, f"{field_name}: Must be {max_length} characters or less"
    return True, ""


def _to_number(value: Any) -> Optional[float]:
    """Strict numeric conversion; None when the value is not a finite number."""
    if value is None or isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (ValueError, TypeError, OverflowError):
        return None
    if not math.isfinite(number):
        return None
    return number


def validate_positive_number(value: Any, field_name: str = "Field") -> Tuple[bool, str]:
    """
    Validate that a value is a positive number (> 0).

    Args:
        value: The value to validate
        field_name: Name of the field for error messages

    Returns:
        Tuple of (is_valid, error_message)
    """
    number = _to_number(value)
    if number is None:
        return False, f"{field_name}: {ERROR_INVALID_NUMBER}"
    if number <= 0:
        return False, f"{field_name}: {ERROR_INVALID_POSITIVE}"
    return True, ""


def validate_non_negative_number(value: Any, field_name: str = "Field") -> Tuple[bool, str]:
    """
    Validate that a value is a non-negative number (>= 0).

    Args:
        value: The value to validate
        field_name: Name of the field for error messages

    Returns:
        Tuple of (is_valid, error_message)
    """
    number = _to_number(value)
    if number is None:
        return False, f"{field_name}: {ERROR_INVALID_NUMBER}"
    if number < 0:
        return False, f"{field_name}: {ERROR_INVALID_NON_NEGATIVE}"
    return True, ""


def validate_number_range(
    value: Any, min_value: float, max_value: float, field_name: str = "Field"
) -> Tuple[bool, str]:
    """
    Validate that a number is within a specified range (inclusive).

    Args:
        value: The value to validate
        min_value: Minimum allowed value
        max_value: Maximum allowed value
        field_name: Name of the field for error messages

    Returns:
        Tuple of (is_valid, error_message)
    """
    number = _to_number(value)
    if number is None:
        return False, f"{field_name}: {ERROR_INVALID_NUMBER}"
    if number < min_value or number > max_value:
        return False, f"{field_name}: Must be between {min_value} and {max_value}"
    return True, ""


def validate_positive_integer(value: Any, field_name: str = "Field") -> Tuple[bool, str]:
    """
    Validate that a value is a whole number >= 1.

    Args:
        value: The value to validate
        field_name: Name of the field for error messages

    Returns:
        Tuple of (is_valid, error_message)
    """
    is_valid, error = validate_positive_number(value, field_name)
    if not is_valid:
        return is_valid, error
    if float(value) != int(float(value)):
        return False, f"{field_name}: {ERROR_INVALID_INTEGER}"
    return True, ""


def validate_choice(value: Any, choices, field_name: str = "Field") -> Tuple[bool, str]:
    """
    Validate that a value is one of the allowed enum values.

    Args:
        value: The value to validate (enum member or its string value)
        choices: Enum class listing the allowed values
        field_name: Name of the field for error messages

    Returns:
        Tuple of (is_valid, error_message)
    """
    try:
        choices(value)
    except ValueError:
        allowed = ", ".join(member.value for member in choices)
        return False, f"{field_name}: {ERROR_INVALID_CHOICE} (expected one of {allowed})"
    return True, ""


# ============================================================================
# Product Form Validation
# ============================================================================


def _collect(errors: List[str], result: Tuple[bool, str]) -> None:
    is_valid, message = result
    if not is_valid:
        errors.append(message)


def _validate_material_entry(entry: Dict[str, Any], label: str) -> List[str]:
    errors: List[str] = []
    _collect(errors, validate_required_string(entry.get("name"), f"{label} name"))
    _collect(
        errors,
        validate_non_negative_number(entry.get("price_per_unit"), f"{label} price per unit"),
    )

    quantity_type = entry.get("quantity_type", QuantityMode.EXACT.value)
    is_valid, message = validate_choice(quantity_type, QuantityMode, f"{label} quantity type")
    if not is_valid:
        errors.append(message)
        return errors

    if QuantityMode(quantity_type) == QuantityMode.PERCENTAGE:
        _collect(
            errors,
            validate_number_range(
                entry.get("quantity_percentage"),
                MIN_PERCENTAGE,
                MAX_PERCENTAGE,
                f"{label} percentage",
            ),
        )
    else:
        _collect(errors, validate_positive_number(entry.get("quantity"), f"{label} quantity"))

    if entry.get("units_made") is not None:
        _collect(errors, validate_positive_number(entry.get("units_made"), f"{label} units made"))
    return errors


def _validate_labor_entry(entry: Dict[str, Any], label: str) -> List[str]:
    errors: List[str] = []
    _collect(errors, validate_required_string(entry.get("activity"), f"{label} activity"))
    _collect(errors, validate_positive_number(entry.get("time_minutes"), f"{label} time"))
    # Missing rates are pre-filled from the user's settings
    if entry.get("hourly_rate") is not None:
        _collect(
            errors,
            validate_non_negative_number(entry.get("hourly_rate"), f"{label} hourly rate"),
        )
    return errors


def _validate_other_cost_entry(entry: Dict[str, Any], label: str) -> List[str]:
    errors: List[str] = []
    _collect(errors, validate_required_string(entry.get("item"), f"{label} item"))
    _collect(errors, validate_positive_number(entry.get("quantity"), f"{label} quantity"))
    _collect(errors, validate_non_negative_number(entry.get("unit_cost"), f"{label} cost"))
    return errors


def validate_product_input(data: Dict[str, Any]) -> None:
    """
    Validate a product form before it is converted to records.

    Collects every problem instead of stopping at the first one.

    Args:
        data: Product form dictionary. Recognised keys: name, sku, description,
              batch_size, status, pricing_method, pricing_value, materials,
              labor, other_costs.

    Raises:
        ValidationError: If any field is invalid (lists all messages)
    """
    from priceme.services.exceptions import ValidationError

    errors: List[str] = []

    _collect(errors, validate_required_string(data.get("name"), "Name"))
    _collect(errors, validate_string_length(data.get("name"), MAX_NAME_LENGTH, "Name"))
    _collect(errors, validate_string_length(data.get("sku"), MAX_SKU_LENGTH, "SKU"))
    _collect(
        errors,
        validate_string_length(data.get("description"), MAX_DESCRIPTION_LENGTH, "Description"),
    )

    if data.get("batch_size") is not None:
        _collect(errors, validate_positive_integer(data.get("batch_size"), "Batch size"))

    if data.get("status") is not None:
        _collect(errors, validate_choice(data.get("status"), ProductStatus, "Status"))

    if data.get("pricing_method") is not None:
        _collect(
            errors, validate_choice(data.get("pricing_method"), PricingMethod, "Pricing method")
        )
    if data.get("pricing_value") is not None:
        _collect(
            errors, validate_non_negative_number(data.get("pricing_value"), "Pricing value")
        )

    for index, entry in enumerate(data.get("materials") or [], start=1):
        errors.extend(_validate_material_entry(entry, f"Material {index}"))
    for index, entry in enumerate(data.get("labor") or [], start=1):
        errors.extend(_validate_labor_entry(entry, f"Labor {index}"))
    for index, entry in enumerate(data.get("other_costs") or [], start=1):
        errors.extend(_validate_other_cost_entry(entry, f"Other cost {index}"))

    if errors:
        raise ValidationError(errors)
