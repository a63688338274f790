"""
Settings Service for user preferences.

Provides default settings, validated partial updates, and the helpers that
apply settings to pricing inputs (labor rate pre-fill, tax).

Settings are passed to these functions explicitly; the pricing formulas
never read them.
"""

from dataclasses import replace
from typing import Any, Dict, List, Optional

from priceme.models.enums import Attribution, UnitSystem
from priceme.models.labor_line import LaborLine
from priceme.models.user_settings import UserSettings
from priceme.utils.constants import (
    CURRENCY_CODE_LENGTH,
    DEFAULT_CURRENCY,
    DEFAULT_IMPERIAL_UNITS,
    DEFAULT_METRIC_UNITS,
    DEFAULT_TAX_PERCENTAGE,
    MAX_PERCENTAGE,
    MIN_PERCENTAGE,
)
from priceme.utils.validators import (
    parse_numeric_or_zero,
    validate_choice,
    validate_non_negative_number,
    validate_number_range,
)

from .exceptions import ValidationError
from .logging_utils import get_service_logger, log_operation


logger = get_service_logger(__name__)

SETTINGS_FIELDS = (
    "currency",
    "tax_percentage",
    "revenue_goal",
    "labor_hourly_cost",
    "unit_system",
    "units",
)


def default_units(unit_system: UnitSystem = UnitSystem.METRIC) -> List[str]:
    """Return a fresh copy of the default unit list for a unit system."""
    if UnitSystem(unit_system) == UnitSystem.IMPERIAL:
        return list(DEFAULT_IMPERIAL_UNITS)
    return list(DEFAULT_METRIC_UNITS)


def default_settings(unit_system: UnitSystem = UnitSystem.METRIC) -> UserSettings:
    """
    Settings used when a user has not saved any.

    Args:
        unit_system: Unit system whose default units to offer

    Returns:
        UserSettings with USD, 0% tax and the unit system's default units
    """
    unit_system = UnitSystem(unit_system)
    return UserSettings(
        currency=DEFAULT_CURRENCY,
        tax_percentage=DEFAULT_TAX_PERCENTAGE,
        revenue_goal=None,
        labor_hourly_cost=None,
        unit_system=unit_system,
        units=default_units(unit_system),
    )


def _validate_currency(value: Any, errors: List[str]) -> Optional[str]:
    if (
        not isinstance(value, str)
        or len(value.strip()) != CURRENCY_CODE_LENGTH
        or not value.strip().isalpha()
    ):
        errors.append(f"Currency: Must be a {CURRENCY_CODE_LENGTH}-letter currency code")
        return None
    return value.strip().upper()


def _validate_optional_amount(value: Any, field_name: str, errors: List[str]) -> Optional[float]:
    if value is None:
        return None
    is_valid, message = validate_non_negative_number(value, field_name)
    if not is_valid:
        errors.append(message)
        return None
    return parse_numeric_or_zero(value)


def merge_settings(
    current: Optional[UserSettings], updates: Dict[str, Any]
) -> UserSettings:
    """
    Apply a partial settings update.

    Fields missing from updates keep their current value. An empty unit
    list falls back to the default units of the resulting unit system.

    Args:
        current: Saved settings (None means defaults)
        updates: Fields to change

    Returns:
        New UserSettings

    Raises:
        ValidationError: If any field is invalid (lists all messages)
    """
    if current is None:
        current = default_settings()

    errors: List[str] = []
    changes: Dict[str, Any] = {}

    unknown = sorted(set(updates) - set(SETTINGS_FIELDS))
    for key in unknown:
        errors.append(f"{key}: Unknown setting")

    if "currency" in updates:
        changes["currency"] = _validate_currency(updates["currency"], errors)

    if "tax_percentage" in updates:
        is_valid, message = validate_number_range(
            updates["tax_percentage"], MIN_PERCENTAGE, MAX_PERCENTAGE, "Tax percentage"
        )
        if is_valid:
            changes["tax_percentage"] = parse_numeric_or_zero(updates["tax_percentage"])
        else:
            errors.append(message)

    if "revenue_goal" in updates:
        changes["revenue_goal"] = _validate_optional_amount(
            updates["revenue_goal"], "Revenue goal", errors
        )

    if "labor_hourly_cost" in updates:
        changes["labor_hourly_cost"] = _validate_optional_amount(
            updates["labor_hourly_cost"], "Labor hourly cost", errors
        )

    unit_system = current.unit_system
    if "unit_system" in updates:
        is_valid, message = validate_choice(updates["unit_system"], UnitSystem, "Unit system")
        if is_valid:
            unit_system = UnitSystem(updates["unit_system"])
            changes["unit_system"] = unit_system
        else:
            errors.append(message)

    if "units" in updates:
        units = updates["units"]
        if units is None or (isinstance(units, (list, tuple)) and len(units) == 0):
            changes["units"] = default_units(unit_system)
        elif isinstance(units, (list, tuple)) and all(
            isinstance(unit, str) and unit.strip() for unit in units
        ):
            changes["units"] = [unit.strip() for unit in units]
        else:
            errors.append("Units: Must be a list of unit names")

    if errors:
        log_operation(
            logger,
            operation="merge_settings",
            outcome="validation_failed",
            errors=errors,
        )
        raise ValidationError(errors)

    log_operation(
        logger,
        operation="merge_settings",
        outcome="success",
        changed_fields=sorted(changes),
    )
    return replace(current, **changes)


def new_labor_line(
    activity: str,
    time_minutes,
    settings: Optional[UserSettings] = None,
    attribution: Attribution = Attribution.PER_UNIT,
    hourly_rate=None,
) -> LaborLine:
    """
    Build a labor line, pre-filling the hourly rate from settings.

    Args:
        activity: Description of the work
        time_minutes: Minutes spent
        settings: User settings supplying labor_hourly_cost
        attribution: Per unit or per batch
        hourly_rate: Explicit rate; wins over the settings default

    Returns:
        LaborLine with the explicit rate, else the settings rate, else 0
    """
    if hourly_rate is None:
        if settings is not None and settings.labor_hourly_cost is not None:
            hourly_rate = settings.labor_hourly_cost
        else:
            hourly_rate = 0.0

    return LaborLine(
        activity=activity,
        time_minutes=parse_numeric_or_zero(time_minutes),
        hourly_rate=parse_numeric_or_zero(hourly_rate),
        attribution=Attribution(attribution),
    )


def price_with_tax(price, settings: UserSettings) -> float:
    """
    Add the settings' tax percentage on top of a price.

    Args:
        price: Price before tax
        settings: User settings supplying tax_percentage

    Returns:
        price x (1 + tax / 100)
    """
    tax = parse_numeric_or_zero(settings.tax_percentage)
    return parse_numeric_or_zero(price) * (1 + tax / 100.0)
