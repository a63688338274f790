"""
UserSettings model for per-user preferences.

Currency is carried for display only; every calculation is currency-agnostic.
The labor hourly cost pre-fills new labor lines and is not read by the
pricing formulas.
"""

from dataclasses import dataclass, field
from typing import List, Optional

from priceme.utils.constants import (
    DEFAULT_CURRENCY,
    DEFAULT_METRIC_UNITS,
    DEFAULT_TAX_PERCENTAGE,
)

from .enums import UnitSystem


@dataclass(frozen=True)
class UserSettings:
    """
    User preferences.

    Attributes:
        currency: ISO 4217 currency code
        tax_percentage: Tax added on top of prices, 0-100
        revenue_goal: Optional revenue target
        labor_hourly_cost: Optional default hourly rate for new labor lines
        unit_system: Metric or imperial
        units: Units offered when entering materials
    """

    currency: str = DEFAULT_CURRENCY
    tax_percentage: float = DEFAULT_TAX_PERCENTAGE
    revenue_goal: Optional[float] = None
    labor_hourly_cost: Optional[float] = None
    unit_system: UnitSystem = UnitSystem.METRIC
    units: List[str] = field(default_factory=lambda: list(DEFAULT_METRIC_UNITS))
