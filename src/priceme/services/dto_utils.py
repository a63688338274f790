"""DTO utilities for service layer.

Provides standardized formatting functions for data transfer objects,
ensuring consistent serialization of money and percentage values handed
to the storage layer.
"""

from decimal import Decimal, ROUND_HALF_UP
from typing import Optional, Union

from priceme.utils.constants import CURRENCY_DECIMAL_PLACES, PERCENTAGE_DECIMAL_PLACES


def cost_to_string(value: Union[Decimal, float, int, str, None]) -> str:
    """
    Convert a cost value to a 2-decimal string format.

    Args:
        value: Cost value (Decimal, float, int, str, or None)

    Returns:
        String formatted as "12.34" (2 decimal places).
        Returns "0.00" if value is None.

    Examples:
        >>> cost_to_string(Decimal("12.345"))
        '12.35'
        >>> cost_to_string(12.3)
        '12.30'
        >>> cost_to_string(None)
        '0.00'
    """
    if value is None:
        return "0.00"

    decimal_value = Decimal(str(value))
    quantum = Decimal(1).scaleb(-CURRENCY_DECIMAL_PLACES)
    rounded = decimal_value.quantize(quantum, rounding=ROUND_HALF_UP)

    return str(rounded)


def round_percentage(
    value: Optional[float], places: int = PERCENTAGE_DECIMAL_PLACES
) -> Optional[float]:
    """
    Round a percentage half-up to a fixed number of places.

    Args:
        value: Percentage value, or None
        places: Decimal places to keep

    Returns:
        Rounded float, or None when value is None

    Examples:
        >>> round_percentage(33.33333)
        33.33
        >>> round_percentage(12.345)
        12.35
    """
    if value is None:
        return None
    quantum = Decimal(1).scaleb(-places)
    return float(Decimal(str(value)).quantize(quantum, rounding=ROUND_HALF_UP))
