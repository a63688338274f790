"""
LaborLine model for time spent making a product.
"""

from dataclasses import dataclass

from .enums import Attribution


@dataclass(frozen=True)
class LaborLine:
    """
    One labor activity.

    Attributes:
        activity: Description of the work (e.g. "Pouring")
        time_minutes: Minutes spent (>= 0)
        hourly_rate: Currency per hour (>= 0)
        attribution: Per finished unit, or once per batch
    """

    activity: str
    time_minutes: float
    hourly_rate: float
    attribution: Attribution = Attribution.PER_UNIT

    @property
    def is_per_batch(self) -> bool:
        """Check if the activity is performed once per batch."""
        return self.attribution == Attribution.PER_BATCH
