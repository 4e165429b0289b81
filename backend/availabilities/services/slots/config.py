# backend/availabilities/services/slots/config.py
"""
Configuration for availability calculation.
"""

from dataclasses import dataclass
from functools import lru_cache


@dataclass(frozen=True)
class AvailabilityConfig:
    """
    Configuration for the availability computation.

    Attributes:
        horizon_days: How many days (reference date included) are computed
        slot_step_minutes: Grid step in minutes (only 30 is supported)
        snap_slot_labels: Round slot labels down to the half-hour boundary
                          instead of reading the start minute verbatim
        dedupe_slots: Skip labels already present for the day when openings overlap
    """
    horizon_days: int = 7
    slot_step_minutes: int = 30
    snap_slot_labels: bool = False
    dedupe_slots: bool = True

    def __post_init__(self):
        """Validate configuration."""
        if self.slot_step_minutes != 30:
            raise ValueError(f"slot_step_minutes must be 30, got {self.slot_step_minutes}")
        if self.horizon_days < 1:
            raise ValueError(f"horizon_days must be positive, got {self.horizon_days}")

    @property
    def slots_per_day(self) -> int:
        """Number of slots in a day (48 for the 30 min grid)."""
        return (24 * 60) // self.slot_step_minutes


@lru_cache
def get_availability_config() -> AvailabilityConfig:
    """
    Get availability configuration (singleton).

    Flags come from application settings; the grid itself is fixed.
    """
    from ...config import settings

    return AvailabilityConfig(
        snap_slot_labels=settings.snap_slot_labels,
        dedupe_slots=settings.dedupe_slots,
    )
