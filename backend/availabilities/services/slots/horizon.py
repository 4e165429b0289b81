# backend/availabilities/services/slots/horizon.py
"""
Horizon: the ordered day keys the computation is bounded by.
"""

from datetime import date, timedelta

from .grid import DayKey, day_key


def build_horizon(reference_date: date, days: int = 7) -> list[DayKey]:
    """
    Day keys [reference_date, reference_date + days - 1], ascending.

    The reference date is always first.
    """
    return [day_key(reference_date + timedelta(days=offset)) for offset in range(days)]


def resolve_weekly_day(start_day: date, horizon: list[DayKey]) -> DayKey | None:
    """
    Find the horizon day a weekly recurring opening lands on.

    Steps forward from start_day by whole weeks until the day is no longer
    before the horizon. Returns None when that day is outside the horizon
    (start_day after the horizon, or a horizon shorter than a week).
    """
    if not horizon:
        return None

    first = date.fromisoformat(horizon[0])
    current = start_day
    while current < first:
        current += timedelta(days=7)

    key = day_key(current)
    return key if key in horizon else None
