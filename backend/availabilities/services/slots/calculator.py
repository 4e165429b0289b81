# backend/availabilities/services/slots/calculator.py
"""
Interval expansion: [starts_at, ends_at) -> slot labels on the 30 min grid.

The first slot is always emitted, then the cursor moves by one step for as
long as a full step still fits before ends_at:

    09:00-10:00 -> ["9:00", "9:30"]
    09:00-09:50 -> ["9:00"]
    09:00-09:10 -> ["9:00"]
"""

from datetime import datetime, timedelta

from .exceptions import InvalidInterval
from .grid import SlotLabel, advance, slot_label


def expand_interval(
    starts_at: datetime,
    ends_at: datetime,
    step_minutes: int = 30,
    snap: bool = False,
) -> list[SlotLabel]:
    """
    Expand an event interval into ordered slot labels.

    Raises:
        InvalidInterval: starts_at >= ends_at
    """
    if starts_at >= ends_at:
        raise InvalidInterval(f"Interval start {starts_at} is not before end {ends_at}")

    step = timedelta(minutes=step_minutes)
    labels: list[SlotLabel] = []

    cursor = starts_at
    while True:
        labels.append(slot_label(cursor, snap=snap))
        cursor = advance(cursor, step_minutes)
        if ends_at - cursor < step:
            break

    return labels
