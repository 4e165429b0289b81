# backend/availabilities/services/slots/grid.py
"""
Time-grid helpers.

Day key:    "YYYY-MM-DD" (ISO date, sorts chronologically as a string)
Slot label: "H:MM" (hour unpadded, minute zero-padded), e.g. "9:00", "14:30"
"""

from datetime import date, datetime, time, timedelta, timezone

from .exceptions import InvalidTimestamp

DayKey = str
SlotLabel = str


def parse_timestamp(value) -> datetime:
    """
    Coerce a raw event timestamp to a naive datetime.

    Accepts datetime, date (midnight), ISO-8601 strings (trailing "Z" allowed)
    and int/float epoch milliseconds (UTC). Offsets are dropped, the
    wall-clock time is kept.
    """
    if isinstance(value, datetime):
        return value.replace(tzinfo=None)

    if isinstance(value, date):
        return datetime.combine(value, time.min)

    # bool is an int subclass, never a timestamp
    if isinstance(value, bool):
        raise InvalidTimestamp(f"Invalid timestamp: {value!r}")

    if isinstance(value, (int, float)):
        try:
            dt = datetime.fromtimestamp(value / 1000, tz=timezone.utc)
        except (OverflowError, OSError, ValueError) as e:
            raise InvalidTimestamp(f"Invalid timestamp: {value!r}") from e
        return dt.replace(tzinfo=None)

    if isinstance(value, str):
        raw = value.strip()
        if raw.endswith("Z"):
            raw = raw[:-1] + "+00:00"
        try:
            dt = datetime.fromisoformat(raw)
        except ValueError as e:
            raise InvalidTimestamp(f"Invalid timestamp: {value!r}") from e
        return dt.replace(tzinfo=None)

    raise InvalidTimestamp(f"Invalid timestamp: {value!r}")


def parse_date(value) -> date:
    """Coerce a reference date (date, datetime, ISO string, epoch ms) to a date."""
    if isinstance(value, date) and not isinstance(value, datetime):
        return value
    return parse_timestamp(value).date()


def day_key(value: date | datetime) -> DayKey:
    """Truncate to calendar date, "YYYY-MM-DD"."""
    if isinstance(value, datetime):
        value = value.date()
    return value.isoformat()


def slot_label(value: datetime, snap: bool = False) -> SlotLabel:
    """
    Render the time of day as "H:MM".

    The minute is read verbatim (09:05 -> "9:05") unless snap is set,
    in which case it is rounded down to the half-hour (09:05 -> "9:00").
    """
    minute = value.minute
    if snap:
        minute -= minute % 30
    return f"{value.hour}:{minute:02d}"


def advance(value: datetime, minutes: int) -> datetime:
    """Shift by a number of minutes, rolling over day/month/year."""
    return value + timedelta(minutes=minutes)
