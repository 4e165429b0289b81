# backend/availabilities/services/slots/booked.py
"""
Booked-slot index: slot labels taken by appointments, per horizon day.

All slots of an appointment are attributed to its start day, even when the
appointment runs past midnight.
"""

from collections.abc import Iterable

from .calculator import expand_interval
from .config import AvailabilityConfig, get_availability_config
from .events import SlotEvent
from .grid import DayKey, SlotLabel, day_key


def index_booked_slots(
    appointments: Iterable[SlotEvent],
    horizon: list[DayKey],
    config: AvailabilityConfig | None = None,
) -> dict[DayKey, set[SlotLabel]]:
    """
    Map horizon day key -> set of booked slot labels.

    Appointments starting outside the horizon are skipped. Days without
    appointments have no entry.
    """
    config = config or get_availability_config()
    if not horizon:
        return {}

    first_day, last_day = horizon[0], horizon[-1]
    booked: dict[DayKey, set[SlotLabel]] = {}

    for appointment in sorted(appointments, key=lambda e: e.starts_at):
        key = day_key(appointment.starts_at)
        if key < first_day or key > last_day:
            continue

        labels = expand_interval(
            appointment.starts_at,
            appointment.ends_at,
            config.slot_step_minutes,
            snap=config.snap_slot_labels,
        )
        booked.setdefault(key, set()).update(labels)

    return booked
