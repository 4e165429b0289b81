# backend/availabilities/services/slots/availability.py
"""
Availability calculation for the next horizon days.

Takes into account:
- Openings (one-off, or weekly recurring)
- Appointments (subtracted from openings)

Result: {"YYYY-MM-DD": ["H:MM", ...], ...} with every horizon day present,
in ascending date order, even when nothing is open that day.
"""

import logging
from collections.abc import Iterable
from datetime import date

from .booked import index_booked_slots
from .calculator import expand_interval
from .config import AvailabilityConfig, get_availability_config
from .events import EVENT_KINDS, SlotEvent
from .grid import DayKey, SlotLabel, day_key, parse_date
from .horizon import build_horizon, resolve_weekly_day

logger = logging.getLogger(__name__)


class AvailabilityResolver:
    """Computes availability mappings for one configuration."""

    def __init__(self, config: AvailabilityConfig | None = None):
        self.config = config or get_availability_config()

    def compute(self, reference_date, events: Iterable) -> dict[DayKey, list[SlotLabel]]:
        """
        Compute available slots for [reference_date, reference_date + horizon).

        Args:
            reference_date: date, datetime or ISO string
            events: raw event records (dicts, ORM rows or SlotEvent)

        Raises:
            InvalidTimestamp: unparsable reference date or event timestamp
            InvalidInterval: event with starts_at >= ends_at
        """
        ref = parse_date(reference_date)

        # Step 1: Validate everything up front, one bad event aborts the call
        parsed = [SlotEvent.from_record(record) for record in events]
        appointments = sorted((e for e in parsed if e.is_appointment), key=lambda e: e.starts_at)
        openings = sorted((e for e in parsed if e.is_opening), key=lambda e: e.starts_at)

        ignored = sum(1 for e in parsed if e.kind not in EVENT_KINDS)
        if ignored:
            logger.debug(f"Ignoring {ignored} events of unknown kind")

        # Step 2: Horizon and empty days
        horizon = build_horizon(ref, self.config.horizon_days)
        availability: dict[DayKey, list[SlotLabel]] = {key: [] for key in horizon}

        # Step 3: Booked slots
        booked = index_booked_slots(appointments, horizon, self.config)

        # Step 4: Openings
        last_day = horizon[-1]
        used = 0
        for opening in openings:
            start_key = day_key(opening.starts_at)
            if start_key > last_day:
                continue

            target = self._target_day(opening, start_key, horizon)
            if target is None or target not in availability:
                continue

            labels = expand_interval(
                opening.starts_at,
                opening.ends_at,
                self.config.slot_step_minutes,
                snap=self.config.snap_slot_labels,
            )
            self._accumulate(availability[target], labels, booked.get(target, set()))
            used += 1

        logger.debug(
            f"Availability from {horizon[0]} to {last_day}: "
            f"{used}/{len(openings)} openings used, {len(appointments)} appointments"
        )
        return availability

    def _target_day(self, opening: SlotEvent, start_key: DayKey, horizon: list[DayKey]) -> DayKey | None:
        """Day the opening's slots go to: its own date, or the matching weekday for weekly ones."""
        if not opening.weekly_recurring:
            return start_key
        return resolve_weekly_day(opening.starts_at.date(), horizon)

    def _accumulate(self, day_slots: list[SlotLabel], labels: list[SlotLabel], booked: set[SlotLabel]) -> None:
        for label in labels:
            if label in booked:
                continue
            if self.config.dedupe_slots and label in day_slots:
                continue
            day_slots.append(label)


def compute_availabilities(
    reference_date: date | str,
    events: Iterable,
    config: AvailabilityConfig | None = None,
) -> dict[DayKey, list[SlotLabel]]:
    """Compute the availability mapping (synchronous, no I/O)."""
    return AvailabilityResolver(config).compute(reference_date, events)
