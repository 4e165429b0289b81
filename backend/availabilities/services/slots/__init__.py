# backend/availabilities/services/slots/__init__.py
"""
Slots calculation module.

Openings are expanded into 30 min slots over a 7 day horizon,
appointments are subtracted on the fly. Nothing is cached.
"""

from .config import AvailabilityConfig, get_availability_config
from .exceptions import SlotsError, InvalidTimestamp, InvalidInterval, SourceUnavailable
from .events import SlotEvent
from .grid import day_key, slot_label, advance, parse_timestamp, parse_date
from .calculator import expand_interval
from .horizon import build_horizon
from .booked import index_booked_slots
from .availability import AvailabilityResolver, compute_availabilities
from .source import fetch_events, get_availabilities

__all__ = [
    "AvailabilityConfig",
    "get_availability_config",
    "SlotsError",
    "InvalidTimestamp",
    "InvalidInterval",
    "SourceUnavailable",
    "SlotEvent",
    "day_key",
    "slot_label",
    "advance",
    "parse_timestamp",
    "parse_date",
    "expand_interval",
    "build_horizon",
    "index_booked_slots",
    "AvailabilityResolver",
    "compute_availabilities",
    "fetch_events",
    "get_availabilities",
]
