# backend/availabilities/services/slots/events.py
"""
Calendar event value object used by the slots computation.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from datetime import datetime
from typing import Any

from .exceptions import InvalidInterval
from .grid import parse_timestamp

KIND_APPOINTMENT = "appointment"
KIND_OPENING = "opening"
EVENT_KINDS = (KIND_APPOINTMENT, KIND_OPENING)


@dataclass(frozen=True)
class SlotEvent:
    """
    Event read from the source.

    Attributes:
        starts_at: Interval start (inclusive)
        ends_at: Interval end (exclusive)
        kind: "appointment" or "opening"
        weekly_recurring: Opening repeats every week (ignored for appointments)
        id: Source identifier, not used by the computation
    """
    starts_at: datetime
    ends_at: datetime
    kind: str
    weekly_recurring: bool = False
    id: Any = None

    def __post_init__(self):
        if self.starts_at >= self.ends_at:
            raise InvalidInterval(
                f"Event {self.id}: starts_at {self.starts_at} is not before ends_at {self.ends_at}"
            )

    @property
    def is_opening(self) -> bool:
        return self.kind == KIND_OPENING

    @property
    def is_appointment(self) -> bool:
        return self.kind == KIND_APPOINTMENT

    @classmethod
    def from_record(cls, record) -> "SlotEvent":
        """
        Build from a dict, an ORM row or any object with event attributes.

        Raises:
            InvalidTimestamp: starts_at / ends_at cannot be parsed
            InvalidInterval: starts_at >= ends_at
        """
        if isinstance(record, cls):
            return record

        if isinstance(record, Mapping):
            get = record.get
        else:
            def get(name, default=None):
                return getattr(record, name, default)

        kind = get("kind")
        # ORM Enum columns may hand back enum members
        kind = getattr(kind, "value", kind)

        return cls(
            starts_at=parse_timestamp(get("starts_at")),
            ends_at=parse_timestamp(get("ends_at")),
            kind=kind,
            weekly_recurring=bool(get("weekly_recurring")),
            id=get("id"),
        )
