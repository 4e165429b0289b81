# backend/availabilities/services/slots/source.py
"""
Event source and async entry point.

The fetch is the only blocking step. It runs in a worker thread,
the computation itself is synchronous.
"""

import asyncio
import logging
from collections.abc import Callable, Sequence
from datetime import date

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from .availability import compute_availabilities
from .config import AvailabilityConfig
from .exceptions import SourceUnavailable
from .grid import DayKey, SlotLabel

logger = logging.getLogger(__name__)


def fetch_events(db: Session) -> list[dict]:
    """
    Read all events, unordered.

    Raises:
        SourceUnavailable: the query failed
    """
    from ...models.events import Events

    try:
        rows = db.query(Events).all()
    except SQLAlchemyError as e:
        raise SourceUnavailable(f"Failed to fetch events: {e}") from e

    return [
        {
            "id": row.id,
            "starts_at": row.starts_at,
            "ends_at": row.ends_at,
            "kind": row.kind,
            "weekly_recurring": row.weekly_recurring,
        }
        for row in rows
    ]


def fetch_events_from_db() -> list[dict]:
    """Fetch events with a short-lived session."""
    from ...database import SessionLocal

    db = SessionLocal()
    try:
        return fetch_events(db)
    finally:
        db.close()


async def get_availabilities(
    reference_date: date | str,
    fetch: Callable[[], Sequence] | None = None,
    config: AvailabilityConfig | None = None,
) -> dict[DayKey, list[SlotLabel]]:
    """
    Fetch events and compute availability for the horizon starting at reference_date.

    Raises:
        SourceUnavailable: fetch failed
        InvalidTimestamp / InvalidInterval: bad event or reference date
    """
    fetch = fetch or fetch_events_from_db

    try:
        events = await asyncio.to_thread(fetch)
    except SourceUnavailable:
        logger.exception("Event source unavailable")
        raise
    except Exception as e:
        logger.exception("Event source unavailable")
        raise SourceUnavailable(f"Failed to fetch events: {e}") from e

    return compute_availabilities(reference_date, events, config)
