# backend/availabilities/services/slots/exceptions.py
"""
Errors raised by the slots computation.

None of them are handled inside the computation: a single bad event aborts
the whole call and the error reaches the caller as is.
"""


class SlotsError(Exception):
    """Base class for slots computation errors."""


class InvalidTimestamp(SlotsError, ValueError):
    """Timestamp or date value cannot be parsed."""


class InvalidInterval(SlotsError, ValueError):
    """Event interval is empty or reversed (starts_at >= ends_at)."""


class SourceUnavailable(SlotsError):
    """Event source failed to return events."""
