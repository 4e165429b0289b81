# backend/availabilities/schemas/availabilities.py
"""
Pydantic schemas for availabilities API.
"""

from datetime import date
from pydantic import BaseModel, Field


class AvailabilitiesResponse(BaseModel):
    """Available slots for every day of the horizon."""
    reference_date: date
    availabilities: dict[str, list[str]] = Field(
        description='Day "YYYY-MM-DD" -> slot labels "H:MM", every horizon day present'
    )

    # Metadata
    horizon_days: int
    slot_step_minutes: int = Field(description="Grid step in minutes (30)")

    model_config = {"from_attributes": True}
