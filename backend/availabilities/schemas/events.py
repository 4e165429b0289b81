# backend/availabilities/schemas/events.py

from datetime import datetime
from typing import Literal, Optional
from pydantic import BaseModel, model_validator


class EventCreate(BaseModel):
    starts_at: datetime
    ends_at: datetime

    kind: Literal["appointment", "opening"]
    weekly_recurring: Optional[bool] = None

    model_config = {"from_attributes": True}

    @model_validator(mode="after")
    def check_interval(self):
        if self.starts_at >= self.ends_at:
            raise ValueError("starts_at must be before ends_at")
        return self


class EventRead(BaseModel):
    id: int

    starts_at: datetime
    ends_at: datetime

    kind: Literal["appointment", "opening"]
    weekly_recurring: Optional[bool] = None

    model_config = {"from_attributes": True}
