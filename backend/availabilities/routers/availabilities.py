# backend/availabilities/routers/availabilities.py
"""
Availabilities API endpoint.

GET /availabilities?date=YYYY-MM-DD - Available slots for the 7 days starting at date
"""

from datetime import date
from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from ..database import get_db
from ..schemas.availabilities import AvailabilitiesResponse
from ..services.slots import (
    InvalidInterval,
    InvalidTimestamp,
    SourceUnavailable,
    fetch_events,
    get_availability_config,
    get_availabilities,
)


router = APIRouter(prefix="/availabilities", tags=["availabilities"])


@router.get("", response_model=AvailabilitiesResponse)
async def get_availabilities_for_date(
    target_date: date = Query(..., alias="date"),
    db: Session = Depends(get_db),
):
    """Get available slots for the horizon starting at date."""
    config = get_availability_config()

    try:
        result = await get_availabilities(
            target_date,
            fetch=lambda: fetch_events(db),
            config=config,
        )
    except SourceUnavailable as e:
        raise HTTPException(status_code=503, detail=str(e))
    except (InvalidTimestamp, InvalidInterval) as e:
        raise HTTPException(status_code=422, detail=str(e))

    return AvailabilitiesResponse(
        reference_date=target_date,
        availabilities=result,
        horizon_days=config.horizon_days,
        slot_step_minutes=config.slot_step_minutes,
    )
