# backend/availabilities/routers/events.py
# PATCH = 405, DELETE = ALLOWED (hard)

import logging

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from ..database import get_db
from ..models.events import Events as DBEvents
from ..schemas.events import EventCreate, EventRead

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/events", tags=["events"])


@router.get("/", response_model=list[EventRead])
def list_events(db: Session = Depends(get_db)):
    return db.query(DBEvents).order_by(DBEvents.starts_at).all()


@router.get("/{id}", response_model=EventRead)
def get_event(id: int, db: Session = Depends(get_db)):
    obj = db.get(DBEvents, id)
    if not obj:
        raise HTTPException(status_code=404, detail="Not found")
    return obj


@router.post("/", response_model=EventRead, status_code=status.HTTP_201_CREATED)
def create_event(
    data: EventCreate,
    db: Session = Depends(get_db),
):
    payload = data.model_dump()
    # Offsets are not supported, keep the wall-clock time
    payload["starts_at"] = payload["starts_at"].replace(tzinfo=None)
    payload["ends_at"] = payload["ends_at"].replace(tzinfo=None)

    obj = DBEvents(**payload)
    db.add(obj)
    db.commit()
    db.refresh(obj)
    logger.info(f"Event created: {obj.id} {obj.kind} {obj.starts_at} → {obj.ends_at}")
    return obj


@router.patch("/{id}")
def patch_not_allowed():
    raise HTTPException(
        status_code=status.HTTP_405_METHOD_NOT_ALLOWED,
        detail="Method not allowed",
    )


@router.delete("/{id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_event(id: int, db: Session = Depends(get_db)):
    obj = db.get(DBEvents, id)
    if not obj:
        raise HTTPException(status_code=404, detail="Not found")
    db.delete(obj)
    db.commit()
