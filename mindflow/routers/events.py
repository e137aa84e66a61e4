# mindflow/routers/events.py
import logging

from fastapi import APIRouter, Depends, HTTPException, Response
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from mindflow.core.security import get_current_user
from mindflow.db.session import get_db
from mindflow.models.user import User
from mindflow.schemas.event import CalendarEventIn, CalendarEventUpdate
from mindflow.services import event_service

router = APIRouter(prefix="/events", tags=["events"])
logger = logging.getLogger(__name__)


@router.post("", status_code=201)
def create_event(
    body: CalendarEventIn,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    try:
        event = event_service.create(db, user.id, body.title, body.time, body.predicted_mood, body.tag)
    except SQLAlchemyError as e:
        db.rollback()
        logger.error("Saving event failed for user=%s: %s", user.id, e)
        raise HTTPException(status_code=500, detail="Failed to save event")

    logger.info("Event saved: id=%s user=%s", event.id, user.id)
    return event_service.event_to_out(event)


@router.get("")
def list_events(user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    return [event_service.event_to_out(e) for e in event_service.find_all(db, user.id)]


@router.put("/{event_id}")
def update_event(
    event_id: int,
    body: CalendarEventUpdate,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    event = event_service.find_one(db, event_id, user.id)
    if not event:
        raise HTTPException(status_code=404, detail="Event not found")

    try:
        event = event_service.update(db, event, body.model_dump(exclude_unset=True))
    except SQLAlchemyError as e:
        db.rollback()
        logger.error("Updating event %s failed for user=%s: %s", event_id, user.id, e)
        raise HTTPException(status_code=500, detail="Failed to update event")

    return event_service.event_to_out(event)


@router.delete("/{event_id}", status_code=204)
def delete_event(
    event_id: int,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    event = event_service.find_one(db, event_id, user.id)
    if not event:
        raise HTTPException(status_code=404, detail="Event not found")

    try:
        event_service.remove(db, event)
    except SQLAlchemyError as e:
        db.rollback()
        logger.error("Deleting event %s failed for user=%s: %s", event_id, user.id, e)
        raise HTTPException(status_code=500, detail="Failed to delete event")

    logger.info("Event deleted: id=%s user=%s", event_id, user.id)
    return Response(status_code=204)
