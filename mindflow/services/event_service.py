# mindflow/services/event_service.py
from typing import Any, Dict, List, Optional

from sqlalchemy.orm import Session

from mindflow.core.moods import tag_for
from mindflow.models.event import CalendarEvent


def event_to_out(e: CalendarEvent) -> Dict[str, Any]:
    return {
        "id": e.id,
        "userId": e.user_id,
        "title": e.title,
        "time": e.time,
        "predictedMood": e.predicted_mood,
        "tag": e.tag or tag_for(e.predicted_mood),
    }


def create(db: Session, user_id: int, title: str, time: str, predicted_mood: str,
           tag: Optional[str] = None) -> CalendarEvent:
    event = CalendarEvent(
        user_id=user_id,
        title=title,
        time=time,
        predicted_mood=predicted_mood,
        tag=tag or tag_for(predicted_mood),
    )
    db.add(event)
    db.commit()
    db.refresh(event)
    return event


def find_all(db: Session, user_id: int) -> List[CalendarEvent]:
    return (
        db.query(CalendarEvent)
        .filter(CalendarEvent.user_id == user_id)
        .order_by(CalendarEvent.id.asc())
        .all()
    )


def find_one(db: Session, event_id: int, user_id: int) -> Optional[CalendarEvent]:
    """Owner-scoped lookup; someone else's event is treated as missing."""
    return (
        db.query(CalendarEvent)
        .filter(CalendarEvent.id == event_id, CalendarEvent.user_id == user_id)
        .first()
    )


def update(db: Session, event: CalendarEvent, changes: Dict[str, Any]) -> CalendarEvent:
    new_mood = changes.get("predicted_mood")
    mood_changed = new_mood is not None and new_mood != event.predicted_mood
    for key in ("title", "time", "predicted_mood", "tag"):
        if changes.get(key) is not None:
            setattr(event, key, changes[key])

    # re-derive the tag when the mood moves and no explicit tag was sent
    if mood_changed and changes.get("tag") is None:
        event.tag = tag_for(event.predicted_mood)

    db.add(event)
    db.commit()
    db.refresh(event)
    return event


def remove(db: Session, event: CalendarEvent) -> None:
    db.delete(event)
    db.commit()
