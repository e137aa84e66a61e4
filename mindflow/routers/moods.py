# mindflow/routers/moods.py
import logging

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from mindflow.core.security import get_current_user
from mindflow.db.session import get_db
from mindflow.models.user import User
from mindflow.schemas.mood import MoodEntryIn
from mindflow.services import mood_report, mood_service

router = APIRouter(prefix="/moods", tags=["moods"])
logger = logging.getLogger(__name__)


@router.post("", status_code=201)
def create_mood(
    body: MoodEntryIn,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    try:
        entry = mood_service.create(db, user.id, body.mood, body.note, body.timestamp)
    except SQLAlchemyError as e:
        db.rollback()
        logger.error("Saving mood failed for user=%s: %s", user.id, e)
        raise HTTPException(status_code=500, detail="Failed to save mood")

    logger.info("Mood saved: id=%s user=%s mood=%s", entry.id, user.id, entry.mood)
    return mood_service.mood_to_out(entry)


@router.get("")
def list_moods(user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    """The caller's mood entries, newest first."""
    return [mood_service.mood_to_out(m) for m in mood_service.find_all(db, user.id)]


@router.get("/report")
def mood_report_summary(user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    entries = [mood_service.mood_to_out(m) for m in mood_service.find_all(db, user.id)]
    return mood_report.summarize(entries)
