# mindflow/services/mood_service.py
from datetime import datetime
from typing import Any, Dict, List, Optional

from sqlalchemy.orm import Session

from mindflow.core.timezone import as_utc, format_time, utc_now
from mindflow.models.mood import MoodEntry


def mood_to_out(m: MoodEntry) -> Dict[str, Any]:
    return {
        "id": m.id,
        "userId": m.user_id,
        "mood": m.mood,
        "note": m.note,
        "timestamp": format_time(m.timestamp),
    }


def create(db: Session, user_id: int, mood: str, note: Optional[str] = None,
           timestamp: Optional[datetime] = None) -> MoodEntry:
    entry = MoodEntry(
        user_id=user_id,
        mood=mood,
        note=note,
        timestamp=as_utc(timestamp) if timestamp else utc_now(),
    )
    db.add(entry)
    db.commit()
    db.refresh(entry)
    return entry


def find_all(db: Session, user_id: int) -> List[MoodEntry]:
    """All of the user's entries, newest first."""
    return (
        db.query(MoodEntry)
        .filter(MoodEntry.user_id == user_id)
        .order_by(MoodEntry.timestamp.desc(), MoodEntry.id.desc())
        .all()
    )
