# mindflow/client/reminders.py
import re
import uuid
from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from mindflow.client.storage import LocalStore, REMINDERS_KEY

_HHMM = re.compile(r"^([01]\d|2[0-3]):[0-5]\d$")


class Reminder(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    title: str = Field(..., min_length=1)
    time: str
    is_active: bool = Field(default=True, alias="isActive")
    message: Optional[str] = None

    @field_validator("time")
    @classmethod
    def time_is_hhmm(cls, v: str) -> str:
        if not _HHMM.match(v):
            raise ValueError("time must be HH:MM (24h)")
        return v


DEFAULT_REMINDERS = [
    Reminder(id="1", title="Morning Check-in", time="09:00", is_active=True, message="How are you feeling today?"),
    Reminder(id="2", title="Mindful Break", time="12:00", is_active=True, message="Take a moment to breathe deeply"),
    Reminder(id="3", title="Afternoon Stretch", time="15:00", is_active=False, message="Stand up and stretch!"),
    Reminder(id="4", title="Evening Reflection", time="20:00", is_active=True, message="Reflect on your day"),
]


class ReminderBook:
    """Wellness reminders persisted in the local store."""

    def __init__(self, store: LocalStore):
        self.store = store

    def all(self) -> List[Reminder]:
        saved = self.store.get(REMINDERS_KEY)
        if saved is None:
            return [r.model_copy() for r in DEFAULT_REMINDERS]
        return [Reminder.model_validate(r) for r in saved]

    def _save(self, reminders: List[Reminder]) -> None:
        self.store.set(REMINDERS_KEY, [r.model_dump(by_alias=True) for r in reminders])

    def add(self, title: str, time: str, message: Optional[str] = None) -> Reminder:
        reminder = Reminder(id=uuid.uuid4().hex, title=title.strip(), time=time, message=message)
        reminders = self.all()
        reminders.append(reminder)
        self._save(reminders)
        return reminder

    def toggle(self, reminder_id: str) -> Reminder:
        reminders = self.all()
        for r in reminders:
            if r.id == reminder_id:
                r.is_active = not r.is_active
                self._save(reminders)
                return r
        raise KeyError(reminder_id)

    def delete(self, reminder_id: str) -> None:
        reminders = self.all()
        kept = [r for r in reminders if r.id != reminder_id]
        if len(kept) == len(reminders):
            raise KeyError(reminder_id)
        self._save(kept)

    def due(self, now: Optional[datetime] = None) -> Optional[Reminder]:
        """First active reminder scheduled for the current minute."""
        now = now or datetime.now()
        current = now.strftime("%H:%M")
        for r in self.all():
            if r.is_active and r.time == current:
                return r
        return None
