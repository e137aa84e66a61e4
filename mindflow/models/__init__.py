from mindflow.models.user import User
from mindflow.models.mood import MoodEntry
from mindflow.models.event import CalendarEvent

__all__ = ["User", "MoodEntry", "CalendarEvent"]
