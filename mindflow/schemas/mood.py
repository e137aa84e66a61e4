from datetime import datetime
from pydantic import BaseModel, ConfigDict, Field

from mindflow.core.moods import Mood

class MoodEntryIn(BaseModel):
    model_config = ConfigDict(use_enum_values=True)

    mood: Mood
    note: str | None = Field(default=None, max_length=5000)
    timestamp: datetime | None = None
