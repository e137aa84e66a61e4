from pydantic import BaseModel, ConfigDict, Field

from mindflow.core.moods import Mood

class CalendarEventIn(BaseModel):
    model_config = ConfigDict(populate_by_name=True, str_strip_whitespace=True, use_enum_values=True)

    title: str = Field(..., min_length=1, max_length=200)
    time: str = Field(..., min_length=1, max_length=100)
    predicted_mood: Mood = Field(..., alias="predictedMood")
    tag: str | None = Field(default=None, max_length=100)

class CalendarEventUpdate(BaseModel):
    model_config = ConfigDict(populate_by_name=True, str_strip_whitespace=True, use_enum_values=True)

    title: str | None = Field(default=None, min_length=1, max_length=200)
    time: str | None = Field(default=None, min_length=1, max_length=100)
    predicted_mood: Mood | None = Field(default=None, alias="predictedMood")
    tag: str | None = Field(default=None, max_length=100)
