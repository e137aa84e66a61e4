# mindflow/core/moods.py
from enum import Enum


class Mood(str, Enum):
    happy = "happy"
    calm = "calm"
    tired = "tired"
    anxious = "anxious"
    neutral = "neutral"
    sad = "sad"
    energetic = "energetic"


MOOD_LABELS = tuple(m.value for m in Mood)

MOOD_EMOJIS = {
    "happy": "😊",
    "calm": "😌",
    "tired": "😴",
    "anxious": "😰",
    "neutral": "😐",
    "sad": "😢",
    "energetic": "⚡",
}

MOOD_COLORS = {
    "happy": "hsl(45, 95%, 55%)",
    "calm": "hsl(200, 60%, 55%)",
    "tired": "hsl(270, 40%, 60%)",
    "anxious": "hsl(35, 90%, 55%)",
    "neutral": "hsl(158, 64%, 42%)",
    "sad": "hsl(220, 40%, 50%)",
    "energetic": "hsl(340, 75%, 55%)",
}

# Calendar display tag derived from an event's predicted mood
MOOD_TAGS = {
    "happy": "Energizing Activity",
    "calm": "Peaceful Time",
    "neutral": "Neutral & Productive",
    "tired": "Low Energy Task",
    "anxious": "Energy Dip Likely",
    "sad": "Need Support",
    "energetic": "High Energy",
}

SENTIMENT = {
    "happy": "positive",
    "calm": "positive",
    "energetic": "positive",
    "neutral": "neutral",
    "tired": "negative",
    "anxious": "negative",
    "sad": "negative",
}


def tag_for(mood: str) -> str:
    return MOOD_TAGS.get(mood, MOOD_TAGS["neutral"])


def is_mood(value: str | None) -> bool:
    return value in MOOD_LABELS
