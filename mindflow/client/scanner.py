# mindflow/client/scanner.py
import logging
import random
from datetime import date
from typing import Any, Callable, Dict, Optional

from mindflow.client.api import ApiError, MindflowClient
from mindflow.client.emotion_heuristic import Frame, encode_jpeg, estimate_mood
from mindflow.core.moods import MOOD_EMOJIS, is_mood

logger = logging.getLogger(__name__)

CHAT_FALLBACK = "I'm here for you. Would you like to talk more about how you're feeling?"
CHAT_OFFLINE = "I'm having trouble connecting right now. Please try again in a moment. 💙"


class MoodScanner:
    """Collects a mood signal: AI first, camera heuristic when the AI is unavailable."""

    def __init__(self, client: MindflowClient, rng: Callable[[], float] = random.random):
        self.client = client
        self.rng = rng

    def scan(self, frame: Frame) -> Dict[str, Any]:
        try:
            result = self.client.analyze_face(encode_jpeg(frame))
            if is_mood(result.get("mood")):
                return {**result, "source": "ai"}
            logger.warning("Facial analysis returned no usable mood, using heuristic")
        except ApiError as e:
            logger.warning("Facial analysis unavailable (%s), using heuristic", e.message)

        return {"mood": estimate_mood(frame, self.rng), "source": "heuristic"}

    def confirm(self, mood: str, note: Optional[str] = None, today: Optional[date] = None) -> Dict[str, Any]:
        """Save the chosen mood and close today's scan gate."""
        entry = self.client.add_mood(mood, note)
        self.client.store.complete_scan(today)
        return entry

    def analyze_journal(self, text: str) -> Dict[str, Any]:
        """
        Analyze a journal entry and log the detected mood with the entry as note.

        Gateway failures propagate as ApiError so the caller can notify the user.
        """
        text = (text or "").strip()
        if not text:
            raise ValueError("journal entry is empty")

        result = self.client.analyze_journal(text)
        if is_mood(result.get("mood")):
            self.client.add_mood(result["mood"], note=text)
            result["summary"] = f"Detected mood: {MOOD_EMOJIS[result['mood']]} {result['mood']}"
        return result

    def chat(self, text: str) -> str:
        try:
            data = self.client.chat(text)
        except ApiError as e:
            logger.warning("Chat failed: %s", e.message)
            return CHAT_OFFLINE
        return data.get("response") or data.get("insight") or CHAT_FALLBACK
