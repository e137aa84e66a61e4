# mindflow/client/storage.py
import json
import logging
import os
import tempfile
from datetime import date
from pathlib import Path
from typing import Any, Dict, List, Optional

from mindflow.core.timezone import utc_now
from mindflow.services.mood_report import current_streak

logger = logging.getLogger(__name__)

TOKEN_KEY = "token"
MOOD_HISTORY_KEY = "moodHistory"
REMINDERS_KEY = "wellnessReminders"
LAST_SCAN_KEY = "lastMoodScan"

DEFAULT_PATH = Path(os.getenv("MINDFLOW_STATE_FILE", Path.home() / ".mindflow" / "state.json"))


class LocalStore:
    """Small JSON-file key/value store for client state."""

    def __init__(self, path: Optional[os.PathLike] = None):
        self.path = Path(path) if path else DEFAULT_PATH
        self._data: Dict[str, Any] = self._load()

    def _load(self) -> Dict[str, Any]:
        if not self.path.exists():
            return {}
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.warning("Ignoring unreadable state file %s: %s", self.path, e)
            return {}
        return data if isinstance(data, dict) else {}

    def _flush(self) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp = tempfile.mkstemp(dir=self.path.parent, prefix=".state-", suffix=".json")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(self._data, f, ensure_ascii=False, indent=2)
            os.replace(tmp, self.path)
        except BaseException:
            if os.path.exists(tmp):
                os.remove(tmp)
            raise

    def get(self, key: str, default: Any = None) -> Any:
        return self._data.get(key, default)

    def set(self, key: str, value: Any) -> None:
        self._data[key] = value
        self._flush()

    def delete(self, key: str) -> None:
        if key in self._data:
            del self._data[key]
            self._flush()

    # ---- mood history ----

    def mood_history(self) -> List[Dict[str, Any]]:
        return list(self.get(MOOD_HISTORY_KEY, []))

    def append_mood(self, entry: Dict[str, Any]) -> None:
        history = self.mood_history()
        history.append(entry)
        self.set(MOOD_HISTORY_KEY, history)

    def streak(self, today: Optional[date] = None) -> int:
        return current_streak(self.mood_history(), today)

    # ---- daily scan gate ----

    def needs_scan(self, today: Optional[date] = None) -> bool:
        today = today or utc_now().date()
        return self.get(LAST_SCAN_KEY) != today.isoformat()

    def complete_scan(self, today: Optional[date] = None) -> None:
        today = today or utc_now().date()
        self.set(LAST_SCAN_KEY, today.isoformat())
