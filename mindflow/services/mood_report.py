# mindflow/services/mood_report.py
from collections import Counter
from datetime import date, datetime, timedelta
from typing import Any, Dict, Iterable, List, Optional

from mindflow.core.moods import MOOD_COLORS, MOOD_EMOJIS, MOOD_LABELS, SENTIMENT
from mindflow.core.timezone import day_of, utc_now


def _entry_day(entry: Dict[str, Any]) -> Optional[date]:
    ts = entry.get("timestamp")
    if isinstance(ts, datetime):
        return day_of(ts)
    if isinstance(ts, str) and ts:
        try:
            return day_of(datetime.fromisoformat(ts.replace("Z", "+00:00")))
        except ValueError:
            return None
    return None


def mood_distribution(entries: Iterable[Dict[str, Any]]) -> List[Dict[str, Any]]:
    """Entry count per mood, only moods that occur, in canonical mood order."""
    counts = Counter(e.get("mood") for e in entries if e.get("mood") in MOOD_LABELS)
    return [
        {
            "name": mood,
            "value": counts[mood],
            "color": MOOD_COLORS[mood],
            "emoji": MOOD_EMOJIS[mood],
        }
        for mood in MOOD_LABELS
        if counts[mood] > 0
    ]


def weekly_trend(entries: Iterable[Dict[str, Any]], today: Optional[date] = None) -> List[Dict[str, Any]]:
    """positive / neutral / negative counts for each of the 7 days ending today."""
    today = today or utc_now().date()
    days = [today - timedelta(days=offset) for offset in range(6, -1, -1)]
    buckets = {d: Counter() for d in days}

    for e in entries:
        d = _entry_day(e)
        if d in buckets and e.get("mood") in SENTIMENT:
            buckets[d][SENTIMENT[e["mood"]]] += 1

    return [
        {
            "day": d.strftime("%a"),
            "date": d.isoformat(),
            "positive": buckets[d]["positive"],
            "neutral": buckets[d]["neutral"],
            "negative": buckets[d]["negative"],
        }
        for d in days
    ]


def current_streak(entries: Iterable[Dict[str, Any]], today: Optional[date] = None) -> int:
    """
    Consecutive days with at least one entry.

    The run ends today, or yesterday when nothing has been logged yet today.
    """
    today = today or utc_now().date()
    logged = {d for d in (_entry_day(e) for e in entries) if d is not None}

    cursor = today if today in logged else today - timedelta(days=1)
    streak = 0
    while cursor in logged:
        streak += 1
        cursor -= timedelta(days=1)
    return streak


def summarize(entries: Iterable[Dict[str, Any]], today: Optional[date] = None) -> Dict[str, Any]:
    entries = list(entries)
    distribution = mood_distribution(entries)
    dominant = max(distribution, key=lambda d: d["value"])["name"] if distribution else None
    return {
        "total_entries": sum(d["value"] for d in distribution),
        "dominant_mood": dominant,
        "distribution": distribution,
        "weekly_trend": weekly_trend(entries, today),
        "streak": current_streak(entries, today),
    }
