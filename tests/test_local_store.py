"""Tests for persisted client state."""

import json
from datetime import date

from mindflow.client.storage import LocalStore, LAST_SCAN_KEY


def test_values_persist_across_instances(tmp_path):
    path = tmp_path / "state.json"
    LocalStore(path).set("token", "abc")

    assert LocalStore(path).get("token") == "abc"


def test_delete_and_defaults(tmp_path):
    store = LocalStore(tmp_path / "state.json")
    store.set("token", "abc")
    store.delete("token")
    store.delete("never-set")

    assert store.get("token") is None
    assert store.get("moodHistory", []) == []


def test_unreadable_file_starts_empty(tmp_path):
    path = tmp_path / "state.json"
    path.write_text("{broken", encoding="utf-8")

    store = LocalStore(path)
    assert store.get("token") is None
    store.set("token", "fresh")
    assert json.loads(path.read_text(encoding="utf-8")) == {"token": "fresh"}


def test_daily_scan_gate(tmp_path):
    store = LocalStore(tmp_path / "state.json")
    today = date(2026, 10, 19)

    assert store.needs_scan(today)
    store.complete_scan(today)
    assert not store.needs_scan(today)
    assert store.needs_scan(date(2026, 10, 20))
    assert store.get(LAST_SCAN_KEY) == "2026-10-19"


def test_streak_counts_consecutive_days(tmp_path):
    store = LocalStore(tmp_path / "state.json")
    for ts in ["2026-10-16T09:00:00+00:00", "2026-10-17T09:00:00+00:00",
               "2026-10-18T21:00:00+00:00", "2026-10-18T22:00:00+00:00"]:
        store.append_mood({"mood": "calm", "timestamp": ts})

    # nothing logged yet on the 19th: the run ending yesterday still counts
    assert store.streak(date(2026, 10, 19)) == 3
    assert store.streak(date(2026, 10, 18)) == 3
    assert store.streak(date(2026, 10, 21)) == 0
