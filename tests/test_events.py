"""Tests for calendar event endpoints."""

from tests.conftest import auth_headers, fail_commits


def _event(**overrides):
    payload = {"title": "Team Meeting", "time": "10:00 AM", "predictedMood": "anxious"}
    payload.update(overrides)
    return payload


def test_create_event_derives_tag(client, register_user):
    data = register_user()
    headers = auth_headers(data["access_token"])

    resp = client.post("/events", json=_event(), headers=headers)

    assert resp.status_code == 201
    body = resp.json()
    assert body["predictedMood"] == "anxious"
    assert body["tag"] == "Energy Dip Likely"
    assert body["userId"] == data["user"]["id"]


def test_explicit_tag_is_kept(client, register_user):
    headers = auth_headers(register_user()["access_token"])

    resp = client.post("/events", json=_event(predictedMood="happy", tag="Recharge Time"), headers=headers)

    assert resp.json()["tag"] == "Recharge Time"


def test_event_fields_are_required(client, register_user):
    headers = auth_headers(register_user()["access_token"])

    missing = client.post("/events", json={"time": "10:00"}, headers=headers)
    blank = client.post("/events", json=_event(title="   "), headers=headers)

    assert missing.status_code == 422
    assert blank.status_code == 422
    assert blank.json()["detail"][0]["loc"] == ["body", "title"]


def test_events_listed_in_insertion_order(client, register_user):
    headers = auth_headers(register_user()["access_token"])
    for title in ["Team Meeting", "Lunch Break", "Project Review"]:
        client.post("/events", json=_event(title=title), headers=headers)

    titles = [e["title"] for e in client.get("/events", headers=headers).json()]

    assert titles == ["Team Meeting", "Lunch Break", "Project Review"]


def test_events_only_visible_to_owner(client, register_user):
    alice = auth_headers(register_user(email="alice@example.com")["access_token"])
    bob = auth_headers(register_user(email="bob@example.com")["access_token"])

    event_id = client.post("/events", json=_event(), headers=alice).json()["id"]

    assert client.get("/events", headers=bob).json() == []
    assert client.put(f"/events/{event_id}", json={"title": "Hijack"}, headers=bob).status_code == 404
    assert client.delete(f"/events/{event_id}", headers=bob).status_code == 404
    assert client.get("/events", headers=alice).json()[0]["title"] == "Team Meeting"


def test_update_event_rederives_tag(client, register_user):
    headers = auth_headers(register_user()["access_token"])
    event_id = client.post("/events", json=_event(), headers=headers).json()["id"]

    resp = client.put(f"/events/{event_id}", json={"predictedMood": "calm", "time": "11:00 AM"}, headers=headers)

    assert resp.status_code == 200
    body = resp.json()
    assert body["predictedMood"] == "calm"
    assert body["tag"] == "Peaceful Time"
    assert body["time"] == "11:00 AM"
    assert body["title"] == "Team Meeting"


def test_delete_event(client, register_user):
    headers = auth_headers(register_user()["access_token"])
    event_id = client.post("/events", json=_event(), headers=headers).json()["id"]

    assert client.delete(f"/events/{event_id}", headers=headers).status_code == 204
    assert client.get("/events", headers=headers).json() == []
    assert client.delete(f"/events/{event_id}", headers=headers).status_code == 404


def test_update_and_delete_report_database_failures(client, register_user, monkeypatch, caplog):
    headers = auth_headers(register_user()["access_token"])
    event_id = client.post("/events", json=_event(), headers=headers).json()["id"]

    fail_commits(monkeypatch)
    resp = client.put(f"/events/{event_id}", json={"title": "Renamed"}, headers=headers)
    assert resp.status_code == 500
    assert resp.json()["detail"] == "Failed to update event"

    resp = client.delete(f"/events/{event_id}", headers=headers)
    assert resp.status_code == 500
    assert resp.json()["detail"] == "Failed to delete event"
    assert "Deleting event" in caplog.text

    # nothing was written
    monkeypatch.undo()
    assert client.get("/events", headers=headers).json()[0]["title"] == "Team Meeting"
