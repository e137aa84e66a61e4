"""Tests for service probes."""


def test_root(client):
    body = client.get("/").json()
    assert body["status"] == "running"
    assert body["health"] == "/health"


def test_health_checks_database(client):
    resp = client.get("/health")

    assert resp.status_code == 200
    assert resp.json()["ok"] is True
