from __future__ import annotations


def test_heartbeat(client) -> None:
    resp = client.get("/health/")
    assert resp.status_code == 200
    assert resp.json()["status"] == "ok"


def test_db_health_masks_url(client) -> None:
    resp = client.get("/health/db")
    assert resp.status_code == 200
    body = resp.json()
    assert body["orm"] == "ok"
    assert body["db_url"].startswith("sqlite:///")
