from __future__ import annotations

from urllib.parse import parse_qs, urlparse

import pytest

from helpers import bearer, make_token, required_profile_payload
from matchmaker.middleware import is_protected_path, login_redirect_url


PREFIXES = ["/profile", "/dashboard", "/settings", "/matches", "/messages", "/family-details"]


@pytest.mark.parametrize(
    ("path", "protected"),
    [
        ("/dashboard", True),
        ("/dashboard/", True),
        ("/profile/edit", True),
        ("/family-details/step/2", True),
        ("/messages", True),
        ("/dashboards", False),
        ("/api/profile", False),
        ("/health/", False),
        ("/", False),
    ],
)
def test_is_protected_path(path: str, protected: bool) -> None:
    assert is_protected_path(path, PREFIXES) is protected


def test_login_redirect_url_keeps_existing_query() -> None:
    assert login_redirect_url("/login", "/dashboard") == "/login?post_login_redirect_url=%2Fdashboard"
    assert login_redirect_url("/login?x=1", "/matches") == "/login?x=1&post_login_redirect_url=%2Fmatches"


@pytest.mark.parametrize("path", ["/dashboard", "/settings/privacy", "/matches", "/family-details"])
def test_unauthenticated_pages_redirect_to_login(client, path: str) -> None:
    resp = client.get(path, follow_redirects=False)

    assert resp.status_code == 307
    location = urlparse(resp.headers["location"])
    assert location.path == "/api/auth/login"
    assert parse_qs(location.query) == {"post_login_redirect_url": [path]}


def test_invalid_token_redirects(client) -> None:
    resp = client.get("/dashboard", headers={"Authorization": "Bearer not-a-jwt"}, follow_redirects=False)
    assert resp.status_code == 307


def test_api_routes_are_not_redirected(client) -> None:
    resp = client.get("/api/profile", follow_redirects=False)
    assert resp.status_code == 401


def test_dashboard_summary_for_new_user(client) -> None:
    resp = client.get("/dashboard", headers=bearer(given_name="Asha", family_name="Rao"))

    assert resp.status_code == 200
    assert resp.json() == {
        "name": "Asha Rao",
        "profileComplete": False,
        "completionPercentage": 0,
        "stats": {"interestsReceived": 0, "profileViews": 0, "newMatches": 0},
    }


def test_dashboard_accepts_session_cookie(client) -> None:
    headers = bearer()
    client.put("/api/profile", json=required_profile_payload(), headers=headers)
    client.put("/api/profile", json={"bio": "Loves trekking and books."}, headers=headers)

    resp = client.get("/dashboard", headers={"Cookie": f"access_token={make_token()}"})

    assert resp.status_code == 200
    body = resp.json()
    assert body["profileComplete"] is True
    assert body["completionPercentage"] == 100


def test_protected_page_decodes_token_once(client, monkeypatch) -> None:
    from matchmaker.utils import jwt_handler

    calls = []
    decode = jwt_handler.decode_identity_token

    def counting_decode(token, settings):
        calls.append(token)
        return decode(token, settings)

    monkeypatch.setattr(jwt_handler, "decode_identity_token", counting_decode)

    resp = client.get("/dashboard", headers=bearer())

    assert resp.status_code == 200
    assert len(calls) == 1
