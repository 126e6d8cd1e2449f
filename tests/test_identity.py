from __future__ import annotations

import time

from helpers import make_token
from matchmaker.utils.jwt_handler import ProviderIdentity, decode_identity_token, identity_from_claims


def test_identity_from_claims() -> None:
    identity = identity_from_claims(
        {"sub": "kp_1", "email": "a@example.com", "given_name": "Asha", "picture": "https://x/y.png"}
    )
    assert identity == ProviderIdentity(
        subject="kp_1", email="a@example.com", given_name="Asha", family_name=None, picture="https://x/y.png"
    )
    assert identity.display_name == "Asha"


def test_identity_requires_subject_and_email() -> None:
    assert identity_from_claims({"email": "a@example.com"}) is None
    assert identity_from_claims({"sub": "kp_1"}) is None


def test_display_name_is_none_without_names() -> None:
    assert ProviderIdentity(subject="kp_1", email="a@example.com").display_name is None


def test_decode_round_trip(settings) -> None:
    payload = decode_identity_token(make_token(subject="kp_9"), settings)
    assert payload["sub"] == "kp_9"


def test_expired_token_is_unauthorized(client) -> None:
    token = make_token(exp=int(time.time()) - 60)
    resp = client.get("/api/profile", headers={"Authorization": f"Bearer {token}"})
    assert resp.status_code == 401


def test_audience_is_checked_when_configured(settings, client) -> None:
    client.app.state.settings.identity_audience = "matchmaker"
    wrong = make_token(aud="someone-else")
    right = make_token(aud="matchmaker")

    assert client.get("/api/profile", headers={"Authorization": f"Bearer {wrong}"}).status_code == 401
    assert client.get("/api/profile", headers={"Authorization": f"Bearer {right}"}).status_code == 200
