from __future__ import annotations

from datetime import date
from typing import Any

from jose import jwt


TEST_SECRET = "test-identity-secret"


def make_token(
    subject: str = "kp_123",
    email: str = "asha@example.com",
    given_name: str | None = "Asha",
    family_name: str | None = "Rao",
    picture: str | None = None,
    secret: str = TEST_SECRET,
    **extra: Any,
) -> str:
    claims: dict[str, Any] = {"sub": subject, "email": email, **extra}
    if given_name is not None:
        claims["given_name"] = given_name
    if family_name is not None:
        claims["family_name"] = family_name
    if picture is not None:
        claims["picture"] = picture
    return jwt.encode(claims, secret, algorithm="HS256")


def bearer(**kwargs: Any) -> dict[str, str]:
    return {"Authorization": f"Bearer {make_token(**kwargs)}"}


def years_ago(years: int) -> date:
    today = date.today()
    return date(today.year - years, 1, 1)


def required_profile_payload(**overrides: Any) -> dict[str, Any]:
    payload: dict[str, Any] = {
        "firstName": "Asha",
        "lastName": "Rao",
        "dateOfBirth": years_ago(28).isoformat(),
        "gender": "FEMALE",
        "city": "Pune",
        "state": "Maharashtra",
        "education": "B.Tech",
        "occupation": "Engineer",
        "religion": "HINDU",
        "maritalStatus": "NEVER_MARRIED",
    }
    payload.update(overrides)
    return payload
