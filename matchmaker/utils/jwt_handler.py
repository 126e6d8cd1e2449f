# jwt_handler.py
import logging
from dataclasses import dataclass

from fastapi import Request
from jose import JWTError, jwt
from jose.exceptions import ExpiredSignatureError

from matchmaker.config import Settings


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ProviderIdentity:
    """Authenticated subject as issued by the identity provider."""

    subject: str
    email: str
    given_name: str | None = None
    family_name: str | None = None
    picture: str | None = None

    @property
    def display_name(self) -> str | None:
        name = f"{self.given_name or ''} {self.family_name or ''}".strip()
        return name or None


def decode_identity_token(token: str, settings: Settings) -> dict:
    options = {"verify_aud": bool(settings.identity_audience)}
    return jwt.decode(
        token,
        settings.identity_jwt_secret,
        algorithms=[settings.identity_jwt_algorithm],
        audience=settings.identity_audience,
        issuer=settings.identity_issuer,
        options=options,
    )


def extract_token(request: Request, settings: Settings) -> str | None:
    authorization = request.headers.get("Authorization")
    if authorization:
        parts = authorization.split()
        if len(parts) == 2 and parts[0].lower() == "bearer":
            return parts[1]
        return None
    return request.cookies.get(settings.session_cookie_name) or None


def identity_from_claims(payload: dict) -> ProviderIdentity | None:
    subject = payload.get("sub")
    email = payload.get("email")
    if not subject or not email:
        return None
    return ProviderIdentity(
        subject=str(subject),
        email=str(email),
        given_name=payload.get("given_name"),
        family_name=payload.get("family_name"),
        picture=payload.get("picture"),
    )


def resolve_identity(request: Request, settings: Settings) -> ProviderIdentity | None:
    """Return the caller's identity, or None when there is no usable token."""
    token = extract_token(request, settings)
    if not token:
        return None
    try:
        payload = decode_identity_token(token, settings)
    except ExpiredSignatureError:
        logger.info("identity token expired path=%s", request.url.path)
        return None
    except JWTError as exc:
        logger.warning("identity token rejected path=%s reason=%s", request.url.path, exc)
        return None
    identity = identity_from_claims(payload)
    if identity is None:
        logger.warning("identity token missing sub/email claims path=%s", request.url.path)
    return identity


def request_identity(request: Request, settings: Settings) -> ProviderIdentity | None:
    """resolve_identity() at most once per request; the result rides on request.state."""
    if not hasattr(request.state, "identity"):
        request.state.identity = resolve_identity(request, settings)
    return request.state.identity
