"""Redirect unauthenticated visitors away from member-only pages."""
from __future__ import annotations

import logging
from urllib.parse import urlencode

from fastapi import FastAPI, Request
from fastapi.responses import RedirectResponse

from matchmaker.utils.jwt_handler import request_identity


logger = logging.getLogger(__name__)


def is_protected_path(path: str, prefixes: list[str]) -> bool:
    for prefix in prefixes:
        if path == prefix or path.startswith(prefix + "/"):
            return True
    return False


def login_redirect_url(login_url: str, path: str) -> str:
    separator = "&" if "?" in login_url else "?"
    return f"{login_url}{separator}{urlencode({'post_login_redirect_url': path})}"


def install_route_protection(app: FastAPI) -> None:
    @app.middleware("http")
    async def route_protection(request: Request, call_next):
        settings = request.app.state.settings
        path = request.url.path
        if is_protected_path(path, settings.protected_path_prefixes):
            if request_identity(request, settings) is None:
                logger.info("route.protect redirecting unauthenticated request path=%s", path)
                return RedirectResponse(url=login_redirect_url(settings.login_url, path))
        return await call_next(request)
