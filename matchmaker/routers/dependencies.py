# dependencies.py
from fastapi import Depends, Request
from sqlalchemy.orm import Session

from matchmaker.config import Settings
from matchmaker.context import RequestContext
from matchmaker.database import get_db
from matchmaker.errors import Unauthorized
from matchmaker.services.user_sync import sync_user
from matchmaker.utils.jwt_handler import request_identity


def get_settings_from_app(request: Request) -> Settings:
    return request.app.state.settings


def get_request_context(
    request: Request,
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings_from_app),
) -> RequestContext:
    identity = request_identity(request, settings)
    context = RequestContext(db=db, settings=settings, identity=identity)
    if identity is not None:
        context.user = sync_user(db, identity, retry_delay=settings.user_sync_retry_delay)
    return context


def get_authenticated_context(context: RequestContext = Depends(get_request_context)) -> RequestContext:
    if context.user is None:
        raise Unauthorized()
    return context
