# profile_service.py
"""Profile procedures: read, partial update, completion status and tab saves.

Every function takes a RequestContext whose user is already resolved; the
profile touched is always the caller's own.
"""
from __future__ import annotations

import logging
from typing import Any, Mapping

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from matchmaker.context import RequestContext
from matchmaker.errors import StorageFailure
from matchmaker.models.profile import Profile
from matchmaker.schemas.profile import ProfileUpdate
from matchmaker.services.completion import CompletionResult, completion_status, compute_is_complete
from matchmaker.services.profile_validation import validate_profile_update


logger = logging.getLogger(__name__)

UPDATE_SUCCESS_MESSAGE = "Profile updated successfully!"
UPDATE_FAILED_MESSAGE = "Failed to update profile. Please try again."
TAB_FAILED_MESSAGE = "Failed to save. Please try again."


def find_profile(db: Session, user_id: int) -> Profile | None:
    return db.query(Profile).filter(Profile.user_id == user_id).one_or_none()


def _changes(update: ProfileUpdate) -> dict[str, Any]:
    # Only fields the caller actually sent; explicit nulls clear a value.
    return update.model_dump(exclude_unset=True)


def _apply(profile: Profile, changes: Mapping[str, Any]) -> None:
    for name, value in changes.items():
        setattr(profile, name, value)


def get_profile(context: RequestContext) -> Profile | None:
    return find_profile(context.db, context.user.id)


def update_profile(context: RequestContext, update: ProfileUpdate) -> Profile:
    db = context.db
    user_id = context.user.id
    changes = _changes(update)
    try:
        profile = find_profile(db, user_id)
        if profile is None:
            # New profiles start incomplete whatever was submitted.
            profile = Profile(user_id=user_id, is_complete=False)
            _apply(profile, changes)
            db.add(profile)
            logger.info("profile.update created user_id=%s fields=%s", user_id, sorted(changes))
        else:
            is_complete = compute_is_complete(changes, profile)
            _apply(profile, changes)
            profile.is_complete = is_complete
            logger.info(
                "profile.update user_id=%s fields=%s is_complete=%s", user_id, sorted(changes), is_complete
            )
        db.commit()
        db.refresh(profile)
        return profile
    except SQLAlchemyError as exc:
        db.rollback()
        logger.exception("profile.update failed user_id=%s", user_id)
        raise StorageFailure(UPDATE_FAILED_MESSAGE) from exc


def get_completion_status(context: RequestContext) -> CompletionResult:
    return completion_status(get_profile(context))


def save_profile_tab(context: RequestContext, tab_name: str, tab_data: Mapping[str, Any]) -> Profile:
    """Upsert one tab's fields.

    ``is_complete`` is left alone here unless
    ``settings.recompute_completion_on_tab_save`` is on; a full
    ``update_profile`` call is what normally settles it.
    """
    changes = _changes(validate_profile_update(tab_data))
    db = context.db
    user_id = context.user.id
    try:
        profile = find_profile(db, user_id)
        if profile is None:
            profile = Profile(user_id=user_id, is_complete=False)
            db.add(profile)
        elif context.settings.recompute_completion_on_tab_save:
            profile.is_complete = compute_is_complete(changes, profile)
        _apply(profile, changes)
        db.commit()
        db.refresh(profile)
        logger.info("profile.tab_save user_id=%s tab=%s fields=%s", user_id, tab_name, sorted(changes))
        return profile
    except SQLAlchemyError as exc:
        db.rollback()
        logger.exception("profile.tab_save failed user_id=%s tab=%s", user_id, tab_name)
        raise StorageFailure(TAB_FAILED_MESSAGE) from exc


def tab_saved_message(tab_name: str) -> str:
    return f"{tab_name} saved successfully!"
