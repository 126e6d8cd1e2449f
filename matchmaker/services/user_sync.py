"""Keep the local User row in step with the identity provider.

Called once per authenticated request. Creation races between two requests for
the same new subject are resolved by retrying the update path once.
"""
from __future__ import annotations

import logging
import time

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from matchmaker.errors import StorageFailure
from matchmaker.models.user import User
from matchmaker.utils.jwt_handler import ProviderIdentity


logger = logging.getLogger(__name__)

SYNC_FAILED_MESSAGE = "Failed to sync user"


def _find_user(db: Session, kinde_id: str) -> User | None:
    return db.query(User).filter(User.kinde_id == kinde_id).one_or_none()


def _apply_identity(db: Session, user: User, identity: ProviderIdentity) -> User:
    user.email = identity.email
    user.name = identity.display_name
    user.avatar = identity.picture
    db.commit()
    db.refresh(user)
    return user


def _create_user(db: Session, identity: ProviderIdentity) -> User:
    user = User(
        kinde_id=identity.subject,
        email=identity.email,
        name=identity.display_name,
        avatar=identity.picture,
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


def sync_user(db: Session, identity: ProviderIdentity, *, retry_delay: float = 0.1) -> User:
    try:
        existing = _find_user(db, identity.subject)
        if existing is not None:
            return _apply_identity(db, existing, identity)

        try:
            user = _create_user(db, identity)
            logger.info("user.sync created user_id=%s", user.id)
            return user
        except IntegrityError:
            # Another request created the same subject first; fall through to the update path.
            db.rollback()
            logger.warning("user.sync duplicate key for subject=%s, retrying as update", identity.subject)

        time.sleep(retry_delay)
        existing = _find_user(db, identity.subject)
        if existing is None:
            logger.error("user.sync retry found no user for subject=%s", identity.subject)
            raise StorageFailure(SYNC_FAILED_MESSAGE)
        return _apply_identity(db, existing, identity)
    except SQLAlchemyError as exc:
        db.rollback()
        logger.exception("user.sync failed for subject=%s", identity.subject)
        raise StorageFailure(SYNC_FAILED_MESSAGE) from exc
