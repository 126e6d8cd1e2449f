from dataclasses import dataclass

from sqlalchemy.orm import Session

from matchmaker.config import Settings
from matchmaker.models.user import User
from matchmaker.utils.jwt_handler import ProviderIdentity


@dataclass
class RequestContext:
    """Everything a procedure needs for one request, resolved once."""

    db: Session
    settings: Settings
    identity: ProviderIdentity | None = None
    user: User | None = None
