# __init__.py
from matchmaker.models.profile import Profile
from matchmaker.models.user import User

__all__ = [
	"Profile",
	"User",
]
