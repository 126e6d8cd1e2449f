from pydantic import Field

from matchmaker.schemas.base import CamelModel


class DashboardStats(CamelModel):
    # Matching and interests do not exist yet; these stay at zero.
    interests_received: int = 0
    profile_views: int = 0
    new_matches: int = 0


class DashboardSummary(CamelModel):
    name: str | None = None
    profile_complete: bool
    completion_percentage: int
    stats: DashboardStats = Field(default_factory=DashboardStats)
