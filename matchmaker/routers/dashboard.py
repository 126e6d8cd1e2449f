from fastapi import APIRouter, Depends

from matchmaker.context import RequestContext
from matchmaker.routers.dependencies import get_authenticated_context
from matchmaker.schemas.dashboard import DashboardSummary
from matchmaker.services import profile_service
from matchmaker.services.completion import compute_completion_percentage


router = APIRouter(prefix="/dashboard", tags=["dashboard"])


@router.get("", response_model=DashboardSummary)
def read_dashboard(context: RequestContext = Depends(get_authenticated_context)) -> DashboardSummary:
    profile = profile_service.get_profile(context)
    return DashboardSummary(
        name=context.user.name,
        profile_complete=bool(profile is not None and profile.is_complete),
        completion_percentage=compute_completion_percentage(profile),
    )
