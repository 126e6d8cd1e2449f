# profile.py
from typing import Any

from fastapi import APIRouter, Body, Depends, Query

from matchmaker.context import RequestContext
from matchmaker.routers.dependencies import get_authenticated_context
from matchmaker.schemas.profile import (
    CompletionStatus,
    ProfileRead,
    ProfileUpdate,
    SaveProfileTabRequest,
    SaveProfileTabResponse,
    UpdateProfileResponse,
    ValidateProfileResponse,
)
from matchmaker.services import profile_service
from matchmaker.services.profile_validation import validate_complete_profile, validate_section


router = APIRouter(prefix="/profile", tags=["profile"])


@router.get("", response_model=ProfileRead | None)
def get_profile(context: RequestContext = Depends(get_authenticated_context)) -> ProfileRead | None:
    profile = profile_service.get_profile(context)
    if profile is None:
        return None
    return ProfileRead.model_validate(profile)


@router.put("", response_model=UpdateProfileResponse)
def update_profile(
    payload: ProfileUpdate,
    context: RequestContext = Depends(get_authenticated_context),
) -> UpdateProfileResponse:
    profile = profile_service.update_profile(context, payload)
    return UpdateProfileResponse(
        success=True,
        profile=ProfileRead.model_validate(profile),
        message=profile_service.UPDATE_SUCCESS_MESSAGE,
    )


@router.get("/completion", response_model=CompletionStatus)
def get_completion_status(context: RequestContext = Depends(get_authenticated_context)) -> CompletionStatus:
    result = profile_service.get_completion_status(context)
    return CompletionStatus(
        is_complete=result.is_complete,
        completion_percentage=result.completion_percentage,
        missing_fields=result.missing_fields,
    )


@router.post("/tabs", response_model=SaveProfileTabResponse)
def save_profile_tab(
    payload: SaveProfileTabRequest,
    context: RequestContext = Depends(get_authenticated_context),
) -> SaveProfileTabResponse:
    profile_service.save_profile_tab(context, payload.tab_name, payload.tab_data)
    return SaveProfileTabResponse(success=True, message=profile_service.tab_saved_message(payload.tab_name))


@router.post("/validate", response_model=ValidateProfileResponse)
def validate_profile(
    data: dict[str, Any] = Body(...),
    section: str | None = Query(default=None),
    context: RequestContext = Depends(get_authenticated_context),
) -> ValidateProfileResponse:
    if section:
        validate_section(section, data)
    else:
        validate_complete_profile(data)
    return ValidateProfileResponse(valid=True, section=section)
