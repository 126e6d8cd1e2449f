# __init__.py
from matchmaker.schemas.dashboard import DashboardStats, DashboardSummary
from matchmaker.schemas.profile import (
	SECTION_SCHEMAS,
	BasicInfo,
	CompleteProfile,
	CompletionStatus,
	EducationCareer,
	FamilyInfo,
	LocationContact,
	Lifestyle,
	PartnerPreferences,
	ProfileRead,
	ProfileUpdate,
	ReligionCulture,
	SaveProfileTabRequest,
	SaveProfileTabResponse,
	UpdateProfileResponse,
	ValidateProfileResponse,
)

__all__ = [
	"SECTION_SCHEMAS",
	"BasicInfo",
	"CompleteProfile",
	"CompletionStatus",
	"DashboardStats",
	"DashboardSummary",
	"EducationCareer",
	"FamilyInfo",
	"LocationContact",
	"Lifestyle",
	"PartnerPreferences",
	"ProfileRead",
	"ProfileUpdate",
	"ReligionCulture",
	"SaveProfileTabRequest",
	"SaveProfileTabResponse",
	"UpdateProfileResponse",
	"ValidateProfileResponse",
]
