from __future__ import annotations

from typing import Any, Mapping

from pydantic import ValidationError

from matchmaker.errors import FieldError, ProfileValidationError, field_errors_from_validation
from matchmaker.schemas.profile import (
    SECTION_SCHEMAS,
    CompleteProfile,
    PartnerPreferences,
    ProfileSection,
    ProfileUpdate,
)


AGE_RANGE_MESSAGE = "Maximum age must be greater than or equal to minimum age"
HEIGHT_RANGE_MESSAGE = "Maximum height must be greater than or equal to minimum height"


def partner_range_errors(partner: PartnerPreferences) -> list[FieldError]:
    errors: list[FieldError] = []
    if partner.partner_age_min is not None and partner.partner_age_max is not None:
        if partner.partner_age_max < partner.partner_age_min:
            errors.append(FieldError(path="partnerAgeMax", message=AGE_RANGE_MESSAGE))
    if partner.partner_height_min is not None and partner.partner_height_max is not None:
        if partner.partner_height_max < partner.partner_height_min:
            errors.append(FieldError(path="partnerHeightMax", message=HEIGHT_RANGE_MESSAGE))
    return errors


def validate_complete_profile(data: Mapping[str, Any]) -> CompleteProfile:
    """Validate a whole profile, including the partner range rules.

    All violations are collected. The range rules still run when unrelated
    fields fail, as long as the partner section itself is valid.
    """
    errors: list[FieldError] = []
    profile: CompleteProfile | None = None
    try:
        profile = CompleteProfile.model_validate(data)
    except ValidationError as exc:
        errors.extend(field_errors_from_validation(exc))

    if profile is not None:
        errors.extend(partner_range_errors(profile))
    else:
        try:
            partner = PartnerPreferences.model_validate(data)
        except ValidationError:
            partner = None
        if partner is not None:
            errors.extend(partner_range_errors(partner))

    if errors or profile is None:
        raise ProfileValidationError(errors)
    return profile


def validate_profile_update(data: Mapping[str, Any]) -> ProfileUpdate:
    try:
        return ProfileUpdate.model_validate(data)
    except ValidationError as exc:
        raise ProfileValidationError(field_errors_from_validation(exc)) from exc


def validate_section(section: str, data: Mapping[str, Any]) -> ProfileSection:
    schema = SECTION_SCHEMAS.get(section)
    if schema is None:
        known = ", ".join(SECTION_SCHEMAS)
        raise ProfileValidationError(
            [FieldError(path="section", message=f"Unknown section '{section}'. Expected one of: {known}")]
        )
    try:
        return schema.model_validate(data)
    except ValidationError as exc:
        raise ProfileValidationError(field_errors_from_validation(exc)) from exc
