# profile.py
import re
from datetime import date, datetime
from enum import Enum
from typing import Annotated, Any

from pydantic import AfterValidator, ConfigDict, Field, Strict, field_serializer
from pydantic.alias_generators import to_camel
from pydantic_core import PydanticCustomError

from matchmaker.schemas.base import CamelModel


MIN_AGE = 18
MAX_AGE = 80


class Gender(str, Enum):
    MALE = "MALE"
    FEMALE = "FEMALE"
    OTHER = "OTHER"


class FamilyType(str, Enum):
    NUCLEAR = "NUCLEAR"
    JOINT = "JOINT"
    OTHER = "OTHER"


class MaritalStatus(str, Enum):
    NEVER_MARRIED = "NEVER_MARRIED"
    DIVORCED = "DIVORCED"
    WIDOWED = "WIDOWED"
    SEPARATED = "SEPARATED"


class Religion(str, Enum):
    HINDU = "HINDU"
    MUSLIM = "MUSLIM"
    CHRISTIAN = "CHRISTIAN"
    SIKH = "SIKH"
    BUDDHIST = "BUDDHIST"
    JAIN = "JAIN"
    OTHER = "OTHER"


class Complexion(str, Enum):
    VERY_FAIR = "VERY_FAIR"
    FAIR = "FAIR"
    WHEATISH = "WHEATISH"
    DARK = "DARK"
    VERY_DARK = "VERY_DARK"


class BodyType(str, Enum):
    SLIM = "SLIM"
    AVERAGE = "AVERAGE"
    ATHLETIC = "ATHLETIC"
    HEAVY = "HEAVY"


class Diet(str, Enum):
    VEGETARIAN = "VEGETARIAN"
    NON_VEGETARIAN = "NON_VEGETARIAN"
    VEGAN = "VEGAN"
    JAIN_VEGETARIAN = "JAIN_VEGETARIAN"


class SmokingHabit(str, Enum):
    NEVER = "NEVER"
    OCCASIONALLY = "OCCASIONALLY"
    REGULARLY = "REGULARLY"


class DrinkingHabit(str, Enum):
    NEVER = "NEVER"
    OCCASIONALLY = "OCCASIONALLY"
    REGULARLY = "REGULARLY"


def _optional_text(min_length: int, max_length: int) -> Any:
    """Bounded text where "" means "not provided yet"."""

    def check(value: str) -> str:
        if value == "":
            return value
        if len(value) < min_length:
            raise PydanticCustomError(
                "text_too_short", "Must be at least {min_length} characters", {"min_length": min_length}
            )
        if len(value) > max_length:
            raise PydanticCustomError(
                "text_too_long", "Must be at most {max_length} characters", {"max_length": max_length}
            )
        return value

    return Annotated[str, AfterValidator(check)]


def _bounded_int(
    minimum: int,
    maximum: int,
    too_small: str = "Must be at least {minimum}",
    too_large: str = "Must be at most {maximum}",
) -> Any:
    def check(value: int) -> int:
        if value < minimum:
            raise PydanticCustomError("number_too_small", too_small, {"minimum": minimum})
        if value > maximum:
            raise PydanticCustomError("number_too_large", too_large, {"maximum": maximum})
        return value

    return Annotated[int, Strict(), AfterValidator(check)]


_PHONE_RE = re.compile(r"\+?[0-9]{10,15}")


def _check_phone(value: str) -> str:
    if value == "" or _PHONE_RE.fullmatch(value):
        return value
    raise PydanticCustomError("invalid_phone", "Please enter a valid phone number")


def age_in_years(born: date, today: date | None = None) -> int:
    # Calendar-year difference only; birthdays later in the year are not accounted for.
    today = today or date.today()
    return today.year - born.year


def _check_birth_date(value: date) -> date:
    age = age_in_years(value)
    if age < MIN_AGE or age > MAX_AGE:
        raise PydanticCustomError(
            "age_out_of_range",
            "Age must be between {min_age} and {max_age}",
            {"min_age": MIN_AGE, "max_age": MAX_AGE},
        )
    return value


Text50 = _optional_text(2, 50)
ShortText = _optional_text(2, 30)
LongText = _optional_text(2, 100)
Note = _optional_text(0, 200)
Bio = _optional_text(10, 500)
Phone = Annotated[str, AfterValidator(_check_phone)]
BirthDate = Annotated[date, AfterValidator(_check_birth_date)]
Height = _bounded_int(120, 250, "Height must be at least {minimum} cm", "Height must be at most {maximum} cm")
Weight = _bounded_int(30, 200, "Weight must be at least {minimum} kg", "Weight must be at most {maximum} kg")
Siblings = _bounded_int(0, 20)
PartnerAgeMin = _bounded_int(
    MIN_AGE, MAX_AGE, "Minimum age must be at least {minimum}", "Minimum age must be at most {maximum}"
)
PartnerAgeMax = _bounded_int(
    MIN_AGE, MAX_AGE, "Maximum age must be at least {minimum}", "Maximum age must be at most {maximum}"
)
PartnerHeight = _bounded_int(120, 250)


class ProfileSection(CamelModel):
    model_config = ConfigDict(use_enum_values=True)


class BasicInfo(ProfileSection):
    first_name: Text50 | None = None
    last_name: Text50 | None = None
    date_of_birth: BirthDate
    gender: Gender
    height: Height | None = None
    weight: Weight | None = None
    phone: Phone | None = None
    marital_status: MaritalStatus | None = None
    complexion: Complexion | None = None
    body_type: BodyType | None = None


class LocationContact(ProfileSection):
    city: Text50 | None = None
    state: Text50 | None = None
    country: Text50 | None = None


class EducationCareer(ProfileSection):
    education: LongText | None = None
    occupation: LongText | None = None
    income: Text50 | None = None
    company: LongText | None = None


class FamilyInfo(ProfileSection):
    father_name: Text50 | None = None
    mother_name: Text50 | None = None
    siblings: Siblings | None = None
    family_type: FamilyType | None = None
    family_income: Text50 | None = None


class ReligionCulture(ProfileSection):
    religion: Religion | None = None
    caste: Text50 | None = None
    subcaste: Text50 | None = None
    mother_tongue: ShortText | None = None
    languages: list[str] | None = None


class Lifestyle(ProfileSection):
    diet: Diet | None = None
    smoking: SmokingHabit | None = None
    drinking: DrinkingHabit | None = None
    disabilities: Note | None = None
    bio: Bio | None = None
    hobbies: list[str] | None = None


class PartnerPreferences(ProfileSection):
    # Range checks between min and max live in validate_complete_profile().
    partner_age_min: PartnerAgeMin | None = None
    partner_age_max: PartnerAgeMax | None = None
    partner_height_min: PartnerHeight | None = None
    partner_height_max: PartnerHeight | None = None
    partner_education: LongText | None = None
    partner_occupation: LongText | None = None
    partner_income: Text50 | None = None
    partner_location: list[str] | None = None


class CompleteProfile(
    BasicInfo,
    LocationContact,
    EducationCareer,
    FamilyInfo,
    ReligionCulture,
    Lifestyle,
    PartnerPreferences,
):
    model_config = ConfigDict(extra="forbid")


class ProfileUpdate(CompleteProfile):
    """Every field optional so a single tab can be saved on its own."""

    date_of_birth: BirthDate | None = None
    gender: Gender | None = None


SECTION_SCHEMAS: dict[str, type[ProfileSection]] = {
    "basic": BasicInfo,
    "location": LocationContact,
    "career": EducationCareer,
    "family": FamilyInfo,
    "culture": ReligionCulture,
    "lifestyle": Lifestyle,
    "partner": PartnerPreferences,
}


class ProfileRead(CamelModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: int

    first_name: str | None = None
    last_name: str | None = None
    date_of_birth: date | None = None
    gender: str | None = None
    height: int | None = None
    weight: int | None = None
    phone: str | None = None
    marital_status: str | None = None
    complexion: str | None = None
    body_type: str | None = None

    city: str | None = None
    state: str | None = None
    country: str | None = None

    education: str | None = None
    occupation: str | None = None
    income: str | None = None
    company: str | None = None

    father_name: str | None = None
    mother_name: str | None = None
    siblings: int | None = None
    family_type: str | None = None
    family_income: str | None = None

    religion: str | None = None
    caste: str | None = None
    subcaste: str | None = None
    mother_tongue: str | None = None
    languages: list[str] | None = None

    diet: str | None = None
    smoking: str | None = None
    drinking: str | None = None
    disabilities: str | None = None
    bio: str | None = None
    hobbies: list[str] | None = None

    partner_age_min: int | None = None
    partner_age_max: int | None = None
    partner_height_min: int | None = None
    partner_height_max: int | None = None
    partner_education: str | None = None
    partner_occupation: str | None = None
    partner_income: str | None = None
    partner_location: list[str] | None = None

    is_complete: bool = False
    created_at: datetime | None = None
    updated_at: datetime | None = None


class UpdateProfileResponse(CamelModel):
    success: bool
    profile: ProfileRead
    message: str


class CompletionStatus(CamelModel):
    is_complete: bool
    completion_percentage: int = Field(ge=0, le=100)
    missing_fields: list[str] = Field(default_factory=list)

    @field_serializer("missing_fields")
    def _serialize_missing_fields(self, value: list[str]) -> list[str]:
        return [to_camel(name) for name in value]


class SaveProfileTabRequest(CamelModel):
    tab_name: str = Field(min_length=1)
    tab_data: dict[str, Any] = Field(default_factory=dict)


class SaveProfileTabResponse(CamelModel):
    success: bool
    message: str


class ValidateProfileResponse(CamelModel):
    valid: bool
    section: str | None = None
