"""API request/response schemas."""

from typing import Any

from pydantic import BaseModel, Field, ValidationError, ValidationInfo, field_validator
from pydantic.alias_generators import to_camel
from pydantic_core import PydanticCustomError

# Required profile fields and the message shown when one is missing
REQUIRED_MESSAGES = {
    "age": "Age is required",
    "gender": "Gender is required",
    "caste": "Caste is required",
    "religion": "Religion is required",
    "family_income": "Family income is required",
    "family_occupation": "Family occupation is required",
    "academic_performance": "Academic performance is required",
    "location": "Location is required",
    "gpa": "GPA is required",
    "field_of_study": "Field of study is required",
    "institution_type": "Institution type is required",
}

OPTIONAL_FIELDS = (
    "extracurricular",
    "disability",
    "residence",
    "career",
    "community",
    "language",
    "talents",
)


# Profile schemas
class ProfileDraft(BaseModel):
    """Student profile as it is being edited. Nothing is enforced yet."""

    age: str = ""
    gender: str = ""
    caste: str = ""
    religion: str = ""
    family_income: str = ""
    family_occupation: str = ""
    academic_performance: str = ""
    location: str = ""
    gpa: str = ""
    field_of_study: str = ""
    institution_type: str = ""
    extracurricular: str = ""
    disability: str = "None"
    residence: str = ""
    career: str = ""
    community: str = ""
    language: str = ""
    talents: str = ""

    class Config:
        alias_generator = to_camel
        populate_by_name = True

    def to_profile(self) -> "StudentProfile":
        """Validate the draft. Raises ValidationError listing every missing field."""
        return StudentProfile.model_validate(self.model_dump())


class StudentProfile(ProfileDraft):
    """Validated, frozen profile handed to the search on submit."""

    class Config:
        frozen = True
        validate_default = True

    @field_validator(*REQUIRED_MESSAGES)
    @classmethod
    def _require_value(cls, value: str, info: ValidationInfo) -> str:
        if not value.strip():
            raise PydanticCustomError(
                "required", REQUIRED_MESSAGES[info.field_name], {"field": info.field_name}
            )
        return value


def field_errors(exc: ValidationError) -> dict[str, str]:
    """Map a profile ValidationError to {field_name: message}."""
    errors = {}
    for error in exc.errors():
        field = (error.get("ctx") or {}).get("field")
        if field is None and error["loc"]:
            field = str(error["loc"][0])
        errors.setdefault(field, error["msg"])
    return errors


# Search schemas
class SearchRequest(BaseModel):
    query: Any = Field(default=None, description="Natural-language search query")


class SearchResult(BaseModel):
    """One scholarship returned by the search provider."""

    title: str = ""
    url: str = ""
    content: str = ""
    score: float | None = Field(default=None, description="Relevance between 0 and 1")

    class Config:
        extra = "allow"  # Keep any other provider keys

    @field_validator("title", "url", "content", mode="before")
    @classmethod
    def _none_as_empty(cls, value: Any) -> Any:
        return "" if value is None else value


class SearchResponse(BaseModel):
    results: list[dict[str, Any]]


class ErrorResponse(BaseModel):
    error: str
    details: Any = None
