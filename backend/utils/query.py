"""
Query builder.

Turns a student profile into the natural-language query sent to the search
provider, and into the filter summary shown above the results.
"""

from backend.api.schemas import ProfileDraft

PLACEHOLDERS = {
    "gender": "all",
    "location": "all locations",
    "field_of_study": "all fields",
    "academic_performance": "any",
    "caste": "any",
    "religion": "any",
    "institution_type": "any",
}
DEFAULT_PLACEHOLDER = "not specified"

# Optional details appended after the main template, in this order
EXTRA_DETAILS = [
    ("extracurricular", "Extracurricular activities"),
    ("residence", "Residence"),
    ("career", "Career goals"),
    ("community", "Community"),
    ("language", "Language"),
    ("talents", "Special talents"),
]

QUERY_TEMPLATE = (
    "Find scholarships for {gender} students in {location} studying {field_of_study} "
    "with {academic_performance} academic performance. "
    "Family background: income {family_income}, occupation {family_occupation}, "
    "caste {caste}, religion {religion}. "
    "Looking for scholarships in {institution_type} institutions. "
    "Additional details: Age {age}, GPA {gpa}, Disability status: {disability}"
)

SUMMARY_TEMPLATE = (
    "Showing scholarships for {gender} students in {location} studying {field_of_study} "
    "with {caste} caste and {religion} religious background."
)


def field_value(profile: ProfileDraft, name: str) -> str:
    """Return the field's value, or its placeholder when blank."""
    value = getattr(profile, name)
    if value and value.strip():
        return value
    return PLACEHOLDERS.get(name, DEFAULT_PLACEHOLDER)


def _values(profile: ProfileDraft) -> dict[str, str]:
    return {name: field_value(profile, name) for name in ProfileDraft.model_fields}


def build_search_query(profile: ProfileDraft) -> str:
    """Build the provider query. Same profile, same string."""
    values = _values(profile)
    query = QUERY_TEMPLATE.format(**values)
    extras = [f"{label}: {values[name]}" for name, label in EXTRA_DETAILS]
    return f"{query}, " + ", ".join(extras)


def summarize_filters(profile: ProfileDraft) -> str:
    """Header line for the results page."""
    return SUMMARY_TEMPLATE.format(**_values(profile))
