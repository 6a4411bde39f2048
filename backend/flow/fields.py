"""Profile form fields: labels, inputs and the wizard step each belongs to."""

from dataclasses import dataclass

from pydantic.alias_generators import to_camel

GENDERS = ["Male", "Female", "Other", "Prefer not to say"]
CASTES = ["General", "OBC", "SC", "ST", "Other"]
RELIGIONS = ["Hindu", "Muslim", "Christian", "Sikh", "Buddhist", "Jain", "Other"]
INCOME_RANGES = ["Below 1 Lakh", "1-3 Lakhs", "3-6 Lakhs", "6-10 Lakhs", "Above 10 Lakhs"]
PERFORMANCE_LEVELS = ["Excellent", "Good", "Average", "Below Average"]
FIELDS_OF_STUDY = [
    "Engineering",
    "Medicine",
    "Arts",
    "Commerce",
    "Science",
    "Law",
    "Management",
    "Other",
]
INSTITUTION_TYPES = ["Government", "State", "Local", "Private", "Any"]
LOCATIONS = [
    "Andhra Pradesh",
    "Arunachal Pradesh",
    "Assam",
    "Bihar",
    "Chhattisgarh",
    "Goa",
    "Gujarat",
    "Haryana",
    "Himachal Pradesh",
    "Jharkhand",
    "Karnataka",
    "Kerala",
    "Madhya Pradesh",
    "Maharashtra",
    "Manipur",
    "Meghalaya",
    "Mizoram",
    "Nagaland",
    "Odisha",
    "Punjab",
    "Rajasthan",
    "Sikkim",
    "Tamil Nadu",
    "Telangana",
    "Tripura",
    "Uttar Pradesh",
    "Uttarakhand",
    "West Bengal",
    "Delhi",
    "Other",
]


@dataclass(frozen=True)
class FormField:
    name: str
    label: str
    step: int
    placeholder: str = ""
    options: tuple[str, ...] = ()
    required: bool = True

    @property
    def alias(self) -> str:
        """Name used in HTML forms and JSON bodies."""
        return to_camel(self.name)

    @property
    def is_select(self) -> bool:
        return bool(self.options)


FORM_FIELDS = [
    # Step 1: Personal Details
    FormField("age", "Age", 1, "Enter your age"),
    FormField("gender", "Gender", 1, "Select gender", tuple(GENDERS)),
    FormField("caste", "Caste", 1, "Select caste", tuple(CASTES)),
    FormField("religion", "Religion", 1, "Select religion", tuple(RELIGIONS)),
    FormField("family_income", "Annual Family Income", 1, "Select income range", tuple(INCOME_RANGES)),
    FormField("family_occupation", "Family Occupation", 1, "E.g., Farming, Business, Service"),
    # Step 2: Academic Information
    FormField(
        "academic_performance",
        "Academic Performance",
        2,
        "Select performance level",
        tuple(PERFORMANCE_LEVELS),
    ),
    FormField("gpa", "GPA/Percentage", 2, "Enter your GPA or percentage"),
    FormField("field_of_study", "Field of Study", 2, "Select field", tuple(FIELDS_OF_STUDY)),
    FormField("institution_type", "Institution Type", 2, "Select institution type", tuple(INSTITUTION_TYPES)),
    FormField("location", "Location (State/UT)", 2, "Select your state", tuple(LOCATIONS)),
    # Step 2: Additional information
    FormField("extracurricular", "Extracurricular Activities", 2, "E.g., Sports, Music, NCC", required=False),
    FormField("disability", "Disability Status", 2, "E.g., None, Visual, Locomotor", required=False),
    FormField("residence", "Residence", 2, "Rural or Urban", required=False),
    FormField("career", "Career Goals", 2, "E.g., Civil Services, Research", required=False),
    FormField("community", "Community", 2, "E.g., Minority, Tribal", required=False),
    FormField("language", "Language", 2, "E.g., Hindi, Tamil", required=False),
    FormField("talents", "Special Talents", 2, "E.g., Chess, Painting", required=False),
]

FIELDS_BY_NAME = {f.name: f for f in FORM_FIELDS}

STEP_TITLES = {1: "Personal Details", 2: "Academic Information"}
TOTAL_STEPS = len(STEP_TITLES)


def fields_for_step(step: int) -> list[FormField]:
    return [f for f in FORM_FIELDS if f.step == step]


def required_for_step(step: int) -> list[str]:
    """Fields checked by the wizard's next step from this step."""
    return [f.name for f in fields_for_step(step) if f.required]
