"""Multi-step profile intake: option lists, per-step validation, completeness."""

from models.requests import ProfileIntake

PROFILE_STEPS = ["Education", "Career", "Interests & Goals", "Additional Info"]

EDUCATION_LEVELS = [
    "10th Pass",
    "12th Pass",
    "Diploma",
    "Undergraduate (Pursuing)",
    "Undergraduate (Completed)",
    "Postgraduate (Pursuing)",
    "Postgraduate (Completed)",
    "PhD (Pursuing)",
    "PhD (Completed)",
    "Other",
]

FIELDS_OF_STUDY = [
    "Science",
    "Commerce",
    "Arts",
    "Engineering",
    "Medicine",
    "Law",
    "Business Administration",
    "Computer Applications",
    "Design",
    "Other",
]

INTERESTS = [
    "Technology",
    "Business",
    "Healthcare",
    "Arts & Design",
    "Science & Research",
    "Education",
    "Engineering",
    "Finance",
    "Marketing",
    "Social Services",
    "Other",
]

SKILLS = [
    "Programming",
    "Data Analysis",
    "Graphic Design",
    "Content Writing",
    "Digital Marketing",
    "Project Management",
    "Public Speaking",
    "Research",
    "Language Proficiency",
    "Leadership",
]

# Fields counted towards completeness
_COMPLETENESS_FIELDS = [
    "education_level",
    "field_of_study",
    "institution",
    "year_of_completion",
    "current_status",
    "work_experience",
    "skills",
    "interests",
    "career_goals",
    "preferred_work_environment",
    "preferred_work_location",
    "salary_expectations",
]


def _blank(value: str) -> bool:
    return not value or not value.strip()


def validate_step(profile: ProfileIntake, step: int) -> dict[str, str]:
    """Return field -> error message for the given step (empty when valid)."""
    errors: dict[str, str] = {}
    if step == 0:
        if _blank(profile.education_level):
            errors["education_level"] = "Education level is required"
        if _blank(profile.field_of_study):
            errors["field_of_study"] = "Field of study is required"
        if _blank(profile.institution):
            errors["institution"] = "Institution name is required"
    elif step == 1:
        if _blank(profile.current_status):
            errors["current_status"] = "Current status is required"
        if not [s for s in profile.skills if s.strip()]:
            errors["skills"] = "Please select at least one skill"
    elif step == 2:
        if not [i for i in profile.interests if i.strip()]:
            errors["interests"] = "Please select at least one interest"
        if _blank(profile.career_goals):
            errors["career_goals"] = "Career goals are required"
    elif step not in range(len(PROFILE_STEPS)):
        raise ValueError(f"Unknown profile step: {step}")
    return errors


def validate_profile(profile: ProfileIntake) -> dict[str, str]:
    errors: dict[str, str] = {}
    for step in range(len(PROFILE_STEPS)):
        errors.update(validate_step(profile, step))
    return errors


def profile_completeness(profile: ProfileIntake) -> float:
    """Share (0.0-1.0) of intake fields the user has filled in."""
    filled = 0
    for name in _COMPLETENESS_FIELDS:
        value = getattr(profile, name)
        if isinstance(value, list):
            filled += bool([v for v in value if v.strip()])
        else:
            filled += not _blank(value)
    return round(filled / len(_COMPLETENESS_FIELDS), 3)
