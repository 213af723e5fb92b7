import pytest

from models.requests import ProfileIntake
from services.profile_intake import (
    PROFILE_STEPS,
    profile_completeness,
    validate_profile,
    validate_step,
)


def test_steps():
    assert PROFILE_STEPS == ["Education", "Career", "Interests & Goals", "Additional Info"]


def test_empty_profile_step_errors():
    profile = ProfileIntake()
    assert set(validate_step(profile, 0)) == {"education_level", "field_of_study", "institution"}
    assert set(validate_step(profile, 1)) == {"current_status", "skills"}
    assert set(validate_step(profile, 2)) == {"interests", "career_goals"}
    assert validate_step(profile, 3) == {}


def test_error_messages():
    errors = validate_step(ProfileIntake(), 1)
    assert errors["skills"] == "Please select at least one skill"
    assert errors["current_status"] == "Current status is required"


def test_whitespace_counts_as_blank():
    profile = ProfileIntake(institution="   ", skills=["  "])
    assert "institution" in validate_step(profile, 0)
    assert "skills" in validate_step(profile, 1)


def test_complete_profile_valid(complete_profile):
    assert validate_profile(complete_profile) == {}


def test_unknown_step():
    with pytest.raises(ValueError):
        validate_step(ProfileIntake(), 7)


def test_completeness():
    assert profile_completeness(ProfileIntake()) == 0.0
    partial = ProfileIntake(education_level="Diploma", skills=["Research"], interests=["Finance"])
    assert profile_completeness(partial) == 0.25


def test_completeness_full(complete_profile):
    full = complete_profile.model_copy(
        update={
            "preferred_work_environment": "Remote",
            "preferred_work_location": "Berlin",
            "salary_expectations": "60k",
        }
    )
    assert profile_completeness(full) == 1.0
