"""Shared test configuration, fixtures and pytest markers."""

import pytest

from models.requests import ProfileIntake


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "live: calls the real Gemini API (needs GEMINI_API_KEY)"
    )


@pytest.fixture
def complete_profile() -> ProfileIntake:
    return ProfileIntake(
        education_level="Undergraduate (Completed)",
        field_of_study="Engineering",
        institution="State University",
        year_of_completion="2022",
        current_status="Employed",
        work_experience="2 years as a QA analyst",
        skills=["Programming", "Data Analysis"],
        interests=["Technology", "Finance"],
        career_goals="Move into data engineering",
    )
