"""Pytest configuration for domain package tests."""

import pytest

from resume_scorer.domain import ResumeContent


@pytest.fixture
def legacy_resume() -> dict:
    """A resume using the older technical/soft/tools skill layout."""
    return {
        "summary": "Skilled developer. Builds things.",
        "experience": [
            {
                "company": "Globex",
                "role": "Developer",
                "duration": "2019 - 2023",
                "bullets": ["Developed internal dashboards", "Fixed bugs"],
            }
        ],
        "skills": {
            "technical": ["Go", "Rust", "SQL"],
            "soft": ["Communication"],
            "tools": ["Git"],
        },
        "education": [],
        "additionalSections": [],
    }


@pytest.fixture
def resume_from():
    """Build a ResumeContent from keyword overrides of an empty resume."""

    def _build(**fields) -> ResumeContent:
        return ResumeContent.from_dict(fields)

    return _build
