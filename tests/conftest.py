"""Global pytest fixtures: deterministic environment and sample documents."""

from __future__ import annotations

import copy
import logging

import pytest

JOB_ANALYSIS = {
    "requiredSkills": ["Python", "AWS", "Docker", "PostgreSQL", "React"],
    "preferredQualifications": ["Experience with Kubernetes", "Bachelor's degree in Computer Science"],
    "keyResponsibilities": ["Build backend services", "Own CI/CD pipelines"],
    "atsKeywords": [
        {"keyword": "python", "frequency": 5},
        {"keyword": "aws", "frequency": 4},
        {"keyword": "docker", "frequency": 3},
        {"keyword": "microservices", "frequency": 2},
        {"keyword": "postgresql", "frequency": 2},
    ],
    "jobLevel": "senior",
    "industry": "Software Development",
    "companyCultureIndicators": ["fast-paced", "collaborative"],
}

STRONG_RESUME = {
    "summary": (
        "Experienced backend engineer with 8 years building Python microservices on AWS. "
        "Proven record of shipping reliable, scalable platforms for high-traffic products."
    ),
    "experience": [
        {
            "company": "Acme Corp",
            "role": "Senior Software Engineer",
            "duration": "2020 - Present",
            "bullets": [
                "Led migration of 12 Python microservices to AWS, reducing hosting costs by 30%",
                "Designed Docker-based CI pipeline that cut release time by 50%",
                "Optimized PostgreSQL queries, improving p95 latency by 40%",
            ],
        },
        {
            "company": "StartupCo",
            "role": "Software Engineer",
            "duration": "2016 - 2020",
            "bullets": [
                "Built React dashboards used by 5000 customers",
                "Implemented REST APIs in Python serving $2M in annual transactions",
            ],
        },
    ],
    "skills": {
        "languages": ["Python", "JavaScript", "SQL"],
        "frameworks": ["React", "FastAPI"],
        "databases": ["PostgreSQL", "Redis"],
        "cloud": ["AWS"],
        "tools": ["Docker", "Git"],
    },
    "education": [
        {"degree": "B.S. Computer Science", "institution": "State University", "year": "2016"},
    ],
    "additionalSections": [
        {"title": "Certifications", "items": ["AWS Certified Solutions Architect"]},
    ],
}

EMPTY_RESUME = {
    "summary": "",
    "experience": [],
    "skills": {},
    "education": [],
    "additionalSections": [],
}


@pytest.fixture(autouse=True)
def _isolate_runtime_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Clear local runtime env that can leak into tests on developer machines."""
    monkeypatch.delenv("RESUME_SCORER_CONFIG", raising=False)


@pytest.fixture(autouse=True)
def _reset_scorer_logging():
    """Drop handlers bound to a per-test captured stream."""
    yield
    logger = logging.getLogger("resume_scorer")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)


@pytest.fixture
def job_analysis() -> dict:
    return copy.deepcopy(JOB_ANALYSIS)


@pytest.fixture
def strong_resume() -> dict:
    return copy.deepcopy(STRONG_RESUME)


@pytest.fixture
def empty_resume() -> dict:
    return copy.deepcopy(EMPTY_RESUME)
