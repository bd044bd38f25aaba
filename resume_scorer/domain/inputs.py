"""Structured inputs for the scoring engine.

Job analyses and resumes arrive as JSON-decoded mappings produced upstream.
This module validates their outer structure and coerces them into read-only
dataclasses.  Structural violations raise :class:`InvalidArgumentError`;
sparse or malformed elements are coerced to empty values instead.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Sequence

from .errors import InvalidArgumentError

DEFAULT_KEYWORD_WEIGHT = 1.0

JOB_LEVELS = ("entry", "mid", "senior")


@dataclass(frozen=True)
class ATSKeyword:
    """A job-posting keyword and its importance weight (not an occurrence count)."""

    keyword: str
    frequency: float = DEFAULT_KEYWORD_WEIGHT


@dataclass(frozen=True)
class JobRequirements:
    required_skills: List[str] = field(default_factory=list)
    preferred_qualifications: List[str] = field(default_factory=list)
    key_responsibilities: List[str] = field(default_factory=list)
    ats_keywords: List[ATSKeyword] = field(default_factory=list)
    job_level: Optional[str] = None
    industry: str = ""
    company_culture_indicators: List[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any, argument: str = "job") -> "JobRequirements":
        """Validate and coerce an upstream job analysis mapping."""
        raw = _require_mapping(data, argument)
        level = _get(raw, "jobLevel", "job_level")
        return cls(
            required_skills=_string_list(raw, argument, "requiredSkills", "required_skills"),
            preferred_qualifications=_string_list(
                raw, argument, "preferredQualifications", "preferred_qualifications"
            ),
            key_responsibilities=_string_list(raw, argument, "keyResponsibilities", "key_responsibilities"),
            ats_keywords=_keyword_list(raw, argument),
            job_level=level.strip().lower() if isinstance(level, str) and level.strip() else None,
            industry=_string(_get(raw, "industry")),
            company_culture_indicators=_string_list(
                raw, argument, "companyCultureIndicators", "company_culture_indicators"
            ),
        )


@dataclass(frozen=True)
class ExperienceEntry:
    company: str = ""
    role: str = ""
    duration: str = ""
    bullets: List[str] = field(default_factory=list)


@dataclass(frozen=True)
class EducationEntry:
    degree: str = ""
    institution: str = ""
    year: str = ""
    details: str = ""


@dataclass(frozen=True)
class AdditionalSection:
    title: str = ""
    items: List[str] = field(default_factory=list)


@dataclass(frozen=True)
class ResumeContent:
    """A generated resume.

    ``skills`` is an open mapping of category name to skill list: legacy
    resumes use ``technical/soft/tools``, newer ones
    ``languages/frameworks/databases/cloud/tools``.  Consumers iterate every
    category present.
    """

    summary: str = ""
    experience: List[ExperienceEntry] = field(default_factory=list)
    skills: Dict[str, List[str]] = field(default_factory=dict)
    education: List[EducationEntry] = field(default_factory=list)
    additional_sections: List[AdditionalSection] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any, argument: str = "resume") -> "ResumeContent":
        """Validate and coerce an upstream resume mapping."""
        raw = _require_mapping(data, argument)

        experience = [
            ExperienceEntry(
                company=_string(item.get("company")),
                role=_string(item.get("role")),
                duration=_string(item.get("duration")),
                bullets=_strings(item.get("bullets")),
            )
            for item in _list(raw, argument, "experience")
            if isinstance(item, Mapping)
        ]

        skills_raw = _get(raw, "skills")
        if skills_raw is not None and not isinstance(skills_raw, Mapping):
            raise InvalidArgumentError(argument, "field 'skills' must be a mapping of category to list")
        skills = {str(category): _strings(values) for category, values in (skills_raw or {}).items()}

        education = [
            EducationEntry(
                degree=_string(item.get("degree")),
                institution=_string(item.get("institution")),
                year=_string(item.get("year")),
                details=_string(item.get("details")),
            )
            for item in _list(raw, argument, "education")
            if isinstance(item, Mapping)
        ]

        sections = [
            AdditionalSection(title=_string(item.get("title")), items=_strings(item.get("items")))
            for item in _list(raw, argument, "additionalSections", "additional_sections")
            if isinstance(item, Mapping)
        ]

        return cls(
            summary=_string(_get(raw, "summary")),
            experience=experience,
            skills=skills,
            education=education,
            additional_sections=sections,
        )

    def all_skills(self) -> List[str]:
        """Every skill across all categories, in category order."""
        return [skill for values in self.skills.values() for skill in values]

    def all_bullets(self) -> List[str]:
        return [bullet for entry in self.experience for bullet in entry.bullets]


# ---------------------------------------------------------------------------
# Coercion entry points used by the scorers
# ---------------------------------------------------------------------------


def as_job(job: Any, argument: str = "job") -> JobRequirements:
    if isinstance(job, JobRequirements):
        return job
    return JobRequirements.from_dict(job, argument)


def as_resume(resume: Any, argument: str = "resume") -> ResumeContent:
    if isinstance(resume, ResumeContent):
        return resume
    return ResumeContent.from_dict(resume, argument)


def as_keywords(keywords: Any) -> List[ATSKeyword]:
    """Coerce a raw keyword list, tolerating malformed pairs."""
    if keywords is None:
        return []
    if isinstance(keywords, (str, bytes)) or not isinstance(keywords, Sequence):
        raise InvalidArgumentError("ats_keywords", "must be a list of {keyword, frequency} pairs")
    return [kw for kw in (_keyword(item) for item in keywords) if kw is not None]


def as_skill_list(skills: Any, argument: str = "required_skills") -> List[str]:
    if skills is None:
        return []
    if isinstance(skills, (str, bytes)) or not isinstance(skills, Sequence):
        raise InvalidArgumentError(argument, "must be a list of strings")
    return [s for s in _strings(skills) if s.strip()]


# ---------------------------------------------------------------------------
# Private helpers
# ---------------------------------------------------------------------------


def _require_mapping(data: Any, argument: str) -> Mapping[str, Any]:
    if data is None:
        raise InvalidArgumentError(argument, "is required")
    if not isinstance(data, Mapping):
        raise InvalidArgumentError(argument, f"must be an object, got {type(data).__name__}")
    return data


def _get(raw: Mapping[str, Any], *keys: str) -> Any:
    for key in keys:
        if raw.get(key) is not None:
            return raw[key]
    return None


def _list(raw: Mapping[str, Any], argument: str, *keys: str) -> List[Any]:
    value = _get(raw, *keys)
    if value is None:
        return []
    if not isinstance(value, list):
        raise InvalidArgumentError(argument, f"field '{keys[0]}' must be a list")
    return value


def _string_list(raw: Mapping[str, Any], argument: str, *keys: str) -> List[str]:
    return [s for s in _strings(_list(raw, argument, *keys)) if s.strip()]


def _string(value: Any) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return ""


def _strings(values: Any) -> List[str]:
    if not isinstance(values, (list, tuple)):
        return []
    return [v for v in values if isinstance(v, str)]


def _keyword(item: Any) -> Optional[ATSKeyword]:
    if isinstance(item, ATSKeyword):
        return item
    if isinstance(item, str):
        keyword, frequency = item, None
    elif isinstance(item, Mapping):
        keyword, frequency = item.get("keyword"), item.get("frequency")
    else:
        return None
    if not isinstance(keyword, str) or not keyword.strip():
        return None
    return ATSKeyword(keyword=keyword, frequency=_weight(frequency))


def _weight(frequency: Any) -> float:
    if isinstance(frequency, bool) or not isinstance(frequency, (int, float)) or frequency <= 0:
        return DEFAULT_KEYWORD_WEIGHT
    return float(frequency)


def _keyword_list(raw: Mapping[str, Any], argument: str) -> List[ATSKeyword]:
    return [kw for kw in (_keyword(item) for item in _list(raw, argument, "atsKeywords", "ats_keywords")) if kw]
