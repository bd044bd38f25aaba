"""Resume Scorer Domain - Pure logic for resume-to-job matching and scoring.

This package contains pure functions with no file system, network or logging
dependencies. All I/O is handled by the tools, web and CLI layers; this
package operates on JSON-decoded mappings and the dataclasses built from them.
"""

from .ats_scorer import (
    CONTENT_WEIGHT,
    KEYWORD_WEIGHT,
    SCORING_WEIGHTS,
    SKILLS_WEIGHT,
    STUFFING_THRESHOLD,
    KeywordMatch,
    ScoreReport,
    SkillsCoverage,
    aggregate,
    detect_stuffing,
    format_ats_report,
    generate_suggestions,
    score_content,
    score_keywords,
    score_resume,
    score_skills,
)
from .errors import InvalidArgumentError
from .inputs import ATSKeyword, JobRequirements, ResumeContent
from .salary_estimator import SalaryFactor, SalaryReport, estimate_salary, format_salary_report
from .skills_gap import (
    SKILL_EQUIVALENTS,
    SKILL_RELATIONSHIPS,
    GapReport,
    Recommendation,
    analyze_gap,
    are_equivalent,
    format_gap_report,
)
from .text_matching import count_occurrences, extract_resume_text, normalize

__all__ = [
    # Inputs
    "ATSKeyword",
    "JobRequirements",
    "ResumeContent",
    "InvalidArgumentError",
    # Text matching
    "normalize",
    "count_occurrences",
    "extract_resume_text",
    # ATS scorer
    "score_resume",
    "score_keywords",
    "score_skills",
    "score_content",
    "detect_stuffing",
    "generate_suggestions",
    "aggregate",
    "ScoreReport",
    "KeywordMatch",
    "SkillsCoverage",
    "SCORING_WEIGHTS",
    "KEYWORD_WEIGHT",
    "SKILLS_WEIGHT",
    "CONTENT_WEIGHT",
    "STUFFING_THRESHOLD",
    "format_ats_report",
    # Skills gap
    "analyze_gap",
    "are_equivalent",
    "GapReport",
    "Recommendation",
    "SKILL_EQUIVALENTS",
    "SKILL_RELATIONSHIPS",
    "format_gap_report",
    # Salary
    "estimate_salary",
    "SalaryReport",
    "SalaryFactor",
    "format_salary_report",
]
