"""Scoring endpoint request/response contracts.

Field names are snake_case in Python and camelCase on the wire, matching the
upstream job-analysis and resume documents.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ---------------------------------------------------------------------------
# Requests
# ---------------------------------------------------------------------------


class ScoreRequest(_CamelModel):
    job_analysis: Dict[str, Any]
    resume_content: Dict[str, Any]


class SkillsGapRequest(ScoreRequest):
    user_answers: Optional[Union[Dict[str, Any], str]] = None


class SalaryRequest(ScoreRequest):
    ats_score: Optional[Dict[str, Any]] = None
    user_answers: Optional[Dict[str, Any]] = None


# ---------------------------------------------------------------------------
# Responses
# ---------------------------------------------------------------------------


class ScoreReportResponse(_CamelModel):
    overall_score: int
    keyword_match_score: float
    skills_coverage_score: float
    content_quality_score: float
    missing_keywords: List[str]
    missing_skills: List[str]
    suggestions: List[str]
    stuffed_keywords: List[str] = []


class RelatedExperienceResponse(_CamelModel):
    concept: str
    suggestion: str
    source: Optional[str] = None


class SkillGapResponse(_CamelModel):
    skill: str
    status: str
    source: Optional[str] = None
    related_experience: Optional[List[RelatedExperienceResponse]] = None
    recommendation: Optional[str] = None


class QualificationGapResponse(_CamelModel):
    qualification: str
    status: str
    recommendation: Optional[str] = None


class SkillsBreakdownResponse(_CamelModel):
    matched: List[SkillGapResponse]
    missing: List[SkillGapResponse]
    match_percentage: int


class QualificationsBreakdownResponse(_CamelModel):
    matched: List[QualificationGapResponse]
    missing: List[QualificationGapResponse]
    match_percentage: int


class RecommendationResponse(_CamelModel):
    priority: str
    type: str
    message: str


class GapReportResponse(_CamelModel):
    skills: SkillsBreakdownResponse
    qualifications: QualificationsBreakdownResponse
    overall_match_percentage: int
    recommendations: List[RecommendationResponse]
    summary: str


class SalaryRangeResponse(_CamelModel):
    min: int
    mid: int
    max: int


class SalaryFactorResponse(_CamelModel):
    factor: str
    value: str
    impact: str
    description: str


class SalaryReportResponse(_CamelModel):
    range: SalaryRangeResponse
    currency: str
    period: str
    factors: List[SalaryFactorResponse]
    tips: List[str]
    confidence: int
    disclaimer: str
