"""HTTP request/response contracts."""

from .scoring import (
    GapReportResponse,
    SalaryReportResponse,
    SalaryRequest,
    ScoreReportResponse,
    ScoreRequest,
    SkillsGapRequest,
)

__all__ = [
    "ScoreRequest",
    "SkillsGapRequest",
    "SalaryRequest",
    "ScoreReportResponse",
    "GapReportResponse",
    "SalaryReportResponse",
]
