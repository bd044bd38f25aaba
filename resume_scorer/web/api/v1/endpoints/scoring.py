"""Scoring endpoints: ATS score, skills gap and salary estimate."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from .....contracts.web.scoring import (
    GapReportResponse,
    SalaryReportResponse,
    SalaryRequest,
    ScoreReportResponse,
    ScoreRequest,
    SkillsGapRequest,
)
from .....domain import InvalidArgumentError
from .....evaluations import evaluate_gap, evaluate_salary, evaluate_score
from .....observability import ScoringObserver
from ....errors import APIError
from ..deps import get_observer

router = APIRouter(tags=["scoring"])


@router.post("/score", response_model=ScoreReportResponse)
async def score(
    payload: ScoreRequest,
    observer: ScoringObserver = Depends(get_observer),
) -> ScoreReportResponse:
    try:
        report = evaluate_score(payload.job_analysis, payload.resume_content, observer=observer)
    except InvalidArgumentError as exc:
        raise APIError.from_invalid_argument(exc) from exc
    return ScoreReportResponse.model_validate(report.to_dict())


@router.post("/skills-gap", response_model=GapReportResponse)
async def skills_gap(
    payload: SkillsGapRequest,
    observer: ScoringObserver = Depends(get_observer),
) -> GapReportResponse:
    try:
        report = evaluate_gap(
            payload.job_analysis,
            payload.resume_content,
            payload.user_answers,
            observer=observer,
        )
    except InvalidArgumentError as exc:
        raise APIError.from_invalid_argument(exc) from exc
    return GapReportResponse.model_validate(report.to_dict())


@router.post("/salary-estimate", response_model=SalaryReportResponse)
async def salary_estimate(
    payload: SalaryRequest,
    observer: ScoringObserver = Depends(get_observer),
) -> SalaryReportResponse:
    try:
        report = evaluate_salary(
            payload.job_analysis,
            payload.resume_content,
            score_report=payload.ats_score,
            user_answers=payload.user_answers,
            observer=observer,
        )
    except InvalidArgumentError as exc:
        raise APIError.from_invalid_argument(exc) from exc
    return SalaryReportResponse.model_validate(report.to_dict())
