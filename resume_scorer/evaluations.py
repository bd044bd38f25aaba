"""Timed, observed entry points shared by the web, tool and CLI layers."""

from __future__ import annotations

from time import perf_counter
from typing import Any, Optional

from .domain import (
    GapReport,
    InvalidArgumentError,
    SalaryReport,
    ScoreReport,
    analyze_gap,
    estimate_salary,
    score_resume,
)
from .observability import ScoringObserver


def evaluate_score(job: Any, resume: Any, observer: Optional[ScoringObserver] = None) -> ScoreReport:
    start = perf_counter()
    try:
        report = score_resume(job, resume)
    except InvalidArgumentError as exc:
        if observer:
            observer.log_error("score", exc)
        raise
    if observer:
        observer.log_evaluation(
            "score",
            (perf_counter() - start) * 1000,
            headline=report.overall_score,
            missing_keywords=len(report.missing_keywords),
            missing_skills=len(report.missing_skills),
        )
    return report


def evaluate_gap(
    job: Any,
    resume: Any,
    user_answers: Any = None,
    observer: Optional[ScoringObserver] = None,
) -> GapReport:
    start = perf_counter()
    try:
        report = analyze_gap(job, resume, user_answers)
    except InvalidArgumentError as exc:
        if observer:
            observer.log_error("skills_gap", exc)
        raise
    if observer:
        observer.log_evaluation(
            "skills_gap",
            (perf_counter() - start) * 1000,
            headline=report.overall_match_percentage,
            missing_skills=len(report.missing_skills),
        )
    return report


def evaluate_salary(
    job: Any,
    resume: Any,
    score_report: Any = None,
    user_answers: Any = None,
    observer: Optional[ScoringObserver] = None,
) -> SalaryReport:
    """Estimate salary, scoring the resume first when no score is supplied."""
    start = perf_counter()
    try:
        if score_report is None:
            score_report = score_resume(job, resume)
        report = estimate_salary(job, resume, score_report, user_answers)
    except InvalidArgumentError as exc:
        if observer:
            observer.log_error("salary", exc)
        raise
    if observer:
        observer.log_evaluation(
            "salary",
            (perf_counter() - start) * 1000,
            headline=report.mid,
            confidence=report.confidence,
        )
    return report
