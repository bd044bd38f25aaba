"""Scoring tools - ATS score, skills gap and salary estimate from JSON files."""

from __future__ import annotations

from typing import Any, Optional

from ..domain import InvalidArgumentError, format_ats_report, format_gap_report, format_salary_report
from ..evaluations import evaluate_gap, evaluate_salary, evaluate_score
from ..observability import ScoringObserver
from .base import BaseTool, ToolInputError, ToolResult

_JOB_PARAM = {
    "type": "string",
    "description": "Path to the job analysis JSON (requiredSkills, atsKeywords, jobLevel, ...)",
    "required": True,
}
_RESUME_PARAM = {
    "type": "string",
    "description": "Path to the structured resume JSON (summary, experience, skills, ...)",
    "required": True,
}
_ANSWERS_PARAM = {
    "type": "string",
    "description": "Optional path to the questionnaire answers JSON",
}


class _ScoringTool(BaseTool):
    def __init__(self, workspace_dir: str = ".", observer: Optional[ScoringObserver] = None):
        super().__init__(workspace_dir)
        self.observer = observer or ScoringObserver(source="tools")

    def _load_answers(self, answers_path: str) -> Any:
        return self._load_json(answers_path) if answers_path.strip() else None


class ATSScoreTool(_ScoringTool):
    """Score a structured resume against a job analysis."""

    name = "ats_score"
    description = """Score a structured resume against a job analysis. Returns an overall
ATS score (0-100) with keyword match, skills coverage and content quality
sub-scores, missing keywords/skills and prioritized suggestions."""
    parameters = {"job_path": _JOB_PARAM, "resume_path": _RESUME_PARAM}

    async def execute(self, job_path: str, resume_path: str) -> ToolResult:
        try:
            job = self._load_json(job_path)
            resume = self._load_json(resume_path)
            report = evaluate_score(job, resume, observer=self.observer)
        except (ToolInputError, InvalidArgumentError) as e:
            return ToolResult(success=False, output="", error=str(e))

        return ToolResult(success=True, output=format_ats_report(report), data=report.to_dict())


class SkillsGapTool(_ScoringTool):
    """Classify required skills and qualifications as matched or missing."""

    name = "skills_gap"
    description = """Analyze the gap between a job's required skills / preferred qualifications
and a resume plus questionnaire answers. Reports matched and missing items,
transferable experience and prioritized recommendations."""
    parameters = {"job_path": _JOB_PARAM, "resume_path": _RESUME_PARAM, "answers_path": _ANSWERS_PARAM}

    async def execute(self, job_path: str, resume_path: str, answers_path: str = "") -> ToolResult:
        try:
            job = self._load_json(job_path)
            resume = self._load_json(resume_path)
            answers = self._load_answers(answers_path)
            report = evaluate_gap(job, resume, answers, observer=self.observer)
        except (ToolInputError, InvalidArgumentError) as e:
            return ToolResult(success=False, output="", error=str(e))

        return ToolResult(success=True, output=format_gap_report(report), data=report.to_dict())


class SalaryEstimateTool(_ScoringTool):
    """Estimate a salary range for a job."""

    name = "salary_estimate"
    description = """Estimate an annual salary range (USD) for a job from its level, industry
and required skills, the candidate's years of experience and the resume's
ATS score. Returns the range, factor breakdown, tips and a confidence value."""
    parameters = {"job_path": _JOB_PARAM, "resume_path": _RESUME_PARAM, "answers_path": _ANSWERS_PARAM}

    async def execute(self, job_path: str, resume_path: str, answers_path: str = "") -> ToolResult:
        try:
            job = self._load_json(job_path)
            resume = self._load_json(resume_path)
            answers = self._load_answers(answers_path)
            report = evaluate_salary(job, resume, user_answers=answers, observer=self.observer)
        except (ToolInputError, InvalidArgumentError) as e:
            return ToolResult(success=False, output="", error=str(e))

        return ToolResult(success=True, output=format_salary_report(report), data=report.to_dict())
