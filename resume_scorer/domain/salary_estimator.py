"""Pure domain logic for salary range estimation.

A deterministic lookup-and-multiplier model: a base range by job level is
adjusted for industry, years of experience, high-demand skills and resume
strength, with an explainable factor breakdown.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional

from .ats_scorer import ScoreReport
from .inputs import JOB_LEVELS, as_job, as_resume
from .numeric import clamp, round_half_up

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

# USD annual
BASE_SALARY_RANGES: Dict[str, Dict[str, int]] = {
    "entry": {"min": 45000, "mid": 60000, "max": 80000},
    "mid": {"min": 70000, "mid": 95000, "max": 130000},
    "senior": {"min": 110000, "mid": 145000, "max": 200000},
}

BASE_YEARS: Dict[str, int] = {"entry": 1, "mid": 3, "senior": 6}

# Matched by substring against the job's industry label, in this order.
INDUSTRY_MULTIPLIERS: Dict[str, float] = {
    "Software Development": 1.15,
    "Technology": 1.12,
    "Finance": 1.20,
    "Healthcare": 1.05,
    "Marketing": 0.95,
    "Consulting": 1.10,
    "Retail": 0.85,
    "Manufacturing": 0.90,
    "Education": 0.80,
    "Government": 0.85,
}
DEFAULT_INDUSTRY_MULTIPLIER = 1.0
DEFAULT_INDUSTRY = "Technology"
DEFAULT_JOB_LEVEL = "mid"

HIGH_DEMAND_SKILLS = [
    "machine learning",
    "ai",
    "artificial intelligence",
    "kubernetes",
    "cloud",
    "aws",
    "gcp",
    "azure",
    "react",
    "node.js",
    "python",
    "golang",
    "rust",
    "data science",
    "blockchain",
    "security",
    "devops",
    "typescript",
    "microservices",
    "system design",
]

EXPERIENCE_BONUS_PER_YEAR = 0.02
HIGH_DEMAND_SKILL_BONUS = 0.02
DEFAULT_YEARS_OF_EXPERIENCE = 3
DEFAULT_ATS_SCORE = 70
# Stated years are clamped to this range before any arithmetic.
MAX_YEARS_OF_EXPERIENCE = 60

ATS_STRONG_SCORE = 80
ATS_SOLID_SCORE = 60
ATS_MULTIPLIERS = {"strong": 1.05, "solid": 1.0, "weak": 0.95}

BASE_CONFIDENCE = 50
MAX_CONFIDENCE = 85

DISCLAIMER = (
    "These estimates are based on general market data and should be used as a starting point for "
    "research. Actual salaries vary by location, company size, and individual negotiation."
)

_LEADING_INT_RE = re.compile(r"\s*([+-]?)(\d+)")


@dataclass
class SalaryFactor:
    factor: str
    value: str
    impact: str  # "positive", "negative", "neutral"
    description: str

    def to_dict(self) -> Dict[str, str]:
        return {"factor": self.factor, "value": self.value, "impact": self.impact, "description": self.description}


@dataclass
class SalaryReport:
    """Structured result from salary estimation."""

    min: int
    mid: int
    max: int
    factors: List[SalaryFactor] = field(default_factory=list)
    tips: List[str] = field(default_factory=list)
    confidence: int = BASE_CONFIDENCE
    currency: str = "USD"
    period: str = "annual"
    disclaimer: str = DISCLAIMER

    def to_dict(self) -> Dict[str, Any]:
        return {
            "range": {"min": self.min, "mid": self.mid, "max": self.max},
            "currency": self.currency,
            "period": self.period,
            "factors": [f.to_dict() for f in self.factors],
            "tips": list(self.tips),
            "confidence": self.confidence,
            "disclaimer": self.disclaimer,
        }


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def estimate_salary(job: Any, resume: Any, score_report: Any = None, user_answers: Any = None) -> SalaryReport:
    """Estimate a salary range for *job*.

    *score_report* may be a :class:`ScoreReport`, a mapping carrying
    ``overallScore`` or ``None``; *user_answers* may carry
    ``years_of_experience`` / ``yearsOfExperience``.
    """
    requirements = as_job(job)
    # The resume is validated like every entry point but does not move the estimate.
    as_resume(resume)

    level = requirements.job_level if requirements.job_level in JOB_LEVELS else DEFAULT_JOB_LEVEL
    industry = requirements.industry or DEFAULT_INDUSTRY
    stated_years = years_of_experience(user_answers)
    years = DEFAULT_YEARS_OF_EXPERIENCE if stated_years is None else stated_years
    ats_score = _overall_score(score_report)

    industry_multiplier = industry_multiplier_for(industry)
    base_years = BASE_YEARS[level]
    experience_bonus = max(0.0, (years - base_years) * EXPERIENCE_BONUS_PER_YEAR)
    high_demand = count_high_demand_skills(requirements.required_skills)
    skills_multiplier = 1 + high_demand * HIGH_DEMAND_SKILL_BONUS
    ats_multiplier = _ats_multiplier(ats_score)

    total = industry_multiplier * (1 + experience_bonus) * skills_multiplier * ats_multiplier
    base = BASE_SALARY_RANGES[level]

    factors = _factors(level, industry, industry_multiplier, years, experience_bonus, high_demand, ats_score)
    tips = _tips(ats_score, high_demand, years, base_years)

    return SalaryReport(
        min=_to_thousand(base["min"] * total),
        mid=_to_thousand(base["mid"] * total),
        max=_to_thousand(base["max"] * total),
        factors=factors,
        tips=tips,
        confidence=calculate_confidence(requirements, stated_years is not None),
    )


def industry_multiplier_for(industry: str) -> float:
    lowered = industry.lower()
    for key, multiplier in INDUSTRY_MULTIPLIERS.items():
        if key.lower() in lowered:
            return multiplier
    return DEFAULT_INDUSTRY_MULTIPLIER


def count_high_demand_skills(required_skills: List[str]) -> int:
    return sum(1 for skill in required_skills if any(hd in skill.lower() for hd in HIGH_DEMAND_SKILLS))


def years_of_experience(user_answers: Any) -> Optional[int]:
    """Years stated in the answers, clamped to 0..60.

    ``None`` when absent or unparseable; non-finite numbers are unparseable.
    """
    if not isinstance(user_answers, Mapping):
        return None
    for key in ("years_of_experience", "yearsOfExperience"):
        value = user_answers.get(key)
        if isinstance(value, bool) or value is None:
            continue
        if isinstance(value, float) and not math.isfinite(value):
            continue
        if isinstance(value, (int, float)):
            return _clamp_years(int(value))
        if isinstance(value, str):
            match = _LEADING_INT_RE.match(value)
            if match:
                sign, digits = match.groups()
                # Long digit runs are out of range anyway; skip the int conversion.
                years = MAX_YEARS_OF_EXPERIENCE if len(digits) > 3 else int(digits)
                return _clamp_years(-years if sign == "-" else years)
    return None


def calculate_confidence(requirements: Any, years_given: bool) -> int:
    """Confidence grows with the data available, never above :data:`MAX_CONFIDENCE`."""
    job = as_job(requirements)
    score = BASE_CONFIDENCE
    if job.industry:
        score += 10
    if job.job_level:
        score += 10
    if len(job.required_skills) > 3:
        score += 10
    if years_given:
        score += 10
    if job.company_culture_indicators:
        score += 5
    return min(score, MAX_CONFIDENCE)


# ---------------------------------------------------------------------------
# Report formatting
# ---------------------------------------------------------------------------


def format_salary_report(report: SalaryReport) -> str:
    """Render a :class:`SalaryReport` as a human-readable markdown report."""
    lines = [
        f"## Estimated Salary: ${report.min:,} - ${report.max:,} ({report.currency}, {report.period})",
        f"Midpoint: ${report.mid:,}  ",
        f"Confidence: {report.confidence}%",
        "",
        "| Factor | Value | Impact |",
        "|--------|-------|--------|",
    ]
    lines += [f"| {f.factor} | {f.value} | {f.impact} |" for f in report.factors]

    if report.tips:
        lines += ["", "### Tips"]
        lines += [f"- {tip}" for tip in report.tips]

    lines += ["", f"_{report.disclaimer}_"]
    return "\n".join(lines)


# ---------------------------------------------------------------------------
# Private helpers
# ---------------------------------------------------------------------------


def _overall_score(score_report: Any) -> float:
    if isinstance(score_report, ScoreReport):
        return score_report.overall_score
    if isinstance(score_report, Mapping):
        value = score_report.get("overallScore", score_report.get("overall_score"))
        if isinstance(value, float) and not math.isfinite(value):
            return DEFAULT_ATS_SCORE
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return clamp(value)
    return DEFAULT_ATS_SCORE


def _ats_multiplier(score: float) -> float:
    if score >= ATS_STRONG_SCORE:
        return ATS_MULTIPLIERS["strong"]
    elif score >= ATS_SOLID_SCORE:
        return ATS_MULTIPLIERS["solid"]
    else:
        return ATS_MULTIPLIERS["weak"]


def _clamp_years(years: int) -> int:
    return max(0, min(years, MAX_YEARS_OF_EXPERIENCE))


def _to_thousand(amount: float) -> int:
    return int(round_half_up(amount / 1000)) * 1000


def _impact(multiplier: float) -> str:
    if multiplier > 1:
        return "positive"
    elif multiplier < 1:
        return "negative"
    return "neutral"


def _factors(
    level: str,
    industry: str,
    industry_multiplier: float,
    years: int,
    experience_bonus: float,
    high_demand: int,
    ats_score: float,
) -> List[SalaryFactor]:
    level_pay = {"senior": "higher", "entry": "starting"}.get(level, "mid-range")
    if industry_multiplier > 1:
        industry_pay = "typically pays above average"
    elif industry_multiplier < 1:
        industry_pay = "typically pays below tech average"
    else:
        industry_pay = "pays at market rate"

    factors = [
        SalaryFactor(
            factor="Job Level",
            value=level.capitalize(),
            impact="neutral",
            description=f"{level}-level positions typically command {level_pay} salaries",
        ),
        SalaryFactor(
            factor="Industry",
            value=industry,
            impact=_impact(industry_multiplier),
            description=f"{industry} industry {industry_pay}",
        ),
        SalaryFactor(
            factor="Years of Experience",
            value=f"{years} years",
            impact="positive" if experience_bonus > 0.05 else "neutral",
            description=(
                f"{years} years of experience "
                f"{'adds premium to base salary' if experience_bonus > 0 else 'matches expected level'}"
            ),
        ),
    ]

    if high_demand > 0:
        factors.append(
            SalaryFactor(
                factor="High-Demand Skills",
                value=f"{high_demand} skills",
                impact="positive",
                description=(
                    f"Required skills include {high_demand} high-demand technologies that command premium pay"
                ),
            )
        )

    if ats_score >= ATS_STRONG_SCORE:
        strength = "Strong resume gives better negotiating leverage"
    elif ats_score >= ATS_SOLID_SCORE:
        strength = "Solid resume positions you competitively"
    else:
        strength = "Improving your resume could strengthen your position"
    factors.append(
        SalaryFactor(
            factor="Resume Strength",
            value=f"{ats_score:g}% ATS Score",
            impact=_impact(_ats_multiplier(ats_score)),
            description=strength,
        )
    )
    return factors


def _tips(ats_score: float, high_demand: int, years: int, base_years: int) -> List[str]:
    tips: List[str] = []
    if ats_score < ATS_STRONG_SCORE:
        tips.append("Improve your ATS score to strengthen your negotiating position")
    if high_demand < 2:
        tips.append("Highlight any experience with high-demand technologies like cloud, AI, or modern frameworks")
    tips.append("Research company-specific salaries on Glassdoor and Levels.fyi for more accurate expectations")
    tips.append("Consider total compensation including equity, bonuses, and benefits")
    if years > base_years + 2:
        tips.append("Your experience exceeds typical requirements - use this as leverage in negotiations")
    return tips
