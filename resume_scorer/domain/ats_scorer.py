"""Pure domain logic for ATS (Applicant Tracking System) resume scoring.

Scores a structured resume against a structured job analysis: keyword match,
skills coverage, content quality and keyword stuffing feed a weighted overall
score and an ordered list of suggestions.  All functions are deterministic --
no file I/O, no shared state.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass, field
from typing import Any, Dict, List

from .inputs import ResumeContent, as_job, as_keywords, as_resume, as_skill_list
from .numeric import clamp, round_half_up
from .text_matching import count_occurrences, extract_resume_text, normalize

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

KEYWORD_WEIGHT = 0.50
SKILLS_WEIGHT = 0.30
CONTENT_WEIGHT = 0.20

SCORING_WEIGHTS: Dict[str, float] = {
    "keywords": KEYWORD_WEIGHT,
    "skills": SKILLS_WEIGHT,
    "content": CONTENT_WEIGHT,
}

# Occurrences beyond this cap earn no extra keyword credit.
KEYWORD_OCCURRENCE_CAP = 3
STUFFING_THRESHOLD = 5

KEYWORD_CRITICAL_THRESHOLD = 75
KEYWORD_SOFT_THRESHOLD = 85
SKILLS_CRITICAL_THRESHOLD = 75
SKILLS_SOFT_THRESHOLD = 90
CONTENT_THRESHOLD = 75

OVERALL_LOW_BAND = 60
OVERALL_MID_BAND = 80

SUMMARY_MIN_LENGTH = 100

PROFESSIONAL_WORDS = ["experienced", "skilled", "proven", "expertise", "proficient", "accomplished"]

ACTION_VERBS = [
    "developed",
    "implemented",
    "created",
    "designed",
    "built",
    "led",
    "managed",
    "optimized",
    "improved",
    "increased",
    "reduced",
    "achieved",
    "delivered",
    "executed",
    "launched",
    "established",
    "transformed",
    "enhanced",
    "streamlined",
]

_METRIC_RE = re.compile(
    r"\d+%|\$\d+|\d+\s*(?:million|thousand|k|m|b)|increased|decreased|reduced|improved|by\s+\d+",
    re.IGNORECASE,
)
# Looser signal used when telling the user which bullets lack numbers.
_METRIC_HINT_RE = re.compile(
    r"\d+%|\$\d+|\d+\s*(?:million|thousand|k|m|b)|increased|decreased|reduced|improved|by\s+\d+"
    r"|served|processed|managed\s+\d+",
    re.IGNORECASE,
)
_SENTENCE_END_RE = re.compile(r"[.!?]+")
_LEADING_MARKER_RE = re.compile(r"^[\s\-*•]+")


@dataclass
class KeywordMatch:
    score: float
    missing_keywords: List[str] = field(default_factory=list)
    keyword_counts: Dict[str, int] = field(default_factory=dict)


@dataclass
class SkillsCoverage:
    score: float
    missing_skills: List[str] = field(default_factory=list)
    found_skills: List[str] = field(default_factory=list)


@dataclass
class ScoreReport:
    """Structured result from ATS scoring."""

    overall_score: int
    keyword_match_score: float
    skills_coverage_score: float
    content_quality_score: float
    missing_keywords: List[str] = field(default_factory=list)
    missing_skills: List[str] = field(default_factory=list)
    suggestions: List[str] = field(default_factory=list)
    stuffed_keywords: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "overallScore": self.overall_score,
            "keywordMatchScore": self.keyword_match_score,
            "skillsCoverageScore": self.skills_coverage_score,
            "contentQualityScore": self.content_quality_score,
            "missingKeywords": list(self.missing_keywords),
            "missingSkills": list(self.missing_skills),
            "suggestions": list(self.suggestions),
            "stuffedKeywords": list(self.stuffed_keywords),
        }


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def score_resume(job: Any, resume: Any) -> ScoreReport:
    """Score *resume* against the *job* analysis.

    Both arguments are validated before anything is computed; an
    :class:`~resume_scorer.domain.errors.InvalidArgumentError` is raised for
    a missing or non-mapping argument.
    """
    requirements = as_job(job)
    content = as_resume(resume)

    resume_text = extract_resume_text(content)
    keyword_match = score_keywords(resume_text, requirements.ats_keywords)
    coverage = score_skills(content, requirements.required_skills)
    content_score = score_content(content)
    stuffed = detect_stuffing(resume_text, requirements.ats_keywords)

    overall = aggregate(keyword_match.score, coverage.score, content_score)

    suggestions = generate_suggestions(
        keyword_score=keyword_match.score,
        skills_score=coverage.score,
        content_score=content_score,
        overall_score=overall,
        missing_keywords=keyword_match.missing_keywords,
        missing_skills=coverage.missing_skills,
        stuffed_keywords=stuffed,
        resume=content,
    )

    return ScoreReport(
        overall_score=overall,
        keyword_match_score=keyword_match.score,
        skills_coverage_score=coverage.score,
        content_quality_score=content_score,
        missing_keywords=keyword_match.missing_keywords,
        missing_skills=coverage.missing_skills,
        suggestions=suggestions,
        stuffed_keywords=stuffed,
    )


def score_keywords(resume_text: str, ats_keywords: Any) -> KeywordMatch:
    """Frequency-weighted keyword coverage.

    Each keyword contributes ``min(count, 3) * frequency`` against a total of
    ``sum(frequency)``.  An empty keyword list scores 0: no keyword data is
    not treated as success.
    """
    keywords = as_keywords(ats_keywords)
    if not keywords:
        return KeywordMatch(score=0.0)

    counts: Dict[str, int] = {}
    missing: List[str] = []
    matched_weights: List[float] = []
    total_weights: List[float] = []

    for kw in keywords:
        count = count_occurrences(resume_text, kw.keyword)
        counts[kw.keyword] = count
        total_weights.append(kw.frequency)
        if count > 0:
            matched_weights.append(min(count, KEYWORD_OCCURRENCE_CAP) * kw.frequency)
        else:
            missing.append(kw.keyword)

    total = math.fsum(total_weights)
    raw = math.fsum(matched_weights) / total * 100 if total > 0 else 0.0
    score = clamp(round_half_up(raw, 2))
    return KeywordMatch(score=score, missing_keywords=missing, keyword_counts=counts)


def score_skills(resume: Any, required_skills: Any) -> SkillsCoverage:
    """Fraction of *required_skills* demonstrable in the resume.

    A skill counts when its normalized form appears in the resume text, or
    when it equals, contains or is contained by an entry of any skill
    category.  An empty requirement list is vacuously satisfied (100).
    """
    required = as_skill_list(required_skills)
    if not required:
        return SkillsCoverage(score=100.0)

    content = as_resume(resume)
    resume_text = extract_resume_text(content)
    resume_skills = [s for s in (normalize(skill) for skill in content.all_skills()) if s]

    found: List[str] = []
    missing: List[str] = []
    for skill in required:
        target = normalize(skill)
        if target and _skill_present(target, resume_text, resume_skills):
            found.append(skill)
        else:
            missing.append(skill)

    score = round_half_up(len(found) / len(required) * 100, 2)
    return SkillsCoverage(score=score, missing_skills=missing, found_skills=found)


def score_content(resume: Any) -> float:
    """Structural resume quality on a fixed 100-point budget, independent of the job.

    summary 25, experience bullets 40, skills richness 20, education 10,
    additional sections 5.
    """
    content = as_resume(resume)
    score = (
        _summary_points(content.summary)
        + _experience_points(content)
        + _skills_points(content)
        + (10 if content.education else 0)
        + (5 if content.additional_sections else 0)
    )
    return round_half_up(score, 2)


def detect_stuffing(resume_text: str, ats_keywords: Any) -> List[str]:
    """Keywords repeated more than :data:`STUFFING_THRESHOLD` times."""
    stuffed: List[str] = []
    for kw in as_keywords(ats_keywords):
        if kw.keyword not in stuffed and count_occurrences(resume_text, kw.keyword) > STUFFING_THRESHOLD:
            stuffed.append(kw.keyword)
    return stuffed


def aggregate(keyword_score: float, skills_score: float, content_score: float) -> int:
    """Weighted overall score: round first, then clamp to [0, 100]."""
    overall = round_half_up(
        keyword_score * KEYWORD_WEIGHT + skills_score * SKILLS_WEIGHT + content_score * CONTENT_WEIGHT
    )
    return int(clamp(overall))


def generate_suggestions(
    *,
    keyword_score: float,
    skills_score: float,
    content_score: float,
    overall_score: int,
    missing_keywords: List[str],
    missing_skills: List[str],
    stuffed_keywords: List[str],
    resume: Any,
) -> List[str]:
    """Rule-based advice, most critical first."""
    content = as_resume(resume)
    suggestions: List[str] = []

    if keyword_score < KEYWORD_CRITICAL_THRESHOLD:
        if missing_keywords:
            suggestions.append(
                f"CRITICAL: Add these high-priority keywords to your resume: {', '.join(missing_keywords[:8])}. "
                "Include them in your summary and experience bullets."
            )
        suggestions.append(
            "Incorporate more ATS keywords naturally throughout your resume. Focus on the summary "
            "(5-8 keywords) and experience bullets (2-3 keywords per bullet)."
        )
    elif keyword_score < KEYWORD_SOFT_THRESHOLD and missing_keywords:
        suggestions.append(f"Add these remaining keywords to improve your score: {', '.join(missing_keywords[:3])}")

    if skills_score < SKILLS_CRITICAL_THRESHOLD:
        if missing_skills:
            suggestions.append(
                f"IMPORTANT: Add these required skills to your resume: {', '.join(missing_skills[:8])}. "
                "List them in your skills section AND demonstrate them in your experience bullets "
                "with specific achievements."
            )
        suggestions.append(
            "Ensure ALL required skills from the job posting appear in both your skills section "
            "and are demonstrated in your experience bullets."
        )
    elif skills_score < SKILLS_SOFT_THRESHOLD and missing_skills:
        suggestions.append(f"Consider adding these skills to improve coverage: {', '.join(missing_skills[:3])}")

    if content_score < CONTENT_THRESHOLD:
        bullets = content.all_bullets()
        lacking = sum(1 for bullet in bullets if not _METRIC_HINT_RE.search(bullet))
        if lacking:
            suggestions.append(
                f"CRITICAL: {lacking} out of {len(bullets)} experience bullets lack quantified metrics. "
                "Add specific numbers, percentages, dollar amounts, or scale indicators to EVERY bullet point."
            )
        suggestions.append(
            "Start EVERY experience bullet with a strong action verb (Developed, Implemented, Led, "
            "Optimized, Designed, Built, Achieved, etc.)."
        )
        if len(content.summary) < SUMMARY_MIN_LENGTH:
            suggestions.append(
                "Expand your professional summary to 2-3 sentences (100-150 words) that include ATS "
                "keywords and highlight your most relevant experience and skills."
            )

    if stuffed_keywords:
        suggestions.append(
            f"Warning: These keywords appear too frequently and may be flagged as keyword stuffing: "
            f"{', '.join(stuffed_keywords)}. Use them more naturally."
        )

    if content.skills and _skill_tiers(content)["technical"] < 5:
        suggestions.append(
            "Consider adding more technical skills to your skills section to better match the job requirements."
        )

    if overall_score < OVERALL_LOW_BAND:
        suggestions.append(
            "Consider restructuring your resume to better match the job requirements. Focus on aligning "
            "your experience with the key responsibilities listed in the job posting."
        )
    elif overall_score < OVERALL_MID_BAND:
        suggestions.append(
            "Your resume is good but could be improved. Focus on the missing keywords and skills to "
            "increase your ATS score."
        )
    else:
        suggestions.append(
            "Great job! Your resume is well-optimized for ATS. Continue to refine based on the specific "
            "job requirements."
        )

    return suggestions


# ---------------------------------------------------------------------------
# Report formatting
# ---------------------------------------------------------------------------


def format_ats_report(report: ScoreReport) -> str:
    """Render a :class:`ScoreReport` as a human-readable markdown report."""
    grade = _score_to_grade(report.overall_score)
    lines = [
        f"## ATS Score: {report.overall_score}/100 {grade}",
        _score_bar(report.overall_score),
        "",
        "| Category          | Score  | Weight |",
        "|-------------------|--------|--------|",
        f"| Keyword Match     | {report.keyword_match_score:6.2f} | {KEYWORD_WEIGHT:.0%}    |",
        f"| Skills Coverage   | {report.skills_coverage_score:6.2f} | {SKILLS_WEIGHT:.0%}    |",
        f"| Content Quality   | {report.content_quality_score:6.2f} | {CONTENT_WEIGHT:.0%}    |",
    ]

    if report.missing_keywords:
        lines += ["", f"### Missing Keywords ({len(report.missing_keywords)})", ", ".join(report.missing_keywords)]

    if report.missing_skills:
        lines += ["", f"### Missing Skills ({len(report.missing_skills)})", ", ".join(report.missing_skills)]

    if report.suggestions:
        lines.append("")
        lines.append("### Suggestions")
        for i, s in enumerate(report.suggestions, 1):
            lines.append(f"{i}. {s}")

    return "\n".join(lines)


# ---------------------------------------------------------------------------
# Private scoring helpers
# ---------------------------------------------------------------------------


def _skill_present(target: str, resume_text: str, resume_skills: List[str]) -> bool:
    if target in resume_text:
        return True
    return any(s == target or target in s or s in target for s in resume_skills)


def _summary_points(summary: str) -> float:
    if not summary:
        return 0
    points = 0
    sentences = len(_SENTENCE_END_RE.findall(summary))
    if 2 <= sentences <= 3:
        points += 10
    elif 1 <= sentences <= 4:
        points += 5
    if len(summary) > 50:
        points += 10
    lowered = summary.lower()
    if any(word in lowered for word in PROFESSIONAL_WORDS):
        points += 5
    return points


def _experience_points(content: ResumeContent) -> float:
    bullets = content.all_bullets()
    if not bullets:
        return 0
    with_metrics = sum(1 for bullet in bullets if _METRIC_RE.search(bullet))
    with_verbs = sum(1 for bullet in bullets if _starts_with_action_verb(bullet))
    points = with_metrics / len(bullets) * 20 + with_verbs / len(bullets) * 15
    if len(content.experience) >= 2:
        points += 5
    return points


def _starts_with_action_verb(bullet: str) -> bool:
    lowered = _LEADING_MARKER_RE.sub("", bullet.lower())
    return any(lowered.startswith(verb) for verb in ACTION_VERBS)


def _skill_tiers(content: ResumeContent) -> Dict[str, int]:
    """Count skills per tier: soft and tool categories by name, everything else is technical."""
    tiers = {"technical": 0, "soft": 0, "tools": 0}
    for category, values in content.skills.items():
        name = category.lower()
        if "soft" in name:
            tiers["soft"] += len(values)
        elif "tool" in name:
            tiers["tools"] += len(values)
        else:
            tiers["technical"] += len(values)
    return tiers


def _skills_points(content: ResumeContent) -> float:
    tiers = _skill_tiers(content)
    points = 0
    if tiers["technical"] >= 5:
        points += 10
    elif tiers["technical"] >= 3:
        points += 5

    if tiers["soft"] >= 3:
        points += 5
    elif tiers["soft"] >= 1:
        points += 2

    if tiers["tools"] >= 2:
        points += 5
    elif tiers["tools"] >= 1:
        points += 2
    return points


def _score_to_grade(score: int) -> str:
    if score >= 90:
        return "Excellent"
    elif score >= 75:
        return "Good"
    elif score >= 60:
        return "Fair"
    else:
        return "Needs Work"


def _score_bar(score: int, width: int = 20) -> str:
    filled = round(score / 100 * width)
    return f"[{'=' * filled}{' ' * (width - filled)}]"

