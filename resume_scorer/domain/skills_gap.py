"""Pure domain logic for skills-gap analysis.

Classifies each required skill and preferred qualification of a job as
matched or missing, infers transferable experience for missing skills from a
fixed relationship table, and emits prioritized recommendations.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, FrozenSet, List, Mapping, Optional

from .inputs import ResumeContent, as_job, as_resume
from .numeric import round_half_up

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

SKILL_WEIGHT = 0.7
QUALIFICATION_WEIGHT = 0.3
MAX_RELATED_EXPERIENCE = 3

# Canonical skill -> spellings and abbreviations that mean the same thing.
SKILL_EQUIVALENTS: Dict[str, FrozenSet[str]] = {
    "react": frozenset({"reactjs", "react.js", "react native", "reactnative"}),
    "node": frozenset({"nodejs", "node.js"}),
    "javascript": frozenset({"js", "es6", "es2015", "ecmascript"}),
    "typescript": frozenset({"ts"}),
    "python": frozenset({"py", "python3"}),
    "postgresql": frozenset({"postgres", "psql"}),
    "mongodb": frozenset({"mongo"}),
    "kubernetes": frozenset({"k8s"}),
    "docker": frozenset({"containers", "containerization"}),
    "aws": frozenset({"amazon web services", "amazon-web-services"}),
    "gcp": frozenset({"google cloud", "google cloud platform"}),
    "azure": frozenset({"microsoft azure"}),
    "ci/cd": frozenset({"cicd", "continuous integration", "continuous deployment"}),
    "rest": frozenset({"restful", "rest api", "restful api"}),
    "graphql": frozenset({"gql"}),
    "sql": frozenset({"mysql", "postgresql", "sqlite", "mssql"}),
    "nosql": frozenset({"mongodb", "dynamodb", "cassandra"}),
    "git": frozenset({"github", "gitlab", "bitbucket"}),
    "agile": frozenset({"scrum", "kanban"}),
}

# Skill -> concepts whose presence suggests transferable experience.
SKILL_RELATIONSHIPS: Dict[str, List[str]] = {
    "react": ["javascript", "frontend", "ui", "component", "vue", "angular", "web development"],
    "node.js": ["javascript", "backend", "express", "api", "server", "npm"],
    "python": ["scripting", "automation", "data", "backend", "django", "flask"],
    "aws": ["cloud", "infrastructure", "devops", "azure", "gcp", "deployment"],
    "docker": ["containers", "devops", "deployment", "kubernetes", "orchestration"],
    "kubernetes": ["docker", "containers", "orchestration", "devops", "deployment"],
    "sql": ["database", "data", "query", "mysql", "postgresql", "data management"],
    "mongodb": ["database", "nosql", "data", "json", "document database"],
    "typescript": ["javascript", "type safety", "frontend", "angular"],
    "graphql": ["api", "rest", "backend", "data fetching", "query language"],
    "java": ["object-oriented", "backend", "enterprise", "spring", "jvm"],
    "machine learning": ["data science", "python", "statistics", "data analysis", "ai"],
    "agile": ["project management", "scrum", "teamwork", "sprint", "collaboration"],
    "leadership": ["management", "team lead", "mentoring", "coordination"],
}

_VARIANT_GROUPS: List[FrozenSet[str]] = [
    frozenset({canonical}) | variants for canonical, variants in SKILL_EQUIVALENTS.items()
]


@dataclass
class RelatedExperience:
    concept: str
    suggestion: str
    source: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"concept": self.concept, "suggestion": self.suggestion}
        if self.source is not None:
            data["source"] = self.source
        return data


@dataclass
class SkillGap:
    skill: str
    status: str
    source: Optional[str] = None
    related_experience: Optional[List[RelatedExperience]] = None
    recommendation: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        if self.status == "matched":
            return {"skill": self.skill, "status": self.status, "source": self.source}
        return {
            "skill": self.skill,
            "status": self.status,
            "relatedExperience": (
                [r.to_dict() for r in self.related_experience] if self.related_experience else None
            ),
            "recommendation": self.recommendation,
        }


@dataclass
class QualificationGap:
    qualification: str
    status: str
    recommendation: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"qualification": self.qualification, "status": self.status}
        if self.recommendation is not None:
            data["recommendation"] = self.recommendation
        return data


@dataclass
class Recommendation:
    priority: str  # "high", "medium", "low"
    type: str
    message: str

    def to_dict(self) -> Dict[str, str]:
        return {"priority": self.priority, "type": self.type, "message": self.message}


@dataclass
class GapReport:
    """Structured result from skills-gap analysis."""

    matched_skills: List[SkillGap]
    missing_skills: List[SkillGap]
    skill_match_percentage: int
    matched_qualifications: List[QualificationGap]
    missing_qualifications: List[QualificationGap]
    qualification_match_percentage: int
    overall_match_percentage: int
    recommendations: List[Recommendation] = field(default_factory=list)
    summary: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return {
            "skills": {
                "matched": [s.to_dict() for s in self.matched_skills],
                "missing": [s.to_dict() for s in self.missing_skills],
                "matchPercentage": self.skill_match_percentage,
            },
            "qualifications": {
                "matched": [q.to_dict() for q in self.matched_qualifications],
                "missing": [q.to_dict() for q in self.missing_qualifications],
                "matchPercentage": self.qualification_match_percentage,
            },
            "overallMatchPercentage": self.overall_match_percentage,
            "recommendations": [r.to_dict() for r in self.recommendations],
            "summary": self.summary,
        }


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def analyze_gap(job: Any, resume: Any, user_answers: Any = None) -> GapReport:
    """Compare the *job*'s requirements with the *resume* and the user's answers.

    *user_answers* may be a mapping of questionnaire answers (its string values
    are searched), a plain string, or ``None``.
    """
    requirements = as_job(job)
    content = as_resume(resume)

    resume_skills = [s for s in (skill.lower().strip() for skill in content.all_skills()) if s]
    answers_text = answers_to_text(user_answers)

    matched_skills: List[SkillGap] = []
    missing_skills: List[SkillGap] = []
    for skill in requirements.required_skills:
        skill_lower = skill.lower().strip()
        if _in_resume_skills(skill_lower, resume_skills):
            matched_skills.append(SkillGap(skill=skill, status="matched", source="resume"))
        elif skill_lower in answers_text:
            matched_skills.append(SkillGap(skill=skill, status="matched", source="answers"))
        else:
            related = find_related_experience(skill, answers_text, content)
            missing_skills.append(
                SkillGap(
                    skill=skill,
                    status="missing",
                    related_experience=related or None,
                    recommendation=_skill_recommendation(skill, related),
                )
            )

    matched_quals: List[QualificationGap] = []
    missing_quals: List[QualificationGap] = []
    for qual in requirements.preferred_qualifications:
        qual_lower = qual.lower()
        if qual_lower in answers_text or any(s in qual_lower for s in resume_skills):
            matched_quals.append(QualificationGap(qualification=qual, status="matched"))
        else:
            missing_quals.append(
                QualificationGap(
                    qualification=qual,
                    status="missing",
                    recommendation=f"Consider gaining experience with {qual} or highlighting transferable experience.",
                )
            )

    skill_pct = _percentage(len(matched_skills), len(requirements.required_skills))
    qual_pct = _percentage(len(matched_quals), len(requirements.preferred_qualifications))
    overall = int(round_half_up(skill_pct * SKILL_WEIGHT + qual_pct * QUALIFICATION_WEIGHT))

    return GapReport(
        matched_skills=matched_skills,
        missing_skills=missing_skills,
        skill_match_percentage=skill_pct,
        matched_qualifications=matched_quals,
        missing_qualifications=missing_quals,
        qualification_match_percentage=qual_pct,
        overall_match_percentage=overall,
        recommendations=_recommendations(missing_skills, missing_quals, requirements.industry),
        summary=_summary(len(matched_skills), len(missing_skills), overall),
    )


def are_equivalent(first: str, second: str) -> bool:
    """True when both skills appear in the same equivalence group (case-insensitive)."""
    a, b = first.lower().strip(), second.lower().strip()
    return any(a in group and b in group for group in _VARIANT_GROUPS)


def find_related_experience(skill: str, answers_text: str, resume: ResumeContent) -> List[RelatedExperience]:
    """Transferable-experience hints for a missing *skill*, at most three.

    Related concepts are looked up in the free-text answers first, then in
    every resume bullet; bullet hints carry the originating role as source.
    """
    skill_lower = skill.lower()
    related: List[RelatedExperience] = []
    seen: set[str] = set()

    for key, concepts in SKILL_RELATIONSHIPS.items():
        if key in skill_lower or skill_lower in key:
            for concept in concepts:
                if concept not in seen and concept in answers_text:
                    seen.add(concept)
                    related.append(
                        RelatedExperience(
                            concept=concept,
                            suggestion=f"Your experience with {concept} is transferable to {skill}",
                        )
                    )

    for entry in resume.experience:
        for bullet in entry.bullets:
            bullet_lower = bullet.lower()
            for key, concepts in SKILL_RELATIONSHIPS.items():
                if key not in skill_lower:
                    continue
                for concept in concepts:
                    if concept not in seen and concept in bullet_lower:
                        seen.add(concept)
                        related.append(
                            RelatedExperience(
                                concept=concept,
                                suggestion=f"Your work involving {concept} at {entry.company} relates to {skill}",
                                source=entry.role,
                            )
                        )

    return related[:MAX_RELATED_EXPERIENCE]


def answers_to_text(user_answers: Any) -> str:
    """Lower-cased free text from questionnaire answers."""
    if isinstance(user_answers, str):
        return user_answers.lower()
    if isinstance(user_answers, Mapping):
        return " ".join(v for v in user_answers.values() if isinstance(v, str)).lower()
    return ""


# ---------------------------------------------------------------------------
# Report formatting
# ---------------------------------------------------------------------------


def format_gap_report(report: GapReport) -> str:
    """Render a :class:`GapReport` as a human-readable markdown report."""
    lines = [
        f"## Skills Match: {report.overall_match_percentage}%",
        report.summary,
        "",
        f"Required skills matched: {report.skill_match_percentage}%  ",
        f"Preferred qualifications matched: {report.qualification_match_percentage}%",
    ]

    if report.matched_skills:
        lines += ["", "### Matched Skills", ", ".join(s.skill for s in report.matched_skills)]

    if report.missing_skills:
        lines += ["", "### Missing Skills"]
        for gap in report.missing_skills:
            lines.append(f"- **{gap.skill}**: {gap.recommendation}")
            for hint in gap.related_experience or []:
                lines.append(f"  - {hint.suggestion}")

    if report.missing_qualifications:
        lines += ["", "### Missing Qualifications"]
        lines += [f"- {q.qualification}" for q in report.missing_qualifications]

    if report.recommendations:
        lines += ["", "### Recommendations"]
        for i, rec in enumerate(report.recommendations, 1):
            lines.append(f"{i}. [{rec.priority}] {rec.message}")

    return "\n".join(lines)


# ---------------------------------------------------------------------------
# Private helpers
# ---------------------------------------------------------------------------


def _in_resume_skills(skill_lower: str, resume_skills: List[str]) -> bool:
    return any(
        rs == skill_lower or rs in skill_lower or skill_lower in rs or are_equivalent(rs, skill_lower)
        for rs in resume_skills
    )


def _percentage(matched: int, total: int) -> int:
    if total == 0:
        return 100
    return int(round_half_up(matched / total * 100))


def _skill_recommendation(skill: str, related: List[RelatedExperience]) -> str:
    if related:
        return (
            f"Highlight your {related[0].concept} experience as it relates to {skill}. "
            "Consider mentioning your transferable skills in your cover letter."
        )
    return (
        f"Consider taking an online course or certification in {skill}. "
        "Meanwhile, emphasize your ability to learn quickly and adapt to new technologies."
    )


def _recommendations(
    missing_skills: List[SkillGap],
    missing_quals: List[QualificationGap],
    industry: str,
) -> List[Recommendation]:
    recommendations: List[Recommendation] = []

    critical = [s for s in missing_skills if not s.related_experience]
    if 0 < len(critical) <= 2:
        recommendations.append(
            Recommendation(
                priority="high",
                type="skill_gap",
                message=f"Focus on highlighting transferable experience for: {', '.join(s.skill for s in critical)}",
            )
        )
    elif len(critical) > 2:
        recommendations.append(
            Recommendation(
                priority="high",
                type="skill_gap",
                message=(
                    "This position requires several skills you may not have direct experience with. "
                    f"Consider upskilling in: {', '.join(s.skill for s in critical[:3])}"
                ),
            )
        )

    transferable = [s for s in missing_skills if s.related_experience]
    if transferable:
        recommendations.append(
            Recommendation(
                priority="medium",
                type="transferable",
                message=(
                    f"Good news! You have related experience for: {', '.join(s.skill for s in transferable)}. "
                    "Emphasize these transferable skills in your application."
                ),
            )
        )

    if 0 < len(missing_quals) <= 2:
        recommendations.append(
            Recommendation(
                priority="low",
                type="qualification",
                message=(
                    f"The preferred qualifications include: {', '.join(q.qualification for q in missing_quals)}. "
                    "These are often nice-to-haves, not dealbreakers."
                ),
            )
        )

    if industry:
        recommendations.append(
            Recommendation(
                priority="medium",
                type="industry",
                message=(
                    f"Tailor your resume language to the {industry} industry. "
                    "Use industry-specific terminology where applicable."
                ),
            )
        )

    return recommendations


def _summary(matched: int, missing: int, overall: int) -> str:
    if overall >= 80:
        return (
            f"Excellent match! You have {matched} of the required skills. "
            "Your profile aligns very well with this position."
        )
    elif overall >= 60:
        return (
            f"Good potential! You match {matched} skills, with {missing} areas for improvement. "
            "Focus on highlighting transferable experience."
        )
    elif overall >= 40:
        return (
            f"Moderate match. While you have {matched} relevant skills, consider emphasizing your "
            "ability to learn quickly and any related experience."
        )
    else:
        return (
            f"This role may be a stretch but not impossible. You have {matched} matching skills. "
            "Highlight your learning agility and transferable experience."
        )
