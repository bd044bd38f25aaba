"""Tests for ATS resume scoring."""

import pytest

from resume_scorer.domain import (
    InvalidArgumentError,
    ScoreReport,
    aggregate,
    detect_stuffing,
    format_ats_report,
    generate_suggestions,
    score_content,
    score_keywords,
    score_resume,
    score_skills,
)


class TestScoreKeywords:
    """Frequency-weighted keyword match."""

    def test_repeats_are_capped_and_score_clamped(self):
        result = score_keywords("python python", [{"keyword": "python", "frequency": 5}])
        assert result.score == 100.0
        assert result.missing_keywords == []
        assert result.keyword_counts == {"python": 2}

    def test_occurrence_cap_limits_credit(self):
        text = "python " * 10
        result = score_keywords(text, [{"keyword": "python", "frequency": 1}, {"keyword": "aws", "frequency": 9}])
        assert result.score == 30.0
        assert result.missing_keywords == ["aws"]

    def test_order_independent(self):
        keywords = [
            {"keyword": "python", "frequency": 3},
            {"keyword": "aws", "frequency": 1},
            {"keyword": "docker", "frequency": 2},
        ]
        forward = score_keywords("python aws", keywords)
        backward = score_keywords("python aws", list(reversed(keywords)))
        assert forward.score == backward.score == 66.67

    def test_empty_keywords_score_zero(self):
        result = score_keywords("python aws docker", [])
        assert result.score == 0.0
        assert result.missing_keywords == []

    def test_whole_word_only(self):
        result = score_keywords("javascript developer", [{"keyword": "java", "frequency": 2}])
        assert result.score == 0.0
        assert result.missing_keywords == ["java"]


class TestScoreSkills:
    def test_empty_requirements_score_full(self, empty_resume):
        assert score_skills(empty_resume, []).score == 100.0

    def test_containment_against_skill_entries(self):
        resume = {"skills": {"frontend": ["ReactJS"]}}
        result = score_skills(resume, ["React", "GraphQL"])
        assert result.score == 50.0
        assert result.found_skills == ["React"]
        assert result.missing_skills == ["GraphQL"]

    def test_skill_found_in_text(self):
        resume = {"summary": "Five years of PostgreSQL tuning."}
        assert score_skills(resume, ["PostgreSQL"]).score == 100.0

    def test_all_required_skills_present(self, strong_resume, job_analysis):
        result = score_skills(strong_resume, job_analysis["requiredSkills"])
        assert result.score == 100.0
        assert result.missing_skills == []


class TestScoreContent:
    def test_empty_resume_scores_zero(self, empty_resume):
        assert score_content(empty_resume) == 0.0

    def test_strong_resume(self, strong_resume):
        # summary 25 + bullets 40 + skills 15 + education 10 + additional 5
        assert score_content(strong_resume) == 95.0

    def test_legacy_resume(self, legacy_resume):
        # summary 15 + bullets 7.5 + skills 9
        assert score_content(legacy_resume) == 31.5

    def test_action_verb_must_lead_the_bullet(self, resume_from):
        leading = resume_from(experience=[{"bullets": ["- Led the team"]}])
        trailing = resume_from(experience=[{"bullets": ["The team I led"]}])
        assert score_content(leading) == 15.0
        assert score_content(trailing) == 0.0

    def test_full_marks_with_soft_skills(self, strong_resume):
        strong_resume["skills"]["soft_skills"] = ["Mentoring", "Communication", "Ownership"]
        assert score_content(strong_resume) == 100.0


class TestDetectStuffing:
    def test_more_than_five_occurrences(self):
        assert detect_stuffing("python " * 6, [{"keyword": "python"}]) == ["python"]

    def test_five_occurrences_is_not_stuffing(self):
        assert detect_stuffing("python " * 5, [{"keyword": "python"}]) == []

    def test_duplicate_keywords_reported_once(self):
        keywords = [{"keyword": "aws"}, {"keyword": "aws", "frequency": 3}]
        assert detect_stuffing("aws " * 8, keywords) == ["aws"]


class TestAggregate:
    @pytest.mark.parametrize("value", [0, 80, 100])
    def test_uniform_scores(self, value):
        assert aggregate(value, value, value) == value

    def test_rounds_half_up(self):
        assert aggregate(81, 0, 0) == 41

    def test_weights(self):
        assert aggregate(100, 0, 0) == 50
        assert aggregate(0, 100, 0) == 30
        assert aggregate(0, 0, 100) == 20


class TestGenerateSuggestions:
    def _suggest(self, **overrides):
        params = dict(
            keyword_score=100.0,
            skills_score=100.0,
            content_score=100.0,
            overall_score=90,
            missing_keywords=[],
            missing_skills=[],
            stuffed_keywords=[],
            resume={"skills": {"technical": ["a", "b", "c", "d", "e"]}},
        )
        params.update(overrides)
        return generate_suggestions(**params)

    def test_strong_resume_gets_only_praise(self):
        suggestions = self._suggest()
        assert len(suggestions) == 1
        assert suggestions[0].startswith("Great job!")

    def test_soft_keyword_band(self):
        suggestions = self._suggest(keyword_score=80.0, overall_score=85, missing_keywords=["k1", "k2", "k3", "k4"])
        assert suggestions[0] == "Add these remaining keywords to improve your score: k1, k2, k3"

    def test_soft_skills_band(self):
        suggestions = self._suggest(skills_score=80.0, missing_skills=["Go"])
        assert suggestions[0] == "Consider adding these skills to improve coverage: Go"

    def test_stuffing_warning(self):
        suggestions = self._suggest(stuffed_keywords=["python"])
        assert any(s.startswith("Warning: These keywords appear too frequently") and "python" in s for s in suggestions)

    def test_no_technical_skills_remark_without_skills_section(self):
        suggestions = self._suggest(resume={"summary": "No skills listed."})
        assert not any(s.startswith("Consider adding more technical skills") for s in suggestions)

    def test_few_technical_skills_remark_precedes_holistic(self):
        suggestions = self._suggest(resume={"skills": {"tools": ["Git"]}}, overall_score=70)
        assert suggestions[-2].startswith("Consider adding more technical skills")
        assert suggestions[-1].startswith("Your resume is good but could be improved")

    def test_bullets_lacking_metrics_are_counted(self):
        resume = {
            "summary": "Short.",
            "experience": [{"bullets": ["Wrote code", "Cut costs by 20%", "Reviewed pull requests"]}],
            "skills": {"technical": ["a", "b", "c", "d", "e"]},
        }
        suggestions = self._suggest(content_score=40.0, overall_score=70, resume=resume)
        assert suggestions[0].startswith("CRITICAL: 2 out of 3 experience bullets lack quantified metrics")
        assert suggestions[1].startswith("Start EVERY experience bullet with a strong action verb")
        assert suggestions[2].startswith("Expand your professional summary")


class TestScoreResume:
    def test_strong_resume(self, job_analysis, strong_resume):
        report = score_resume(job_analysis, strong_resume)
        assert isinstance(report, ScoreReport)
        assert report.keyword_match_score == 100.0
        assert report.skills_coverage_score == 100.0
        assert report.content_quality_score == 95.0
        assert report.overall_score == 99
        assert report.suggestions[-1].startswith("Great job!")

    def test_empty_resume_against_full_job(self, empty_resume):
        job = {
            "requiredSkills": ["Python", "AWS", "Docker", "Kubernetes", "Terraform"],
            "atsKeywords": [{"keyword": f"keyword{i}", "frequency": i + 1} for i in range(10)],
        }
        report = score_resume(job, empty_resume)
        assert report.overall_score == 0
        assert report.keyword_match_score == 0.0
        assert report.skills_coverage_score == 0.0
        assert report.content_quality_score == 0.0
        assert len(report.missing_keywords) == 10
        assert report.missing_skills == job["requiredSkills"]
        assert any(s.startswith("CRITICAL: Add these high-priority keywords") for s in report.suggestions)
        assert any(s.startswith("IMPORTANT: Add these required skills") for s in report.suggestions)
        assert report.suggestions[-1].startswith("Consider restructuring your resume")

    def test_critical_keyword_suggestion_lists_first_eight(self, empty_resume):
        job = {"atsKeywords": [{"keyword": f"kw{i}"} for i in range(10)]}
        report = score_resume(job, empty_resume)
        assert "kw7" in report.suggestions[0]
        assert "kw8" not in report.suggestions[0]

    def test_deterministic(self, job_analysis, strong_resume):
        assert score_resume(job_analysis, strong_resume) == score_resume(job_analysis, strong_resume)

    def test_missing_job_raises(self, strong_resume):
        with pytest.raises(InvalidArgumentError) as exc_info:
            score_resume(None, strong_resume)
        assert exc_info.value.argument == "job"

    def test_non_mapping_resume_raises(self, job_analysis):
        with pytest.raises(InvalidArgumentError) as exc_info:
            score_resume(job_analysis, "plain text resume")
        assert exc_info.value.argument == "resume"

    def test_to_dict_uses_wire_names(self, job_analysis, strong_resume):
        data = score_resume(job_analysis, strong_resume).to_dict()
        assert set(data) == {
            "overallScore",
            "keywordMatchScore",
            "skillsCoverageScore",
            "contentQualityScore",
            "missingKeywords",
            "missingSkills",
            "suggestions",
            "stuffedKeywords",
        }


class TestFormatReport:
    def test_markdown_report(self, job_analysis, empty_resume):
        report = score_resume(job_analysis, empty_resume)
        text = format_ats_report(report)
        assert "## ATS Score: 0/100 Needs Work" in text
        assert "### Missing Keywords (5)" in text
        assert "### Suggestions" in text
