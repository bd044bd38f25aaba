"""Tests for salary range estimation."""

import pytest

from resume_scorer.domain import InvalidArgumentError, ScoreReport, estimate_salary, format_salary_report
from resume_scorer.domain.salary_estimator import (
    BASE_SALARY_RANGES,
    MAX_CONFIDENCE,
    calculate_confidence,
    count_high_demand_skills,
    industry_multiplier_for,
    years_of_experience,
)


def _factor(report, name):
    return next(f for f in report.factors if f.factor == name)


class TestEstimateSalary:
    def test_senior_strong_resume_beats_base(self, empty_resume):
        job = {"jobLevel": "senior", "industry": "Agriculture", "requiredSkills": ["Excel", "Forecasting"]}
        report = estimate_salary(job, empty_resume, {"overallScore": 85}, {"years_of_experience": "6 years"})

        assert (report.min, report.mid, report.max) == (116000, 152000, 210000)
        base = BASE_SALARY_RANGES["senior"]
        assert report.min > base["min"]
        assert report.mid > base["mid"]
        assert report.max > base["max"]
        assert report.confidence == 80
        assert _factor(report, "Industry").impact == "neutral"
        assert _factor(report, "Resume Strength").impact == "positive"

    def test_defaults_for_sparse_job(self, empty_resume):
        report = estimate_salary({}, empty_resume)

        assert (report.min, report.mid, report.max) == (78000, 106000, 146000)
        assert report.confidence == 50
        assert _factor(report, "Job Level").value == "Mid"
        assert _factor(report, "Job Level").impact == "neutral"
        assert _factor(report, "Industry").value == "Technology"
        assert _factor(report, "Years of Experience").value == "3 years"
        assert _factor(report, "Resume Strength").value == "70% ATS Score"

    def test_zero_years_is_respected(self, empty_resume):
        report = estimate_salary({"jobLevel": "entry"}, empty_resume, user_answers={"yearsOfExperience": 0})
        assert _factor(report, "Years of Experience").value == "0 years"
        assert report.confidence == 70

    def test_experience_premium(self, empty_resume):
        report = estimate_salary({"jobLevel": "mid"}, empty_resume, user_answers={"years_of_experience": 8})
        factor = _factor(report, "Years of Experience")
        assert factor.impact == "positive"
        assert factor.description == "8 years of experience adds premium to base salary"
        assert report.tips[-1].startswith("Your experience exceeds typical requirements")

    def test_weak_resume_lowers_range(self, empty_resume):
        weak = ScoreReport(
            overall_score=40,
            keyword_match_score=30.0,
            skills_coverage_score=50.0,
            content_quality_score=45.0,
        )
        solid = estimate_salary({"industry": "Retail"}, empty_resume, {"overallScore": 70})
        report = estimate_salary({"industry": "Retail"}, empty_resume, weak)
        assert report.mid < solid.mid
        assert _factor(report, "Resume Strength").impact == "negative"
        assert report.tips[0] == "Improve your ATS score to strengthen your negotiating position"

    def test_high_demand_skills_factor(self, empty_resume):
        report = estimate_salary({"requiredSkills": ["Python", "AWS", "Kubernetes"]}, empty_resume)
        assert _factor(report, "High-Demand Skills").value == "3 skills"

    def test_ranges_are_ordered_thousands(self, job_analysis, strong_resume):
        report = estimate_salary(job_analysis, strong_resume, score_report=None)
        assert report.min <= report.mid <= report.max
        assert all(v % 1000 == 0 for v in (report.min, report.mid, report.max))
        assert report.confidence <= MAX_CONFIDENCE

    def test_invalid_resume_raises(self, job_analysis):
        with pytest.raises(InvalidArgumentError) as exc_info:
            estimate_salary(job_analysis, None)
        assert exc_info.value.argument == "resume"

    def test_to_dict(self, empty_resume):
        data = estimate_salary({}, empty_resume).to_dict()
        assert data["range"] == {"min": 78000, "mid": 106000, "max": 146000}
        assert data["currency"] == "USD"
        assert data["period"] == "annual"
        assert data["disclaimer"]


    def test_out_of_range_inputs_do_not_crash(self, empty_resume):
        report = estimate_salary(
            {"jobLevel": "mid"},
            empty_resume,
            {"overallScore": float("inf")},
            {"years_of_experience": "9" * 400},
        )
        assert _factor(report, "Years of Experience").value == "60 years"
        assert _factor(report, "Resume Strength").value == "70% ATS Score"
        assert report.min <= report.mid <= report.max

    def test_huge_ats_score_is_clamped(self, empty_resume):
        report = estimate_salary({}, empty_resume, {"overallScore": 10**400})
        assert _factor(report, "Resume Strength").value == "100% ATS Score"


class TestHelpers:
    @pytest.mark.parametrize(
        "industry,expected",
        [
            ("Software Development Services", 1.15),
            ("Software Development Technology", 1.15),
            ("Healthcare IT", 1.05),
            ("retail", 0.85),
            ("Agriculture", 1.0),
        ],
    )
    def test_industry_multiplier(self, industry, expected):
        assert industry_multiplier_for(industry) == expected

    def test_count_high_demand_skills(self):
        assert count_high_demand_skills(["Python", "AWS", "Kubernetes", "Excel"]) == 3

    @pytest.mark.parametrize(
        "answers,expected",
        [
            ({"yearsOfExperience": 7}, 7),
            ({"years_of_experience": "10+"}, 10),
            ({"years_of_experience": "about ten"}, None),
            ({"years_of_experience": "9" * 400}, 60),
            ({"years_of_experience": 75}, 60),
            ({"years_of_experience": "-4"}, 0),
            ({"years_of_experience": float("inf")}, None),
            ({"yearsOfExperience": float("nan")}, None),
            ({}, None),
            (None, None),
        ],
    )
    def test_years_of_experience(self, answers, expected):
        assert years_of_experience(answers) == expected

    def test_confidence_is_capped(self, job_analysis):
        assert calculate_confidence(job_analysis, years_given=True) == MAX_CONFIDENCE

    def test_confidence_grows_with_data(self):
        assert calculate_confidence({}, years_given=False) == 50
        assert calculate_confidence({"industry": "Finance"}, years_given=True) == 70


class TestFormatSalaryReport:
    def test_markdown_report(self, empty_resume):
        text = format_salary_report(estimate_salary({}, empty_resume))
        assert "## Estimated Salary: $78,000 - $146,000 (USD, annual)" in text
        assert "| Industry | Technology | positive |" in text
        assert "### Tips" in text
