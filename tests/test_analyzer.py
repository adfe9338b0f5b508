"""
Tests for issue detection, recommendation ranking and the text report.
"""

import pytest

from resume_builder.ats import (
    ATSAnalyzer, ScoreBundle, SectionScores, Impact, RecommendationCategory,
    ResumeSection, analyze_resume,
)
from resume_builder.ats.analyzer import RuleContext
from resume_builder.ats.text import normalize_text


@pytest.fixture
def analyzer() -> ATSAnalyzer:
    return ATSAnalyzer()


def _context(text, overall=90, keyword=90, fmt=90, content=90, readability=90, contact=100):
    scores = ScoreBundle(
        keyword_match=keyword,
        format_score=fmt,
        content_score=content,
        readability_score=readability,
        section_scores=SectionScores(contact=contact),
        overall_score=overall,
    )
    return RuleContext(original_text=text, normalized_text=normalize_text(text), scores=scores)


COMPLETE_TEXT = "Summary jane@example.com 555-123-4567 linkedin.com/in/jane github.com/jane"


class TestIdentifyIssues:

    def test_healthy_resume_has_no_issues(self, analyzer):
        issues = analyzer.identify_issues(_context(COMPLETE_TEXT))

        assert issues.total == 0

    def test_critical_issues_in_rule_order(self, analyzer):
        issues = analyzer.identify_issues(_context("no contact", overall=30, keyword=10))

        assert issues.critical == [
            "Resume has very low ATS compatibility - major improvements needed",
            "Missing email address - ATS systems require contact information",
            "Extremely low keyword match - resume may be filtered out automatically",
        ]

    def test_warnings(self, analyzer):
        text = "jane@example.com " + "word " * 801
        issues = analyzer.identify_issues(_context(text, fmt=60))

        assert issues.warnings == [
            "Missing phone number in contact information",
            "Formatting issues detected that may cause ATS parsing problems",
            "Resume may be too long - consider condensing to 1-2 pages",
            "Consider adding LinkedIn profile URL",
        ]

    def test_suggestions(self, analyzer):
        text = "jane@example.com 555-123-4567 linkedin"
        issues = analyzer.identify_issues(_context(text, keyword=55, content=65))

        assert issues.suggestions == [
            "Increase keyword density by incorporating more relevant terms",
            "Add more quantifiable achievements and action verbs",
            "Consider adding portfolio or GitHub URL to showcase work",
        ]

    def test_thresholds_are_strict(self, analyzer):
        issues = analyzer.identify_issues(
            _context(COMPLETE_TEXT, overall=50, keyword=60, fmt=70, content=70)
        )

        assert issues.total == 0


class TestGenerateRecommendations:

    def test_no_recommendations_when_everything_passes(self, analyzer):
        assert analyzer.generate_recommendations(_context(COMPLETE_TEXT)) == []

    def test_all_rules_fire_and_sort_by_priority(self, analyzer):
        context = _context("plain text", keyword=10, fmt=50, content=50, contact=50)

        recommendations = analyzer.generate_recommendations(context)

        assert [r.priority for r in recommendations] == [100, 95, 90, 85, 70]
        # ids follow generation order, not priority order
        assert [r.id for r in recommendations] == ["rec-1", "rec-4", "rec-2", "rec-3", "rec-5"]
        assert [r.title for r in recommendations] == [
            "Optimize Keyword Usage",
            "Complete Contact Information",
            "Improve ATS-Friendly Formatting",
            "Enhance Achievement Statements",
            "Add Professional Summary",
        ]

    def test_metadata(self, analyzer):
        context = _context("plain text", keyword=10, fmt=50, content=50, contact=50)
        by_title = {r.title: r for r in analyzer.generate_recommendations(context)}

        keyword = by_title["Optimize Keyword Usage"]
        assert keyword.impact == Impact.CRITICAL
        assert keyword.category == RecommendationCategory.KEYWORDS
        assert keyword.section == ResumeSection.SKILLS

        formatting = by_title["Improve ATS-Friendly Formatting"]
        assert formatting.impact == Impact.HIGH
        assert formatting.section is None

        summary = by_title["Add Professional Summary"]
        assert summary.impact == Impact.MEDIUM
        assert summary.section == ResumeSection.SUMMARY

    def test_ids_are_sequential_for_subset(self, analyzer):
        context = _context(COMPLETE_TEXT, content=50, contact=60)

        recommendations = analyzer.generate_recommendations(context)

        assert [(r.id, r.priority) for r in recommendations] == [("rec-2", 95), ("rec-1", 85)]

    def test_objective_counts_as_summary(self, analyzer):
        context = _context("Objective: jane@example.com")
        assert analyzer.generate_recommendations(context) == []


class TestGenerateReport:

    def test_report_contents(self, analyzer, scenario_a_resume):
        result = analyze_resume(scenario_a_resume)

        report = analyzer.generate_report(result)

        assert "ATS COMPATIBILITY REPORT" in report
        assert "Overall ATS Score: 48/100 (NEEDS IMPROVEMENT)" in report
        assert "Keywords:     13/100" in report
        assert "CRITICAL (2):" in report
        assert "1. Optimize Keyword Usage [critical, keywords]" in report
        assert "Found Keywords: javascript, react, java, leadership" in report

    def test_report_for_empty_resume(self, analyzer):
        report = analyzer.generate_report(analyze_resume(""))

        assert "Found Keywords" not in report
        assert "Missing Keywords:" in report
        assert "WARNINGS (3):" in report
