# resume_builder/ats/analyzer.py
import logging
from dataclasses import dataclass
from typing import List, Callable, Tuple, Optional

from resume_builder.ats.models import (
    AnalysisResult, Issues, Recommendation, ScoreBundle,
    Severity, Impact, RecommendationCategory, ResumeSection,
)
from resume_builder.ats.text import count_words
from resume_builder.ats.patterns import EMAIL_PATTERN, PHONE_PATTERN, PORTFOLIO_PATTERN

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RuleContext:
    """Inputs every issue/recommendation rule can look at"""
    original_text: str
    normalized_text: str
    scores: ScoreBundle


@dataclass(frozen=True)
class RecommendationRule:
    """Template for a recommendation and the condition that triggers it"""
    applies: Callable[[RuleContext], bool]
    title: str
    description: str
    impact: Impact
    category: RecommendationCategory
    priority: int
    section: Optional[ResumeSection] = None


# (severity, condition, message), evaluated in order
ISSUE_RULES: Tuple[Tuple[Severity, Callable[[RuleContext], bool], str], ...] = (
    # Critical
    (Severity.CRITICAL,
     lambda c: c.scores.overall_score < 50,
     "Resume has very low ATS compatibility - major improvements needed"),
    (Severity.CRITICAL,
     lambda c: not EMAIL_PATTERN.search(c.original_text),
     "Missing email address - ATS systems require contact information"),
    (Severity.CRITICAL,
     lambda c: c.scores.keyword_match < 20,
     "Extremely low keyword match - resume may be filtered out automatically"),

    # Warnings
    (Severity.WARNING,
     lambda c: not PHONE_PATTERN.search(c.original_text),
     "Missing phone number in contact information"),
    (Severity.WARNING,
     lambda c: c.scores.format_score < 70,
     "Formatting issues detected that may cause ATS parsing problems"),
    (Severity.WARNING,
     lambda c: count_words(c.original_text) > 800,
     "Resume may be too long - consider condensing to 1-2 pages"),
    (Severity.WARNING,
     lambda c: 'linkedin' not in c.normalized_text,
     "Consider adding LinkedIn profile URL"),

    # Suggestions
    (Severity.SUGGESTION,
     lambda c: c.scores.keyword_match < 60,
     "Increase keyword density by incorporating more relevant terms"),
    (Severity.SUGGESTION,
     lambda c: c.scores.content_score < 70,
     "Add more quantifiable achievements and action verbs"),
    (Severity.SUGGESTION,
     lambda c: not PORTFOLIO_PATTERN.search(c.normalized_text),
     "Consider adding portfolio or GitHub URL to showcase work"),
)

RECOMMENDATION_RULES: Tuple[RecommendationRule, ...] = (
    RecommendationRule(
        applies=lambda c: c.scores.keyword_match < 50,
        title="Optimize Keyword Usage",
        description=(
            "Add more relevant keywords throughout your resume, especially in the skills "
            "and experience sections. Focus on technical skills, tools, and methodologies "
            "mentioned in job postings."
        ),
        impact=Impact.CRITICAL,
        category=RecommendationCategory.KEYWORDS,
        section=ResumeSection.SKILLS,
        priority=100,
    ),
    RecommendationRule(
        applies=lambda c: c.scores.format_score < 70,
        title="Improve ATS-Friendly Formatting",
        description=(
            "Use standard fonts, clear section headers, and avoid complex formatting. "
            "Stick to simple bullet points and standard section names like \"Experience\" "
            "and \"Education\"."
        ),
        impact=Impact.HIGH,
        category=RecommendationCategory.FORMAT,
        priority=90,
    ),
    RecommendationRule(
        applies=lambda c: c.scores.content_score < 60,
        title="Enhance Achievement Statements",
        description=(
            "Start bullet points with strong action verbs and include specific metrics. "
            "Instead of \"Responsible for sales,\" write \"Increased sales by 25% over 6 months.\""
        ),
        impact=Impact.HIGH,
        category=RecommendationCategory.CONTENT,
        section=ResumeSection.EXPERIENCE,
        priority=85,
    ),
    RecommendationRule(
        applies=lambda c: c.scores.section_scores.contact < 80,
        title="Complete Contact Information",
        description=(
            "Ensure your resume includes email, phone number, LinkedIn profile, and location. "
            "This information should be clearly visible at the top."
        ),
        impact=Impact.HIGH,
        category=RecommendationCategory.STRUCTURE,
        section=ResumeSection.CONTACT,
        priority=95,
    ),
    RecommendationRule(
        applies=lambda c: (
            'summary' not in c.normalized_text and 'objective' not in c.normalized_text
        ),
        title="Add Professional Summary",
        description=(
            "Include a 2-3 sentence professional summary that highlights your key "
            "qualifications and career goals."
        ),
        impact=Impact.MEDIUM,
        category=RecommendationCategory.CONTENT,
        section=ResumeSection.SUMMARY,
        priority=70,
    ),
)


class ATSAnalyzer:
    """
    Turn computed scores into issues and prioritized recommendations
    """

    def identify_issues(self, context: RuleContext) -> Issues:
        """
        Evaluate ISSUE_RULES in order

        Returns:
            Issues grouped by severity; order within a group is rule order
        """
        issues = Issues()

        for severity, condition, message in ISSUE_RULES:
            if condition(context):
                issues.add(severity, message)

        logger.debug(
            f"Issues: {len(issues.critical)} critical, {len(issues.warnings)} warnings, "
            f"{len(issues.suggestions)} suggestions"
        )
        return issues

    def generate_recommendations(self, context: RuleContext) -> List[Recommendation]:
        """
        Build recommendations for every rule that applies

        Ids (rec-1, rec-2, ...) follow generation order; the returned list
        is sorted by priority, highest first.
        """
        recommendations = []

        for rule in RECOMMENDATION_RULES:
            if not rule.applies(context):
                continue

            recommendations.append(Recommendation(
                id=f"rec-{len(recommendations) + 1}",
                title=rule.title,
                description=rule.description,
                impact=rule.impact,
                category=rule.category,
                section=rule.section,
                priority=rule.priority,
            ))

        recommendations.sort(key=lambda r: r.priority, reverse=True)

        logger.debug(f"Generated {len(recommendations)} recommendations")
        return recommendations

    def generate_report(self, result: AnalysisResult) -> str:
        """
        Generate human-readable ATS report

        Returns:
            Formatted report string
        """
        lines = []

        lines.append("=" * 70)
        lines.append("ATS COMPATIBILITY REPORT")
        lines.append("=" * 70)
        lines.append("")

        # Overall score
        rating = result.rating.replace('_', ' ').upper()
        lines.append(f"Overall ATS Score: {result.overall_score}/100 ({rating})")
        lines.append("")

        # Component scores
        lines.append("Component Scores:")
        lines.append(f"  Keywords:    {result.keyword_match:3d}/100")
        lines.append(f"  Format:      {result.format_score:3d}/100")
        lines.append(f"  Content:     {result.content_score:3d}/100")
        lines.append(f"  Readability: {result.readability_score:3d}/100")
        lines.append("")

        lines.append("Section Scores:")
        for name, value in result.section_scores.to_dict().items():
            lines.append(f"  {name.title():<12} {value:3d}/100")
        lines.append("")

        # Metrics
        m = result.metrics
        lines.append(
            f"Words: {m.word_count}  Sections: {m.section_count}  "
            f"Achievements: {m.quantifiable_achievements}  Action verbs: {m.action_verbs_used}"
        )
        lines.append("")

        # Keywords
        if result.found_keywords:
            lines.append(f"Found Keywords: {', '.join(result.found_keywords)}")
        if result.missing_keywords:
            lines.append(f"Missing Keywords: {', '.join(result.missing_keywords)}")
        lines.append("")

        # Issues by severity
        for label, messages in (
            ("CRITICAL", result.issues.critical),
            ("WARNINGS", result.issues.warnings),
            ("SUGGESTIONS", result.issues.suggestions),
        ):
            if not messages:
                continue
            lines.append(f"{label} ({len(messages)}):")
            lines.append("-" * 70)
            for message in messages:
                lines.append(f"  - {message}")
            lines.append("")

        # Recommendations
        if result.recommendations:
            lines.append("RECOMMENDATIONS:")
            lines.append("-" * 70)
            for i, rec in enumerate(result.recommendations, 1):
                lines.append(f"{i}. {rec.title} [{rec.impact.value}, {rec.category.value}]")
                lines.append(f"   → {rec.description}")
                lines.append("")

        lines.append("=" * 70)

        return "\n".join(lines)
