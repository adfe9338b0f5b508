# resume_builder/ats/scorer.py
import math
import logging
from typing import List, Optional, Callable, Tuple

from resume_builder.ats.config import ATSConfig
from resume_builder.ats.models import ScoreBundle, SectionScores
from resume_builder.ats.text import count_words
from resume_builder.ats.patterns import (
    EMAIL_PATTERN, EMAIL_OR_LABEL_PATTERN, PHONE_PATTERN, LINKEDIN_PATTERN,
    PORTFOLIO_PATTERN, LOCATION_PATTERN, QUANTIFIABLE_PATTERN, METRIC_PATTERN,
    ACTION_VERB_PATTERN, WEAK_PHRASE_PATTERN, DATE_RANGE_PATTERN, COMPANY_PATTERN,
    DEGREE_PATTERN, INSTITUTION_PATTERN, YEAR_PATTERN, GPA_PATTERN,
    TECHNICAL_SKILL_PATTERN, SOFT_SKILL_PATTERN, CERTIFICATION_PATTERN,
    CONTENT_SECTION_PATTERNS, SENTENCE_SPLIT, PARAGRAPH_SPLIT,
)

logger = logging.getLogger(__name__)

Rule = Tuple[str, Callable[[str], bool], int]

PROBLEMATIC_GLYPHS = ('|', '□', '▪', '◆', '★')

# (description, predicate on original text, points deducted)
FORMAT_RULES: Tuple[Rule, ...] = (
    ('tab characters', lambda t: '\t' in t, 10),
    ('more than 20 bullets', lambda t: t.count('•') > 20, 5),
    ('no email address', lambda t: not EMAIL_OR_LABEL_PATTERN.search(t), 20),
    ('no phone number', lambda t: not PHONE_PATTERN.search(t), 15),
) + tuple(
    (f"problematic character '{glyph}'", lambda t, g=glyph: g in t, 5)
    for glyph in PROBLEMATIC_GLYPHS
) + (
    ('fewer than 200 words', lambda t: count_words(t) < 200, 25),
    ('more than 1000 words', lambda t: count_words(t) > 1000, 10),
)

# (description, predicate on text, points awarded)
CONTACT_RULES: Tuple[Rule, ...] = (
    ('email', lambda t: bool(EMAIL_PATTERN.search(t)), 30),
    ('phone', lambda t: bool(PHONE_PATTERN.search(t)), 25),
    ('linkedin', lambda t: bool(LINKEDIN_PATTERN.search(t)), 20),
    ('portfolio', lambda t: bool(PORTFOLIO_PATTERN.search(t)), 15),
    ('location', lambda t: bool(LOCATION_PATTERN.search(t)), 10),
)

EXPERIENCE_RULES: Tuple[Rule, ...] = (
    ('date range', lambda t: bool(DATE_RANGE_PATTERN.search(t)), 25),
    ('company', lambda t: bool(COMPANY_PATTERN.search(t)), 20),
    ('action verbs', lambda t: len(distinct_matches(ACTION_VERB_PATTERN, t)) > 3, 25),
    ('metrics', lambda t: len(METRIC_PATTERN.findall(t)) > 2, 30),
)

EDUCATION_RULES: Tuple[Rule, ...] = (
    ('degree', lambda t: bool(DEGREE_PATTERN.search(t)), 40),
    ('institution', lambda t: bool(INSTITUTION_PATTERN.search(t)), 30),
    ('year', lambda t: bool(YEAR_PATTERN.search(t)), 20),
    ('gpa', lambda t: bool(GPA_PATTERN.search(t)), 10),
)

SKILLS_RULES: Tuple[Rule, ...] = (
    ('technical skills', lambda t: len(TECHNICAL_SKILL_PATTERN.findall(t)) > 5, 40),
    ('soft skills', lambda t: len(SOFT_SKILL_PATTERN.findall(t)) > 3, 30),
    ('certifications', lambda t: bool(CERTIFICATION_PATTERN.search(t)), 30),
)


def round_half_up(value: float) -> int:
    """Round .5 away from zero for non-negative scores"""
    return int(math.floor(value + 0.5))


def clamp(score: float, low: int = 0, high: int = 100) -> int:
    return int(min(max(score, low), high))


def distinct_matches(pattern, text: str) -> List[str]:
    """Distinct lower-cased matches of pattern, in first-seen order"""
    return list(dict.fromkeys(m.lower() for m in pattern.findall(text)))


def apply_rules(text: str, rules: Tuple[Rule, ...]) -> int:
    """Sum the points of every rule whose predicate holds"""
    return sum(points for _, predicate, points in rules if predicate(text))


class ATSScorer:
    """
    Calculate ATS sub-scores and the weighted overall score

    Every scoring method is independent and returns an integer 0-100.
    """

    def __init__(self, config: Optional[ATSConfig] = None):
        self.config = config or ATSConfig()
        self.weights = self.config.weights

    def score(
        self,
        original_text: str,
        normalized_text: str,
        target_keywords: List[str]
    ) -> ScoreBundle:
        """
        Compute every sub-score for one resume

        Args:
            original_text: Resume text as supplied
            normalized_text: Output of normalize_text(original_text)
            target_keywords: Lower-cased keywords to look for

        Returns:
            ScoreBundle with overall_score filled in
        """
        bundle = ScoreBundle(
            keyword_match=self.keyword_match(normalized_text, target_keywords),
            format_score=self.format_score(original_text),
            content_score=self.content_score(normalized_text),
            readability_score=self.readability_score(original_text),
            section_scores=self.section_scores(original_text),
        )
        bundle.overall_score = self.overall_score(bundle)

        logger.debug(
            f"Scores: keyword={bundle.keyword_match} format={bundle.format_score} "
            f"content={bundle.content_score} readability={bundle.readability_score}"
        )
        return bundle

    def overall_score(self, bundle: ScoreBundle) -> int:
        """Weighted sum of the four primary scores"""
        overall = (
            clamp(bundle.keyword_match) * self.weights['keyword'] +
            clamp(bundle.format_score) * self.weights['format'] +
            clamp(bundle.content_score) * self.weights['content'] +
            clamp(bundle.readability_score) * self.weights['readability']
        )
        return clamp(round_half_up(overall))

    def keyword_match(self, normalized_text: str, target_keywords: List[str]) -> int:
        """
        Percentage of target keywords found as substrings of the text

        An empty keyword list scores a flat 80. The extractor never
        produces one, so analyze_resume cannot reach that branch.
        """
        if not target_keywords:
            return 80

        found = sum(1 for kw in target_keywords if kw.lower() in normalized_text)
        return clamp(round_half_up(found / len(target_keywords) * 100))

    def format_score(self, original_text: str) -> int:
        """
        ATS parsing friendliness (0-100)

        Starts at 100; each rule in FORMAT_RULES that holds deducts points.
        """
        deducted = apply_rules(original_text, FORMAT_RULES)
        return clamp(100 - deducted)

    def content_score(self, normalized_text: str) -> int:
        """
        Content quality (0-100)

        Base 40
        - +8 per recognised section (contact, summary, experience, education, skills)
        - +3 per quantifiable achievement, max +15
        - +2 per action verb, max +10
        - -2 per weak phrase, max -15
        """
        score = 40

        for pattern in CONTENT_SECTION_PATTERNS.values():
            if pattern.search(normalized_text):
                score += 8

        achievements = len(QUANTIFIABLE_PATTERN.findall(normalized_text))
        score += min(achievements * 3, 15)

        action_verbs = len(ACTION_VERB_PATTERN.findall(normalized_text))
        score += min(action_verbs * 2, 10)

        weak_phrases = len(WEAK_PHRASE_PATTERN.findall(normalized_text))
        score -= min(weak_phrases * 2, 15)

        return clamp(score)

    def readability_score(self, original_text: str) -> int:
        """
        Sentence and paragraph length score (0-100)

        Base 80; 15-20 words per sentence is optimal (+10), above 25 is
        too dense (-20), below 8 is choppy (-15). Any paragraph over
        100 words costs 10.
        """
        words = count_words(original_text)
        sentences = [s for s in SENTENCE_SPLIT.split(original_text) if s.strip()]
        avg_words = words / len(sentences) if sentences else 0

        score = 80

        if avg_words > 25:
            score -= 20
        if avg_words < 8:
            score -= 15
        if 15 <= avg_words <= 20:
            score += 10

        paragraphs = PARAGRAPH_SPLIT.split(original_text)
        if any(count_words(p) > 100 for p in paragraphs):
            score -= 10

        return clamp(score)

    def section_scores(self, text: str) -> SectionScores:
        """Score each standard section independently"""
        return SectionScores(
            contact=self.evaluate_contact_section(text),
            experience=self.evaluate_experience_section(text),
            education=self.evaluate_education_section(text),
            skills=self.evaluate_skills_section(text),
        )

    def evaluate_contact_section(self, text: str) -> int:
        """Email 30, phone 25, LinkedIn 20, portfolio 15, location 10"""
        return clamp(apply_rules(text, CONTACT_RULES))

    def evaluate_experience_section(self, text: str) -> int:
        """Date ranges 25, company 20, >3 distinct action verbs 25, >2 metrics 30"""
        return clamp(apply_rules(text, EXPERIENCE_RULES))

    def evaluate_education_section(self, text: str) -> int:
        """Degree 40, institution 30, year 20, GPA 10"""
        return clamp(apply_rules(text, EDUCATION_RULES))

    def evaluate_skills_section(self, text: str) -> int:
        """>5 technical skills 40, >3 soft skills 30, certification 30"""
        return clamp(apply_rules(text, SKILLS_RULES))
