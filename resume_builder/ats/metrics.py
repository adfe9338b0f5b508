# resume_builder/ats/metrics.py
import logging

from resume_builder.ats.models import ResumeMetrics
from resume_builder.ats.text import count_words
from resume_builder.ats.patterns import (
    SECTION_HEADER_PATTERN, QUANTIFIABLE_PATTERN, ACTION_VERB_PATTERN,
)

logger = logging.getLogger(__name__)


class MetricsCollector:
    """Countable statistics shown next to the scores"""

    def collect(self, text: str) -> ResumeMetrics:
        """
        Collect metrics from the original resume text

        - word_count: whitespace-separated words
        - section_count: distinct standard section headers
        - quantifiable_achievements: every numeric claim, duplicates included
        - action_verbs_used: distinct action verbs
        """
        sections = {m.lower() for m in SECTION_HEADER_PATTERN.findall(text)}
        verbs = {m.lower() for m in ACTION_VERB_PATTERN.findall(text)}

        metrics = ResumeMetrics(
            word_count=count_words(text),
            section_count=len(sections),
            quantifiable_achievements=len(QUANTIFIABLE_PATTERN.findall(text)),
            action_verbs_used=len(verbs),
        )

        logger.debug(f"Metrics: {metrics}")
        return metrics
