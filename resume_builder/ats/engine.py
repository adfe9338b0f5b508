# resume_builder/ats/engine.py
import logging
from typing import Optional

from resume_builder.ats.config import ATSConfig
from resume_builder.ats.exceptions import InvalidInputError
from resume_builder.ats.models import AnalysisInput, AnalysisResult
from resume_builder.ats.text import normalize_text
from resume_builder.ats.keyword_extractor import KeywordExtractor
from resume_builder.ats.scorer import ATSScorer
from resume_builder.ats.analyzer import ATSAnalyzer, RuleContext
from resume_builder.ats.metrics import MetricsCollector

logger = logging.getLogger(__name__)


class ATSEngine:
    """
    Run a complete ATS compatibility analysis

    Holds no state between calls; one engine can serve any number of
    concurrent callers.
    """

    def __init__(self, config: Optional[ATSConfig] = None):
        self.config = config or ATSConfig()
        self.keyword_extractor = KeywordExtractor(self.config)
        self.scorer = ATSScorer(self.config)
        self.analyzer = ATSAnalyzer()
        self.metrics_collector = MetricsCollector()

    def analyze(
        self,
        resume_text: str,
        job_description: Optional[str] = None,
        target_role: Optional[str] = None
    ) -> AnalysisResult:
        """
        Analyze resume text

        Args:
            resume_text: Raw resume text (may be empty)
            job_description: Optional job description to extract keywords from
            target_role: Optional role name, e.g. "data scientist"

        Returns:
            AnalysisResult

        Raises:
            InvalidInputError: an argument is not a string
        """
        request = self._validate(resume_text, job_description, target_role)

        normalized = normalize_text(request.resume_text)
        target_keywords = self.keyword_extractor.extract_target_keywords(
            request.job_description, request.target_role
        )

        scores = self.scorer.score(request.resume_text, normalized, target_keywords)

        found_keywords = [kw for kw in target_keywords if kw in normalized]
        missing_keywords = [kw for kw in target_keywords if kw not in normalized]

        context = RuleContext(
            original_text=request.resume_text,
            normalized_text=normalized,
            scores=scores,
        )
        issues = self.analyzer.identify_issues(context)
        recommendations = self.analyzer.generate_recommendations(context)
        metrics = self.metrics_collector.collect(request.resume_text)

        result = AnalysisResult(
            overall_score=scores.overall_score,
            keyword_match=scores.keyword_match,
            format_score=scores.format_score,
            content_score=scores.content_score,
            readability_score=scores.readability_score,
            section_scores=scores.section_scores,
            issues=issues,
            missing_keywords=missing_keywords[:self.config.missing_keywords_limit],
            found_keywords=found_keywords[:self.config.found_keywords_limit],
            recommendations=recommendations,
            metrics=metrics,
            all_found_keywords=found_keywords,
            all_missing_keywords=missing_keywords,
            excellent_threshold=self.config.excellent_threshold,
            good_threshold=self.config.good_threshold,
        )

        logger.info(
            f"ATS Score: {result.overall_score}/100 ({result.rating}) - "
            f"{len(found_keywords)}/{len(target_keywords)} keywords matched"
        )
        return result

    @staticmethod
    def _validate(resume_text, job_description, target_role) -> AnalysisInput:
        """Reject non-string input instead of coercing it"""
        if not isinstance(resume_text, str):
            raise InvalidInputError(
                f"resume_text must be a string, got {type(resume_text).__name__}"
            )
        for name, value in (('job_description', job_description), ('target_role', target_role)):
            if value is not None and not isinstance(value, str):
                raise InvalidInputError(
                    f"{name} must be a string or None, got {type(value).__name__}"
                )

        return AnalysisInput(
            resume_text=resume_text,
            job_description=job_description,
            target_role=target_role,
        )


def analyze_resume(
    resume_text: str,
    job_description: Optional[str] = None,
    target_role: Optional[str] = None,
    config: Optional[ATSConfig] = None
) -> AnalysisResult:
    """Analyze resume text with a fresh engine"""
    return ATSEngine(config).analyze(resume_text, job_description, target_role)
