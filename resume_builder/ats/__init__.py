# resume_builder/ats/__init__.py
"""
ATS (Applicant Tracking System) compatibility analysis
"""

from resume_builder.ats.models import (
    AnalysisInput, AnalysisResult, ScoreBundle, SectionScores, Issues,
    Recommendation, ResumeMetrics, Impact, RecommendationCategory,
    ResumeSection, Severity
)
from resume_builder.ats.exceptions import ATSError, InvalidInputError, ConfigurationError
from resume_builder.ats.config import ATSConfig, get_config
from resume_builder.ats.text import normalize_text, load_resume_text
from resume_builder.ats.keyword_extractor import KeywordExtractor
from resume_builder.ats.scorer import ATSScorer
from resume_builder.ats.analyzer import ATSAnalyzer
from resume_builder.ats.metrics import MetricsCollector
from resume_builder.ats.engine import ATSEngine, analyze_resume

__all__ = [
    'AnalysisInput',
    'AnalysisResult',
    'ScoreBundle',
    'SectionScores',
    'Issues',
    'Recommendation',
    'ResumeMetrics',
    'Impact',
    'RecommendationCategory',
    'ResumeSection',
    'Severity',
    'ATSError',
    'InvalidInputError',
    'ConfigurationError',
    'ATSConfig',
    'get_config',
    'normalize_text',
    'load_resume_text',
    'KeywordExtractor',
    'ATSScorer',
    'ATSAnalyzer',
    'MetricsCollector',
    'ATSEngine',
    'analyze_resume',
]
