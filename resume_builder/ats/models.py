# resume_builder/ats/models.py
from dataclasses import dataclass, field
from typing import List, Dict, Optional, Any
from enum import Enum


class Impact(Enum):
    """How much a recommendation moves the score"""
    CRITICAL = "critical"
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class RecommendationCategory(Enum):
    """What kind of change a recommendation asks for"""
    FORMAT = "format"
    CONTENT = "content"
    KEYWORDS = "keywords"
    STRUCTURE = "structure"
    OPTIMIZATION = "optimization"


class ResumeSection(Enum):
    """Resume section a recommendation points at"""
    CONTACT = "contact"
    SUMMARY = "summary"
    EXPERIENCE = "experience"
    EDUCATION = "education"
    SKILLS = "skills"
    PROJECTS = "projects"


class Severity(Enum):
    """Issue severity buckets"""
    CRITICAL = "critical"
    WARNING = "warning"
    SUGGESTION = "suggestion"


@dataclass(frozen=True)
class AnalysisInput:
    """Arguments of a single analysis call"""
    resume_text: str
    job_description: Optional[str] = None
    target_role: Optional[str] = None


@dataclass
class SectionScores:
    """Completeness of individual resume sections (0-100 each)"""
    contact: int = 0
    experience: int = 0
    education: int = 0
    skills: int = 0

    def to_dict(self) -> Dict[str, int]:
        return {
            'contact': self.contact,
            'experience': self.experience,
            'education': self.education,
            'skills': self.skills,
        }


@dataclass
class ScoreBundle:
    """Primary and section scores of one analysis"""
    keyword_match: int
    format_score: int
    content_score: int
    readability_score: int
    section_scores: SectionScores
    overall_score: int = 0


@dataclass
class Issues:
    """Issues grouped by severity, in rule-evaluation order"""
    critical: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)
    suggestions: List[str] = field(default_factory=list)

    def add(self, severity: Severity, message: str):
        if severity == Severity.CRITICAL:
            self.critical.append(message)
        elif severity == Severity.WARNING:
            self.warnings.append(message)
        else:
            self.suggestions.append(message)

    @property
    def total(self) -> int:
        return len(self.critical) + len(self.warnings) + len(self.suggestions)

    def to_dict(self) -> Dict[str, List[str]]:
        return {
            'critical': list(self.critical),
            'warnings': list(self.warnings),
            'suggestions': list(self.suggestions),
        }


@dataclass
class Recommendation:
    """Actionable improvement; higher priority is shown first"""
    id: str
    title: str
    description: str
    impact: Impact
    category: RecommendationCategory
    priority: int
    section: Optional[ResumeSection] = None

    def to_dict(self) -> Dict[str, Any]:
        data = {
            'id': self.id,
            'title': self.title,
            'description': self.description,
            'impact': self.impact.value,
            'category': self.category.value,
            'priority': self.priority,
        }
        if self.section is not None:
            data['section'] = self.section.value
        return data


@dataclass
class ResumeMetrics:
    """Countable statistics about the resume text"""
    word_count: int = 0
    section_count: int = 0
    quantifiable_achievements: int = 0
    action_verbs_used: int = 0

    def to_dict(self) -> Dict[str, int]:
        return {
            'wordCount': self.word_count,
            'sectionCount': self.section_count,
            'quantifiableAchievements': self.quantifiable_achievements,
            'actionVerbsUsed': self.action_verbs_used,
        }


@dataclass
class AnalysisResult:
    """Complete ATS compatibility report"""
    overall_score: int             # 0-100

    # Component scores
    keyword_match: int             # 0-100
    format_score: int              # 0-100
    content_score: int             # 0-100
    readability_score: int         # 0-100
    section_scores: SectionScores

    # Findings
    issues: Issues
    missing_keywords: List[str]    # first 15
    found_keywords: List[str]      # first 20
    recommendations: List[Recommendation]
    metrics: ResumeMetrics

    # Untruncated keyword lists, not serialised
    all_found_keywords: List[str] = field(default_factory=list, repr=False)
    all_missing_keywords: List[str] = field(default_factory=list, repr=False)

    # Display bands
    excellent_threshold: int = field(default=80, repr=False)
    good_threshold: int = field(default=60, repr=False)

    @property
    def rating(self) -> str:
        """Display band for the overall score"""
        if self.overall_score >= self.excellent_threshold:
            return "excellent"
        elif self.overall_score >= self.good_threshold:
            return "good"
        else:
            return "needs_improvement"

    @property
    def passes(self) -> bool:
        """Is the resume likely to get through ATS screening?"""
        return self.rating != "needs_improvement"

    def to_dict(self) -> Dict[str, Any]:
        """JSON-ready representation using the UI's field names"""
        return {
            'overallScore': self.overall_score,
            'keywordMatch': self.keyword_match,
            'formatScore': self.format_score,
            'contentScore': self.content_score,
            'readabilityScore': self.readability_score,
            'sectionScores': self.section_scores.to_dict(),
            'issues': self.issues.to_dict(),
            'missingKeywords': list(self.missing_keywords),
            'foundKeywords': list(self.found_keywords),
            'recommendations': [r.to_dict() for r in self.recommendations],
            'metrics': self.metrics.to_dict(),
            'rating': self.rating,
        }
