# resume_builder/ats/keyword_extractor.py
import logging
from typing import List, Optional, Iterable, Dict

from resume_builder.ats.config import ATSConfig
from resume_builder.ats.keywords import (
    TECHNICAL_KEYWORDS, SOFT_SKILL_KEYWORDS, BUSINESS_KEYWORDS,
    ROLE_KEYWORDS, COMMON_WORDS, TECH_MARKERS,
)
from resume_builder.ats.patterns import SKILL_CONTEXT_PATTERN, KEYWORD_SPLIT

logger = logging.getLogger(__name__)

# Stripped from job-description tokens before they are judged
TOKEN_PUNCTUATION = '.,;:!?()[]{}"\'`'


class KeywordExtractor:
    """
    Build the target keyword set a resume is scored against
    """

    def __init__(self, config: Optional[ATSConfig] = None):
        self.config = config or ATSConfig()

    @staticmethod
    def role_names() -> List[str]:
        """Target roles with a dedicated keyword list"""
        return sorted(ROLE_KEYWORDS)

    def extract_target_keywords(
        self,
        job_description: Optional[str] = None,
        target_role: Optional[str] = None
    ) -> List[str]:
        """
        Collect lower-cased, de-duplicated target keywords

        Sources, in order:
        1. Role lookup table (when target_role is given)
        2. Phrases and technical tokens from the job description
        3. Generic cross-domain fallback when 1 and 2 found nothing

        Returns:
            Keywords in insertion order; never empty
        """
        # dict keeps insertion order and drops duplicates
        keywords: Dict[str, None] = {}

        if target_role:
            role_keywords = self.keywords_for_role(target_role)
            self._add_all(keywords, role_keywords)
            logger.debug(f"Role '{target_role}' contributed {len(role_keywords)} keywords")

        if job_description:
            jd_keywords = self.extract_from_text(job_description)
            self._add_all(keywords, jd_keywords)
            logger.debug(f"Job description contributed {len(jd_keywords)} keywords")

        if not keywords:
            self._add_all(keywords, self.fallback_keywords())
            logger.debug("No role or job description keywords, using generic set")

        logger.info(f"Extracted {len(keywords)} target keywords")
        return list(keywords)

    def keywords_for_role(self, role: str) -> List[str]:
        """Keyword list for a role; unknown roles get a slice of the technical list"""
        role_keywords = ROLE_KEYWORDS.get(role.strip().lower())
        if role_keywords is None:
            return list(TECHNICAL_KEYWORDS[:self.config.unknown_role_keyword_count])
        return list(role_keywords)

    def fallback_keywords(self) -> List[str]:
        """Generic keywords used when nothing else is available"""
        n = self.config.fallback_keywords_per_category
        return [
            *TECHNICAL_KEYWORDS[:n],
            *SOFT_SKILL_KEYWORDS[:n],
            *BUSINESS_KEYWORDS[:n],
        ]

    def extract_from_text(self, text: str) -> List[str]:
        """
        Extract keywords from a job description

        Two passes:
        - skill context: "experience with X, Y", "proficient in Z", ...
        - technical tokens: acronyms, tokens with digits or tech markers
        """
        found: Dict[str, None] = {}

        # 1. Skills mentioned in context
        for match in SKILL_CONTEXT_PATTERN.finditer(text):
            for skill in KEYWORD_SPLIT.split(match.group(1)):
                skill = skill.strip()
                if len(skill) > 2:
                    found[skill.lower()] = None

        # 2. Technical-looking tokens
        for raw in text.split():
            token = raw.strip(TOKEN_PUNCTUATION)
            word = token.lower()

            if len(word) <= 2 or word in COMMON_WORDS:
                continue

            if self.is_technical_term(token) or '.' in word or '+' in word:
                found[word] = None

        return list(found)[:self.config.job_description_keyword_limit]

    @staticmethod
    def is_technical_term(token: str) -> bool:
        """
        Is a token likely a technology or acronym?

        Longer than 3 characters and either contains a tech marker
        (js, sql, api, ...), contains a digit, or is written in capitals.
        """
        if len(token) <= 3:
            return False

        word = token.lower()
        return (
            any(marker in word for marker in TECH_MARKERS) or
            any(ch.isdigit() for ch in word) or
            token.isupper()
        )

    @staticmethod
    def _add_all(keywords: Dict[str, None], values: Iterable[str]):
        for value in values:
            keywords[value.lower()] = None
