# resume_builder/ats/patterns.py
"""
Compiled regular expressions shared by the scorer, analyzer and metrics.

Every pattern is evaluated in a single pass over the text. None of them
nests quantifiers, so run time stays linear on long inputs.
"""

import re
from typing import Iterable

from resume_builder.ats.keywords import (
    ACTION_VERBS, WEAK_PHRASES, TECHNICAL_KEYWORDS, SOFT_SKILL_KEYWORDS,
    SECTION_HEADERS,
)


def word_list_pattern(words: Iterable[str]) -> re.Pattern:
    """
    Build a case-insensitive alternation matching any of ``words`` as a
    whole word. Lookarounds are used instead of ``\\b`` so entries ending
    in symbols (``C++``, ``C#``) still match.
    """
    escaped = sorted({re.escape(w.lower()) for w in words}, key=len, reverse=True)
    return re.compile(r'(?<!\w)(?:' + '|'.join(escaped) + r')(?!\w)', re.IGNORECASE)


# Contact details
EMAIL_PATTERN = re.compile(r'@[\w.-]+\.[a-z]{2,}', re.IGNORECASE)
EMAIL_OR_LABEL_PATTERN = re.compile(r'email|@[\w.-]+\.[a-z]{2,}', re.IGNORECASE)
PHONE_PATTERN = re.compile(r'(?:\+?1[-.\s]?)?\(?[0-9]{3}\)?[-.\s]?[0-9]{3}[-.\s]?[0-9]{4}')
LINKEDIN_PATTERN = re.compile(r'linkedin', re.IGNORECASE)
PORTFOLIO_PATTERN = re.compile(r'github|portfolio|website', re.IGNORECASE)
LOCATION_PATTERN = re.compile(r'[a-z\s],\s*[a-z]{2}', re.IGNORECASE)

# Achievements and phrasing
QUANTIFIABLE_PATTERN = re.compile(
    r'\d+(?:%|\+|k|million|billion|\$|years?|months?)', re.IGNORECASE
)
METRIC_PATTERN = re.compile(r'\d+(?:%|\+|k|million|billion|\$)', re.IGNORECASE)
ACTION_VERB_PATTERN = word_list_pattern(ACTION_VERBS)
WEAK_PHRASE_PATTERN = word_list_pattern(WEAK_PHRASES)

# Experience section
DATE_RANGE_PATTERN = re.compile(r'\d{4}\s*[-–]\s*(?:\d{4}|present)', re.IGNORECASE)
COMPANY_PATTERN = re.compile(r'company|corporation|inc\.|llc', re.IGNORECASE)

# Education section
DEGREE_PATTERN = re.compile(r'bachelor|master|phd|doctorate', re.IGNORECASE)
INSTITUTION_PATTERN = re.compile(r'university|college|institute', re.IGNORECASE)
YEAR_PATTERN = re.compile(r'\d{4}')
GPA_PATTERN = re.compile(r'gpa|grade', re.IGNORECASE)

# Skills section
TECHNICAL_SKILL_PATTERN = word_list_pattern(TECHNICAL_KEYWORDS)
SOFT_SKILL_PATTERN = word_list_pattern(SOFT_SKILL_KEYWORDS)
CERTIFICATION_PATTERN = re.compile(r'certified|certification|license', re.IGNORECASE)

# Content sections, one point bucket each
CONTENT_SECTION_PATTERNS = {
    'contact': re.compile(r'contact|email|phone', re.IGNORECASE),
    'summary': re.compile(r'summary|objective|profile', re.IGNORECASE),
    'experience': re.compile(r'experience|work|employment|career', re.IGNORECASE),
    'education': re.compile(r'education|degree|university|college|school', re.IGNORECASE),
    'skills': re.compile(r'skills|technical|proficient|competenc', re.IGNORECASE),
}

SECTION_HEADER_PATTERN = re.compile(
    r'\b(' + '|'.join(SECTION_HEADERS) + r')\b', re.IGNORECASE
)

# Readability
SENTENCE_SPLIT = re.compile(r'[.!?]+')
PARAGRAPH_SPLIT = re.compile(r'\n\s*\n')

# Job description extraction
SKILL_CONTEXT_PATTERN = re.compile(
    r'\b(?:experience|proficient|skilled|knowledge|familiar)(?:\s+(?:in|with))?\s+([^.]+)',
    re.IGNORECASE
)
KEYWORD_SPLIT = re.compile(r'[,&\s]+')
