import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from resume_builder.ats import ATSEngine, ATSConfig  # noqa: E402


SCENARIO_A_RESUME = (
    "John Doe\njohn@example.com\n555-123-4567\n"
    "Experience: Led team, increased revenue by 20%. "
    "Skills: JavaScript, React, Leadership."
)

STRONG_RESUME = """Jane Smith
jane.smith@example.com | (555) 123-4567 | linkedin.com/in/janesmith | github.com/janesmith
Austin, TX

SUMMARY
Software engineer with 8 years of experience building data platforms in Python, SQL and AWS.

EXPERIENCE
Senior Engineer, Acme Inc. 2019-Present
Led a team of 6 engineers and delivered a streaming platform that reduced latency by 40%.
Designed and launched a billing service processing $2 million per month.
Optimized PostgreSQL queries and increased throughput by 3x for 10k daily users.
Built CI pipelines with Docker, Kubernetes and Jenkins, cutting release time by 50%.

EDUCATION
Bachelor of Science in Computer Science, State University, 2015, GPA 3.8

SKILLS
Python, SQL, AWS, Docker, Kubernetes, React, Git
Leadership, Communication, Mentoring, Problem Solving
AWS Certified Solutions Architect
"""


@pytest.fixture
def engine() -> ATSEngine:
    """Engine with default configuration."""
    return ATSEngine(ATSConfig())


@pytest.fixture
def scenario_a_resume() -> str:
    return SCENARIO_A_RESUME


@pytest.fixture
def strong_resume() -> str:
    return STRONG_RESUME


@pytest.fixture
def long_resume() -> str:
    """Resume text with email, phone and more than 200 words."""
    return "jane@example.com 555-123-4567 " + "word " * 250
