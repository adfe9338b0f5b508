# resume_builder/ats/keywords.py
"""
Static keyword tables used by the ATS engine.

All tables are tuples / frozensets and are never modified at runtime.
Entries keep their display casing; matching code lower-cases them.
"""

from types import MappingProxyType
from typing import Mapping, Tuple


TECHNICAL_KEYWORDS: Tuple[str, ...] = (
    'JavaScript', 'React', 'Node.js', 'Python', 'Java', 'HTML', 'CSS', 'SQL', 'AWS', 'Git',
    'Docker', 'Kubernetes', 'MongoDB', 'PostgreSQL', 'REST API', 'GraphQL', 'TypeScript',
    'Angular', 'Vue.js', 'Express', 'Django', 'Flask', 'Spring', 'Laravel', 'PHP',
    'C++', 'C#', 'Ruby', 'Go', 'Rust', 'Swift', 'Kotlin', 'Scala', 'R', 'MATLAB',
    'TensorFlow', 'PyTorch', 'Machine Learning', 'Data Science', 'Artificial Intelligence',
    'Azure', 'Google Cloud', 'Jenkins', 'CircleCI', 'Terraform', 'Ansible',
)

SOFT_SKILL_KEYWORDS: Tuple[str, ...] = (
    'Leadership', 'Communication', 'Project Management', 'Team Collaboration', 'Problem Solving',
    'Critical Thinking', 'Time Management', 'Adaptability', 'Creativity', 'Analytical',
    'Strategic Planning', 'Decision Making', 'Conflict Resolution', 'Mentoring', 'Training',
    'Public Speaking', 'Negotiation', 'Customer Service', 'Interpersonal Skills', 'Multitasking',
)

BUSINESS_KEYWORDS: Tuple[str, ...] = (
    'Strategic Planning', 'Budget Management', 'Stakeholder Management', 'Process Improvement',
    'Data Analysis', 'Marketing', 'Sales', 'Customer Service', 'Quality Assurance',
    'Business Development', 'Market Research', 'Financial Analysis', 'Risk Management',
    'Vendor Management', 'Contract Negotiation', 'Performance Management', 'Change Management',
    'Compliance', 'Audit', 'Reporting', 'KPI', 'ROI', 'P&L', 'Budget Planning',
)

CERTIFICATION_KEYWORDS: Tuple[str, ...] = (
    'AWS Certified', 'Google Cloud Certified', 'Microsoft Certified', 'Cisco Certified',
    'CompTIA', 'CISSP', 'CISM', 'PMP', 'Agile', 'Scrum Master', 'Six Sigma',
    'ITIL', 'Salesforce Certified', 'Oracle Certified', 'Red Hat Certified',
)

# Strong verbs recruiters look for at the start of a bullet
ACTION_VERBS: Tuple[str, ...] = (
    'Achieved', 'Accelerated', 'Accomplished', 'Analyzed', 'Built', 'Created', 'Delivered',
    'Developed', 'Designed', 'Enhanced', 'Established', 'Executed', 'Generated', 'Implemented',
    'Improved', 'Increased', 'Initiated', 'Launched', 'Led', 'Managed', 'Optimized',
    'Organized', 'Reduced', 'Resolved', 'Streamlined', 'Strengthened', 'Supervised',
    'Transformed', 'Utilized', 'Spearheaded', 'Coordinated', 'Facilitated', 'Collaborated',
)

# Passive phrasing that weakens a bullet
WEAK_PHRASES: Tuple[str, ...] = (
    'Responsible for', 'Duties included', 'Worked on', 'Helped with', 'Assisted',
    'Participated', 'Involved', 'Familiar with', 'Knowledge of', 'Experience with',
)

COMMON_WORDS = frozenset({
    'the', 'and', 'for', 'are', 'but', 'not', 'you', 'all', 'can', 'had', 'her', 'was',
    'one', 'our', 'out', 'day', 'get', 'has', 'him', 'his', 'how', 'man', 'new', 'now',
    'old', 'see', 'two', 'way', 'who', 'its', 'said', 'each', 'make', 'most', 'over',
    'such', 'time', 'very', 'when', 'much', 'then', 'them', 'these', 'they', 'were',
    'will', 'your', 'from', 'have', 'more', 'been', 'into', 'like', 'than', 'find',
    'come', 'made', 'many', 'oil', 'sit', 'use', 'would', 'which', 'their',
})

SECTION_HEADERS: Tuple[str, ...] = (
    'experience', 'education', 'skills', 'summary',
    'objective', 'projects', 'certifications', 'awards',
)

ROLE_KEYWORDS: Mapping[str, Tuple[str, ...]] = MappingProxyType({
    'software engineer': TECHNICAL_KEYWORDS + ('Agile', 'Scrum', 'CI/CD'),
    'data scientist': ('Python', 'R', 'Machine Learning', 'SQL', 'Statistics', 'TensorFlow'),
    'product manager': ('Product Management', 'Roadmap', 'Stakeholder Management', 'Analytics'),
    'marketing': ('Digital Marketing', 'SEO', 'SEM', 'Analytics', 'Campaign Management'),
    'sales': ('Sales', 'CRM', 'Lead Generation', 'Pipeline Management', 'Negotiation'),
})

# Substrings that mark a job-description token as technical
TECH_MARKERS: Tuple[str, ...] = ('js', 'sql', 'api', 'aws', 'css', 'html')
