# resume_builder/ats/config.py
import os
import math
from dataclasses import dataclass, field, fields
from typing import Dict
import yaml

from resume_builder.ats.exceptions import ConfigurationError

LIMIT_FIELDS = (
    'missing_keywords_limit', 'found_keywords_limit', 'job_description_keyword_limit',
    'fallback_keywords_per_category', 'unknown_role_keyword_count',
)
INT_FIELDS = LIMIT_FIELDS + ('excellent_threshold', 'good_threshold')


@dataclass
class ATSConfig:
    """Configuration for resume analysis"""

    # Weight distribution for overall score
    weights: Dict[str, float] = field(default_factory=lambda: {
        'keyword': 0.35,
        'format': 0.25,
        'content': 0.25,
        'readability': 0.15,
    })

    # Result list clamping (display sized)
    missing_keywords_limit: int = 15
    found_keywords_limit: int = 20

    # Keyword extraction
    job_description_keyword_limit: int = 25
    fallback_keywords_per_category: int = 10
    unknown_role_keyword_count: int = 15

    # Rating bands
    excellent_threshold: int = 80
    good_threshold: int = 60

    def __post_init__(self):
        """Validate weights and limits"""
        expected = {'keyword', 'format', 'content', 'readability'}
        if not isinstance(self.weights, dict):
            raise ConfigurationError(
                f"weights must be a mapping, got {type(self.weights).__name__}"
            )
        if set(self.weights) != expected:
            raise ConfigurationError(
                f"weights must define exactly {sorted(expected)}, got {sorted(map(str, self.weights))}"
            )
        for key, value in self.weights.items():
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise ConfigurationError(f"weight '{key}' must be a number, got {value!r}")
        if not math.isclose(sum(self.weights.values()), 1.0, abs_tol=1e-6):
            raise ConfigurationError(
                f"weights must sum to 1.0, got {sum(self.weights.values()):.4f}"
            )
        for name in INT_FIELDS:
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ConfigurationError(f"{name} must be an integer, got {value!r}")
        for name in LIMIT_FIELDS:
            if getattr(self, name) < 0:
                raise ConfigurationError(f"{name} must not be negative")
        if self.good_threshold > self.excellent_threshold:
            raise ConfigurationError("good_threshold must not exceed excellent_threshold")

    @classmethod
    def from_yaml(cls, path: str):
        """Load configuration from YAML file"""
        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Invalid YAML in {path}: {e}") from e

        if not isinstance(data, dict):
            raise ConfigurationError(f"{path} must contain a mapping at the top level")

        section = data.get('ats') or {}
        if not isinstance(section, dict):
            raise ConfigurationError(f"'ats' section in {path} must be a mapping")

        unknown = set(section) - {f.name for f in fields(cls)}
        if unknown:
            raise ConfigurationError(
                f"Unknown ATS settings in {path}: {', '.join(sorted(map(str, unknown)))}"
            )

        return cls(**section)


def get_config() -> ATSConfig:
    """Get ATS configuration"""
    config_path = os.getenv('ATS_CONFIG', 'config/ats.yaml')

    if os.path.exists(config_path):
        return ATSConfig.from_yaml(config_path)
    return ATSConfig()
