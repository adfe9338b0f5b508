# resume_builder/ats/text.py
import re
import logging
from pathlib import Path
from typing import Union
import ftfy

from resume_builder.ats.exceptions import InvalidInputError

logger = logging.getLogger(__name__)


class TextNormalizer:
    """Normalize resume text for keyword and content matching"""

    # Anything that is not a word character, whitespace, '@', '.' or '-'
    STRIP_CHARS = re.compile(r'[^\w\s@.-]')
    MULTIPLE_SPACES = re.compile(r'\s+')

    def normalize(self, text: str) -> str:
        """
        Lower-case text, blank out punctuation and collapse whitespace.

        Format checks (email, phone, tabs, bullets) must run on the
        original text since this drops the characters they look for.
        """
        if not text:
            return ""

        text = text.lower()
        text = self.STRIP_CHARS.sub(' ', text)
        text = self.MULTIPLE_SPACES.sub(' ', text)

        return text.strip()


_normalizer = TextNormalizer()


def normalize_text(text: str) -> str:
    """Normalize text with the shared TextNormalizer"""
    return _normalizer.normalize(text)


def count_words(text: str) -> int:
    """Whitespace-separated word count; 0 for empty or blank text"""
    return len(text.split())


def clean_text(text: str) -> str:
    """
    Repair text read from an uploaded file.

    Fixes mojibake left by copy-paste from PDF/Word exports and drops
    zero-width characters. Layout (tabs, newlines, bullets) is kept since
    the format checks score it.
    """
    if not text:
        return ""

    text = ftfy.fix_text(text, normalization="NFC", uncurl_quotes=False)

    text = text.replace('\u200b', '')  # Zero-width space
    text = text.replace('\ufeff', '')  # BOM

    return text


def decode_resume_bytes(data: bytes) -> str:
    """Decode an uploaded plain-text resume"""
    try:
        text = data.decode('utf-8-sig')
    except UnicodeDecodeError as e:
        raise InvalidInputError(f"Resume file is not valid UTF-8 text: {e}") from e

    return clean_text(text)


def load_resume_text(path: Union[str, Path]) -> str:
    """
    Read a plain-text resume or job description from disk

    Raises:
        FileNotFoundError: path does not exist
        InvalidInputError: file is not UTF-8 text
    """
    path = Path(path)

    if not path.exists():
        raise FileNotFoundError(f"File not found: {path}")

    logger.debug(f"Loading text from {path}")
    return decode_resume_bytes(path.read_bytes())
