# resume_builder/ats/exceptions.py

class ATSError(Exception):
    """Base class for errors raised by the ATS engine"""


class InvalidInputError(ATSError, TypeError):
    """Raised when analysis input has the wrong type.

    Values are never coerced: ``analyze_resume(None)`` fails here instead
    of scoring the string ``"None"``.
    """


class ConfigurationError(ATSError, ValueError):
    """Raised when an ATSConfig holds values the engine cannot use"""
