# resume_builder/__init__.py
"""
Resume builder backend: ATS compatibility analysis
"""

__version__ = "1.0.0"
