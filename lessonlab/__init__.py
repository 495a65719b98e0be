"""
lessonlab: code-challenge verification for interactive query-language lessons.
"""

__version__ = "0.1.0"
