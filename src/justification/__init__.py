"""
Package marker for source code under `src.justification`.
It groups the pure justification transform and its configuration loader.
"""

from src.justification.justifier import justify_text

__all__ = ["justify_text"]
