"""
Application services for Talent Intake.
"""

from .candidate_service import add_candidate, get_candidate

__all__ = [
    "add_candidate",
    "get_candidate",
]
