"""
Entity models for Talent Intake.

Each entity persists itself through the record store with ``save()``.
"""

# Base entity
from .base import Entity, RecordId

# Child entities
from .education import Education
from .resume import Resume
from .work_experience import WorkExperience

# Candidate
from .candidate import Candidate

__all__ = [
    # Base
    "Entity",
    "RecordId",
    # Candidate
    "Candidate",
    # Children
    "Education",
    "WorkExperience",
    "Resume",
]
