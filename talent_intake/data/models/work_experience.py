"""
Work experience entity for Talent Intake.
"""

from typing import ClassVar, Optional

from talent_intake.utils.constants import WORK_EXPERIENCE_NOT_FOUND_MESSAGE

from .base import Entity, RecordId


class WorkExperience(Entity):
    """One job held by a candidate. ``end_date`` is None for the current position."""

    store_model: ClassVar[str] = "work_experience"
    not_found_message: ClassVar[str] = WORK_EXPERIENCE_NOT_FOUND_MESSAGE

    company: Optional[str] = None
    position: Optional[str] = None
    description: Optional[str] = None
    start_date: Optional[str] = None
    end_date: Optional[str] = None
    candidate_id: Optional[RecordId] = None
