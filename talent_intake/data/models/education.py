"""
Education entity for Talent Intake.
"""

from typing import ClassVar, Optional

from talent_intake.utils.constants import EDUCATION_NOT_FOUND_MESSAGE

from .base import Entity, RecordId


class Education(Entity):
    """One education entry of a candidate. Dates are ISO ``YYYY-MM-DD`` strings."""

    store_model: ClassVar[str] = "education"
    not_found_message: ClassVar[str] = EDUCATION_NOT_FOUND_MESSAGE

    institution: Optional[str] = None
    title: Optional[str] = None
    start_date: Optional[str] = None
    end_date: Optional[str] = None
    candidate_id: Optional[RecordId] = None
