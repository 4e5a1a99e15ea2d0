"""
Resume entity for Talent Intake.

Only the reference to an already stored file is kept; uploading the file
itself happens elsewhere.
"""

from datetime import datetime
from typing import ClassVar, Optional

from pydantic import Field

from talent_intake.utils.constants import RESUME_NOT_FOUND_MESSAGE

from .base import Entity, RecordId


class Resume(Entity):
    """Reference to a candidate's résumé file."""

    store_model: ClassVar[str] = "resume"
    not_found_message: ClassVar[str] = RESUME_NOT_FOUND_MESSAGE

    file_path: Optional[str] = None
    file_type: Optional[str] = None  # MIME type, e.g. "application/pdf"
    upload_date: datetime = Field(default_factory=datetime.utcnow)
    candidate_id: Optional[RecordId] = None
