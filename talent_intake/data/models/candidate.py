"""
Candidate entity for Talent Intake.

A candidate owns its education history, work experience and résumé
references. Creating a candidate sends those children along as nested
create blocks; updating it only ever touches the candidate's own fields.
"""

from typing import Any, ClassVar, Optional

from pydantic import Field

from talent_intake.data.store import StoreClient
from talent_intake.utils.constants import CANDIDATE_NOT_FOUND_MESSAGE

from .base import Entity, RecordId
from .education import Education
from .resume import Resume
from .work_experience import WorkExperience


class Candidate(Entity):
    """
    Main candidate model representing a job applicant.

    Only ``email`` is unique in the store; the validator is responsible for
    every format rule.
    """

    store_model: ClassVar[str] = "candidate"
    not_found_message: ClassVar[str] = CANDIDATE_NOT_FOUND_MESSAGE
    relation_fields: ClassVar[frozenset[str]] = frozenset(
        {"educations", "work_experiences", "resumes"}
    )

    # Personal Information
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None

    # Owned records
    educations: list[Education] = Field(default_factory=list)
    work_experiences: list[WorkExperience] = Field(default_factory=list)
    resumes: list[Resume] = Field(default_factory=list)

    @property
    def full_name(self) -> str:
        """Get candidate's full name."""
        return " ".join(part for part in (self.first_name, self.last_name) if part)

    def create_payload(self) -> dict[str, Any]:
        """Scalar fields plus a nested create block per non-empty relation."""
        data = self.scalar_payload()
        for relation in ("educations", "work_experiences", "resumes"):
            children = getattr(self, relation)
            if children:
                data[relation] = {"create": [child.nested_payload() for child in children]}
        return data

    @classmethod
    async def find_one(
        cls, candidate_id: RecordId, client: Optional[StoreClient] = None
    ) -> Optional["Candidate"]:
        """Load a candidate by id, or None when the store has no such record."""
        record = await cls._delegate(client).find_unique(where={"id": candidate_id})
        if record is None:
            return None
        return cls.model_validate(record)
