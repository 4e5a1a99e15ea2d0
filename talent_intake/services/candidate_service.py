"""
Candidate intake service for Talent Intake.

Validates a raw candidate payload, stores the candidate and then stores
each of its child records against the new candidate id.
"""

from typing import Any, Mapping, Optional

from talent_intake.data.models import Candidate, Education, RecordId, Resume, WorkExperience
from talent_intake.data.store import StoreClient
from talent_intake.errors import DuplicateEmailError, RecordNotFoundError, error_code
from talent_intake.utils.constants import CANDIDATE_NOT_FOUND_MESSAGE, UNIQUE_CONSTRAINT_CODE
from talent_intake.utils.logger import audit_log, get_logger
from talent_intake.validator import validate_candidate_data

logger = get_logger(__name__)

CANDIDATE_SCALAR_FIELDS = ("id", "first_name", "last_name", "email", "phone", "address")
EDUCATION_FIELDS = ("institution", "title", "start_date", "end_date")
WORK_EXPERIENCE_FIELDS = ("company", "position", "description", "start_date", "end_date")
RESUME_FIELDS = ("file_path", "file_type")


def _pick(data: Mapping[str, Any], fields: tuple[str, ...]) -> dict[str, Any]:
    return {key: data[key] for key in fields if key in data}


async def add_candidate(
    candidate_data: Mapping[str, Any],
    client: Optional[StoreClient] = None,
) -> dict[str, Any]:
    """
    Validate and store a new candidate with its related records.

    The candidate is written first; education entries, work experience
    entries and the CV (if any) follow one at a time, each tagged with the
    new candidate id. The writes are not atomic: a failing child leaves the
    candidate and any earlier children stored.

    Args:
        candidate_data: Raw payload (scalar fields, ``educations``,
            ``work_experiences`` and an optional ``cv`` mapping)
        client: Store client to write through; the default client when omitted

    Returns:
        The stored candidate record as returned by the store

    Raises:
        ValidationError: When the payload fails a field check
        DuplicateEmailError: When the email is already registered
    """
    validate_candidate_data(candidate_data)

    candidate = Candidate(**_pick(candidate_data, CANDIDATE_SCALAR_FIELDS))
    try:
        saved_candidate = await candidate.save(client)
    except Exception as e:
        if error_code(e) == UNIQUE_CONSTRAINT_CODE:
            logger.warning("Rejected candidate with an already registered email")
            raise DuplicateEmailError() from e
        raise

    candidate_id = saved_candidate["id"]
    logger.info(f"Candidate {candidate_id} created")

    for education_data in candidate_data.get("educations") or []:
        education = Education(**_pick(education_data, EDUCATION_FIELDS))
        education.candidate_id = candidate_id
        await education.save(client)
        candidate.educations.append(education)

    for experience_data in candidate_data.get("work_experiences") or []:
        experience = WorkExperience(**_pick(experience_data, WORK_EXPERIENCE_FIELDS))
        experience.candidate_id = candidate_id
        await experience.save(client)
        candidate.work_experiences.append(experience)

    cv = candidate_data.get("cv")
    if cv:
        resume = Resume(**_pick(cv, RESUME_FIELDS))
        resume.candidate_id = candidate_id
        await resume.save(client)
        candidate.resumes.append(resume)

    audit_log(
        "candidate_added",
        {
            "candidate_id": candidate_id,
            "email": candidate.email,
            "educations": len(candidate.educations),
            "work_experiences": len(candidate.work_experiences),
            "resumes": len(candidate.resumes),
        },
    )
    return saved_candidate


async def get_candidate(
    candidate_id: RecordId,
    client: Optional[StoreClient] = None,
) -> Candidate:
    """Load a stored candidate; RecordNotFoundError when the id is unknown."""
    candidate = await Candidate.find_one(candidate_id, client)
    if candidate is None:
        raise RecordNotFoundError(CANDIDATE_NOT_FOUND_MESSAGE)
    return candidate
