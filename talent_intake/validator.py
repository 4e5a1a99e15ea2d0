"""
Field validation for incoming candidate payloads.

Checks run in a fixed order and stop at the first violation, raising a
ValidationError whose message names the failing category.
"""

from typing import Any, Mapping, Optional

from talent_intake.errors import ValidationError
from talent_intake.utils.constants import (
    ADDRESS_MAX_LENGTH,
    DESCRIPTION_MAX_LENGTH,
    EDUCATION_FIELD_MAX_LENGTH,
    EMAIL_PATTERN,
    EXPERIENCE_FIELD_MAX_LENGTH,
    INVALID_ADDRESS,
    INVALID_COMPANY,
    INVALID_CV_DATA,
    INVALID_DATE,
    INVALID_DESCRIPTION,
    INVALID_EMAIL,
    INVALID_INSTITUTION,
    INVALID_NAME,
    INVALID_PHONE,
    INVALID_POSITION,
    INVALID_TITLE,
    ISO_DATE_PATTERN,
    NAME_MAX_LENGTH,
    NAME_MIN_LENGTH,
    NAME_PATTERN,
    PHONE_PATTERN,
)


def _is_text(value: Any) -> bool:
    return isinstance(value, str) and value != ""


def _bounded_text(value: Any, max_length: int) -> bool:
    """Non-empty string no longer than max_length."""
    return _is_text(value) and len(value) <= max_length


def validate_name(name: Any) -> None:
    if (
        not _is_text(name)
        or not NAME_MIN_LENGTH <= len(name) <= NAME_MAX_LENGTH
        or not NAME_PATTERN.fullmatch(name)
    ):
        raise ValidationError(INVALID_NAME)


def validate_email(email: Any) -> None:
    if not _is_text(email) or not EMAIL_PATTERN.fullmatch(email):
        raise ValidationError(INVALID_EMAIL)


def validate_phone(phone: Any) -> None:
    """Optional: only checked when a value is given."""
    if phone and (not isinstance(phone, str) or not PHONE_PATTERN.fullmatch(phone)):
        raise ValidationError(INVALID_PHONE)


def validate_address(address: Any) -> None:
    if address and (not isinstance(address, str) or len(address) > ADDRESS_MAX_LENGTH):
        raise ValidationError(INVALID_ADDRESS)


def validate_date(value: Any) -> None:
    if not _is_text(value) or not ISO_DATE_PATTERN.fullmatch(value):
        raise ValidationError(INVALID_DATE)


def _validate_period(entry: Mapping[str, Any]) -> None:
    validate_date(entry.get("start_date"))
    if entry.get("end_date"):
        validate_date(entry["end_date"])


def validate_education(education: Mapping[str, Any]) -> None:
    if not _bounded_text(education.get("institution"), EDUCATION_FIELD_MAX_LENGTH):
        raise ValidationError(INVALID_INSTITUTION)
    if not _bounded_text(education.get("title"), EDUCATION_FIELD_MAX_LENGTH):
        raise ValidationError(INVALID_TITLE)
    _validate_period(education)


def validate_work_experience(experience: Mapping[str, Any]) -> None:
    if not _bounded_text(experience.get("company"), EXPERIENCE_FIELD_MAX_LENGTH):
        raise ValidationError(INVALID_COMPANY)
    if not _bounded_text(experience.get("position"), EXPERIENCE_FIELD_MAX_LENGTH):
        raise ValidationError(INVALID_POSITION)
    description = experience.get("description")
    if description and (
        not isinstance(description, str) or len(description) > DESCRIPTION_MAX_LENGTH
    ):
        raise ValidationError(INVALID_DESCRIPTION)
    _validate_period(experience)


def validate_cv(cv: Any) -> None:
    if (
        not isinstance(cv, Mapping)
        or not _is_text(cv.get("file_path"))
        or not _is_text(cv.get("file_type"))
    ):
        raise ValidationError(INVALID_CV_DATA)


def _entries(value: Optional[Any], message: str) -> list[Any]:
    """Nested collections are optional and may be sent as null."""
    if not value:
        return []
    if not isinstance(value, (list, tuple)):
        raise ValidationError(message)
    return list(value)


def validate_candidate_data(data: Mapping[str, Any]) -> None:
    """
    Validate a raw candidate payload.

    Payloads carrying an id are existing candidates and are accepted
    without any check.

    Args:
        data: Raw candidate payload with snake_case keys

    Raises:
        ValidationError: On the first field that fails its check
    """
    # NOTE: update payloads bypass every rule below, malformed fields included
    if data.get("id"):
        return

    validate_name(data.get("first_name"))
    validate_name(data.get("last_name"))
    validate_email(data.get("email"))
    validate_phone(data.get("phone"))
    validate_address(data.get("address"))

    for education in _entries(data.get("educations"), INVALID_INSTITUTION):
        if not isinstance(education, Mapping):
            raise ValidationError(INVALID_INSTITUTION)
        validate_education(education)

    for experience in _entries(data.get("work_experiences"), INVALID_COMPANY):
        if not isinstance(experience, Mapping):
            raise ValidationError(INVALID_COMPANY)
        validate_work_experience(experience)

    cv = data.get("cv")
    if cv:
        validate_cv(cv)
