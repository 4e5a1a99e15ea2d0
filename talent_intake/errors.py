"""
Exception hierarchy for Talent Intake.

Store errors carry a ``code`` so callers can react to known constraint
violations without depending on a particular driver.
"""

from typing import Optional

from talent_intake.utils.constants import (
    DUPLICATE_EMAIL_MESSAGE,
    RECORD_NOT_FOUND_CODE,
    UNIQUE_CONSTRAINT_CODE,
)


class TalentIntakeError(Exception):
    """Base class for all application errors."""


class ValidationError(TalentIntakeError):
    """A candidate payload failed a field check."""


class StoreError(TalentIntakeError):
    """Generic failure reported by the record store."""

    def __init__(self, message: str, code: Optional[str] = None) -> None:
        super().__init__(message)
        self.message = message
        self.code = code


class StoreInitializationError(StoreError):
    """The record store could not be reached."""


class UniqueConstraintError(StoreError):
    """A unique field value already exists in the store."""

    def __init__(self, message: str, fields: tuple[str, ...] = ()) -> None:
        super().__init__(message, code=UNIQUE_CONSTRAINT_CODE)
        self.fields = fields


class RecordNotFoundError(StoreError):
    """The record targeted by an update or delete does not exist."""

    def __init__(self, message: str) -> None:
        super().__init__(message, code=RECORD_NOT_FOUND_CODE)


class DuplicateEmailError(UniqueConstraintError):
    """A candidate with the same email is already stored."""

    def __init__(self, message: str = DUPLICATE_EMAIL_MESSAGE) -> None:
        super().__init__(message, fields=("email",))


def error_code(error: BaseException) -> Optional[str]:
    """Return the store error code carried by an exception, if any."""
    return getattr(error, "code", None)
