"""
Application-wide constants for Talent Intake.

Field limits, validation patterns, store error codes and the fixed
user-facing messages live here so every layer reports the same text.
"""

import re
from typing import Final


# =============================================================================
# Field Limits
# =============================================================================

NAME_MIN_LENGTH: Final[int] = 2
NAME_MAX_LENGTH: Final[int] = 100
ADDRESS_MAX_LENGTH: Final[int] = 100
EDUCATION_FIELD_MAX_LENGTH: Final[int] = 100  # institution, title
EXPERIENCE_FIELD_MAX_LENGTH: Final[int] = 100  # company, position
DESCRIPTION_MAX_LENGTH: Final[int] = 200


# =============================================================================
# Validation Patterns
# =============================================================================

# Latin letters, accented letters (Latin-1 supplement) and spaces
NAME_PATTERN: Final[re.Pattern] = re.compile(r"^[A-Za-zÀ-ÖØ-öø-ÿ ]+$")

EMAIL_PATTERN: Final[re.Pattern] = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")

# Spanish numbering plan: 9 digits, mobile 6/7, landline 9
PHONE_PATTERN: Final[re.Pattern] = re.compile(r"^[679][0-9]{8}$")

ISO_DATE_PATTERN: Final[re.Pattern] = re.compile(r"^[0-9]{4}-[0-9]{2}-[0-9]{2}$")


# =============================================================================
# Store Error Codes
# =============================================================================

UNIQUE_CONSTRAINT_CODE: Final[str] = "P2002"
RECORD_NOT_FOUND_CODE: Final[str] = "P2025"


# =============================================================================
# Error Messages
# =============================================================================

INVALID_NAME: Final[str] = "Invalid name"
INVALID_EMAIL: Final[str] = "Invalid email"
INVALID_PHONE: Final[str] = "Invalid phone"
INVALID_ADDRESS: Final[str] = "Invalid address"
INVALID_DATE: Final[str] = "Invalid date"
INVALID_INSTITUTION: Final[str] = "Invalid institution"
INVALID_TITLE: Final[str] = "Invalid title"
INVALID_COMPANY: Final[str] = "Invalid company"
INVALID_POSITION: Final[str] = "Invalid position"
INVALID_DESCRIPTION: Final[str] = "Invalid description"
INVALID_CV_DATA: Final[str] = "Invalid CV data"

DUPLICATE_EMAIL_MESSAGE: Final[str] = "The email already exists in the database"

CANDIDATE_NOT_FOUND_MESSAGE: Final[str] = (
    "Could not find the candidate record with the provided ID."
)
EDUCATION_NOT_FOUND_MESSAGE: Final[str] = (
    "Could not find the education record with the provided ID."
)
WORK_EXPERIENCE_NOT_FOUND_MESSAGE: Final[str] = (
    "Could not find the work experience record with the provided ID."
)
RESUME_NOT_FOUND_MESSAGE: Final[str] = (
    "Could not find the resume record with the provided ID."
)


# =============================================================================
# Collections
# =============================================================================

CANDIDATES_COLLECTION: Final[str] = "candidates"
EDUCATIONS_COLLECTION: Final[str] = "educations"
WORK_EXPERIENCES_COLLECTION: Final[str] = "work_experiences"
RESUMES_COLLECTION: Final[str] = "resumes"
COUNTERS_COLLECTION: Final[str] = "counters"
