"""
Utility modules for Talent Intake.

This package contains shared utilities used across the application:
- config: Configuration management
- logger: Logging infrastructure
- constants: Field limits, patterns, error codes and messages
"""

from talent_intake.utils.config import (
    AppSettings,
    get_settings,
    reload_settings,
    ROOT_DIR,
    LOGS_DIR,
)
from talent_intake.utils.constants import (
    UNIQUE_CONSTRAINT_CODE,
    RECORD_NOT_FOUND_CODE,
)
from talent_intake.utils.logger import (
    setup_logging,
    get_logger,
    audit_log,
    sanitize_for_logging,
)

__all__ = [
    # Config
    "AppSettings",
    "get_settings",
    "reload_settings",
    "ROOT_DIR",
    "LOGS_DIR",
    # Constants
    "UNIQUE_CONSTRAINT_CODE",
    "RECORD_NOT_FOUND_CODE",
    # Logger
    "setup_logging",
    "get_logger",
    "audit_log",
    "sanitize_for_logging",
]
