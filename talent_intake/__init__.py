"""
Talent Intake - candidate intake backend.

Validates incoming candidate payloads and persists candidates together with
their education history, work experience and résumé references.
"""

__app_name__ = "talent-intake"
__version__ = "0.1.0"
