"""Service layer - Business logic orchestration.

This module contains service classes that orchestrate business logic:
- LocationSession: Location state, persistence and result ownership
- open_session: Build a session and its collaborators from configuration
"""

from placefinder.service.factory import open_session
from placefinder.service.session import LocationSession

__all__ = [
    "LocationSession",
    "open_session",
]
