"""Walks module - трекинг прогулок, журнал и календарь."""

from .session_manager import WalkSessionManager, ActiveWalk
from .tracker import WalkTracker, LocationFix, WalkSummary
from .walk_service import WalkService
from .journal_service import JournalService
from .exceptions import (
    WalkNotFound,
    WalkValidationError,
    WalkSessionNotFound,
    WalkSessionStateError,
    NoLocationFix,
)

__all__ = [
    # Services
    "WalkSessionManager",
    "ActiveWalk",
    "WalkTracker",
    "LocationFix",
    "WalkSummary",
    "WalkService",
    "JournalService",
    # Exceptions
    "WalkNotFound",
    "WalkValidationError",
    "WalkSessionNotFound",
    "WalkSessionStateError",
    "NoLocationFix",
]
