"""Application services - use case implementations."""

from .guard_service import GuardDecision, GuardService

__all__ = [
    "GuardDecision",
    "GuardService",
]
