"""Custom exception hierarchy for the password scorer."""

from __future__ import annotations


class ScorerError(Exception):
    """Base exception for all scorer errors.

    Args:
        message: Human-readable error description.
        context: Optional dict of extra context for logging/debugging.
    """

    def __init__(self, message: str = "", context: dict | None = None) -> None:
        super().__init__(message)
        self.context = context or {}


class ConfigurationError(ScorerError):
    """Raised when scoring configuration loading or validation fails."""
