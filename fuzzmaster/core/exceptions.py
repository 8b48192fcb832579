"""Custom exceptions for fuzzing sessions.

Mutation and generation never raise: out-of-range inputs fall back to
well-defined no-ops. These exceptions cover caller-contract violations
against a FuzzingSession.
"""

from typing import Any


class FuzzMasterError(Exception):
    """Base exception for fuzzing operations.

    Attributes:
        message: Human-readable error description
        error_code: Optional error code for categorization
        context: Additional context information

    """

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.context = context or {}


class ValidationError(FuzzMasterError):
    """Raised when session configuration or a seed is invalid."""

    pass


class InvalidCaseError(FuzzMasterError):
    """Raised when a crash references a case the session never issued."""

    pass


class SessionCancelledError(FuzzMasterError):
    """Raised when a case is requested from a cancelled session."""

    pass


class CorpusFrozenError(FuzzMasterError):
    """Raised when a seed is added after case generation has started."""

    pass
