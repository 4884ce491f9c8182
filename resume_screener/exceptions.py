"""Error taxonomy for the screening pipeline.

Each pipeline stage raises its own subclass; the orchestrator converts any
of them into an error-bearing ScreeningResult instead of letting it escape.
"""

from typing import Any


class ScreeningError(Exception):
    """Base exception for screening pipeline failures."""

    stage: str = "screening"

    def __init__(
        self,
        message: str,
        details: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ):
        self.message = message
        self.details = details or {}
        self.cause = cause
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to dictionary for logging/response."""
        result = {
            "error_type": self.__class__.__name__,
            "stage": self.stage,
            "message": self.message,
            "details": self.details,
        }
        if self.cause:
            result["cause"] = str(self.cause)
        return result


class ParsingError(ScreeningError):
    """Raised when resume input has an unrecognized shape."""

    stage = "parsing"


class ExtractionError(ScreeningError):
    """Raised when features cannot be derived from a parsed profile."""

    stage = "extraction"


class EvaluationError(ScreeningError):
    """Raised when scoring a profile against requirements fails."""

    stage = "evaluation"
