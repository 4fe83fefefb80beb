"""Custom exceptions for clause analysis."""

from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass
class AnalysisError(Exception):
    """
    Base exception for clause analysis errors.

    Attributes:
        message: Human-readable error description.
        details: Additional error details.
    """
    message: str
    details: Optional[dict] = field(default_factory=dict)

    def __post_init__(self):
        if self.details is None:
            self.details = {}
        super().__init__(str(self))

    def __str__(self) -> str:
        return self.message

    def to_dict(self) -> dict[str, Any]:
        """Convert error to dictionary for logging/serialization."""
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "details": self.details,
        }


@dataclass
class ClauseValidationError(AnalysisError):
    """
    Raised when a clause is rejected before analysis.

    Only the input validation layer raises this; the engine itself
    accepts any string.
    """
    field_name: str = "clause"

    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        data["field"] = self.field_name
        return data


@dataclass
class MalformedSegmentError(AnalysisError):
    """
    Raised inside the logic compiler for a relator with nothing to attach to.

    The compiler catches it, records a warning and skips the relator.
    """
    segment_index: int = -1
    relator: str = ""

    def __str__(self) -> str:
        if self.relator:
            return f"{self.message} | Relator: '{self.relator}' at segment {self.segment_index}"
        return self.message


@dataclass
class CacheUnavailable(AnalysisError):
    """
    Raised when the result cache cannot serve a request.

    Covers lock acquisition timeouts and internal cache faults. Callers
    treat it as a miss and recompute.
    """
    operation: str = ""
