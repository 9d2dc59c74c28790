"""Typed errors raised by the search core, the services and the HTTP layer."""

from enum import Enum
from typing import Any, Dict, Optional


class ErrorCode(str, Enum):
    """Stable error codes surfaced to callers."""
    VALIDATION = "VALIDATION_ERROR"
    NOT_FOUND = "NOT_FOUND"
    INTERNAL = "INTERNAL_ERROR"
    OUT_OF_BOUNDS = "OUT_OF_BOUNDS"
    BLOCKED = "BLOCKED"
    INVALID_DIMENSIONS = "INVALID_DIMENSIONS"
    UNKNOWN_ALGORITHM = "UNKNOWN_ALGORITHM"
    CANCELLED = "CANCELLED"


class PathfinderError(Exception):
    """Base error carrying an error code, a message and optional details."""

    code = ErrorCode.INTERNAL
    default_message = "an internal error occurred"

    def __init__(self, message: Optional[str] = None, details: Optional[str] = None):
        self.message = message or self.default_message
        self.details = details
        super().__init__(self.message)

    def __str__(self) -> str:
        if self.details:
            return f"{self.code.value}: {self.message} ({self.details})"
        return f"{self.code.value}: {self.message}"

    def to_dict(self) -> Dict[str, Any]:
        data = {"code": self.code.value, "message": self.message}
        if self.details:
            data["details"] = self.details
        return data


class ValidationError(PathfinderError, ValueError):
    code = ErrorCode.VALIDATION
    default_message = "validation failed"


class NotFoundError(PathfinderError):
    code = ErrorCode.NOT_FOUND
    default_message = "not found"


class OutOfBoundsError(PathfinderError, ValueError):
    code = ErrorCode.OUT_OF_BOUNDS
    default_message = "point outside grid bounds"


class BlockedError(PathfinderError, ValueError):
    code = ErrorCode.BLOCKED
    default_message = "point is blocked"


class InvalidDimensionsError(PathfinderError, ValueError):
    code = ErrorCode.INVALID_DIMENSIONS
    default_message = "maze dimensions must be at least 2x2"


class UnknownAlgorithmError(PathfinderError, ValueError):
    code = ErrorCode.UNKNOWN_ALGORITHM
    default_message = "unknown algorithm"


class SearchCancelledError(PathfinderError):
    code = ErrorCode.CANCELLED
    default_message = "operation cancelled before it started"
