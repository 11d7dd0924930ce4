"""Structured errors for misuse of the containers.

Container failures are values (Absent, Err, Invalid) and never raise. The
exceptions here cover programming errors only: extracting from the wrong
variant, non-exhaustive dispatch tables, and malformed failure payloads.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Self

from pydantic import BaseModel, Field


class ErrorCode(StrEnum):
    """Machine-readable codes for container misuse."""
    UNWRAP_FAILED = "UNWRAP_FAILED"
    NON_EXHAUSTIVE_MATCH = "NON_EXHAUSTIVE_MATCH"
    EMPTY_FAILURE = "EMPTY_FAILURE"
    INVALID_PAYLOAD = "INVALID_PAYLOAD"


class AdtError(BaseModel):
    """Structured description of a misuse error.

    Example:
        >>> error = AdtError.create("unwrap() on Absent", ErrorCode.UNWRAP_FAILED, variant="Absent")
        >>> print(error.render())
        [UNWRAP_FAILED] unwrap() on Absent (variant: Absent)
    """

    message: str = Field(..., description="Human-readable error message")
    code: ErrorCode = Field(..., description="Machine-readable error code")
    variant: str | None = Field(default=None, description="Variant the operation was applied to")

    @classmethod
    def create(cls, message: str, code: ErrorCode, *, variant: str | None = None) -> Self:
        """Factory method for cleaner construction."""
        return cls(message=message, code=code, variant=variant)

    def render(self) -> str:
        suffix = f" (variant: {self.variant})" if self.variant else ""
        return f"[{self.code}] {self.message}{suffix}"

    def __str__(self) -> str:
        return self.render()


class AdtException(Exception):
    """Base exception wrapping an AdtError."""

    code: ErrorCode = ErrorCode.UNWRAP_FAILED

    def __init__(self, error: AdtError) -> None:
        self.error = error
        super().__init__(error.render())

    @classmethod
    def create(cls, message: str, *, variant: str | None = None) -> Self:
        """Build the exception with the subclass's error code."""
        return cls(AdtError.create(message, cls.code, variant=variant))


class UnwrapError(AdtException, RuntimeError):
    """Value extraction on the wrong variant."""

    code = ErrorCode.UNWRAP_FAILED


class MatchError(AdtException, TypeError):
    """Dispatch table is missing a handler for a variant."""

    code = ErrorCode.NON_EXHAUSTIVE_MATCH


class EmptyFailureError(AdtException, ValueError):
    """Invalid constructed without any errors."""

    code = ErrorCode.EMPTY_FAILURE


class InvalidPayloadError(AdtException, TypeError):
    """Invalid constructed from a scalar instead of a sequence of errors."""

    code = ErrorCode.INVALID_PAYLOAD
