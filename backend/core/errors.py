"""Error kinds, structured validation failures and engine exceptions."""

from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict


class ErrorKind(str, Enum):
    MALFORMED_INPUT = "MalformedInput"
    INVALID_TYPE = "InvalidType"
    INVALID_VALUE = "InvalidValue"
    PERCENT_OUT_OF_RANGE = "PercentOutOfRange"
    EXCEEDS_PAYCHECK_AMOUNT = "ExceedsPaycheckAmount"
    EXCEEDS_ANNUAL_LIMIT = "ExceedsAnnualLimit"
    DEGENERATE_PROFILE = "DegenerateProfile"


class ValidationFailure(BaseModel):
    """A rejected contribution election, returned to the caller rather than raised.

    The hint fields carry the largest value that would have been accepted, in
    the election's own units.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    kind: ErrorKind
    message: str
    maxAllowedPercent: Optional[float] = None
    maxAllowedAmount: Optional[float] = None


class ContributionEngineError(Exception):
    """Base exception for calculation engine errors."""


class DegenerateProfileError(ContributionEngineError):
    """Profile data cannot support the calculation (zero pay base, bad birth date)."""

    kind = ErrorKind.DEGENERATE_PROFILE

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class InvalidPercentError(ContributionEngineError, ValueError):
    """Projection was asked for a negative or non-finite contribution percent."""

    kind = ErrorKind.INVALID_VALUE
