"""Contribution election validation, normalization and type conversion."""

from __future__ import annotations

import logging
import math
from collections.abc import Mapping
from datetime import datetime, timezone
from typing import Any, Optional, Union

from backend.core.errors import DegenerateProfileError, ErrorKind, ValidationFailure
from backend.core.money import exact, exceeds_limit, paycheck_gross, round_half_away, truncate
from backend.models import (
    ContributionType,
    FixedAmountElection,
    PercentageElection,
    ProfileSnapshot,
    make_election,
)

logger = logging.getLogger(__name__)

Election = Union[PercentageElection, FixedAmountElection]

_CONTRIBUTION_TYPES = tuple(kind.value for kind in ContributionType)


def _failure(kind: ErrorKind, message: str, **hints: float) -> ValidationFailure:
    logger.info("Contribution rejected: %s (%s)", kind.value, message)
    return ValidationFailure(kind=kind, message=message, **hints)


def _is_plain_number(value: Any) -> bool:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return math.isfinite(value)


def validate_and_normalize(
    profile: ProfileSnapshot,
    payload: Union[Mapping, Election],
    now: Optional[datetime] = None,
) -> Union[Election, ValidationFailure]:
    """
    Check a proposed election against the profile and plan limit.

    Rules run in order and the first failure is returned:
      1) payload shape, 2) type, 3) value,
      4) percentage range and annual limit, or
      5) fixed amount against paycheck gross and annual limit.

    On success a fresh election stamped with `now` (UTC) is returned. Any
    `lastUpdated` on the payload is ignored.
    """
    if isinstance(payload, (PercentageElection, FixedAmountElection)):
        payload = payload.model_dump()

    if not isinstance(payload, Mapping) or "type" not in payload or "value" not in payload:
        return _failure(ErrorKind.MALFORMED_INPUT, "Contribution must be an object with a type and a value.")

    kind = payload["type"]
    if not isinstance(kind, str) or kind not in _CONTRIBUTION_TYPES:
        return _failure(ErrorKind.INVALID_TYPE, 'Invalid contribution type. Must be "percentage" or "fixed".')

    value = payload["value"]
    if not _is_plain_number(value) or value < 0:
        return _failure(ErrorKind.INVALID_VALUE, "Invalid contribution value. Must be a non-negative number.")

    limit = profile.planAnnualLimit
    contribution_type = ContributionType(kind)

    if contribution_type is ContributionType.PERCENTAGE:
        if value > 100:
            return _failure(ErrorKind.PERCENT_OUT_OF_RANGE, "Percentage cannot exceed 100%.")
        annual_contribution = exact(value) * exact(profile.annualSalary) / 100
        if exceeds_limit(annual_contribution, limit):
            return _failure(
                ErrorKind.EXCEEDS_ANNUAL_LIMIT,
                f"Annual contribution would exceed IRS limit of ${limit:,.0f}.",
                maxAllowedPercent=truncate(limit, profile.annualSalary, 1, scale=100),
            )
    else:
        gross = paycheck_gross(profile)
        if value > gross:
            return _failure(ErrorKind.EXCEEDS_PAYCHECK_AMOUNT, "Contribution cannot exceed paycheck amount.")
        annual_contribution = exact(value) * profile.payPeriodsPerYear
        if exceeds_limit(annual_contribution, limit):
            return _failure(
                ErrorKind.EXCEEDS_ANNUAL_LIMIT,
                f"Annual contribution would exceed IRS limit of ${limit:,.0f}.",
                maxAllowedAmount=truncate(limit, profile.payPeriodsPerYear, 2),
            )

    stamped = now or datetime.now(timezone.utc)
    election = make_election(contribution_type, float(value), last_updated=stamped)
    logger.info("Contribution accepted: %s %s", election.type, election.value)
    return election


def convert_election(
    profile: ProfileSnapshot,
    election: Election,
    target_type: Union[ContributionType, str],
) -> Election:
    """Re-express an election in the other unit, keeping its dollar intent.

    The result is rounded to a whole number and is not validated; callers run
    it through validate_and_normalize before persisting.
    """
    target = ContributionType(target_type)
    if election.contribution_type is target:
        return election

    gross = paycheck_gross(profile)
    if target is ContributionType.FIXED_AMOUNT:
        new_value = round_half_away(election.value / 100 * gross)
    else:
        if gross <= 0:
            raise DegenerateProfileError("Paycheck gross is zero; cannot express a fixed amount as a percent.")
        new_value = round_half_away(election.value / gross * 100)

    return make_election(target, new_value)


def effective_percent(profile: ProfileSnapshot, election: Election) -> float:
    """Percent of gross pay the election represents."""
    if election.contribution_type is ContributionType.PERCENTAGE:
        return election.value
    gross = paycheck_gross(profile)
    if gross <= 0:
        raise DegenerateProfileError("Paycheck gross is zero; effective percent is undefined.")
    return election.value / gross * 100
