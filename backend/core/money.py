"""Numeric helpers shared by the contribution validator and the projection engine."""

from __future__ import annotations

from decimal import ROUND_DOWN, ROUND_HALF_UP, Decimal

from backend.core.errors import DegenerateProfileError
from backend.models import EmployerMatch, ProfileSnapshot


def round_half_away(amount: float, places: int = 0) -> float:
    """Round to `places` decimals, ties away from zero (Decimal's ROUND_HALF_UP)."""
    quantum = Decimal(1).scaleb(-places)
    return float(Decimal(str(amount)).quantize(quantum, rounding=ROUND_HALF_UP))


def whole_units(amount: float) -> int:
    return int(round_half_away(amount))


def exact(amount: float) -> Decimal:
    return Decimal(str(amount))


def truncate(numerator: float, denominator: float, places: int, scale: int = 1) -> float:
    """numerator x scale / denominator cut toward zero at `places` decimals, computed exactly."""
    quantum = Decimal(1).scaleb(-places)
    ratio = exact(numerator) * scale / exact(denominator)
    return float(ratio.quantize(quantum, rounding=ROUND_DOWN))


def paycheck_gross(profile: ProfileSnapshot) -> float:
    if profile.payPeriodsPerYear <= 0:
        raise DegenerateProfileError("Profile has no pay periods per year; paycheck gross is undefined.")
    return profile.annualSalary / profile.payPeriodsPerYear


def annual_employer_match(annual_salary: float, percent: float, match: EmployerMatch) -> float:
    # only deferrals up to maxMatchPercent of salary are matched
    matched_percent = min(percent, match.maxMatchPercent)
    return matched_percent * annual_salary / 100 * match.matchPercent / 100


def exceeds_limit(annual_amount: Decimal, limit: float) -> bool:
    """Compare an exact annual amount with the plan limit, so truncated hints always pass."""
    return annual_amount > exact(limit)


def _periods(profile: ProfileSnapshot) -> int:
    if profile.payPeriodsPerYear <= 0:
        raise DegenerateProfileError("Profile has no pay periods per year; per-paycheck amounts are undefined.")
    return profile.payPeriodsPerYear


def employee_contribution_per_paycheck(profile: ProfileSnapshot, percent: float) -> float:
    return percent * profile.annualSalary / 100 / _periods(profile)


def employer_match_per_paycheck(profile: ProfileSnapshot, percent: float) -> float:
    return annual_employer_match(profile.annualSalary, percent, profile.employerMatch) / _periods(profile)
