from __future__ import annotations

import logging
import math
from datetime import date
from typing import List, Optional

from backend.core.errors import DegenerateProfileError, InvalidPercentError
from backend.core.money import (
    annual_employer_match,
    employee_contribution_per_paycheck,
    employer_match_per_paycheck,
    round_half_away,
    whole_units,
)
from backend.models import ProfileSnapshot
from backend.schemas.projection import ProjectionPoint, ProjectionResult

logger = logging.getLogger(__name__)

RETIREMENT_AGE = 65
ANNUAL_RETURN = 0.07
DAYS_PER_YEAR = 365.25


def current_age(date_of_birth: date, today: Optional[date] = None) -> int:
    """Whole years since birth, using a 365.25-day year rather than calendar birthdays."""
    today = today or date.today()
    days = (today - date_of_birth).days
    if days < 0:
        raise DegenerateProfileError(f"Date of birth {date_of_birth.isoformat()} is after {today.isoformat()}.")
    return math.floor(days / DAYS_PER_YEAR)


def project(
    profile: ProfileSnapshot,
    effective_percent: float,
    today: Optional[date] = None,
) -> ProjectionResult:
    """
    Project the account balance from today to RETIREMENT_AGE.

    Order of operations (per year):
      1) Record the balance at the START of the year.
      2) Add the year's employee + employer contribution.
      3) Apply ANNUAL_RETURN to the sum.

    The recorded rows end at retirement age with the balance *before* that
    year's contribution and growth. projectedBalanceAtRetirement is the
    balance *after* it, so it is one step ahead of the last row.

    effective_percent has no upper bound here: what-if values that would
    fail validation can still be projected.
    """
    if isinstance(effective_percent, bool) or not math.isfinite(effective_percent) or effective_percent < 0:
        raise InvalidPercentError(f"Contribution percent must be a non-negative number, got {effective_percent!r}.")

    age = current_age(profile.dateOfBirth, today)
    years_to_retirement = max(0, RETIREMENT_AGE - age)

    salary = profile.annualSalary
    employee = effective_percent * salary / 100
    employer = annual_employer_match(salary, effective_percent, profile.employerMatch)
    total = employee + employer
    employee_per_paycheck = employee_contribution_per_paycheck(profile, effective_percent)
    match_per_paycheck = employer_match_per_paycheck(profile, effective_percent)

    balance = float(profile.ytdBalance)
    rows: List[ProjectionPoint] = []
    for year in range(years_to_retirement + 1):
        rows.append(ProjectionPoint(age=age + year, balance=whole_units(balance)))
        balance = (balance + total) * (1 + ANNUAL_RETURN)

    logger.debug(
        "Projected %d years at %.2f%%: %.2f -> %.2f",
        years_to_retirement,
        effective_percent,
        profile.ytdBalance,
        balance,
    )

    return ProjectionResult(
        currentAge=age,
        retirementAge=RETIREMENT_AGE,
        yearsToRetirement=years_to_retirement,
        currentBalance=profile.ytdBalance,
        effectivePercent=round_half_away(effective_percent, 2),
        annualEmployeeContribution=round_half_away(employee, 2),
        annualEmployerContribution=round_half_away(employer, 2),
        totalAnnualContribution=round_half_away(total, 2),
        employeeContributionPerPaycheck=round_half_away(employee_per_paycheck, 2),
        employerMatchPerPaycheck=round_half_away(match_per_paycheck, 2),
        projectedBalanceAtRetirement=whole_units(balance),
        assumedAnnualReturn=ANNUAL_RETURN,
        yearlyProjections=rows,
    )


__all__ = [
    "RETIREMENT_AGE",
    "ANNUAL_RETURN",
    "current_age",
    "project",
]
