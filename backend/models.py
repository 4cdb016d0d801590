from __future__ import annotations

from datetime import date, datetime
from enum import Enum
from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

PAY_PERIODS_BY_FREQUENCY = {
    "weekly": 52,
    "biweekly": 26,
    "semimonthly": 24,
    "monthly": 12,
}


class ContributionType(str, Enum):
    PERCENTAGE = "percentage"
    FIXED_AMOUNT = "fixed"


class EmployerMatch(BaseModel):
    """Employer adds matchPercent% of the employee deferral, on deferrals up to maxMatchPercent% of salary."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    matchPercent: float = Field(ge=0, le=100)
    maxMatchPercent: float = Field(ge=0, le=100)


class ProfileSnapshot(BaseModel):
    """Read-only view of the participant the engine calculates against."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    dateOfBirth: date
    annualSalary: float = Field(ge=0, allow_inf_nan=False)
    payPeriodsPerYear: int = Field(ge=0)
    employerMatch: EmployerMatch
    ytdBalance: float = Field(ge=0, allow_inf_nan=False)
    planAnnualLimit: float = Field(default=23000.0, ge=0, allow_inf_nan=False)


class PercentageElection(BaseModel):
    """Contribution expressed as a percent of gross pay."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    type: Literal["percentage"] = "percentage"
    value: float = Field(ge=0, allow_inf_nan=False)
    lastUpdated: Optional[datetime] = None

    @property
    def contribution_type(self) -> ContributionType:
        return ContributionType.PERCENTAGE


class FixedAmountElection(BaseModel):
    """Contribution expressed as currency per paycheck."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    type: Literal["fixed"] = "fixed"
    value: float = Field(ge=0, allow_inf_nan=False)
    lastUpdated: Optional[datetime] = None

    @property
    def contribution_type(self) -> ContributionType:
        return ContributionType.FIXED_AMOUNT


ContributionElection = Annotated[
    Union[PercentageElection, FixedAmountElection],
    Field(discriminator="type"),
]


def make_election(
    contribution_type: ContributionType,
    value: float,
    last_updated: Optional[datetime] = None,
) -> Union[PercentageElection, FixedAmountElection]:
    if ContributionType(contribution_type) is ContributionType.PERCENTAGE:
        return PercentageElection(value=value, lastUpdated=last_updated)
    return FixedAmountElection(value=value, lastUpdated=last_updated)


class YtdSummary(BaseModel):
    model_config = ConfigDict(extra="forbid")

    employeeContributions: float = Field(ge=0)
    employerContributions: float = Field(ge=0)
    totalBalance: float = Field(ge=0)
    paychecksProcessed: int = Field(ge=0)


class UserRecord(BaseModel):
    """The single participant owned by the profile store."""

    model_config = ConfigDict(extra="forbid")

    id: int
    name: str
    email: str
    dateOfBirth: date
    hireDate: date
    annualSalary: float = Field(ge=0)
    payFrequency: Literal["weekly", "biweekly", "semimonthly", "monthly"] = "biweekly"
    contribution: ContributionElection
    employerMatch: EmployerMatch
    ytdData: YtdSummary

    @property
    def pay_periods_per_year(self) -> int:
        return PAY_PERIODS_BY_FREQUENCY[self.payFrequency]

    def to_snapshot(self, plan_annual_limit: float) -> ProfileSnapshot:
        return ProfileSnapshot(
            dateOfBirth=self.dateOfBirth,
            annualSalary=self.annualSalary,
            payPeriodsPerYear=self.pay_periods_per_year,
            employerMatch=self.employerMatch,
            ytdBalance=self.ytdData.totalBalance,
            planAnnualLimit=plan_annual_limit,
        )
