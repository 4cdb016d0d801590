"""Data contracts for retirement projections."""

from typing import List

from pydantic import BaseModel, Field


class ProjectionPoint(BaseModel):
    """Balance at the start of the year the participant turns `age`."""

    age: int = Field(..., ge=0)
    balance: int = Field(..., description="Balance rounded to whole currency units.")


class ProjectionResult(BaseModel):
    """Year-by-year projection to retirement age."""

    currentAge: int = Field(..., ge=0)
    retirementAge: int
    yearsToRetirement: int = Field(..., ge=0)
    currentBalance: float = Field(..., ge=0)
    effectivePercent: float = Field(..., ge=0)
    annualEmployeeContribution: float = Field(..., ge=0)
    annualEmployerContribution: float = Field(..., ge=0)
    totalAnnualContribution: float = Field(..., ge=0)
    employeeContributionPerPaycheck: float = Field(..., ge=0)
    employerMatchPerPaycheck: float = Field(..., ge=0)
    projectedBalanceAtRetirement: int = Field(
        ...,
        description=(
            "Balance after the final year's contribution and growth; one compounding "
            "step past the last entry of yearlyProjections."
        ),
    )
    assumedAnnualReturn: float = Field(..., description="Annual return as a decimal (0.07 for 7%).")
    yearlyProjections: List[ProjectionPoint]
