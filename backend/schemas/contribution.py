"""Data contracts for the contribution and user endpoints."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from backend.models import ContributionElection, ContributionType, UserRecord


class ContributionUpdateResponse(BaseModel):
    """Body returned after a contribution is persisted."""

    message: str = "Contribution updated successfully"
    contribution: ContributionElection


class ConversionRequest(BaseModel):
    """Switch an election to the other unit without changing its dollar amount."""

    model_config = ConfigDict(extra="forbid")

    type: ContributionType
    value: float = Field(..., ge=0, allow_inf_nan=False)
    targetType: ContributionType


class ConversionResponse(BaseModel):
    contribution: ContributionElection


class UserResponse(UserRecord):
    """User record plus values derived from it at request time."""

    calculatedAge: int
    paycheckGross: float
    employeeContributionPerPaycheck: float
    employerMatchPerPaycheck: float
    effectiveContributionPercent: Optional[float] = Field(
        default=None,
        description="Current election as percent of gross pay.",
    )
