from __future__ import annotations

from datetime import datetime
from math import isclose

import pytest

from backend.core.contribution import convert_election, effective_percent
from backend.core.errors import DegenerateProfileError
from backend.models import ContributionType, FixedAmountElection, PercentageElection

from conftest import make_profile


def test_percentage_to_fixed_keeps_dollar_intent(profile):
    # 6% of an 85000/26 paycheck is 196.15
    converted = convert_election(profile, PercentageElection(value=6), ContributionType.FIXED_AMOUNT)

    assert isinstance(converted, FixedAmountElection)
    assert converted.value == 196.0


def test_fixed_to_percentage_keeps_dollar_intent(profile):
    converted = convert_election(profile, FixedAmountElection(value=196), "percentage")

    assert isinstance(converted, PercentageElection)
    assert converted.value == 6.0


def test_ties_round_away_from_zero():
    profile = make_profile(annualSalary=2600.0, payPeriodsPerYear=26)  # paycheck gross of 100

    to_fixed = convert_election(profile, PercentageElection(value=12.5), ContributionType.FIXED_AMOUNT)
    to_percent = convert_election(profile, FixedAmountElection(value=2.5), ContributionType.PERCENTAGE)

    assert to_fixed.value == 13.0
    assert to_percent.value == 3.0


def test_conversion_drops_timestamp(profile):
    election = PercentageElection(value=6, lastUpdated=datetime(2025, 11, 20))

    converted = convert_election(profile, election, ContributionType.FIXED_AMOUNT)

    assert converted.lastUpdated is None


def test_same_type_is_unchanged(profile):
    election = PercentageElection(value=7.5)

    assert convert_election(profile, election, ContributionType.PERCENTAGE) is election


@pytest.mark.parametrize("percent", [0, 1, 3, 6, 10, 15, 27, 50, 99, 100])
def test_percent_round_trip_within_one(profile, percent):
    fixed = convert_election(profile, PercentageElection(value=percent), ContributionType.FIXED_AMOUNT)
    back = convert_election(profile, fixed, ContributionType.PERCENTAGE)

    assert abs(back.value - percent) <= 1


def test_fixed_to_percentage_with_zero_salary_is_degenerate():
    profile = make_profile(annualSalary=0.0)

    with pytest.raises(DegenerateProfileError):
        convert_election(profile, FixedAmountElection(value=10), ContributionType.PERCENTAGE)


def test_effective_percent_of_percentage_is_identity(profile):
    assert effective_percent(profile, PercentageElection(value=8.5)) == 8.5


def test_effective_percent_of_fixed_amount(profile):
    # 196 of a 3269.23 paycheck
    assert isclose(effective_percent(profile, FixedAmountElection(value=196)), 5.99529, rel_tol=1e-5)


@pytest.mark.parametrize("overrides", [{"annualSalary": 0.0}, {"payPeriodsPerYear": 0}])
def test_effective_percent_with_zero_paycheck_is_degenerate(overrides):
    profile = make_profile(**overrides)

    with pytest.raises(DegenerateProfileError):
        effective_percent(profile, FixedAmountElection(value=100))
