from __future__ import annotations

from datetime import date

import pytest
from flask.testing import FlaskClient

from backend.app import create_app
from backend.config import Settings
from backend.domain.profile_store import ProfileStore
from backend.models import EmployerMatch, ProfileSnapshot

# 23 years old on this date under the 365.25-day year
TODAY = date(2025, 11, 20)


def make_profile(**overrides) -> ProfileSnapshot:
    fields = {
        "dateOfBirth": date(2002, 3, 22),
        "annualSalary": 85000.0,
        "payPeriodsPerYear": 26,
        "employerMatch": EmployerMatch(matchPercent=50, maxMatchPercent=6),
        "ytdBalance": 20000.0,
        "planAnnualLimit": 23000.0,
    }
    fields.update(overrides)
    return ProfileSnapshot(**fields)


@pytest.fixture()
def profile() -> ProfileSnapshot:
    return make_profile()


@pytest.fixture()
def store() -> ProfileStore:
    return ProfileStore(plan_annual_limit=23000.0)


@pytest.fixture()
def client(store: ProfileStore) -> FlaskClient:
    flask_app = create_app(settings=Settings(), store=store)
    with flask_app.test_client() as test_client:
        yield test_client
