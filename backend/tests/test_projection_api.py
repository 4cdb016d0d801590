from __future__ import annotations

from datetime import date

import pytest
from flask.testing import FlaskClient

from backend.app import create_app
from backend.config import Settings
from backend.domain.profile_store import ProfileStore, demo_user


def test_projection_uses_saved_percentage(client: FlaskClient):
    resp = client.get("/api/projection")

    assert resp.status_code == 200
    body = resp.get_json()
    assert body["effectivePercent"] == 6.0
    assert body["annualEmployeeContribution"] == 5100.0
    assert body["annualEmployerContribution"] == 2550.0
    assert body["retirementAge"] == 65
    assert body["employeeContributionPerPaycheck"] == 196.15
    assert body["employerMatchPerPaycheck"] == 98.08
    assert len(body["yearlyProjections"]) == body["yearsToRetirement"] + 1
    assert body["yearlyProjections"][0]["balance"] == 20000
    assert body["yearlyProjections"][-1]["age"] == 65


def test_projection_converts_saved_fixed_amount(client: FlaskClient):
    client.put("/api/contribution", json={"type": "fixed", "value": 200})

    body = client.get("/api/projection").get_json()

    # 200 per paycheck x 26 paychecks
    assert body["annualEmployeeContribution"] == pytest.approx(5200.0, abs=0.01)


def test_what_if_percent_overrides_saved_value(client: FlaskClient):
    body = client.get("/api/projection?contributionPercent=10").get_json()

    assert body["effectivePercent"] == 10.0
    assert body["annualEmployeeContribution"] == 8500.0


def test_zero_what_if_percent_is_honoured(client: FlaskClient):
    body = client.get("/api/projection?contributionPercent=0").get_json()

    assert body["annualEmployeeContribution"] == 0
    assert body["annualEmployerContribution"] == 0


@pytest.mark.parametrize("raw", ["abc", "-5", "nan"])
def test_bad_what_if_percent_returns_400(client: FlaskClient, raw):
    resp = client.get(f"/api/projection?contributionPercent={raw}")

    assert resp.status_code == 400
    assert resp.get_json()["kind"] == "InvalidValue"


def test_higher_percent_projects_higher_balance(client: FlaskClient):
    low = client.get("/api/projection?contributionPercent=3").get_json()
    high = client.get("/api/projection?contributionPercent=12").get_json()

    assert high["projectedBalanceAtRetirement"] > low["projectedBalanceAtRetirement"]


def test_future_birth_date_returns_409():
    record = demo_user().model_copy(update={"dateOfBirth": date(2999, 1, 1)})
    flask_app = create_app(settings=Settings(), store=ProfileStore(record))

    with flask_app.test_client() as client:
        resp = client.get("/api/projection")

    assert resp.status_code == 409
    assert resp.get_json()["kind"] == "DegenerateProfile"
