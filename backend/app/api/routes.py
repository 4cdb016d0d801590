"""HTTP routes for the Flask API."""

import logging
import math
from http import HTTPStatus
from typing import Any, Optional

from flask import Blueprint, current_app, jsonify, request
from pydantic import ValidationError

from backend.core.contribution import convert_election, effective_percent, validate_and_normalize
from backend.core.errors import DegenerateProfileError, ErrorKind, ValidationFailure
from backend.core.money import (
    employee_contribution_per_paycheck,
    employer_match_per_paycheck,
    paycheck_gross,
    round_half_away,
)
from backend.core.projection import current_age, project
from backend.domain.profile_store import ProfileStore
from backend.models import make_election
from backend.schemas.contribution import (
    ContributionUpdateResponse,
    ConversionRequest,
    ConversionResponse,
    UserResponse,
)

logger = logging.getLogger(__name__)

STORE_EXTENSION = "profile_store"

api_bp = Blueprint("api", __name__)


def _store() -> ProfileStore:
    return current_app.extensions[STORE_EXTENSION]


def _failure_response(failure: ValidationFailure, status: HTTPStatus) -> Any:
    return jsonify(failure.model_dump(mode="json", exclude_none=True)), status


@api_bp.errorhandler(ValidationError)
def _handle_validation_error(exc: ValidationError):
    """Convert Pydantic validation errors into JSON responses."""
    return jsonify({"detail": exc.errors(include_url=False)}), HTTPStatus.UNPROCESSABLE_ENTITY


@api_bp.errorhandler(DegenerateProfileError)
def _handle_degenerate_profile(exc: DegenerateProfileError):
    """Profile data problems are not fixable by the user, so report them apart from input errors."""
    logger.warning("Degenerate profile: %s", exc.message)
    failure = ValidationFailure(kind=ErrorKind.DEGENERATE_PROFILE, message=exc.message)
    return _failure_response(failure, HTTPStatus.CONFLICT)


@api_bp.get("/user")
def user() -> Any:
    """User profile with derived age and paycheck figures."""
    store = _store()
    record = store.user()
    snapshot = store.snapshot()
    percent = effective_percent(snapshot, record.contribution)
    response = UserResponse(
        **record.model_dump(),
        calculatedAge=current_age(record.dateOfBirth),
        paycheckGross=round_half_away(paycheck_gross(snapshot), 2),
        employeeContributionPerPaycheck=round_half_away(employee_contribution_per_paycheck(snapshot, percent), 2),
        employerMatchPerPaycheck=round_half_away(employer_match_per_paycheck(snapshot, percent), 2),
        effectiveContributionPercent=round_half_away(percent, 2),
    )
    return jsonify(response.model_dump(mode="json"))


@api_bp.get("/contribution")
def get_contribution() -> Any:
    """Current contribution settings."""
    return jsonify(_store().contribution().model_dump(mode="json"))


@api_bp.put("/contribution")
def update_contribution() -> Any:
    """Validate and persist a new contribution election."""
    store = _store()
    payload = request.get_json(force=True, silent=True)
    result = validate_and_normalize(store.snapshot(), payload)
    if isinstance(result, ValidationFailure):
        return _failure_response(result, HTTPStatus.BAD_REQUEST)

    store.save_contribution(result)
    response = ContributionUpdateResponse(contribution=result)
    return jsonify(response.model_dump(mode="json"))


@api_bp.post("/contribution/convert")
def convert_contribution() -> Any:
    """Re-express an election in the other unit. Nothing is persisted."""
    payload = ConversionRequest.model_validate(request.get_json(force=True, silent=False))
    election = make_election(payload.type, payload.value)
    converted = convert_election(_store().snapshot(), election, payload.targetType)
    return jsonify(ConversionResponse(contribution=converted).model_dump(mode="json"))


def _requested_percent() -> Optional[float]:
    raw = request.args.get("contributionPercent")
    if raw is None or raw.strip() == "":
        return None
    percent = float(raw)
    if not math.isfinite(percent) or percent < 0:
        raise ValueError(raw)
    return percent


@api_bp.get("/projection")
def projection() -> Any:
    """Retirement projection for the saved election or a what-if percent."""
    store = _store()
    snapshot = store.snapshot()
    try:
        percent = _requested_percent()
    except ValueError:
        failure = ValidationFailure(
            kind=ErrorKind.INVALID_VALUE,
            message="contributionPercent must be a non-negative number.",
        )
        return _failure_response(failure, HTTPStatus.BAD_REQUEST)

    if percent is None:
        percent = effective_percent(snapshot, store.contribution())

    result = project(snapshot, percent)
    return jsonify(result.model_dump(mode="json"))


@api_bp.get("/ytd")
def ytd() -> Any:
    """Year-to-date contribution summary."""
    return jsonify(_store().ytd().model_dump(mode="json"))
