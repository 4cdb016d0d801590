from __future__ import annotations

import logging
import threading
from datetime import date, datetime
from typing import Optional, Union

from backend.models import (
    EmployerMatch,
    FixedAmountElection,
    PercentageElection,
    ProfileSnapshot,
    UserRecord,
    YtdSummary,
)

logger = logging.getLogger(__name__)


def demo_user() -> UserRecord:
    """Seed participant used when no record is supplied."""
    return UserRecord(
        id=1,
        name="Demo Participant",
        email="participant@example.com",
        dateOfBirth=date(2002, 3, 22),
        hireDate=date(2020, 6, 1),
        annualSalary=85000,
        payFrequency="biweekly",
        contribution=PercentageElection(value=6, lastUpdated=datetime(2025, 11, 20)),
        employerMatch=EmployerMatch(matchPercent=50, maxMatchPercent=6),
        ytdData=YtdSummary(
            employeeContributions=4000,
            employerContributions=2000,
            totalBalance=20000,
            paychecksProcessed=16,
        ),
    )


class ProfileStore:
    """In-memory holder of the single user record.

    Every read returns a deep copy, and contribution writes go through a lock
    so concurrent updates to the one profile are applied one at a time.
    """

    def __init__(self, record: Optional[UserRecord] = None, plan_annual_limit: float = 23000.0):
        self._record = (record or demo_user()).model_copy(deep=True)
        self._plan_annual_limit = plan_annual_limit
        self._lock = threading.Lock()

    def user(self) -> UserRecord:
        with self._lock:
            return self._record.model_copy(deep=True)

    def snapshot(self) -> ProfileSnapshot:
        with self._lock:
            return self._record.to_snapshot(self._plan_annual_limit)

    def contribution(self) -> Union[PercentageElection, FixedAmountElection]:
        with self._lock:
            return self._record.contribution

    def ytd(self) -> YtdSummary:
        with self._lock:
            return self._record.ytdData.model_copy()

    def save_contribution(self, election: Union[PercentageElection, FixedAmountElection]) -> None:
        with self._lock:
            record = self._record.model_copy(update={"contribution": election}, deep=True)
            self._record = record
        logger.info("Stored %s contribution of %s for user %s", election.type, election.value, record.id)
