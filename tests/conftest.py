"""
Shared fixtures for the triage test suite.

A fixed clock makes response ids and timestamps deterministic.
"""

from datetime import datetime, timezone

import pytest
from fastapi.testclient import TestClient

from support_triage.main import app
from support_triage.triage.application import IClock, TriageService
from support_triage.triage.domain import KeywordClassifier, ResponseFormatter


FIXED_NOW = datetime(2024, 5, 1, 12, 0, 0, tzinfo=timezone.utc)
FIXED_TIMESTAMP = "2024-05-01T12:00:00.000Z"
FIXED_RESPONSE_ID = "tri_1714564800000"


class FixedClock(IClock):
    """Clock frozen at a single instant."""

    def __init__(self, moment: datetime = FIXED_NOW):
        self.moment = moment

    def now(self) -> datetime:
        return self.moment


@pytest.fixture
def fixed_now() -> datetime:
    return FIXED_NOW


@pytest.fixture
def fixed_timestamp() -> str:
    return FIXED_TIMESTAMP


@pytest.fixture
def fixed_response_id() -> str:
    return FIXED_RESPONSE_ID


@pytest.fixture
def clock() -> FixedClock:
    return FixedClock()


@pytest.fixture
def classifier() -> KeywordClassifier:
    return KeywordClassifier()


@pytest.fixture
def formatter() -> ResponseFormatter:
    return ResponseFormatter()


@pytest.fixture
def service(clock) -> TriageService:
    return TriageService(clock)


@pytest.fixture
def client(service):
    app.state.triage_service = service
    try:
        with TestClient(app) as test_client:
            yield test_client
    finally:
        app.state.triage_service = None
