"""Shared test fixtures for Life Lag backend tests."""

import pytest
from datetime import datetime, timedelta, timezone
from unittest.mock import AsyncMock, MagicMock
from bson import ObjectId

from lifelag.engine.types import CheckinSummary, StreakState


@pytest.fixture
def sample_user_id():
    return str(ObjectId())


@pytest.fixture
def now():
    # A Wednesday
    return datetime(2025, 3, 12, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def mock_collection():
    collection = AsyncMock()
    # Motor's find() returns a cursor synchronously (not a coroutine),
    # so use MagicMock for it. Async methods like find_one, insert_one,
    # count_documents etc. stay as AsyncMock.
    collection.find = MagicMock()
    return collection


@pytest.fixture
def mock_db(mock_collection):
    db = MagicMock()
    db.__getitem__ = MagicMock(return_value=mock_collection)
    return db


@pytest.fixture
def make_answers():
    """Build an answers dict; every dimension defaults to the same rating."""
    def _make(default=3, **overrides):
        answers = {
            "energy": default,
            "sleep": default,
            "structure": default,
            "initiation": default,
            "engagement": default,
            "sustainability": default,
        }
        answers.update(overrides)
        return answers
    return _make


@pytest.fixture
def make_checkin(now):
    """Build a CheckinSummary `days_ago` days before `now`."""
    def _make(lag_score, drift_category="mild", weakest_dimension="energy", days_ago=7, score_delta=None):
        return CheckinSummary(
            id=str(ObjectId()),
            lag_score=lag_score,
            drift_category=drift_category,
            weakest_dimension=weakest_dimension,
            created_at=now - timedelta(days=days_ago),
            score_delta=score_delta,
        )
    return _make


@pytest.fixture
def mock_repository():
    """CheckinRepository with an empty history."""
    repository = AsyncMock()
    repository.get_recent_checkins.return_value = []
    repository.count_checkins.return_value = 0
    repository.get_streak.return_value = StreakState()
    repository.get_milestones.return_value = []
    repository.add_milestones.return_value = []
    return repository
