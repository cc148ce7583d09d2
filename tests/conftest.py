"""Shared fixtures for the expense API tests."""

from datetime import datetime, timezone

import pytest

from api.app import create_app
from common.services import ExpenseStore

SEED_TIME = datetime(2024, 3, 10, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def store():
    return ExpenseStore.with_seed_data(now=SEED_TIME)


@pytest.fixture
def app(store):
    app = create_app(store)
    app.config.update(TESTING=True)
    return app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def lunch():
    return {"amount": 12.5, "description": "Lunch", "category": "Food", "date": "2024-01-01"}
