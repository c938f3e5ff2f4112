"""Shared fixtures for the Schedule Tracker tests."""

import pytest
from fastapi.testclient import TestClient

from dashboard.app import app
from dashboard.core.data_manager import DataManager
from dashboard.dependencies import get_data_manager, get_now, reset_data_manager
from helpers import FIXED_NOW


@pytest.fixture
def data_manager(tmp_path) -> DataManager:
    """Return a DataManager writing into a temporary directory."""
    return DataManager(tmp_path / "data", max_habits=25, max_tasks_per_day=50)


@pytest.fixture
def client(data_manager: DataManager):
    """Return a TestClient bound to a temporary store and a fixed clock."""
    app.dependency_overrides[get_data_manager] = lambda: data_manager
    app.dependency_overrides[get_now] = lambda: FIXED_NOW
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
        reset_data_manager()
