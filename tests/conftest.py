"""
Shared fixtures for scenario store and API testing.
"""

import sys
import os
import pytest

# Add src to path so the tests run without installing the package
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from ferex.models import SavedScenario
from ferex.store import ScenarioStore, init_database


@pytest.fixture
def data_dir(tmp_path):
    """Application data directory that does not exist yet."""
    return tmp_path / "app-data" / "ferex"


@pytest.fixture
def store(data_dir):
    """A ready store in a fresh data directory."""
    s = init_database(data_dir)
    yield s
    s.close()


@pytest.fixture
def uninitialized_store():
    return ScenarioStore()


@pytest.fixture
def make_scenario():
    """Factory for scenarios with sensible defaults."""
    def _make(id="scn-1", name="Retire at 62", data=None,
              created_at="2024-01-01T00:00:00Z", updated_at="2024-01-01T00:00:00Z"):
        if data is None:
            data = '{"personalInfo": {"currentAge": 55}, "tsp": {"currentBalance": 450000}}'
        return SavedScenario(
            id=id,
            name=name,
            data=data,
            created_at=created_at,
            updated_at=updated_at,
        )

    return _make
