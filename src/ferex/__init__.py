"""FEREX backend: saved scenarios and FERS retirement calculations."""

from .errors import StorageError, StorageInitError, StorageReadError, StorageWriteError
from .models import SavedScenario
from .pension import calculate_fers_pension
from .store import ScenarioStore, init_database

__all__ = [
    "SavedScenario",
    "ScenarioStore",
    "StorageError",
    "StorageInitError",
    "StorageReadError",
    "StorageWriteError",
    "calculate_fers_pension",
    "init_database",
]
