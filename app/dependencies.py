"""
FastAPI Dependencies

All object creation happens here, not per request.
Stores are process-wide singletons; routes receive them via Depends().
"""

from functools import lru_cache

from fastapi import Header

from app.core.config import settings
from snapshots.file_store import FileDatasetStore
from snapshots.store import DatasetStore
from store.employee_store import EmployeeStore
from store.settings_store import SettingsStore


@lru_cache(maxsize=1)
def get_employee_store() -> EmployeeStore:
    return EmployeeStore()


@lru_cache(maxsize=1)
def get_settings_store() -> SettingsStore:
    return SettingsStore(default_threshold=settings.default_deviation_threshold)


@lru_cache(maxsize=1)
def get_dataset_store() -> DatasetStore:
    """
    Create and cache the dataset store.

    Backed by a JSON file at settings.datasets_path.
    """
    return FileDatasetStore(
        path=settings.datasets_path,
        max_name_length=settings.max_dataset_name_length,
    )


def get_user_id(x_user_id: str = Header(default="")) -> str:
    """
    Identify the caller.

    Authentication lives in front of this service; it forwards the user id
    in the X-User-Id header.
    """
    return x_user_id.strip() or settings.default_user_id
