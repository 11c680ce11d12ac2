"""
Datasets API Route

Named snapshots of the caller's employees and settings.
"""

from typing import Dict, List, Optional

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field

from app.dependencies import get_dataset_store, get_employee_store, get_settings_store, get_user_id
from schemas.employee import Employee
from snapshots.store import Dataset, DatasetSettings, DatasetStore, DatasetSummary
from store.employee_store import EmployeeStore
from store.settings_store import SettingsStore, SettingsUpdate


router = APIRouter(prefix="/datasets", tags=["datasets"])


class SaveDatasetRequest(BaseModel):
    """
    Save request. Without employees/settings the caller's current state
    is captured.
    """
    name: str = Field(..., description="Unique per user, at most 100 characters")
    employees: Optional[List[Employee]] = None
    settings: Optional[DatasetSettings] = None


class DatasetListResponse(BaseModel):
    datasets: List[DatasetSummary]


@router.get("", response_model=DatasetListResponse)
def list_datasets(
    user_id: str = Depends(get_user_id),
    store: DatasetStore = Depends(get_dataset_store),
) -> DatasetListResponse:
    return DatasetListResponse(datasets=store.list(user_id))


@router.post("", response_model=DatasetSummary, status_code=201)
def save_dataset(
    request: SaveDatasetRequest,
    user_id: str = Depends(get_user_id),
    store: DatasetStore = Depends(get_dataset_store),
    employee_store: EmployeeStore = Depends(get_employee_store),
    settings_store: SettingsStore = Depends(get_settings_store),
) -> DatasetSummary:
    if request.employees is not None:
        employees = request.employees
    else:
        employees = employee_store.list(user_id)

    if request.settings is not None:
        dataset_settings = request.settings
    else:
        current = settings_store.get(user_id)
        dataset_settings = DatasetSettings(
            target_percentages=current.target_percentages,
            deviation_threshold=current.deviation_threshold,
        )

    return store.save(user_id, request.name, employees, dataset_settings)


@router.get("/{dataset_id}", response_model=Dataset)
def get_dataset(
    dataset_id: int,
    user_id: str = Depends(get_user_id),
    store: DatasetStore = Depends(get_dataset_store),
) -> Dataset:
    return store.load(user_id, dataset_id)


@router.post("/{dataset_id}/load", response_model=Dataset)
def load_dataset(
    dataset_id: int,
    user_id: str = Depends(get_user_id),
    store: DatasetStore = Depends(get_dataset_store),
    employee_store: EmployeeStore = Depends(get_employee_store),
    settings_store: SettingsStore = Depends(get_settings_store),
) -> Dataset:
    """Restore a snapshot's employees and settings as the caller's current state."""
    dataset = store.load(user_id, dataset_id)
    employee_store.set_employees(user_id, dataset.employees)
    settings_store.update(user_id, SettingsUpdate(
        target_percentages=dataset.settings.target_percentages,
        deviation_threshold=dataset.settings.deviation_threshold,
    ))
    return dataset


@router.delete("/{dataset_id}")
def delete_dataset(
    dataset_id: int,
    user_id: str = Depends(get_user_id),
    store: DatasetStore = Depends(get_dataset_store),
) -> Dict[str, str]:
    store.delete(user_id, dataset_id)
    return {"message": "Dataset deleted"}
