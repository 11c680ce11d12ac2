"""
Dataset Store Interface

Abstract interface for named snapshots of employees plus settings.
Storage-agnostic - implementations can write to files, databases, etc.

DESIGN RULES:
- Snapshots are scoped to one user
- Names are unique per user
- Stored snapshots are immutable; save a new one instead of editing
"""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Sequence

from pydantic import BaseModel, Field

from schemas.employee import Employee
from schemas.rating import DEVIATION_THRESHOLD, PercentageSplit, default_percentages

MAX_NAME_LENGTH = 100


class DatasetError(Exception):
    """Base class for dataset store failures."""


class DatasetNotFoundError(DatasetError):
    def __init__(self, dataset_id: int):
        super().__init__(f"Dataset not found: {dataset_id}")
        self.dataset_id = dataset_id


class DatasetConflictError(DatasetError):
    def __init__(self, name: str):
        super().__init__(f"A dataset named '{name}' already exists")
        self.name = name


class DatasetValidationError(DatasetError):
    """Rejected save request (bad name, no employees)."""


class DatasetSettings(BaseModel):
    """Settings captured with a snapshot."""
    target_percentages: PercentageSplit = Field(default_factory=default_percentages)
    deviation_threshold: float = Field(default=DEVIATION_THRESHOLD, ge=0)


class DatasetSummary(BaseModel):
    id: int
    name: str
    created_at: datetime


class Dataset(DatasetSummary):
    employees: List[Employee]
    settings: DatasetSettings

    def summary(self) -> DatasetSummary:
        return DatasetSummary(id=self.id, name=self.name, created_at=self.created_at)


def clean_name(name: str, max_length: int = MAX_NAME_LENGTH) -> str:
    """
    Trim and check a dataset name.

    Raises:
        DatasetValidationError: empty or longer than max_length
    """
    cleaned = (name or "").strip()
    if not cleaned:
        raise DatasetValidationError("Dataset name is required")
    if len(cleaned) > max_length:
        raise DatasetValidationError(f"Dataset name must be {max_length} characters or less")
    return cleaned


class DatasetStore(ABC):
    """
    Abstract base for dataset persistence.

    Implementations:
    - FileDatasetStore (JSON, local)
    """

    @abstractmethod
    def list(self, user_id: str) -> List[DatasetSummary]:
        """Summaries of a user's datasets, newest first."""

    @abstractmethod
    def save(
        self,
        user_id: str,
        name: str,
        employees: Sequence[Employee],
        settings: DatasetSettings,
    ) -> DatasetSummary:
        """
        Persist a new snapshot.

        Raises:
            DatasetValidationError: bad name or no employees
            DatasetConflictError: name already used by this user
        """

    @abstractmethod
    def load(self, user_id: str, dataset_id: int) -> Dataset:
        """Raises DatasetNotFoundError for unknown ids."""

    @abstractmethod
    def delete(self, user_id: str, dataset_id: int) -> None:
        """Raises DatasetNotFoundError for unknown ids."""
