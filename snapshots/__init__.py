# Snapshots Package
from snapshots.store import (
    DatasetStore,
    Dataset,
    DatasetSettings,
    DatasetSummary,
    DatasetError,
    DatasetNotFoundError,
    DatasetConflictError,
    DatasetValidationError,
)
from snapshots.file_store import FileDatasetStore

__all__ = [
    "DatasetStore",
    "Dataset",
    "DatasetSettings",
    "DatasetSummary",
    "DatasetError",
    "DatasetNotFoundError",
    "DatasetConflictError",
    "DatasetValidationError",
    "FileDatasetStore",
]
