"""
File-based Dataset Store

Single JSON document holding every user's saved datasets.
Human-readable, easy to inspect, no database required.

Layout:
    {"next_id": 3, "datasets": [{"id": 1, "user_id": "...", ...}, ...]}
"""

import json
import logging
from datetime import datetime, timezone
from pathlib import Path
from threading import Lock
from typing import Any, Dict, List, Optional, Sequence

from snapshots.store import (
    MAX_NAME_LENGTH,
    Dataset,
    DatasetConflictError,
    DatasetNotFoundError,
    DatasetSettings,
    DatasetStore,
    DatasetSummary,
    DatasetValidationError,
    clean_name,
)
from schemas.employee import Employee


logger = logging.getLogger(__name__)


class FileDatasetStore(DatasetStore):
    """
    JSON file-based dataset storage.

    Every write rewrites the whole file; fine for the handful of
    snapshots an administrator keeps.
    """

    DEFAULT_PATH = "datasets.json"

    def __init__(self, path: Optional[str] = None, max_name_length: int = MAX_NAME_LENGTH):
        """
        Initialize file store.

        Args:
            path: Path to the JSON file. Defaults to 'datasets.json' in cwd.
            max_name_length: Longest accepted dataset name
        """
        self._path = Path(path or self.DEFAULT_PATH)
        self._max_name_length = max_name_length
        self._lock = Lock()

        # Ensure parent directory exists
        self._path.parent.mkdir(parents=True, exist_ok=True)

    def list(self, user_id: str) -> List[DatasetSummary]:
        with self._lock:
            records = self._read()["datasets"]
        summaries = [
            DatasetSummary(id=r["id"], name=r["name"], created_at=r["created_at"])
            for r in records
            if r["user_id"] == user_id
        ]
        return sorted(summaries, key=lambda s: (s.created_at, s.id), reverse=True)

    def save(
        self,
        user_id: str,
        name: str,
        employees: Sequence[Employee],
        settings: DatasetSettings,
    ) -> DatasetSummary:
        cleaned = clean_name(name, self._max_name_length)
        if not employees:
            raise DatasetValidationError("Employees data is required")

        with self._lock:
            data = self._read()
            if any(r["user_id"] == user_id and r["name"] == cleaned for r in data["datasets"]):
                raise DatasetConflictError(cleaned)

            dataset = Dataset(
                id=data["next_id"],
                name=cleaned,
                created_at=datetime.now(timezone.utc),
                employees=list(employees),
                settings=settings,
            )
            record = dataset.model_dump(mode="json")
            record["user_id"] = user_id
            data["datasets"].append(record)
            data["next_id"] += 1
            self._write(data)

        logger.info(f"[{user_id}] Saved dataset {dataset.id} '{cleaned}' ({len(employees)} employees)")
        return dataset.summary()

    def load(self, user_id: str, dataset_id: int) -> Dataset:
        with self._lock:
            record = self._find(self._read(), user_id, dataset_id)
        return Dataset.model_validate({k: v for k, v in record.items() if k != "user_id"})

    def delete(self, user_id: str, dataset_id: int) -> None:
        with self._lock:
            data = self._read()
            record = self._find(data, user_id, dataset_id)
            data["datasets"].remove(record)
            self._write(data)
        logger.info(f"[{user_id}] Deleted dataset {dataset_id}")

    def _find(self, data: Dict[str, Any], user_id: str, dataset_id: int) -> Dict[str, Any]:
        for record in data["datasets"]:
            if record["id"] == dataset_id and record["user_id"] == user_id:
                return record
        raise DatasetNotFoundError(dataset_id)

    def _read(self) -> Dict[str, Any]:
        """Read the whole document (internal, caller holds the lock)."""
        if not self._path.exists():
            return {"next_id": 1, "datasets": []}
        with open(self._path, "r", encoding="utf-8") as f:
            return json.load(f)

    def _write(self, data: Dict[str, Any]) -> None:
        tmp = self._path.with_suffix(self._path.suffix + ".tmp")
        with open(tmp, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2)
        tmp.replace(self._path)
