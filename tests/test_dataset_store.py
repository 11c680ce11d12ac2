"""
File Dataset Store Tests

Run: pytest tests/test_dataset_store.py
"""

import json

import pytest

from snapshots.file_store import FileDatasetStore
from snapshots.store import (
    DatasetConflictError,
    DatasetNotFoundError,
    DatasetSettings,
    DatasetValidationError,
)

from conftest import make_employee


@pytest.fixture
def store(tmp_path):
    return FileDatasetStore(path=str(tmp_path / "data" / "datasets.json"))


@pytest.fixture
def employees():
    return [make_employee(r, i) for i, r in enumerate([1, 3, 5])]


def test_save_and_load_roundtrip(store, employees):
    settings = DatasetSettings(deviation_threshold=4)

    summary = store.save("alice", "  Q1 review ", employees, settings)
    dataset = store.load("alice", summary.id)

    assert summary.name == "Q1 review"
    assert dataset.name == "Q1 review"
    assert dataset.employees == employees
    assert dataset.settings.deviation_threshold == 4
    assert dataset.settings.target_percentages.rating3 == 40


def test_list_newest_first(store, employees):
    first = store.save("alice", "first", employees, DatasetSettings())
    second = store.save("alice", "second", employees, DatasetSettings())

    assert [s.id for s in store.list("alice")] == [second.id, first.id]


def test_datasets_are_scoped_per_user(store, employees):
    summary = store.save("alice", "mine", employees, DatasetSettings())

    assert store.list("bob") == []
    with pytest.raises(DatasetNotFoundError):
        store.load("bob", summary.id)
    # same name is fine for another user
    store.save("bob", "mine", employees, DatasetSettings())


def test_duplicate_name_conflicts(store, employees):
    store.save("alice", "Q1", employees, DatasetSettings())

    with pytest.raises(DatasetConflictError):
        store.save("alice", " Q1 ", employees, DatasetSettings())


@pytest.mark.parametrize("name", ["", "   ", "x" * 101])
def test_invalid_names(store, employees, name):
    with pytest.raises(DatasetValidationError):
        store.save("alice", name, employees, DatasetSettings())


def test_name_at_length_limit(store, employees):
    assert store.save("alice", "x" * 100, employees, DatasetSettings()).name == "x" * 100


def test_employees_required(store):
    with pytest.raises(DatasetValidationError):
        store.save("alice", "empty", [], DatasetSettings())


def test_delete(store, employees):
    summary = store.save("alice", "gone", employees, DatasetSettings())

    store.delete("alice", summary.id)

    assert store.list("alice") == []
    with pytest.raises(DatasetNotFoundError):
        store.delete("alice", summary.id)


def test_persists_across_instances(tmp_path, employees):
    path = tmp_path / "datasets.json"
    FileDatasetStore(path=str(path)).save("alice", "kept", employees, DatasetSettings())

    reopened = FileDatasetStore(path=str(path))

    assert [s.name for s in reopened.list("alice")] == ["kept"]
    assert json.loads(path.read_text())["next_id"] == 2
