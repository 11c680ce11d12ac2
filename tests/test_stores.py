"""
Employee & Settings Store Tests

Run: pytest tests/test_stores.py
"""

import pytest
from pydantic import ValidationError

from schemas.employee import EmployeeUpdate
from schemas.rating import PercentageSplit
from store.employee_store import EmployeeStore
from store.errors import EmployeeFrozenError, EmployeeNotFoundError, EmptyUpdateError
from store.settings_store import SettingsStore, SettingsUpdate

from conftest import make_imported


@pytest.fixture
def employee_store():
    store = EmployeeStore()
    store.replace_all("alice", [
        make_imported(3, 1, department="Engineering", manager="Ada"),
        make_imported(4, 2, department="Sales", manager="Bob"),
        make_imported(3, 3, department="Engineering", manager="Bob"),
    ])
    return store


# --- EmployeeStore ---

def test_replace_all_assigns_ids(employee_store):
    employees = employee_store.list("alice")

    assert [e.employee_id for e in employees] == ["E001", "E002", "E003"]
    assert len({e.id for e in employees}) == 3
    assert not any(e.is_frozen for e in employees)


def test_replace_all_drops_previous_rows(employee_store):
    employee_store.replace_all("alice", [make_imported(5, 9)])

    assert [e.employee_id for e in employee_store.list("alice")] == ["E009"]


def test_users_are_isolated(employee_store):
    assert employee_store.list("bob") == []
    assert employee_store.count("alice") == 3


def test_filters_are_case_insensitive(employee_store):
    assert len(employee_store.list("alice", department="engin")) == 2
    assert len(employee_store.list("alice", manager="BOB")) == 2
    assert len(employee_store.list("alice", department="engineering", manager="bob")) == 1


def test_get_by_rating(employee_store):
    assert [e.employee_id for e in employee_store.get_by_rating("alice", 3)] == ["E001", "E003"]


def test_listed_employees_are_copies(employee_store):
    listed = employee_store.list("alice")
    listed[0].rating = 1

    assert employee_store.list("alice")[0].rating == 3


def test_update_rating(employee_store):
    target = employee_store.list("alice")[0]

    updated = employee_store.update("alice", target.id, EmployeeUpdate(rating=5))

    assert updated.rating == 5
    assert employee_store.get("alice", target.id).rating == 5


def test_update_unknown_employee(employee_store):
    with pytest.raises(EmployeeNotFoundError):
        employee_store.update("alice", "missing", EmployeeUpdate(rating=2))


def test_empty_update(employee_store):
    target = employee_store.list("alice")[0]

    with pytest.raises(EmptyUpdateError):
        employee_store.update("alice", target.id, EmployeeUpdate())


def test_frozen_employee_rejects_changes(employee_store):
    """
    Test: frozen → rating locked, unfreezing allowed
    """
    target = employee_store.list("alice")[0]
    frozen = employee_store.toggle_freeze("alice", target.id)
    assert frozen.is_frozen is True

    with pytest.raises(EmployeeFrozenError):
        employee_store.update("alice", target.id, EmployeeUpdate(rating=1))
    assert employee_store.get("alice", target.id).rating == 3

    unfrozen = employee_store.update("alice", target.id, EmployeeUpdate(is_frozen=False))
    assert unfrozen.is_frozen is False


def test_toggle_freeze_twice(employee_store):
    target = employee_store.list("alice")[1]

    employee_store.toggle_freeze("alice", target.id)
    again = employee_store.toggle_freeze("alice", target.id)

    assert again.is_frozen is False


def test_clear(employee_store):
    employee_store.clear("alice")

    assert employee_store.list("alice") == []


# --- SettingsStore ---

def test_settings_defaults():
    settings = SettingsStore().get("alice")

    assert settings.target_percentages.as_dict() == {1: 10, 2: 20, 3: 40, 4: 20, 5: 10}
    assert settings.deviation_threshold == 2
    assert settings.theme == "light"


def test_settings_default_threshold_is_configurable():
    assert SettingsStore(default_threshold=5).get("alice").deviation_threshold == 5


def test_set_target_percentage_leaves_others():
    store = SettingsStore()

    settings = store.set_target_percentage("alice", 2, 35)

    assert settings.target_percentages.as_dict() == {1: 10, 2: 35, 3: 40, 4: 20, 5: 10}
    assert store.get("alice").target_percentages.rating2 == 35
    assert store.get("bob").target_percentages.rating2 == 20


def test_partial_update():
    store = SettingsStore()

    updated = store.update("alice", SettingsUpdate(deviation_threshold=5, theme="dark"))

    assert updated.deviation_threshold == 5
    assert updated.theme == "dark"
    assert updated.target_percentages.rating3 == 40


def test_invalid_split_is_stored():
    store = SettingsStore()
    split = PercentageSplit(rating1=30, rating2=20, rating3=40, rating4=20, rating5=10)

    updated = store.update("alice", SettingsUpdate(target_percentages=split))

    assert updated.target_percentages == split


def test_empty_settings_update():
    with pytest.raises(EmptyUpdateError):
        SettingsStore().update("alice", SettingsUpdate())


def test_negative_threshold_rejected():
    with pytest.raises(ValidationError):
        SettingsUpdate(deviation_threshold=-1)


def test_reset_keeps_theme():
    store = SettingsStore()
    store.update("alice", SettingsUpdate(deviation_threshold=7, theme="dark"))
    store.set_target_percentage("alice", 1, 50)

    reset = store.reset("alice")

    assert reset.target_percentages.rating1 == 10
    assert reset.deviation_threshold == 2
    assert reset.theme == "dark"
