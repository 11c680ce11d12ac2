# Store Package
from store.errors import StoreError, EmployeeNotFoundError, EmployeeFrozenError, EmptyUpdateError
from store.employee_store import EmployeeStore
from store.settings_store import SettingsStore, UserSettings, SettingsUpdate

__all__ = [
    "StoreError",
    "EmployeeNotFoundError",
    "EmployeeFrozenError",
    "EmptyUpdateError",
    "EmployeeStore",
    "SettingsStore",
    "UserSettings",
    "SettingsUpdate",
]
