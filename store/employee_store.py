"""
Employee Store

In-memory employee lists, one per user.

DESIGN RULES:
- Owned by the application layer, passed to the core as plain lists
- Returned employees are copies; callers cannot mutate stored state
- Frozen employees only accept a change to their frozen flag

Thread-safe for concurrent access.
"""

import logging
import uuid
from threading import Lock
from typing import Dict, List, Optional, Sequence

from schemas.employee import Employee, EmployeeUpdate, ImportedEmployee
from store.errors import EmployeeFrozenError, EmployeeNotFoundError, EmptyUpdateError


logger = logging.getLogger(__name__)


def _matches(value: str, needle: Optional[str]) -> bool:
    if not needle:
        return True
    return needle.strip().lower() in value.lower()


class EmployeeStore:
    """
    In-memory employee store keyed by user_id.

    NOT persistent - data lives only in process memory. Named snapshots
    are the job of the dataset store.
    """

    def __init__(self):
        self._employees: Dict[str, List[Employee]] = {}
        self._lock = Lock()

    def list(
        self,
        user_id: str,
        department: Optional[str] = None,
        manager: Optional[str] = None,
    ) -> List[Employee]:
        """
        List a user's employees in import order.

        Args:
            user_id: Owner of the list
            department: Case-insensitive substring filter
            manager: Case-insensitive substring filter

        Returns:
            Copies of the matching employees
        """
        with self._lock:
            employees = self._employees.get(user_id, [])
            return [
                e.model_copy()
                for e in employees
                if _matches(e.department, department) and _matches(e.manager, manager)
            ]

    def get(self, user_id: str, employee_id: str) -> Employee:
        with self._lock:
            return self._find(user_id, employee_id).model_copy()

    def get_by_rating(self, user_id: str, rating: int) -> List[Employee]:
        return [e for e in self.list(user_id) if e.rating == rating]

    def replace_all(self, user_id: str, imported: Sequence[ImportedEmployee]) -> List[Employee]:
        """
        Replace every employee of a user (bulk import).

        New ids are assigned and every row starts unfrozen.
        """
        employees = [Employee.from_import(str(uuid.uuid4()), row) for row in imported]
        with self._lock:
            self._employees[user_id] = employees
        logger.info(f"[{user_id}] Imported {len(employees)} employees")
        return [e.model_copy() for e in employees]

    def set_employees(self, user_id: str, employees: Sequence[Employee]) -> List[Employee]:
        """Store employees as given, ids and frozen flags included."""
        copies = [e.model_copy() for e in employees]
        with self._lock:
            self._employees[user_id] = copies
        return [e.model_copy() for e in copies]

    def update(self, user_id: str, employee_id: str, update: EmployeeUpdate) -> Employee:
        """
        Apply a partial update to one employee.

        Raises:
            EmptyUpdateError: update sets nothing
            EmployeeNotFoundError: unknown id
            EmployeeFrozenError: employee is frozen and the update touches
                anything besides `is_frozen`
        """
        changes = update.changes()
        if not changes:
            raise EmptyUpdateError()

        with self._lock:
            current = self._find(user_id, employee_id)
            freeze_flag_only = set(changes) == {"is_frozen"}
            if current.is_frozen and not freeze_flag_only:
                raise EmployeeFrozenError(employee_id)

            updated = current.model_copy(update=changes)
            self._replace(user_id, updated)

        if "rating" in changes and changes["rating"] != current.rating:
            logger.info(f"[{user_id}] Employee {employee_id} rating {current.rating} -> {updated.rating}")
        return updated.model_copy()

    def toggle_freeze(self, user_id: str, employee_id: str) -> Employee:
        with self._lock:
            current = self._find(user_id, employee_id)
            updated = current.model_copy(update={"is_frozen": not current.is_frozen})
            self._replace(user_id, updated)
        return updated.model_copy()

    def clear(self, user_id: str) -> None:
        with self._lock:
            self._employees.pop(user_id, None)
        logger.info(f"[{user_id}] Cleared all employees")

    def count(self, user_id: str) -> int:
        with self._lock:
            return len(self._employees.get(user_id, []))

    def _find(self, user_id: str, employee_id: str) -> Employee:
        """Lookup (internal, caller holds the lock)."""
        for employee in self._employees.get(user_id, []):
            if employee.id == employee_id:
                return employee
        raise EmployeeNotFoundError(employee_id)

    def _replace(self, user_id: str, updated: Employee) -> None:
        employees = self._employees[user_id]
        for index, employee in enumerate(employees):
            if employee.id == updated.id:
                employees[index] = updated
                return
