"""
Employees API Route

CRUD over the caller's employee list. Import rows are normalized and
validated here before they replace the stored list.
"""

import logging
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field

from app.dependencies import get_employee_store, get_user_id
from schemas.employee import Employee, EmployeeUpdate
from store.employee_store import EmployeeStore
from validation.employee_validator import import_rows
from validation.report import RowError


logger = logging.getLogger(__name__)

router = APIRouter(prefix="/employees", tags=["employees"])


class EmployeeListResponse(BaseModel):
    employees: List[Employee]


class ImportRequest(BaseModel):
    """Parsed spreadsheet rows, headers as they appear in the file."""
    rows: List[Dict[str, Any]] = Field(..., description="One dict per spreadsheet row")


class ImportResponse(BaseModel):
    employees: List[Employee] = Field(..., description="Stored list after the import")
    errors: List[RowError] = Field(default_factory=list, description="Rows that were skipped and why")


@router.get("", response_model=EmployeeListResponse)
def list_employees(
    department: Optional[str] = None,
    manager: Optional[str] = None,
    user_id: str = Depends(get_user_id),
    store: EmployeeStore = Depends(get_employee_store),
) -> EmployeeListResponse:
    return EmployeeListResponse(employees=store.list(user_id, department=department, manager=manager))


@router.post("/import", response_model=ImportResponse)
def import_employees(
    request: ImportRequest,
    user_id: str = Depends(get_user_id),
    store: EmployeeStore = Depends(get_employee_store),
) -> ImportResponse:
    """
    Replace the caller's employees with the valid imported rows.

    Invalid rows are skipped and reported; they never block the import.
    An import without a single valid row leaves the stored list untouched.
    """
    report = import_rows(request.rows)
    if not report.valid_employees:
        # Nothing usable in the file; keep what is already stored
        logger.warning(f"[{user_id}] No valid employees in import of {len(request.rows)} rows")
        return ImportResponse(employees=store.list(user_id), errors=report.errors)

    employees = store.replace_all(user_id, report.valid_employees)
    return ImportResponse(employees=employees, errors=report.errors)


@router.put("/{employee_id}", response_model=Employee)
def update_employee(
    employee_id: str,
    update: EmployeeUpdate,
    user_id: str = Depends(get_user_id),
    store: EmployeeStore = Depends(get_employee_store),
) -> Employee:
    return store.update(user_id, employee_id, update)


@router.patch("/{employee_id}/freeze", response_model=Employee)
def toggle_freeze(
    employee_id: str,
    user_id: str = Depends(get_user_id),
    store: EmployeeStore = Depends(get_employee_store),
) -> Employee:
    return store.toggle_freeze(user_id, employee_id)


@router.delete("")
def delete_employees(
    user_id: str = Depends(get_user_id),
    store: EmployeeStore = Depends(get_employee_store),
) -> Dict[str, str]:
    store.clear(user_id)
    return {"message": "All employees deleted"}
