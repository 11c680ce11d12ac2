"""
Employee Import Validator

Normalizes spreadsheet headers and validates rows before they reach
the employee store.

DESIGN RULES:
- One bad row never rejects the batch
- Every problem is reported with its 1-based row number
- Unknown columns pass through untouched
"""

import logging
from typing import Any, Dict, List, Mapping, Sequence

from pydantic import ValidationError

from schemas.employee import ImportedEmployee
from validation.report import ImportReport, RowError


logger = logging.getLogger(__name__)

# Lower-cased, trimmed header -> canonical field name
COLUMN_MAPPING: Dict[str, str] = {
    "employee id": "employee_id",
    "employeeid": "employee_id",
    "employee_id": "employee_id",
    "emp_id": "employee_id",
    "id": "employee_id",

    "name": "name",
    "employee name": "name",
    "fullname": "name",
    "full_name": "name",

    "department": "department",
    "dept": "department",
    "dep": "department",

    "manager": "manager",
    "supervisor": "manager",
    "manager name": "manager",

    "rating": "rating",
    "performance rating": "rating",
    "score": "rating",
    "performance score": "rating",
}


def normalize_columns(rows: Sequence[Mapping[str, Any]]) -> List[Dict[str, Any]]:
    """
    Map header variants ("Employee ID", "EmployeeID", "emp_id", ...) to
    canonical field names.

    Returns:
        New row dicts; the input rows are not modified
    """
    normalized = []
    for row in rows:
        out: Dict[str, Any] = {}
        for key, value in row.items():
            mapped = COLUMN_MAPPING.get(str(key).strip().lower(), key)
            out[mapped] = value
        normalized.append(out)
    return normalized


def validate_employees(rows: Sequence[Mapping[str, Any]]) -> ImportReport:
    """
    Validate normalized rows.

    Args:
        rows: Row dicts with canonical field names

    Returns:
        ImportReport with the valid employees and per-field row errors
    """
    report = ImportReport()

    for index, row in enumerate(rows, start=1):
        try:
            report.valid_employees.append(ImportedEmployee.model_validate(row))
        except ValidationError as e:
            for issue in e.errors():
                field = ".".join(str(part) for part in issue["loc"]) or "unknown"
                root = issue["loc"][0] if issue["loc"] else None
                report.errors.append(RowError(
                    row=index,
                    field=field,
                    message=issue["msg"],
                    value=row.get(root) if isinstance(root, str) else None,
                ))

    logger.info(
        f"Validated {len(rows)} rows: {len(report.valid_employees)} valid, "
        f"{len(report.invalid_rows)} with errors"
    )
    return report


def import_rows(rows: Sequence[Mapping[str, Any]]) -> ImportReport:
    """Normalize headers, then validate."""
    return validate_employees(normalize_columns(rows))
