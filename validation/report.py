"""
Import Report

Data structures for employee import validation.
"""

from typing import Any, List
from pydantic import BaseModel, Field

from schemas.employee import ImportedEmployee


class RowError(BaseModel):
    """A single problem found in an imported row."""
    row: int = Field(..., description="1-based row number for user display")
    field: str
    message: str
    value: Any = None


class ImportReport(BaseModel):
    """Outcome of validating a batch of imported rows."""
    valid_employees: List[ImportedEmployee] = Field(default_factory=list)
    errors: List[RowError] = Field(default_factory=list)

    @property
    def has_errors(self) -> bool:
        return bool(self.errors)

    @property
    def invalid_rows(self) -> List[int]:
        return sorted({error.row for error in self.errors})
