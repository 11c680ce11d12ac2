from typing import Any, Optional
from pydantic import BaseModel, Field, field_validator
from pydantic_core import PydanticCustomError

from schemas.rating import RATINGS, Rating

RATING_ERROR = "Rating must be 1, 2, 3, 4, or 5"


def parse_rating(value: Any) -> int:
    """
    Coerce an imported rating cell to an int in 1..5.

    Accepts ints, whole floats (spreadsheet cells) and numeric strings
    such as "3" or "3.0".
    """
    if isinstance(value, bool):
        raise PydanticCustomError("rating", RATING_ERROR)
    if isinstance(value, str):
        text = value.strip()
        try:
            value = float(text)
        except ValueError:
            raise PydanticCustomError("rating", RATING_ERROR)
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    if not isinstance(value, int) or value not in RATINGS:
        raise PydanticCustomError("rating", RATING_ERROR)
    return value


# --- Import Schemas ---

class ImportedEmployee(BaseModel):
    """
    Employee row as produced by a spreadsheet import.

    Text fields are required and trimmed.
    """
    employee_id: str = Field(..., description="Employee ID from import")
    name: str
    department: str
    manager: str
    rating: Rating = Field(..., description="Performance rating 1-5")

    @field_validator("employee_id", "name", "department", "manager", mode="before")
    @classmethod
    def _required_text(cls, value: Any, info) -> str:
        label = "Employee ID" if info.field_name == "employee_id" else info.field_name.capitalize()
        if value is None:
            raise PydanticCustomError("required", "{label} is required", {"label": label})
        text = str(value).strip()
        if not text:
            raise PydanticCustomError("required", "{label} is required", {"label": label})
        return text

    @field_validator("rating", mode="before")
    @classmethod
    def _rating(cls, value: Any) -> int:
        return parse_rating(value)


# --- Stored Employee ---

class Employee(BaseModel):
    """
    Employee held by the application.

    Only `rating` is read by the calibration core; the rest passes through.
    """
    id: str = Field(..., description="Store-assigned identifier")
    employee_id: str
    name: str
    department: str
    manager: str
    rating: Rating
    is_frozen: bool = Field(default=False, description="Frozen rows are not editable")

    @classmethod
    def from_import(cls, id: str, imported: ImportedEmployee) -> "Employee":
        return cls(id=id, is_frozen=False, **imported.model_dump())


class EmployeeUpdate(BaseModel):
    """Partial update; unset fields are left alone."""
    employee_id: Optional[str] = None
    name: Optional[str] = None
    department: Optional[str] = None
    manager: Optional[str] = None
    rating: Optional[Rating] = None
    is_frozen: Optional[bool] = None

    def changes(self) -> dict:
        return self.model_dump(exclude_unset=True, exclude_none=True)
