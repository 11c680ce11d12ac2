"""
Distribution API Route

Thin delegation layer to calibration.report.
Contains NO calculation logic.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field

from app.dependencies import get_employee_store, get_settings_store, get_user_id
from calibration.report import CalibrationReport, build_report
from schemas.rating import PercentageSplit, Rating
from store.employee_store import EmployeeStore
from store.settings_store import SettingsStore


router = APIRouter(tags=["distribution"])


class RatedRecord(BaseModel):
    """Any record carrying a rating; other fields are ignored."""
    rating: Rating


class DistributionRequest(BaseModel):
    """Stateless distribution request."""
    employees: List[RatedRecord] = Field(default_factory=list)
    target_percentages: Optional[PercentageSplit] = Field(
        default=None, description="Defaults to the caller's stored targets"
    )
    deviation_threshold: Optional[float] = Field(
        default=None, ge=0, description="Defaults to the caller's stored threshold"
    )


@router.post("/distribution", response_model=CalibrationReport)
def compute_distribution(
    request: DistributionRequest,
    user_id: str = Depends(get_user_id),
    settings_store: SettingsStore = Depends(get_settings_store),
) -> CalibrationReport:
    """
    Compare the given ratings with a target split.

    Nothing is stored; omitted targets and threshold come from the
    caller's settings.
    """
    user_settings = settings_store.get(user_id)
    targets = request.target_percentages or user_settings.target_percentages
    threshold = (
        request.deviation_threshold
        if request.deviation_threshold is not None
        else user_settings.deviation_threshold
    )
    return build_report(request.employees, targets, threshold)


@router.get("/distribution", response_model=CalibrationReport)
def current_distribution(
    department: Optional[str] = None,
    manager: Optional[str] = None,
    user_id: str = Depends(get_user_id),
    employee_store: EmployeeStore = Depends(get_employee_store),
    settings_store: SettingsStore = Depends(get_settings_store),
) -> CalibrationReport:
    """Report over the caller's stored employees, optionally filtered."""
    employees = employee_store.list(user_id, department=department, manager=manager)
    user_settings = settings_store.get(user_id)
    return build_report(
        employees,
        user_settings.target_percentages,
        user_settings.deviation_threshold,
    )
