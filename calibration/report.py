"""
Calibration Report

Bundles every projection of a rating distribution into one structure,
the single shape handed to the API layer.
"""

from typing import Any, List, Sequence
from pydantic import BaseModel, Field

from calibration.distribution import (
    calculate_distribution,
    calculate_distribution_stats,
    generate_bell_curve_data,
)
from calibration.targets import TargetSummary, summarize_targets
from schemas.rating import (
    DEVIATION_THRESHOLD,
    BellCurveDataPoint,
    DistributionStats,
    PercentageSplit,
    RatingDistribution,
    TargetInput,
)


class CalibrationReport(BaseModel):
    """
    Actual vs target view of one set of employees.
    """
    total_employees: int = Field(..., ge=0)
    deviation_threshold: float
    target_percentages: PercentageSplit
    targets: TargetSummary = Field(..., description="Whether the target split sums to 100")
    distribution: List[RatingDistribution] = Field(..., description="One bucket per rating, ascending")
    bell_curve: List[BellCurveDataPoint]
    stats: DistributionStats

    @property
    def deviating_ratings(self) -> List[int]:
        return [bucket.rating for bucket in self.distribution if bucket.has_deviation]


def build_report(
    employees: Sequence[Any],
    target_percentages: TargetInput,
    deviation_threshold: float = DEVIATION_THRESHOLD,
) -> CalibrationReport:
    """
    Compute distribution, chart points, statistics and target feedback.

    An invalid target split (sum != 100) is reported, never rejected.
    """
    targets = PercentageSplit.coerce(target_percentages)
    distribution = calculate_distribution(employees, targets, deviation_threshold)

    return CalibrationReport(
        total_employees=len(employees),
        deviation_threshold=deviation_threshold,
        target_percentages=targets,
        targets=summarize_targets(targets),
        distribution=distribution,
        bell_curve=generate_bell_curve_data(distribution, len(employees)),
        stats=calculate_distribution_stats(distribution),
    )
