# Calibration Package
from calibration.distribution import (
    calculate_distribution,
    generate_bell_curve_data,
    calculate_distribution_stats,
)
from calibration.targets import (
    TargetStatus,
    TargetSummary,
    get_sum,
    is_valid,
    summarize_targets,
    update_target_percentage,
    reset_to_default,
)
from calibration.report import CalibrationReport, build_report

__all__ = [
    "calculate_distribution",
    "generate_bell_curve_data",
    "calculate_distribution_stats",
    "TargetStatus",
    "TargetSummary",
    "get_sum",
    "is_valid",
    "summarize_targets",
    "update_target_percentage",
    "reset_to_default",
    "CalibrationReport",
    "build_report",
]
