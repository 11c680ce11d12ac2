"""
Target Percentage Validator

Consistency rules for the target split: the five targets must sum to
exactly 100 before a configuration counts as valid.

Validity is advisory. Nothing here rejects a configuration, and the
distribution calculator accepts splits of any sum.
"""

from enum import Enum
from pydantic import BaseModel, Field

from schemas.rating import RATINGS, PercentageSplit, TargetInput, default_percentages

TARGET_TOTAL = 100


class TargetStatus(str, Enum):
    """Where the target sum stands relative to 100."""
    VALID = "valid"
    UNDER = "under"
    OVER = "over"


class TargetSummary(BaseModel):
    """Feedback for the percentage editor."""
    total: float = Field(..., description="Raw sum of the five targets")
    is_valid: bool = Field(..., description="True iff total == 100")
    status: TargetStatus
    remaining: float = Field(0.0, description="Points still to allocate when under 100")
    overage: float = Field(0.0, description="Points allocated beyond 100")


def get_sum(config: TargetInput) -> float:
    """Raw floating sum of the five targets, in rating order."""
    split = PercentageSplit.coerce(config)
    total = 0
    for rating in RATINGS:
        total += split.for_rating(rating)
    return total


def is_valid(config: TargetInput) -> bool:
    """Exact equality with 100, no tolerance."""
    return get_sum(config) == TARGET_TOTAL


def get_status(config: TargetInput) -> TargetStatus:
    total = get_sum(config)
    if total == TARGET_TOTAL:
        return TargetStatus.VALID
    if total < TARGET_TOTAL:
        return TargetStatus.UNDER
    return TargetStatus.OVER


def summarize_targets(config: TargetInput) -> TargetSummary:
    """
    Summarize a configuration for user feedback.

    Args:
        config: Target split to inspect

    Returns:
        TargetSummary with the sum, validity and remaining/overage points
    """
    total = get_sum(config)
    return TargetSummary(
        total=total,
        is_valid=total == TARGET_TOTAL,
        status=get_status(config),
        remaining=max(TARGET_TOTAL - total, 0),
        overage=max(total - TARGET_TOTAL, 0),
    )


def update_target_percentage(config: TargetInput, rating: int, percentage: float) -> PercentageSplit:
    """
    Replace the target of a single rating.

    The other four targets are left untouched; the split is not
    renormalized, so the sum may drift away from 100.

    Returns:
        A new PercentageSplit; the input is not modified
    """
    if rating not in RATINGS:
        raise ValueError(f"Rating must be one of {RATINGS}, got {rating}")
    split = PercentageSplit.coerce(config)
    return PercentageSplit.model_validate({**split.model_dump(), PercentageSplit.slot(rating): percentage})


def reset_to_default() -> PercentageSplit:
    return default_percentages()
