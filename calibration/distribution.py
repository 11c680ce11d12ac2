"""
Distribution Calculator

Compares the actual rating distribution of a set of employees with a
target percentage split.

DESIGN RULES:
- Pure functions, no side effects
- Inputs are never mutated
- Always 5 buckets, ratings 1..5 ascending, zero counts included
"""

import math
from typing import Any, List, Mapping, Sequence

from schemas.rating import (
    RATINGS,
    DEVIATION_THRESHOLD,
    BellCurveDataPoint,
    DistributionStats,
    PercentageSplit,
    RatingDistribution,
    TargetInput,
)


def _rating_of(employee: Any) -> Any:
    """Read the rating from a model instance or a plain mapping."""
    if isinstance(employee, Mapping):
        return employee.get("rating")
    return getattr(employee, "rating", None)


def calculate_distribution(
    employees: Sequence[Any],
    target_percentages: TargetInput,
    deviation_threshold: float = DEVIATION_THRESHOLD,
) -> List[RatingDistribution]:
    """
    Calculate the distribution of employees across ratings
    and compare it with the target percentages.

    Ratings outside 1..5 land in no bucket but still count towards the
    total, so percentages stay relative to the full employee list.

    An empty employee list still yields 5 buckets; each deviation is the
    negated target and is flagged like any other deviation.

    Args:
        employees: Records exposing a `rating` (attribute or key)
        target_percentages: PercentageSplit or mapping of rating -> percent
        deviation_threshold: Percentage points above which a bucket is flagged

    Returns:
        List of 5 RatingDistribution, ordered by rating
    """
    targets = PercentageSplit.coerce(target_percentages)
    ratings = [_rating_of(e) for e in employees]
    total = len(ratings)

    distribution = []
    for rating in RATINGS:
        actual_count = sum(1 for r in ratings if r == rating)
        actual_percentage = (actual_count / total) * 100 if total else 0
        target_percentage = targets.for_rating(rating)
        deviation = actual_percentage - target_percentage

        distribution.append(RatingDistribution(
            rating=rating,
            actual_count=actual_count,
            actual_percentage=actual_percentage,
            target_percentage=target_percentage,
            deviation=deviation,
            has_deviation=abs(deviation) > deviation_threshold,
        ))

    return distribution


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def generate_bell_curve_data(
    distribution: Sequence[RatingDistribution],
    total_employees: int,
) -> List[BellCurveDataPoint]:
    """
    Generate bell curve data points for visualization.

    target_count is the target share of `total_employees`, rounded to the
    nearest whole employee (halves round up).
    """
    return [
        BellCurveDataPoint(
            rating=bucket.rating,
            actual_count=bucket.actual_count,
            target_count=_round_half_up(bucket.target_percentage / 100 * total_employees),
            has_deviation=bucket.has_deviation,
        )
        for bucket in distribution
    ]


def calculate_distribution_stats(distribution: Sequence[RatingDistribution]) -> DistributionStats:
    """
    Calculate mean, median, mode and total absolute deviation.

    - mean: count-weighted average rating, 0 when nobody is rated
    - mode: rating with the highest count, lowest rating wins ties
    - median: fixed at 3, the midpoint of the scale
    - total_deviation: sum of |deviation| over all buckets
    """
    total = sum(bucket.actual_count for bucket in distribution)
    weighted_sum = sum(bucket.rating * bucket.actual_count for bucket in distribution)
    mean = weighted_sum / total if total > 0 else 0

    mode = 3
    if distribution:
        max_count = max(bucket.actual_count for bucket in distribution)
        mode = next(bucket.rating for bucket in distribution if bucket.actual_count == max_count)

    # Midpoint of the 1-5 scale, not derived from the counts
    median = 3

    total_deviation = sum(abs(bucket.deviation) for bucket in distribution)

    return DistributionStats(
        mean=mean,
        median=median,
        mode=mode,
        total_deviation=total_deviation,
    )
