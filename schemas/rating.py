from typing import Dict, Literal, Mapping, Union
from pydantic import BaseModel, Field

# --- Rating Scale ---

Rating = Literal[1, 2, 3, 4, 5]

# Ascending order is part of every contract that iterates ratings
RATINGS = (1, 2, 3, 4, 5)

# Deviation threshold for highlighting (percentage points)
DEVIATION_THRESHOLD = 2.0


# --- Target Configuration ---

class PercentageSplit(BaseModel):
    """
    Target percentage split across all 5 ratings.

    No bounds are enforced here; whether the split sums to 100 is
    answered by calibration.targets, never by this model.
    """
    rating1: float = Field(..., description="Target share of rating 1, in percent")
    rating2: float = Field(..., description="Target share of rating 2, in percent")
    rating3: float = Field(..., description="Target share of rating 3, in percent")
    rating4: float = Field(..., description="Target share of rating 4, in percent")
    rating5: float = Field(..., description="Target share of rating 5, in percent")

    @staticmethod
    def slot(rating: int) -> str:
        """Field name holding the target for a rating."""
        return f"rating{rating}"

    def for_rating(self, rating: int) -> float:
        return getattr(self, self.slot(rating))

    def as_dict(self) -> Dict[int, float]:
        """Targets keyed by rating integer, ascending."""
        return {rating: self.for_rating(rating) for rating in RATINGS}

    @classmethod
    def coerce(cls, value: "TargetInput") -> "PercentageSplit":
        """
        Accept a PercentageSplit or a mapping keyed by rating int or slot name.

        Args:
            value: {1: 10, ...}, {"rating1": 10, ...} or a PercentageSplit

        Returns:
            PercentageSplit
        """
        if isinstance(value, cls):
            return value
        data = {}
        for key, pct in value.items():
            name = cls.slot(key) if isinstance(key, int) else str(key)
            data[name] = pct
        return cls(**data)


TargetInput = Union[PercentageSplit, Mapping[Union[int, str], float]]


def default_percentages() -> PercentageSplit:
    """Default bell-shaped split: 10/20/40/20/10."""
    return PercentageSplit(rating1=10, rating2=20, rating3=40, rating4=20, rating5=10)


DEFAULT_PERCENTAGES = default_percentages()


# --- Distribution Schemas ---

class RatingDistribution(BaseModel):
    """
    Actual vs target breakdown for a single rating bucket.
    """
    rating: int = Field(..., ge=1, le=5, description="Rating this bucket covers")
    actual_count: int = Field(..., ge=0, description="Employees holding this rating")
    actual_percentage: float = Field(..., description="actual_count / total * 100, 0 when total is 0")
    target_percentage: float = Field(..., description="Configured target for this rating")
    deviation: float = Field(..., description="actual_percentage - target_percentage")
    has_deviation: bool = Field(..., description="|deviation| > deviation threshold")


class BellCurveDataPoint(BaseModel):
    """Chart-ready point comparing actual and target head counts."""
    rating: int
    actual_count: int
    target_count: int
    has_deviation: bool


class DistributionStats(BaseModel):
    """
    Summary statistics over a distribution.

    `median` is always 3: it is a fixed midpoint of the scale, not a
    median computed from the data.
    """
    mean: float = 0.0
    median: float = 3
    mode: int = 3
    total_deviation: float = 0.0
