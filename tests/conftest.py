import sys
from pathlib import Path

import pytest

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from schemas.employee import Employee, ImportedEmployee
from schemas.rating import default_percentages


def make_employee(rating: int, index: int = 0, **overrides) -> Employee:
    """Build a stored employee with predictable identity fields."""
    fields = dict(
        id=f"emp-{index}",
        employee_id=f"E{index:03d}",
        name=f"Employee {index}",
        department="Engineering",
        manager="Ada",
        rating=rating,
        is_frozen=False,
    )
    fields.update(overrides)
    return Employee(**fields)


def make_imported(rating: int, index: int = 0, **overrides) -> ImportedEmployee:
    fields = dict(
        employee_id=f"E{index:03d}",
        name=f"Employee {index}",
        department="Engineering",
        manager="Ada",
        rating=rating,
    )
    fields.update(overrides)
    return ImportedEmployee(**fields)


@pytest.fixture
def default_targets():
    return default_percentages()


@pytest.fixture
def sample_employees():
    """Two 1s, one 2, three 3s, one 4, one 5."""
    ratings = [1, 1, 2, 3, 3, 3, 4, 5]
    return [make_employee(r, i) for i, r in enumerate(ratings)]
