"""
Target Percentage Validator Tests

Run: pytest tests/test_targets.py
"""

import pytest

from calibration.targets import (
    TargetStatus,
    get_status,
    get_sum,
    is_valid,
    reset_to_default,
    summarize_targets,
    update_target_percentage,
)
from schemas.rating import PercentageSplit


def test_default_split_is_valid(default_targets):
    assert get_sum(default_targets) == 100
    assert is_valid(default_targets) is True
    assert get_status(default_targets) == TargetStatus.VALID


def test_overage_is_reported():
    """
    Test: 30/20/40/20/10 → sum 120, invalid, overage 20
    """
    config = PercentageSplit(rating1=30, rating2=20, rating3=40, rating4=20, rating5=10)

    summary = summarize_targets(config)

    assert get_sum(config) == 120
    assert is_valid(config) is False
    assert summary.status == TargetStatus.OVER
    assert summary.overage == 20
    assert summary.remaining == 0


def test_remaining_is_reported():
    summary = summarize_targets({1: 10, 2: 20, 3: 30, 4: 20, 5: 10})

    assert summary.total == 90
    assert summary.is_valid is False
    assert summary.status == TargetStatus.UNDER
    assert summary.remaining == 10
    assert summary.overage == 0


def test_validity_is_exact():
    """
    Test: no tolerance around 100
    """
    config = {1: 10, 2: 20, 3: 40.001, 4: 20, 5: 10}

    assert is_valid(config) is False
    assert get_status(config) == TargetStatus.OVER


def test_update_replaces_one_slot_only(default_targets):
    updated = update_target_percentage(default_targets, 1, 30)

    assert updated.as_dict() == {1: 30, 2: 20, 3: 40, 4: 20, 5: 10}
    assert get_sum(updated) == 120
    assert is_valid(updated) is False
    # input left alone
    assert default_targets.rating1 == 10


def test_rebalancing_is_manual(default_targets):
    """
    Test: validity returns only once the user rebalances another slot
    """
    raised = update_target_percentage(default_targets, 1, 30)
    rebalanced = update_target_percentage(raised, 3, 20)

    assert is_valid(raised) is False
    assert is_valid(rebalanced) is True


def test_sum_independent_of_update_order(default_targets):
    a = update_target_percentage(update_target_percentage(default_targets, 1, 25), 5, 5)
    b = update_target_percentage(update_target_percentage(default_targets, 5, 5), 1, 25)

    assert get_sum(a) == get_sum(b) == 110
    assert a == b


def test_update_rejects_unknown_rating(default_targets):
    with pytest.raises(ValueError):
        update_target_percentage(default_targets, 6, 10)


def test_reset_to_default():
    assert reset_to_default().as_dict() == {1: 10, 2: 20, 3: 40, 4: 20, 5: 10}


def test_update_coerces_numeric_strings(default_targets):
    updated = update_target_percentage(default_targets, 1, "30")

    assert updated.rating1 == 30.0
    assert isinstance(updated.rating1, float)
    assert get_sum(updated) == 120
