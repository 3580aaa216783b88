# tests/test_demographic_tier.py
import pytest

from app.domain.scoring import _truncate_score, demographic_score, demographic_tier


@pytest.mark.parametrize(
    "population,income,home_value,tier",
    [
        (1_000_000, 100_000, 500_000, 1),  # 100
        (500_000, 80_000, 100_000, 2),  # 62.5
        (500_000, 40_000, 100_000, 3),  # 50
        (250_000, 40_000, 0, 4),  # 25
        (125_000, 20_000, 0, 5),  # 12.5
        (0, 0, 0, 5),
    ],
)
def test_tier_ranges(population, income, home_value, tier):
    assert demographic_tier(population, income, home_value) == tier


def test_score_is_truncated_before_thresholding():
    # 59.999875 truncates to 59
    assert demographic_score(500_000, 80_000, 79_999) == pytest.approx(59.999875)
    assert demographic_tier(500_000, 80_000, 79_999) == 3
    assert demographic_tier(500_000, 80_000, 80_000) == 2


def test_truncation_is_toward_zero_and_saturating():
    assert _truncate_score(79.9) == 79
    assert _truncate_score(-0.5) == 0
    assert _truncate_score(-20.7) == -20
    assert _truncate_score(float("nan")) == 0
    assert _truncate_score(float("inf")) == 2**31 - 1
    assert _truncate_score(float("-inf")) == -(2**31)


def test_home_value_carries_half_the_weight():
    assert demographic_score(0, 0, 400_000) == 50.0
    assert demographic_score(500_000, 80_000, 0) == 50.0


def test_negative_inputs_fall_to_avoid():
    assert demographic_score(-500_000, 0, 0) == -25.0
    assert demographic_tier(-500_000, 0, 0) == 5


def test_nan_inputs_fall_to_avoid():
    assert demographic_tier(float("nan"), float("nan"), float("nan")) == 5


def test_oversized_ints_saturate_instead_of_raising():
    assert demographic_score(10**400, 0, 0) == 25.0
    assert demographic_tier(10**400, 0, 0) == 4
    assert demographic_score(-10**400, 0, 0) == -25.0
    assert demographic_tier(0, 0, -10**400) == 5
