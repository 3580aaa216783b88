# tests/test_numbers.py
import math

from app.domain.numbers import I64_MAX, round_half_away, to_int


def test_to_int_accepts_plain_integers():
    assert to_int("1793561") == 1793561
    assert to_int("+12") == 12
    assert to_int("-5") == -5
    assert to_int(42) == 42


def test_to_int_falls_back_on_anything_else():
    assert to_int(None) == 0
    assert to_int("") == 0
    assert to_int("N/A") == 0
    assert to_int("12.5", default=-1) == -1
    assert to_int(" 12") == 0
    assert to_int("12\n") == 0
    assert to_int("1_000") == 0
    assert to_int(12.7) == 0
    assert to_int(True) == 0


def test_to_int_is_bounded_to_i64():
    assert to_int(str(I64_MAX)) == I64_MAX
    assert to_int(I64_MAX) == I64_MAX
    assert to_int(str(2**63)) == 0
    assert to_int(str(-(2**63) - 1), default=-1) == -1
    assert to_int("9" * 400) == 0


def test_round_half_away_from_zero():
    assert round_half_away(2.5) == 3.0
    assert round_half_away(-2.5) == -3.0
    assert round_half_away(0.125, 2) == 0.13
    assert round_half_away(-0.125, 2) == -0.13
    assert math.isnan(round_half_away(float("nan")))
