"""Tests for rounding and percentage helpers."""

import pytest

from utils.math_utils import percentage, ratio, round_half_up


class TestRoundHalfUp:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [(0.4, 0), (0.5, 1), (1.5, 2), (2.5, 3), (12.5, 13), (66.666, 67), (99.49, 99)],
    )
    def test_halves_round_up(self, value: float, expected: int) -> None:
        assert round_half_up(value) == expected


class TestPercentage:
    def test_zero_total(self) -> None:
        assert percentage(5, 0) == 0
        assert percentage(0, 0) == 0

    def test_regular_values(self) -> None:
        assert percentage(15, 20) == 75
        assert percentage(1, 3) == 33
        assert percentage(2, 3) == 67

    def test_not_capped(self) -> None:
        assert percentage(30, 20) == 150


class TestRatio:
    def test_ratio(self) -> None:
        assert ratio(15, 30) == pytest.approx(0.5)
        assert ratio(3, 0) == 0.0
