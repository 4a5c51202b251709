"""Unit tests for the stamp duty calculator."""

from decimal import Decimal

import pytest

from househunt.services.stamp_duty import (
    format_cost_range,
    format_stamp_duty,
    stamp_duty,
    stamp_duty_range,
)

THRESHOLDS = [125000, 250000, 925000, 1500000]


class TestStampDuty:
    """Tests for stamp_duty band calculation."""

    @pytest.mark.parametrize("value", [0, 1, 50000, 124999.99, 125000])
    def test_no_duty_up_to_first_threshold(self, value):
        """Prices up to £125,000 pay nothing."""
        assert stamp_duty(value) == Decimal("0")

    def test_second_band(self):
        """£200,000 pays 2% of the £75,000 above £125,000."""
        assert stamp_duty(200000) == Decimal("1500.00")

    def test_third_band(self):
        """300000 → 2500 + 50000 * 0.05."""
        assert stamp_duty(300000) == Decimal("5000.00")

    def test_fourth_band(self):
        """1000000 → 36250 + 75000 * 0.10."""
        assert stamp_duty(1000000) == Decimal("43750.00")

    def test_top_band(self):
        """2000000 → 93750 + 500000 * 0.12."""
        assert stamp_duty(2000000) == Decimal("153750.00")

    @pytest.mark.parametrize(
        "threshold, expected",
        [
            (125000, Decimal("0")),
            (250000, Decimal("2500")),
            (925000, Decimal("36250")),
            (1500000, Decimal("93750")),
        ],
    )
    def test_cumulative_amounts_at_thresholds(self, threshold, expected):
        """Duty at each threshold equals the sum of the full bands below it."""
        assert stamp_duty(threshold) == expected

    @pytest.mark.parametrize("threshold", THRESHOLDS)
    def test_continuous_at_thresholds(self, threshold):
        """A penny either side of a threshold changes duty by at most a penny."""
        below = stamp_duty(Decimal(threshold) - Decimal("0.01"))
        at = stamp_duty(threshold)
        above = stamp_duty(Decimal(threshold) + Decimal("0.01"))
        assert abs(at - below) <= Decimal("0.01")
        assert abs(above - at) <= Decimal("0.01")

    def test_monotonic_non_decreasing(self):
        """Duty never falls as the price rises."""
        previous = Decimal("-1")
        for value in range(0, 2_000_001, 12_500):
            duty = stamp_duty(value)
            assert duty >= previous
            previous = duty

    def test_accepts_strings_and_floats(self):
        """Form input may arrive as text or float."""
        assert stamp_duty("300000") == Decimal("5000.00")
        assert stamp_duty("£300,000") == Decimal("5000.00")
        assert stamp_duty(300000.0) == Decimal("5000.00")

    def test_negative_price_rejected(self):
        with pytest.raises(ValueError, match="cannot be negative"):
            stamp_duty(-1)

    def test_missing_price_rejected(self):
        with pytest.raises(ValueError, match="required"):
            stamp_duty("")


class TestStampDutyRange:
    """Tests for stamp_duty_range."""

    def test_both_bounds(self):
        assert stamp_duty_range(280000, 320000) == (Decimal("4000.00"), Decimal("6000.00"))

    def test_bounds_in_wrong_order_are_swapped(self):
        assert stamp_duty_range(320000, 280000) == (Decimal("4000.00"), Decimal("6000.00"))

    def test_only_min_bound(self):
        assert stamp_duty_range(300000, None) == (Decimal("5000.00"), Decimal("5000.00"))

    def test_only_max_bound(self):
        assert stamp_duty_range("", "300000") == (Decimal("5000.00"), Decimal("5000.00"))

    def test_no_bounds(self):
        assert stamp_duty_range(None, None) is None
        assert stamp_duty_range("", "  ") is None


class TestFormatting:
    """Tests for display formatting of duty and ranges."""

    def test_single_duty(self):
        assert format_stamp_duty(Decimal("7500")) == "£7,500.00"

    def test_zero_duty(self):
        assert format_stamp_duty(Decimal("0")) == "£0.00"

    def test_equal_range_collapses(self):
        assert format_stamp_duty(Decimal("5000"), Decimal("5000")) == "£5,000.00"

    def test_range(self):
        assert format_stamp_duty(Decimal("4000"), Decimal("6000")) == "£4,000.00 - £6,000.00"

    def test_cost_range_pair(self):
        assert format_cost_range(Decimal("280000"), Decimal("320000")) == "280000 - 320000"

    def test_cost_range_reversed(self):
        assert format_cost_range(Decimal("320000"), Decimal("280000")) == "280000 - 320000"

    def test_cost_range_single(self):
        assert format_cost_range(None, Decimal("320000")) == "320000"
        assert format_cost_range(Decimal("300000.50"), Decimal("300000.50")) == "300000.5"

    def test_cost_range_empty(self):
        assert format_cost_range(None, None) is None
