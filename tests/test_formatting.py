"""
Unit tests for byte, uptime and percent formatting.
"""

import pytest

from pterobanner.formatting import format_bytes, format_percent, format_uptime


class TestFormatBytes:
    @pytest.mark.parametrize(
        "value,expected",
        [
            (500, "500B"),
            (1024, "1K"),
            (1536, "1.5K"),
            (1024 ** 2 * 3.4, "3.4M"),
            (1073741824, "1G"),
            (1024 ** 4 * 2, "2T"),
        ],
    )
    def test_scales_to_largest_unit(self, value, expected):
        assert format_bytes(value) == expected

    @pytest.mark.parametrize("value", [0, None, float("nan"), -5, "abc"])
    def test_invalid_or_zero_is_zero_bytes(self, value):
        assert format_bytes(value) == "0B"

    def test_beyond_terabytes_stays_in_terabytes(self):
        assert format_bytes(1024 ** 5) == "1024T"

    def test_decimals(self):
        assert format_bytes(1536, decimals=0) == "2K"
        assert format_bytes(1600, decimals=2) == "1.56K"
        assert format_bytes(1536, decimals=-1) == "2K"

    @pytest.mark.parametrize(
        "value,expected",
        [
            (1280, "1.3K"),
            (int(2.25 * 1024 ** 3), "2.3G"),
            (1024 ** 2 * 1.25, "1.3M"),
        ],
    )
    def test_exact_halves_round_up(self, value, expected):
        assert format_bytes(value) == expected

    def test_exact_half_with_no_decimals(self):
        assert format_bytes(2560, decimals=0) == "3K"

    def test_numeric_string_accepted(self):
        assert format_bytes("2048") == "2K"


class TestFormatUptime:
    def test_under_a_minute(self):
        assert format_uptime(59) == "0 minutes"

    def test_singular_parts(self):
        assert format_uptime(86400 + 3600 + 60) == "1 day 1 hour 1 minute"

    def test_plural_parts(self):
        assert format_uptime(2 * 86400 + 5 * 3600 + 30 * 60) == "2 days 5 hours 30 minutes"

    def test_zero_parts_skipped(self):
        assert format_uptime(3 * 86400 + 120) == "3 days 2 minutes"

    def test_fractional_seconds_floored(self):
        assert format_uptime(119.9) == "1 minute"


class TestFormatPercent:
    def test_one_decimal(self):
        assert format_percent(12.345) == "12.3"

    def test_none(self):
        assert format_percent(None) == "N/A"
