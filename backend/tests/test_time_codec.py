"""Tests for race time and pace string conversion."""

import pytest

from nsplanner.services.time_codec import format_pace, format_time, parse_time


VALID_TIMES = [
    ("20:00", 1200),
    ("3:05", 185),
    ("0:59", 59),
    ("1:25:30", 5130),
    ("0:00:01", 1),
    ("3:00:00", 10800),
    ("12:34:56", 45296),
]


class TestParseTime:
    """Tests for parse_time."""

    @pytest.mark.parametrize("text,expected_total", VALID_TIMES)
    def test_valid_times(self, text: str, expected_total: int):
        parsed = parse_time(text)

        assert parsed is not None
        assert parsed.total_seconds == expected_total

    def test_splits_parts(self):
        parsed = parse_time("1:02:03")

        assert (parsed.hours, parsed.minutes, parsed.seconds) == (1, 2, 3)

    def test_two_parts_have_no_hours(self):
        parsed = parse_time("45:10")

        assert parsed.hours == 0
        assert parsed.minutes == 45

    @pytest.mark.parametrize("text,expected_total", [(" 20:05", 1205), ("+3:05", 185), ("0:00", 0)])
    def test_signs_spaces_and_zero(self, text: str, expected_total: int):
        assert parse_time(text).total_seconds == expected_total

    @pytest.mark.parametrize(
        "text",
        [
            None,
            "",
            "20",
            "1:2:3:4",
            "abc",
            "20:xx",
            "20:",
            ":30",
            "20:60",
            "1:60:00",
            "-1:30",
            "20:-5",
            "20.5:10",
            "1_0:00",
            "20:1_0",
            "\u0661\u0662:00",
            "\uff12\uff10:00",
            "+-5:00",
        ],
    )
    def test_invalid_times_return_none(self, text):
        assert parse_time(text) is None


class TestFormatTime:
    """Tests for format_time."""

    @pytest.mark.parametrize(
        "seconds,expected",
        [
            (0, "0:00"),
            (59, "0:59"),
            (185, "3:05"),
            (1200, "20:00"),
            (3600, "1:00:00"),
            (3725, "1:02:05"),
            (11655, "3:14:15"),
        ],
    )
    def test_format(self, seconds: int, expected: str):
        assert format_time(seconds) == expected

    def test_rounds_before_splitting(self):
        # 59.6s must not render as "0:60"
        assert format_time(59.6) == "1:00"

    @pytest.mark.parametrize("text,expected_total", VALID_TIMES)
    def test_parse_format_agree(self, text: str, expected_total: int):
        formatted = format_time(expected_total)

        assert parse_time(formatted).total_seconds == parse_time(text).total_seconds


class TestFormatPace:
    """Tests for format_pace."""

    @pytest.mark.parametrize(
        "pace,expected",
        [
            (233, "3:53"),
            (300, "5:00"),
            (322, "5:22"),
            (240.4, "4:00"),
            (239.6, "4:00"),
        ],
    )
    def test_km(self, pace: float, expected: str):
        assert format_pace(pace) == expected

    def test_mile_conversion(self):
        # 233 s/km * 1.60934 = 374.98 s/mile
        assert format_pace(233, "mile") == "6:15"

    def test_mile_is_slower_than_km(self):
        assert format_pace(300, "mile") == "8:03"
