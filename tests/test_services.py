"""Tests for services layer."""

import math

import pytest

from beat_timestamps.models.errors import RangeError
from beat_timestamps.models.schemas import Beat
from beat_timestamps.services.converter import (
    MILLIS_PER_DAY,
    convert_beat,
    format_millis,
    seconds_to_millis,
)


def _decompose(timestamp: str) -> int:
    hms, millis = timestamp.split(".")
    hours, minutes, seconds = (int(part) for part in hms.split(":"))
    return hours * 3_600_000 + minutes * 60_000 + seconds * 1_000 + int(millis)


class TestFormatMillis:
    """Tests for format_millis."""

    @pytest.mark.parametrize(
        "millis, expected",
        [
            (12, "00:00:00.012"),
            (123, "00:00:00.123"),
            ((60 * 2 + 3) * 1000 + 123, "00:02:03.123"),
            ((3600 * 22 + 60 * 54 + 31) * 1000 + 60, "22:54:31.060"),
            (1, "00:00:00.001"),
            (MILLIS_PER_DAY - 1, "23:59:59.999"),
        ],
    )
    def test_formats_valid_values(self, millis, expected):
        """Test known millisecond counts format as expected."""
        assert format_millis(millis) == expected

    def test_full_day_wraps_to_midnight(self):
        """Test exactly one day is valid and renders as midnight."""
        assert format_millis(MILLIS_PER_DAY) == "00:00:00.000"

    @pytest.mark.parametrize(
        "millis",
        [
            0,
            -1,
            MILLIS_PER_DAY + 1,
            (86400 * 2 + 3600 * 3 + 60 * 41 + 11) * 1000 + 60,
        ],
    )
    def test_out_of_range_returns_none(self, millis):
        """Test values outside 1..86400000 produce no string."""
        assert format_millis(millis) is None

    @pytest.mark.parametrize(
        "millis",
        [1, 999, 1_000, 59_999, 60_000, 3_599_999, 3_600_000, 45_296_789, MILLIS_PER_DAY - 1],
    )
    def test_fields_recompose_to_input(self, millis):
        """Test the formatted fields add back up to the input count."""
        timestamp = format_millis(millis)

        assert len(timestamp) == len("HH:MM:SS.mmm")
        assert _decompose(timestamp) == millis


class TestSecondsToMillis:
    """Tests for seconds_to_millis."""

    def test_whole_and_fractional_seconds(self):
        """Test simple conversions."""
        assert seconds_to_millis(1.5) == 1500
        assert seconds_to_millis(0.012) == 12
        assert seconds_to_millis(3.0) == 3000

    def test_truncates_sub_millisecond_fraction(self):
        """Test fractions of a millisecond are dropped, not rounded."""
        assert seconds_to_millis(1.0009) == 1000
        assert seconds_to_millis(0.0004) == 0

    def test_resolves_to_nanoseconds_before_truncating(self):
        """Test floats just below a millisecond boundary stay on it."""
        # 1.005 is stored as 1.00499999999999989...
        assert seconds_to_millis(1.005) == 1005

    def test_zero(self):
        """Test zero seconds is zero milliseconds."""
        assert seconds_to_millis(0.0) == 0

    @pytest.mark.parametrize("seconds", [-0.5, -86400.0])
    def test_negative_raises(self, seconds):
        """Test negative times are rejected."""
        with pytest.raises(ValueError, match="negative"):
            seconds_to_millis(seconds)

    @pytest.mark.parametrize("seconds", [math.inf, -math.inf, math.nan])
    def test_non_finite_raises(self, seconds):
        """Test infinite and NaN times are rejected."""
        with pytest.raises(ValueError, match="not finite"):
            seconds_to_millis(seconds)


class TestConvertBeat:
    """Tests for convert_beat."""

    def test_convert_valid_beat(self):
        """Test a valid beat converts to an indexed timestamp."""
        beat = Beat(time_start=1.5, time_stop=2.0, b_type="A")

        result = convert_beat(0, beat)

        assert result.index == 0
        assert result.timestamp == "00:00:01.500"

    def test_time_stop_is_ignored(self):
        """Test only the start time drives the timestamp."""
        beat = Beat(time_start=61.25, time_stop=-10.0, b_type="z")

        assert convert_beat(3, beat).timestamp == "00:01:01.250"

    def test_full_day_boundary(self):
        """Test a start time of exactly one day wraps to midnight."""
        beat = Beat(time_start=86400.0, time_stop=86400.0, b_type="A")

        assert convert_beat(0, beat).timestamp == "00:00:00.000"

    def test_zero_start_raises_range_error(self):
        """Test a zero start time is rejected, not treated as midnight."""
        beat = Beat(time_start=0.0, time_stop=1.0, b_type="A")

        with pytest.raises(RangeError) as exc_info:
            convert_beat(5, beat)

        assert exc_info.value.index == 5
        assert exc_info.value.millis == 0

    def test_sub_millisecond_start_raises_range_error(self):
        """Test a start below one millisecond truncates to zero and fails."""
        beat = Beat(time_start=0.0009, time_stop=1.0, b_type="A")

        with pytest.raises(RangeError):
            convert_beat(0, beat)

    def test_past_one_day_raises_range_error(self):
        """Test a start time beyond one day is rejected."""
        beat = Beat(time_start=86400.001, time_stop=86401.0, b_type="A")

        with pytest.raises(RangeError) as exc_info:
            convert_beat(1, beat)

        assert exc_info.value.millis == MILLIS_PER_DAY + 1

    def test_negative_start_raises_range_error(self):
        """Test a negative start time is rejected as out of range."""
        beat = Beat(time_start=-1.0, time_stop=1.0, b_type="A")

        with pytest.raises(RangeError) as exc_info:
            convert_beat(2, beat)

        assert exc_info.value.index == 2
        assert isinstance(exc_info.value.wrapped, ValueError)
