"""Convert beat start times into HH:MM:SS.mmm timestamps."""

import logging
import math
from fractions import Fraction

from beat_timestamps.models.errors import RangeError
from beat_timestamps.models.schemas import Beat, BeatTimestamp

logger = logging.getLogger(__name__)

MILLIS_PER_SECOND = 1_000
MILLIS_PER_MINUTE = 60_000
MILLIS_PER_HOUR = 3_600_000
MILLIS_PER_DAY = 86_400_000

NANOS_PER_SECOND = 1_000_000_000
NANOS_PER_MILLI = 1_000_000


def seconds_to_millis(seconds: float) -> int:
    """
    Convert seconds to whole milliseconds.

    The float is resolved to the nearest nanosecond first, then any
    fraction of a millisecond is dropped. This keeps values such as
    1.005 at 1005 ms even though the float sits just below it.

    Args:
        seconds: Non-negative, finite time in seconds.

    Returns:
        Number of whole milliseconds.

    Raises:
        ValueError: If seconds is negative or not finite.
    """
    if not math.isfinite(seconds):
        raise ValueError(f"time is not finite: {seconds}")
    if seconds < 0:
        raise ValueError(f"time is negative: {seconds}")

    nanos = round(Fraction(seconds) * NANOS_PER_SECOND)
    return nanos // NANOS_PER_MILLI


def format_millis(millis: int) -> str | None:
    """
    Format a millisecond count as HH:MM:SS.mmm.

    Args:
        millis: Milliseconds since midnight.

    Returns:
        Formatted timestamp, or None if millis is not in 1..86400000.
        Exactly one full day wraps to 00:00:00.000.
    """
    if not 1 <= millis <= MILLIS_PER_DAY:
        return None

    hours = millis % MILLIS_PER_DAY // MILLIS_PER_HOUR
    minutes = millis % MILLIS_PER_HOUR // MILLIS_PER_MINUTE
    seconds = millis % MILLIS_PER_MINUTE // MILLIS_PER_SECOND
    millis = millis % MILLIS_PER_SECOND

    return f"{hours:02d}:{minutes:02d}:{seconds:02d}.{millis:03d}"


def convert_beat(index: int, beat: Beat) -> BeatTimestamp:
    """
    Convert a beat's start time into a timestamp tagged with its index.

    Args:
        index: Zero-based position of the beat in the input.
        beat: Parsed beat record.

    Returns:
        BeatTimestamp for the beat.

    Raises:
        RangeError: If the start time does not map into a single day.
    """
    try:
        millis = seconds_to_millis(beat.time_start)
    except ValueError as e:
        raise RangeError(index, wrapped=e) from e

    timestamp = format_millis(millis)
    if timestamp is None:
        raise RangeError(index, millis=millis)

    logger.debug("[%d] %s -> %s", index, beat.time_start, timestamp)
    return BeatTimestamp(index=index, timestamp=timestamp)
