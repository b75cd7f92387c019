"""Conversion handler for orchestrating the beat-to-timestamp pipeline."""

import logging
from pathlib import Path
from typing import Callable

from beat_timestamps.infrastructure.timestamp_writer import TimestampWriter
from beat_timestamps.infrastructure.tsv_reader import TsvBeatReader
from beat_timestamps.services.converter import convert_beat

logger = logging.getLogger(__name__)


def process_file(
    input_path: str | Path,
    output_path: str | Path,
    reader_factory: Callable[[str | Path], TsvBeatReader] = TsvBeatReader,
    writer_factory: Callable[[str | Path], TimestampWriter] = TimestampWriter,
) -> int:
    """
    Convert a beat list into a timestamp listing.

    The destination is created before the source is opened. Records are
    handled one at a time: parse, convert, write. The first failure aborts
    the run and propagates to the caller.

    Args:
        input_path: Tab-separated beat list.
        output_path: Destination for "HH:MM:SS.mmm <index>" lines.
        reader_factory: Builds the beat reader for input_path.
        writer_factory: Builds the timestamp writer for output_path.

    Returns:
        Number of lines written.

    Raises:
        FileError: If either file cannot be opened, written or flushed.
        ParseError: If a record is not a valid beat.
        RangeError: If a start time does not fall within a single day.
    """
    logger.info("Converting %s -> %s", input_path, output_path)

    with writer_factory(output_path) as writer, reader_factory(input_path) as reader:
        for index, beat in reader:
            writer.write(convert_beat(index, beat))
        count = writer.lines_written

    logger.info("Completed: %d lines written to %s", count, output_path)
    return count
