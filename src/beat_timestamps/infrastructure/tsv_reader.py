"""Tab-separated beat list reader."""

import csv
import logging
from pathlib import Path
from typing import Iterator

from pydantic import ValidationError

from beat_timestamps.models.errors import FileError, ParseError
from beat_timestamps.models.schemas import Beat

logger = logging.getLogger(__name__)

BEAT_FIELDS = ("time_start", "time_stop", "b_type")


class TsvBeatReader:
    """Reads beats from a headerless, tab-separated file."""

    def __init__(self, path: str | Path):
        """
        Initialize reader.

        Args:
            path: Path to the beat list.
        """
        self._path = Path(path)
        self._file = None

    @property
    def path(self) -> Path:
        """Get the source path."""
        return self._path

    def __enter__(self) -> "TsvBeatReader":
        try:
            self._file = open(self._path, "rb")
        except OSError as e:
            logger.error("Cannot open input file %s: %s", self._path, e)
            raise FileError(self._path, "open", e) from e
        logger.debug("Opened input file: %s", self._path)
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if self._file is not None:
            self._file.close()
            self._file = None

    def __iter__(self) -> Iterator[tuple[int, Beat]]:
        """
        Yield beats in file order.

        Yields:
            Tuples of (zero-based index, Beat).

        Raises:
            ParseError: On the first record that is not a valid beat.
        """
        if self._file is None:
            raise RuntimeError("Reader is not open. Use it as a context manager.")

        # decode line by line so a bad byte is charged to its own record
        lines = (line.decode("utf-8") for line in self._file)
        rows = csv.reader(lines, delimiter="\t")
        index = 0
        while True:
            try:
                row = next(rows)
            except StopIteration:
                return
            except (csv.Error, UnicodeDecodeError) as e:
                raise ParseError(index, e) from e

            yield index, parse_row(index, row)
            index += 1


def parse_row(index: int, row: list[str]) -> Beat:
    """
    Build a Beat from one split record.

    Args:
        index: Zero-based record position, used for error reporting.
        row: Fields of the record.

    Returns:
        Parsed Beat.

    Raises:
        ParseError: If the record does not have exactly three valid fields.
    """
    if len(row) != len(BEAT_FIELDS):
        raise ParseError(
            index,
            ValueError(f"expected {len(BEAT_FIELDS)} fields, found {len(row)}"),
        )

    try:
        return Beat(**dict(zip(BEAT_FIELDS, row)))
    except ValidationError as e:
        raise ParseError(index, e) from e
