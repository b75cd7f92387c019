"""Plain-text writer for converted timestamps."""

import logging
from pathlib import Path

from beat_timestamps.models.errors import FileError
from beat_timestamps.models.schemas import BeatTimestamp

logger = logging.getLogger(__name__)


class TimestampWriter:
    """Writes one "HH:MM:SS.mmm <index>" line per converted beat."""

    def __init__(self, path: str | Path):
        """
        Initialize writer.

        Args:
            path: Destination file; created or truncated on open.
        """
        self._path = Path(path)
        self._file = None
        self._lines_written = 0

    @property
    def path(self) -> Path:
        """Get the destination path."""
        return self._path

    @property
    def lines_written(self) -> int:
        """Get the number of lines written so far."""
        return self._lines_written

    def __enter__(self) -> "TimestampWriter":
        try:
            self._file = open(self._path, "w", encoding="utf-8", newline="\n")
        except OSError as e:
            logger.error("Cannot create output file %s: %s", self._path, e)
            raise FileError(self._path, "create", e) from e
        logger.debug("Created output file: %s", self._path)
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if exc_type is None:
            self.close()
            return

        # keep the error already in flight; a close failure is only logged
        try:
            self.close()
        except FileError as e:
            logger.warning("Ignoring close failure after %s: %s", exc_type.__name__, e.internal())

    def write(self, item: BeatTimestamp) -> None:
        """
        Write a single result line.

        Args:
            item: Converted beat.

        Raises:
            FileError: If the line cannot be written.
        """
        if self._file is None:
            raise RuntimeError("Writer is not open. Use it as a context manager.")

        try:
            self._file.write(item.to_line())
        except OSError as e:
            logger.error("Cannot write line %d to %s: %s", item.index, self._path, e)
            raise FileError(self._path, "write to", e) from e
        self._lines_written += 1

    def close(self) -> None:
        """
        Flush and close the destination.

        Raises:
            FileError: If buffered lines cannot be flushed.
        """
        if self._file is None:
            return

        # close() flushes first and releases the handle even if that fails
        file, self._file = self._file, None
        try:
            file.close()
        except OSError as e:
            logger.error("Cannot flush output file %s: %s", self._path, e)
            raise FileError(self._path, "flush", e) from e
        logger.debug("Closed output file %s (%d lines)", self._path, self._lines_written)
