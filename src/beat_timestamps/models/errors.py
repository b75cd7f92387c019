"""Exception hierarchy for beat timestamp conversion."""

from pathlib import Path


class BeatTimestampError(Exception):
    """Base exception for conversion errors.

    Carries a short user-facing message plus internal details for logging.
    Every subclass is fatal: the run stops at the first one raised.
    """

    def __init__(
        self,
        user_message: str,
        internal_details: str = "",
        wrapped: Exception | None = None,
    ) -> None:
        super().__init__(user_message)
        self.user_message = user_message
        self.internal_details = internal_details or user_message
        self.wrapped = wrapped

    def internal(self) -> str:
        return self.internal_details


class FileError(BeatTimestampError):
    """Raised when the source cannot be read or the destination written."""

    def __init__(self, path: str | Path, action: str, cause: Exception) -> None:
        self.path = str(path)
        self.action = action
        super().__init__(
            f"File error: cannot {action} {self.path}",
            f"cannot {action} {self.path}: {cause}",
            cause,
        )


class ParseError(BeatTimestampError):
    """Raised when a record does not match the beat triple."""

    def __init__(self, index: int, wrapped: Exception | None = None) -> None:
        self.index = index
        details = f"Cannot parse line {index}"
        if wrapped is not None:
            details = f"{details}: {wrapped}"
        super().__init__(f"Cannot parse line {index}", details, wrapped)


class RangeError(BeatTimestampError):
    """Raised when a start time falls outside a single day."""

    def __init__(
        self,
        index: int,
        millis: int | None = None,
        wrapped: Exception | None = None,
    ) -> None:
        self.index = index
        self.millis = millis
        if millis is not None:
            details = f"Illegal value at line {index}: {millis} ms is outside 1..86400000"
        elif wrapped is not None:
            details = f"Illegal value at line {index}: {wrapped}"
        else:
            details = f"Illegal value at line {index}"
        super().__init__(f"Illegal value at line {index}", details, wrapped)
