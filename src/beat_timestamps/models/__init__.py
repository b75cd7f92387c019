from .errors import BeatTimestampError, FileError, ParseError, RangeError
from .schemas import Beat, BeatTimestamp

__all__ = [
    "BeatTimestampError",
    "FileError",
    "ParseError",
    "RangeError",
    "Beat",
    "BeatTimestamp",
]
