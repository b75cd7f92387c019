"""Infrastructure package."""

from beat_timestamps.infrastructure.dependency_injection import DependenciesContainer
from beat_timestamps.infrastructure.timestamp_writer import TimestampWriter
from beat_timestamps.infrastructure.tsv_reader import TsvBeatReader

__all__ = [
    "DependenciesContainer",
    "TimestampWriter",
    "TsvBeatReader",
]
