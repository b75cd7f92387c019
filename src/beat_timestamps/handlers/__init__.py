"""Handlers package."""

from beat_timestamps.handlers.conversion import process_file

__all__ = ["process_file"]
