"""Dependency injection container for the application."""

from functools import partial

from dependency_injector import providers
from dependency_injector.containers import DeclarativeContainer

from beat_timestamps.config import Config
from beat_timestamps.infrastructure.timestamp_writer import TimestampWriter
from beat_timestamps.infrastructure.tsv_reader import TsvBeatReader


def _create_process_file(reader_factory, writer_factory):
    """Factory for process_file to avoid circular import."""
    from beat_timestamps.handlers.conversion import process_file

    return partial(
        process_file,
        reader_factory=reader_factory,
        writer_factory=writer_factory,
    )


class DependenciesContainer(DeclarativeContainer):
    """DI container for the application."""

    config = providers.Singleton(Config)

    # File stages, built per run with the path to open
    beat_reader = providers.Factory(TsvBeatReader)
    timestamp_writer = providers.Factory(TimestampWriter)

    # Pipeline bound to the file stages above
    process_file = providers.Factory(
        _create_process_file,
        reader_factory=beat_reader.provider,
        writer_factory=timestamp_writer.provider,
    )
