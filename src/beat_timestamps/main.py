"""Main entry point for the beat timestamp converter."""

import argparse
import logging
import sys

from beat_timestamps import __version__
from beat_timestamps.config import Config
from beat_timestamps.infrastructure.dependency_injection import DependenciesContainer
from beat_timestamps.models.errors import BeatTimestampError

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    """Send log records to stderr so stdout stays empty."""
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[
            logging.StreamHandler(sys.stderr),
        ],
    )


def build_parser(config: Config) -> argparse.ArgumentParser:
    """Build the CLI argument parser with defaults taken from config."""
    parser = argparse.ArgumentParser(
        prog="beat-timestamps",
        description="Convert a tab-separated beat list to HH:MM:SS.mmm timestamps",
    )
    parser.add_argument(
        "-i",
        "--input-file",
        default=config.input_file,
        help=f"Tab-separated beat list (default: {config.input_file})",
    )
    parser.add_argument(
        "-o",
        "--output-file",
        default=config.output_file,
        help=f"Destination for timestamp lines (default: {config.output_file})",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """Entry point with CLI argument parsing."""
    container = DependenciesContainer()
    config = container.config()
    config.validate()
    configure_logging(config.log_level)

    args = build_parser(config).parse_args(argv)

    try:
        process_file = container.process_file()
        process_file(args.input_file, args.output_file)
    except KeyboardInterrupt:
        logger.warning("Interrupted by user")
        sys.exit(1)
    except BeatTimestampError as e:
        # traceback only when debugging
        logger.error(
            "Fatal error: %s",
            e.internal(),
            exc_info=logger.isEnabledFor(logging.DEBUG),
        )
        sys.exit(1)


if __name__ == "__main__":
    main()
