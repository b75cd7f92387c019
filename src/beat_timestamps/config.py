"""Configuration management for the beat timestamp converter."""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

# Load .env file from project root
env_path = Path(__file__).parent.parent.parent / ".env"
load_dotenv(env_path)


@dataclass
class Config:
    """Converter configuration loaded from environment variables."""

    # Default file paths for the CLI
    input_file: str = field(
        default_factory=lambda: os.getenv("BEATS_INPUT_FILE", "in.txt")
    )
    output_file: str = field(
        default_factory=lambda: os.getenv("BEATS_OUTPUT_FILE", "out.txt")
    )

    # Logging
    log_level: str = field(
        default_factory=lambda: os.getenv("LOG_LEVEL", "WARNING").upper()
    )

    def validate(self) -> None:
        """Validate configuration values."""
        if not isinstance(logging.getLevelName(self.log_level), int):
            raise ValueError(f"Unknown LOG_LEVEL: {self.log_level}")
