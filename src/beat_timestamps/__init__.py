"""beat_timestamps - convert tab-separated beat lists to timestamp listings."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("beat-timestamps")
except PackageNotFoundError:  # running from a source checkout
    __version__ = "0.0.0.dev0"

__all__ = ["__version__"]
