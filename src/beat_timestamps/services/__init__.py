from .converter import convert_beat, format_millis, seconds_to_millis

__all__ = [
    "convert_beat",
    "format_millis",
    "seconds_to_millis",
]
