"""Pydantic models for beat records and converted timestamps."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Beat(BaseModel):
    """One input record: start time, stop time and type code."""

    model_config = ConfigDict(frozen=True)

    time_start: float
    time_stop: float
    b_type: str = Field(min_length=1, max_length=1)

    @field_validator("time_start", "time_stop", mode="before")
    @classmethod
    def reject_loose_number_text(cls, value: Any) -> Any:
        """Only plain ASCII number text is accepted: no padding, no digit separators."""
        if isinstance(value, str):
            if value != value.strip() or "_" in value or not value.isascii():
                raise ValueError(f"not a plain number: {value!r}")
        return value


class BeatTimestamp(BaseModel):
    """Formatted start time of a beat, tagged with its input position."""

    model_config = ConfigDict(frozen=True)

    index: int = Field(ge=0)
    timestamp: str

    def to_line(self) -> str:
        return f"{self.timestamp} {self.index}\n"
