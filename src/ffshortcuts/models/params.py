"""Typed, validated parameters for each operation."""

from __future__ import annotations

from pathlib import Path
from typing import ClassVar
from urllib.parse import urlparse

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from ffshortcuts.tools.helpers import normalize_time_marker, parse_timespan_to_seconds

from .defaults import DEFAULT_FPS, DEFAULT_LOOPS, DEFAULT_SPEED

INVALID_LOOPS = "Number of loops must be > 0"


def _normalize_path(v: Path | str) -> str:
    """Expand ``~`` for local paths; leave remote URLs untouched."""
    text = str(v)
    if not text:
        raise ValueError("File path must not be empty")
    if urlparse(text).scheme in {"http", "https"}:
        return text
    return str(Path(text).expanduser())


class OperationParams(BaseModel):
    """Base for operation parameters."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    PATH_FIELDS: ClassVar[tuple[str, ...]] = ()

    @model_validator(mode="before")
    @classmethod
    def normalize_paths(cls, data: object) -> object:
        """Stringify and expand every path-valued field."""
        if not isinstance(data, dict):
            return data
        data = dict(data)
        for name in cls.PATH_FIELDS:
            if data.get(name) is not None:
                data[name] = _normalize_path(data[name])
        return data


class SourceParams(OperationParams):
    """A single input file."""

    PATH_FIELDS: ClassVar[tuple[str, ...]] = ("source",)

    source: str = Field(description="Path to the input file.")


class TimeRangeParams(SourceParams):
    """A single input with optional start/end markers."""

    TIME_DESC_TEMPLATE: ClassVar[str] = "{} marker. Examples: '90', '1m30s', '00:01:30'."

    start: str | None = Field(None, description=TIME_DESC_TEMPLATE.format("Start"))
    end: str | None = Field(None, description=TIME_DESC_TEMPLATE.format("End"))

    @field_validator("start", "end", mode="before")
    @classmethod
    def validate_time_format(cls, v: str | None) -> str | None:
        """Ensure markers parse and rewrite them as ffmpeg time codes."""
        if v is None or v == "":
            return None
        try:
            return normalize_time_marker(str(v))
        except ValueError as exc:
            raise ValueError(f"Invalid time format: {v}") from exc

    @model_validator(mode="after")
    def validate_order(self) -> TimeRangeParams:
        """Reject ranges that end at or before their start."""
        start = parse_timespan_to_seconds(self.start)
        end = parse_timespan_to_seconds(self.end)
        if start is not None and end is not None and end <= start:
            raise ValueError(f"End time {self.end} must be after start time {self.start}")
        return self


class ComposeParams(OperationParams):
    """A still image and an audio track."""

    PATH_FIELDS: ClassVar[tuple[str, ...]] = ("image", "audio")

    image: str = Field(description="Path to the still image.")
    audio: str = Field(description="Path to the audio file.")


class ReplaceAudioParams(OperationParams):
    """An audio track to lay over a video."""

    PATH_FIELDS: ClassVar[tuple[str, ...]] = ("audio", "video")

    audio: str = Field(description="Path to the new audio file.")
    video: str = Field(description="Path to the video file.")


class LoopParams(SourceParams):
    """Loop count for a video."""

    loops: int = Field(DEFAULT_LOOPS, description="Number of extra times to play the video.")

    @field_validator("loops")
    @classmethod
    def validate_loops(cls, v: int) -> int:
        """Reject non-positive loop counts."""
        if v < 1:
            raise ValueError(INVALID_LOOPS)
        return v


class ScaleParams(SourceParams):
    """Target width; height follows the aspect ratio."""

    width: int = Field(gt=0, description="Output width in pixels.")


class ResizeParams(SourceParams):
    """Exact output dimensions."""

    width: int = Field(gt=0, description="Output width in pixels.")
    height: int = Field(gt=0, description="Output height in pixels.")


class FpsParams(SourceParams):
    """Output frame rate."""

    fps: float = Field(DEFAULT_FPS, gt=0, description="Frames per second.")


class SpeedParams(SourceParams):
    """Playback speed multiplier."""

    speed: float = Field(DEFAULT_SPEED, gt=0, description="Speed multiplier, e.g. 2 for double speed.")


__all__ = [
    "INVALID_LOOPS",
    "ComposeParams",
    "FpsParams",
    "LoopParams",
    "OperationParams",
    "ReplaceAudioParams",
    "ResizeParams",
    "ScaleParams",
    "SourceParams",
    "SpeedParams",
    "TimeRangeParams",
]
