"""Dataclasses for ffprobe outputs."""

from __future__ import annotations

from dataclasses import dataclass

MEDIA_START = "00:00:00"  #: Time code for the beginning of a media file.


@dataclass(frozen=True)
class MediaDurationInfo:
    """Duration metadata for a probed media file."""

    end_time: str
    duration_sec: float
    start_time: str = MEDIA_START


@dataclass(frozen=True)
class TimeRange:
    """Effective ``HH:MM:SS`` start and end markers for an operation."""

    start: str
    end: str


__all__ = ["MEDIA_START", "MediaDurationInfo", "TimeRange"]
