"""FFmpeg-related helper utilities."""

from . import probe
from .cli import format_ffmpeg_cmd, format_ffprobe_cmd, join_command, run_ffmpeg, run_ffprobe
from .helpers import format_time, normalize_time_marker, parse_timespan_to_seconds
from .probe import ProbeError
from .timerange import resolve_time_range

__all__ = [
    "ProbeError",
    "format_ffmpeg_cmd",
    "format_ffprobe_cmd",
    "format_time",
    "join_command",
    "normalize_time_marker",
    "parse_timespan_to_seconds",
    "probe",
    "resolve_time_range",
    "run_ffmpeg",
    "run_ffprobe",
]
