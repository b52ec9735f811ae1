"""Utility functions for time codes and status emission."""

from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING, Literal

if TYPE_CHECKING:
    from collections.abc import Callable
else:
    from collections import abc

    Callable = abc.Callable

from pytimeparse2 import parse as parse_duration

from ffshortcuts.models.verbosity import Verbosity

logger = logging.getLogger(__name__)

_MARKER_PLACES = 3

_ROUNDING: dict[str, Callable[[float], int]] = {
    "ceil": math.ceil,
    "floor": math.floor,
    "round": round,
}


def parse_timespan_to_seconds(s: str | None) -> float | None:
    """Convert a time string to seconds.

    Args:
        s: Timespan such as ``"90"``, ``"1m30s"`` or ``"00:01:30"``. ``None``
            or an empty string returns ``None``.

    Returns:
        The parsed duration in seconds.

    Raises:
        ValueError: If ``s`` cannot be parsed.

    """
    if not s:
        return None
    parsed = parse_duration(s)
    if parsed is None:
        raise ValueError(f"Unable to parse timespan: {s}")
    return float(parsed)


def format_time(
    seconds: float,
    *,
    places: int = 0,
    mode: Literal["ceil", "floor", "round"] = "floor",
) -> str:
    """Format elapsed seconds as ``HH:MM:SS`` (``HH:MM:SS.F`` with ``places``).

    Hours are not wrapped at 24; every field is zero-padded to two digits.

    Raises:
        ValueError: If ``seconds`` is negative or not finite.

    """
    if not math.isfinite(seconds) or seconds < 0:
        raise ValueError(f"Cannot format time of {seconds!r} seconds")
    q = 10**places
    scaled = _ROUNDING[mode](seconds * q)
    whole, fraction = divmod(int(scaled), q)
    h, remainder = divmod(whole, 3600)
    m, s = divmod(remainder, 60)
    text = f"{h:02d}:{m:02d}:{s:02d}"
    if places:
        text += f".{fraction:0{places}d}"
    return text


def normalize_time_marker(s: str | None) -> str | None:
    """Rewrite a user time marker in ffmpeg time syntax.

    Whole seconds become ``HH:MM:SS``; fractional values keep milliseconds.
    """
    seconds = parse_timespan_to_seconds(s)
    if seconds is None:
        return None
    if seconds.is_integer():
        return format_time(seconds)
    return format_time(seconds, places=_MARKER_PLACES, mode="round")


def emit_status(message: str, *, status_callback: Callable[[str], None] | None) -> None:
    """Send ``message`` to ``status_callback``, or to ``logger.info`` without one.

    Streamed tool output may end in a carriage return for in-place progress;
    callbacks decide how to render that.
    """
    if status_callback is None:
        logger.info(message.rstrip("\r"))
        return
    status_callback(message)


def format_action_label(*, dry_run: bool, cached: bool = False) -> str:
    """Return a short action label for command banners.

    - Cached: when serving from cache
    - Command: when in dry-run mode
    - Running: otherwise
    """
    if cached:
        return "Cached"
    if dry_run:
        return "Command"
    return "Running"


def maybe_log_command(
    *,
    verbosity: Verbosity,
    dry_run: bool,
    status_callback: Callable[[str], None] | None,
    banner: str,
) -> None:
    """Log a command banner when verbosity allows it or in dry-run mode."""
    if verbosity >= Verbosity.COMMANDS or dry_run:
        emit_status(banner, status_callback=status_callback)


__all__ = [
    "emit_status",
    "format_action_label",
    "format_time",
    "maybe_log_command",
    "normalize_time_marker",
    "parse_timespan_to_seconds",
]
