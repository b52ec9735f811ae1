"""Resolve effective start/end markers for time-bounded operations."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ffshortcuts.models.ffprobe import TimeRange

from . import probe

if TYPE_CHECKING:
    from ffshortcuts.models.context import RuntimeContext

logger = logging.getLogger(__name__)


def resolve_time_range(
    ctx: RuntimeContext,
    path: str,
    start: str | None = None,
    end: str | None = None,
) -> TimeRange:
    """Return the time range to process in ``path``.

    The file is always probed, even when both markers are given, so a
    missing or unreadable input is reported before ffmpeg runs. Supplied
    markers are returned unchanged; a missing start becomes ``00:00:00`` and a
    missing end becomes the probed duration.

    Raises:
        probe.ProbeError: If the duration cannot be determined.

    """
    info = probe.get_media_duration_info(ctx, path)
    logger.debug("Probed %s: %.3fs", path, info.duration_sec)
    return TimeRange(
        start=start or info.start_time,
        end=end or info.end_time,
    )


__all__ = ["resolve_time_range"]
