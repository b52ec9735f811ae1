"""ffprobe helpers and probing utilities."""

from __future__ import annotations

import json
import logging
import subprocess
from pathlib import Path
from urllib.parse import urlparse

from ffshortcuts.models.context import RuntimeContext
from ffshortcuts.models.ffprobe import MediaDurationInfo
from ffshortcuts.models.verbosity import Verbosity

from .cli import cache_key, format_ffprobe_cmd, run_ffprobe
from .helpers import emit_status, format_action_label, format_time

_QUIET = ["-v", "quiet"]
_JSON_OUTPUT = ["-of", "json"]
_SHOW_ENTRIES = ["-show_entries"]
DURATION_ENTRIES = "stream=duration:format=duration"
UNAVAILABLE = "N/A"  #: ffprobe's placeholder for a missing value.

logger = logging.getLogger(__name__)

_CACHE_FAILURE_ENTRY: tuple[bool, str | None] = (False, None)
_CACHE_ENTRY_LENGTH = 2


class ProbeError(RuntimeError):
    """Raised when ffprobe cannot produce usable metadata for a file."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"Unable to probe {path}: {reason}")
        self.path = path
        self.reason = reason


def _decode_cache_entry(value: object) -> tuple[bool, str | None]:
    """Normalize ffprobe cache entries."""
    if isinstance(value, tuple) and len(value) == _CACHE_ENTRY_LENGTH and isinstance(value[0], bool):
        ok, payload = value
        if payload is None or isinstance(payload, str):
            return ok, payload
        return ok, str(payload)
    if value is None or isinstance(value, str):
        return True, value
    return True, str(value)


def _log_cmd(ctx: RuntimeContext, cmd: list[str], *, cached: bool = False) -> None:
    """Log an ffprobe command banner with consistent labeling and routing."""
    action = format_action_label(dry_run=False, cached=cached)
    emit_status(f"{action}: {format_ffprobe_cmd(cmd)}", status_callback=ctx.status_callback)


def run(ctx: RuntimeContext, cmd: list[str]) -> str | None:
    """Run ``ffprobe`` with ``cmd`` and return stripped output or ``None``.

    Probing happens even in dry-run mode since commands depend on its result.
    Non-zero exits are cached alongside successes for the lifetime of the
    cache; timeouts are not, so a later run may retry.

    Raises:
        ProbeError: If the ``ffprobe`` executable cannot be started or times out.

    """
    key = cache_key(["ffprobe", *cmd])
    if key in ctx.cache:
        cached = ctx.cache[key]
        if ctx.verbosity >= Verbosity.COMMANDS:
            _log_cmd(ctx, cmd, cached=True)
        ok, payload = _decode_cache_entry(cached)
        return payload if ok else None
    if ctx.verbosity >= Verbosity.COMMANDS:
        _log_cmd(ctx, cmd)
    try:
        out = run_ffprobe(
            cmd,
            verbose=ctx.verbosity >= Verbosity.OUTPUT,
            status_callback=ctx.status_callback,
            list_cmd=False,
            timeout=ctx.timeout,
        ).strip()
    except OSError as exc:
        raise ProbeError(cmd[-1], f"ffprobe could not be started ({exc})") from exc
    except subprocess.TimeoutExpired as exc:
        logger.warning("ffprobe timed out: %s", format_ffprobe_cmd(cmd))
        raise ProbeError(cmd[-1], f"ffprobe did not finish within {exc.timeout:g}s") from exc
    except subprocess.CalledProcessError as exc:
        command = format_ffprobe_cmd(cmd)
        logger.warning("ffprobe command failed: %s", command, exc_info=exc)
        if ctx.verbosity >= Verbosity.COMMANDS:
            emit_status(f"ffprobe failed: {command}", status_callback=ctx.status_callback)
        ctx.cache[key] = _CACHE_FAILURE_ENTRY
        return None
    result = out or None
    ctx.cache[key] = (True, result)
    return result


def _is_remote(path: str) -> bool:
    return urlparse(path).scheme in {"http", "https"}


def _parse_duration(value: object) -> float | None:
    """Return a positive-or-zero duration, or ``None`` when unavailable."""
    if value is None or value == UNAVAILABLE:
        return None
    try:
        seconds = float(value)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        return None
    return seconds if seconds >= 0 else None


def get_duration_sec(ctx: RuntimeContext, path: str) -> float:
    """Return the media duration of ``path`` in seconds.

    The first stream's duration wins unless it is missing or ``N/A``; the
    container-level duration is the fallback.

    Raises:
        ProbeError: If the file is missing, ffprobe fails, or no duration is
            reported.

    """
    if not _is_remote(path) and not Path(path).is_file():
        raise ProbeError(path, "file not found")
    out = run(ctx, [*_QUIET, *_SHOW_ENTRIES, DURATION_ENTRIES, *_JSON_OUTPUT, path])
    if not out:
        raise ProbeError(path, "ffprobe returned no metadata")
    try:
        data = json.loads(out)
    except json.JSONDecodeError as e:
        raise ProbeError(path, "ffprobe returned invalid JSON") from e
    streams = data.get("streams") or []
    duration = _parse_duration(streams[0].get("duration")) if streams else None
    if duration is None:
        duration = _parse_duration((data.get("format") or {}).get("duration"))
    if duration is None:
        raise ProbeError(path, "no duration reported")
    return duration


def get_media_duration_info(ctx: RuntimeContext, path: str) -> MediaDurationInfo:
    """Probe ``path`` and describe its full time span."""
    duration = get_duration_sec(ctx, path)
    return MediaDurationInfo(end_time=format_time(duration), duration_sec=duration)


def clear_cache(ctx: RuntimeContext) -> None:
    """Clear cached probe results."""
    ctx.cache.clear()


__all__ = [
    "ProbeError",
    "RuntimeContext",
    "clear_cache",
    "get_duration_sec",
    "get_media_duration_info",
    "run",
]
