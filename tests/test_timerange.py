"""Tests for time range resolution and ffprobe duration parsing."""

from __future__ import annotations

import subprocess
from typing import TYPE_CHECKING

import pytest

from ffshortcuts.models.ffprobe import MEDIA_START
from ffshortcuts.tools import ProbeError, probe, resolve_time_range

if TYPE_CHECKING:
    from pathlib import Path

    from conftest import FakeProbe

    from ffshortcuts.models import RuntimeContext


def test_missing_markers_use_probed_span(ctx: RuntimeContext, fake_probe: FakeProbe, media_file: Path) -> None:
    """Without markers the whole file is used."""
    time_range = resolve_time_range(ctx, str(media_file))
    assert time_range.start == MEDIA_START == "00:00:00"
    assert time_range.end == "00:02:05"


def test_explicit_markers_pass_through(ctx: RuntimeContext, fake_probe: FakeProbe, media_file: Path) -> None:
    """Supplied markers are returned unchanged, but the file is still probed."""
    time_range = resolve_time_range(ctx, str(media_file), "00:00:05", "00:01:00")
    assert (time_range.start, time_range.end) == ("00:00:05", "00:01:00")
    assert len(fake_probe.calls) == 1


def test_only_start_given(ctx: RuntimeContext, fake_probe: FakeProbe, media_file: Path) -> None:
    """A missing end falls back to the probed duration."""
    time_range = resolve_time_range(ctx, str(media_file), start="00:00:10")
    assert (time_range.start, time_range.end) == ("00:00:10", "00:02:05")


def test_duration_floors_to_whole_seconds(ctx: RuntimeContext, fake_probe: FakeProbe, media_file: Path) -> None:
    """Fractional durations are truncated, not rounded."""
    fake_probe.payload = {"streams": [{"duration": "3661.999"}]}
    assert resolve_time_range(ctx, str(media_file)).end == "01:01:01"


@pytest.mark.parametrize(
    "payload",
    [
        {"streams": [{"duration": "N/A"}], "format": {"duration": "42.5"}},
        {"streams": [{}], "format": {"duration": "42.5"}},
        {"streams": [], "format": {"duration": "42.5"}},
    ],
)
def test_falls_back_to_container_duration(
    ctx: RuntimeContext, fake_probe: FakeProbe, media_file: Path, payload: dict[str, object]
) -> None:
    """The container duration is used when the stream has none."""
    fake_probe.payload = payload
    assert probe.get_duration_sec(ctx, str(media_file)) == pytest.approx(42.5)
    assert resolve_time_range(ctx, str(media_file)).end == "00:00:42"


def test_probe_command_requests_json_durations(ctx: RuntimeContext, fake_probe: FakeProbe, media_file: Path) -> None:
    """ffprobe is asked for stream and format durations as JSON."""
    probe.get_duration_sec(ctx, str(media_file))
    (cmd,) = fake_probe.calls
    assert cmd == [
        "-v",
        "quiet",
        "-show_entries",
        "stream=duration:format=duration",
        "-of",
        "json",
        str(media_file),
    ]


def test_missing_file_fails_loudly(ctx: RuntimeContext, fake_probe: FakeProbe, tmp_path: Path) -> None:
    """A missing input raises instead of producing an empty range."""
    with pytest.raises(ProbeError, match="file not found"):
        resolve_time_range(ctx, str(tmp_path / "missing.mp4"))
    assert fake_probe.calls == []


@pytest.mark.parametrize(
    ("payload", "reason"),
    [
        (None, "no metadata"),
        ("not json", "invalid JSON"),
        ({"streams": [{"duration": "N/A"}], "format": {"duration": "N/A"}}, "no duration"),
        ({"streams": [], "format": {}}, "no duration"),
    ],
)
def test_unusable_probe_output(
    ctx: RuntimeContext,
    fake_probe: FakeProbe,
    media_file: Path,
    payload: dict[str, object] | str | None,
    reason: str,
) -> None:
    """Unusable ffprobe output raises ``ProbeError`` with the reason."""
    fake_probe.payload = payload
    with pytest.raises(ProbeError, match=reason) as excinfo:
        resolve_time_range(ctx, str(media_file))
    assert excinfo.value.path == str(media_file)


def test_ffprobe_failure_raises(ctx: RuntimeContext, fake_probe: FakeProbe, media_file: Path) -> None:
    """A non-zero ffprobe exit is reported as a probe failure."""
    fake_probe.error = subprocess.CalledProcessError(1, ["ffprobe"])
    with pytest.raises(ProbeError):
        resolve_time_range(ctx, str(media_file))


def test_ffprobe_not_installed(ctx: RuntimeContext, fake_probe: FakeProbe, media_file: Path) -> None:
    """A missing ffprobe executable is a probe failure, not a crash."""
    fake_probe.error = FileNotFoundError("ffprobe")
    with pytest.raises(ProbeError, match="could not be started"):
        resolve_time_range(ctx, str(media_file))


def test_ffprobe_timeout_is_not_cached(ctx: RuntimeContext, fake_probe: FakeProbe, media_file: Path) -> None:
    """A timed-out ffprobe raises each time and is retried on the next run."""
    fake_probe.error = subprocess.TimeoutExpired(["ffprobe"], 5)
    for _ in range(2):
        with pytest.raises(ProbeError, match="did not finish within 5s"):
            resolve_time_range(ctx, str(media_file))
    assert len(fake_probe.calls) == 2


def test_probe_results_are_cached(ctx: RuntimeContext, fake_probe: FakeProbe, media_file: Path) -> None:
    """Repeated probes of an unchanged file hit the cache."""
    resolve_time_range(ctx, str(media_file))
    resolve_time_range(ctx, str(media_file))
    assert len(fake_probe.calls) == 1
    probe.clear_cache(ctx)
    resolve_time_range(ctx, str(media_file))
    assert len(fake_probe.calls) == 2


def test_probe_failures_are_cached(ctx: RuntimeContext, fake_probe: FakeProbe, media_file: Path) -> None:
    """Failed probes are not retried for the same file."""
    fake_probe.error = subprocess.CalledProcessError(1, ["ffprobe"])
    for _ in range(2):
        with pytest.raises(ProbeError):
            resolve_time_range(ctx, str(media_file))
    assert len(fake_probe.calls) == 1


def test_real_ffprobe_duration(ctx: RuntimeContext, source_file: Path) -> None:
    """The synthetic clip reports its four second duration."""
    time_range = resolve_time_range(ctx, str(source_file))
    assert time_range.start == "00:00:00"
    assert time_range.end == "00:00:04"
