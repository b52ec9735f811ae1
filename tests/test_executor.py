"""Tests for FFmpeg execution helpers."""

from __future__ import annotations

import subprocess
from pathlib import Path
from typing import TYPE_CHECKING

import pytest
from diskcache import Cache
from pydantic import ValidationError

from ffshortcuts.backend import executor
from ffshortcuts.backend.builder import build_command
from ffshortcuts.models import LoopParams, Operation, RuntimeContext, SourceParams, SpeedParams, TimeRangeParams
from ffshortcuts.models.verbosity import Verbosity
from ffshortcuts.tools import ProbeError, probe

if TYPE_CHECKING:
    from conftest import FakeProbe


class RecordingFFmpeg:
    """Stand-in for ``run_ffmpeg`` that records its arguments."""

    def __init__(self, error: BaseException | None = None, output: str = "") -> None:
        self.calls: list[tuple[tuple[str, ...], dict[str, object]]] = []
        self.error = error
        self.output = output

    def __call__(self, args: tuple[str, ...], **kwargs: object) -> str:
        self.calls.append((args, kwargs))
        if self.error is not None:
            raise self.error
        return self.output


@pytest.fixture
def cache(tmp_path: Path) -> Cache:
    """A standalone cache for contexts built inside a test."""
    return Cache(str(tmp_path / "cache-standalone"))


@pytest.fixture
def ffmpeg(monkeypatch: pytest.MonkeyPatch) -> RecordingFFmpeg:
    """Replace ffmpeg with a recorder that succeeds."""
    fake = RecordingFFmpeg()
    monkeypatch.setattr(executor, "run_ffmpeg", fake)
    return fake


def test_run_operation_runs_built_command(
    ctx: RuntimeContext, fake_probe: FakeProbe, ffmpeg: RecordingFFmpeg, media_file: Path, tmp_path: Path
) -> None:
    """The planned command is handed to ffmpeg unchanged."""
    out = tmp_path / "out.mp4"
    params = TimeRangeParams(source=str(media_file), start="5")
    commands, result = executor.run_operation(Operation.CLIP, params, ctx, output=out)
    assert result.success
    assert result.output == str(out)
    (args,) = commands
    assert ffmpeg.calls[0][0] == args
    assert args == ("-y", "-ss", "00:00:05", "-to", "00:02:05", "-i", str(media_file), "-c:a", "copy", str(out))


def test_default_output_name(ctx: RuntimeContext) -> None:
    """Audio results default to ``audio.mp3``, others to ``video.mp4``."""
    audio_plan = executor.plan_operation("speedaudio", SpeedParams(source="a.mp3"), ctx)
    video_plan = executor.plan_operation(Operation.REVERSE, SourceParams(source="v.mp4"), ctx)
    assert audio_plan.output_path == "audio.mp3"
    assert video_plan.output_path == "video.mp4"


def test_dry_run_does_not_execute(tmp_path: Path, cache: Cache, ffmpeg: RecordingFFmpeg) -> None:
    """Dry-run shows the command and never starts ffmpeg."""
    seen: list[str] = []
    with RuntimeContext(dry_run=True, status_callback=seen.append, cache=cache) as ctx:
        commands, result = executor.run_operation(
            Operation.REVERSE, SourceParams(source="in.mp4"), ctx, output=tmp_path / "rev.mp4"
        )
    assert result.success
    assert ffmpeg.calls == []
    assert len(commands) == 1
    assert seen
    assert seen[-1].startswith("Command: ffmpeg -y -i in.mp4 -vf reverse")


def test_failure_returns_result(ctx: RuntimeContext, monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """A non-zero exit becomes a failed result carrying the tool output."""
    fake = RecordingFFmpeg(error=subprocess.CalledProcessError(1, ["ffmpeg"], output="boom"))
    monkeypatch.setattr(executor, "run_ffmpeg", fake)
    _, result = executor.run_operation(
        Operation.GRAYSCALE, SourceParams(source="in.mp4"), ctx, output=tmp_path / "gray.mp4"
    )
    assert not result.success
    assert result.error.startswith(executor.CONVERSION_FAILED)
    assert "status 1" in result.error
    assert result.log == "boom"


def test_timeout_returns_result(monkeypatch: pytest.MonkeyPatch, cache: Cache, tmp_path: Path) -> None:
    """A hung ffmpeg is reported once the timeout expires."""
    fake = RecordingFFmpeg(error=subprocess.TimeoutExpired(["ffmpeg"], 2.5))
    monkeypatch.setattr(executor, "run_ffmpeg", fake)
    with RuntimeContext(cache=cache, timeout=2.5) as ctx:
        _, result = executor.run_operation(
            Operation.INVERT, SourceParams(source="in.mp4"), ctx, output=tmp_path / "inv.mp4"
        )
    assert not result.success
    assert "did not finish within 2.5s" in result.error
    assert fake.calls[0][1]["timeout"] == 2.5


def test_missing_ffmpeg_returns_result(ctx: RuntimeContext, monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """An ffmpeg that cannot be started is a failed result, not a crash."""
    monkeypatch.setattr(executor, "run_ffmpeg", RecordingFFmpeg(error=FileNotFoundError("ffmpeg")))
    _, result = executor.run_operation(
        Operation.CONTRAST, SourceParams(source="in.mp4"), ctx, output=tmp_path / "c.mp4"
    )
    assert not result.success
    assert result.error.startswith(executor.CONVERSION_FAILED)


def test_probe_failure_raises_before_ffmpeg(
    ctx: RuntimeContext, fake_probe: FakeProbe, ffmpeg: RecordingFFmpeg, tmp_path: Path
) -> None:
    """Planning a clip of a missing file fails before ffmpeg runs."""
    params = TimeRangeParams(source=str(tmp_path / "missing.mp4"))
    with pytest.raises(ProbeError):
        executor.run_operation(Operation.CLIP, params, ctx)
    assert ffmpeg.calls == []


def test_invalid_loops_never_reach_ffmpeg(ffmpeg: RecordingFFmpeg) -> None:
    """Loop validation fails while building params, so nothing runs."""
    with pytest.raises(ValidationError):
        LoopParams(source="in.mp4", loops=0)
    assert ffmpeg.calls == []


def test_params_must_match_operation(ctx: RuntimeContext) -> None:
    """Plans reject parameters of the wrong shape."""
    with pytest.raises(TypeError, match="expects LoopParams"):
        executor.plan_operation(Operation.LOOP, SourceParams(source="in.mp4"), ctx)


def test_output_directory_is_created(ctx: RuntimeContext, ffmpeg: RecordingFFmpeg, tmp_path: Path) -> None:
    """Missing parent directories of the output are created."""
    out = tmp_path / "nested" / "dir" / "out.mp4"
    _, result = executor.run_operation(Operation.REVERSE, SourceParams(source="in.mp4"), ctx, output=out)
    assert result.success
    assert out.parent.is_dir()


def test_verbosity_controls_command_listing(cache: Cache, ffmpeg: RecordingFFmpeg, tmp_path: Path) -> None:
    """Commands are listed from the COMMANDS level, output streamed at OUTPUT."""
    with RuntimeContext(verbosity=Verbosity.OUTPUT, cache=cache) as ctx:
        executor.run_operation(Operation.REVERSE, SourceParams(source="in.mp4"), ctx, output=tmp_path / "o.mp4")
    kwargs = ffmpeg.calls[0][1]
    assert kwargs["list_cmd"] is True
    assert kwargs["verbose"] is True


def test_loop_end_to_end(ctx: RuntimeContext, source_file: Path, tmp_path: Path) -> None:
    """Looping once doubles the clip length."""
    out = tmp_path / "looped.mp4"
    params = LoopParams(source=str(source_file), loops=1)
    plan = executor.plan_operation(Operation.LOOP, params, ctx, output=out)
    args, _ = build_command(plan)
    _, result = executor.execute_plan(plan, ctx)
    assert result.success, result.error
    assert args[-1] == str(out)
    probe.clear_cache(ctx)
    assert probe.get_duration_sec(ctx, str(out)) == pytest.approx(8.0, abs=0.5)

