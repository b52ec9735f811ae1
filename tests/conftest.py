"""Shared pytest fixtures.

Unit tests replace ``ffprobe`` with a canned JSON payload so no external tool
is needed. Integration tests generate a short synthetic clip with the real
``ffmpeg`` and are skipped when it is not installed.
"""

from __future__ import annotations

import json
import shutil
import subprocess
from typing import TYPE_CHECKING, Any

import pytest
from diskcache import Cache

from ffshortcuts.backend import OPERATIONS
from ffshortcuts.models import Operation, OperationPlan, RuntimeContext, TimeRange

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator
    from pathlib import Path

    from ffshortcuts.models import OperationParams

# Duration in seconds used by synthetic sample videos in tests.
VIDEO_DURATION_SEC: float = 4.0


class FakeProbe:
    """Stand-in for ``run_ffprobe`` that returns a configurable payload."""

    def __init__(self) -> None:
        self.payload: dict[str, Any] | str | None = {"streams": [{"duration": "125.000000"}]}
        self.calls: list[list[str]] = []
        self.error: BaseException | None = None

    def __call__(self, cmd: list[str], **_kwargs: object) -> str:
        self.calls.append(list(cmd))
        if self.error is not None:
            raise self.error
        if self.payload is None:
            return ""
        if isinstance(self.payload, str):
            return self.payload
        return json.dumps(self.payload)


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep user configuration from leaking into tests."""
    monkeypatch.delenv("FFSHORTCUTS_CACHE", raising=False)
    monkeypatch.delenv("FFSHORTCUTS_TIMEOUT", raising=False)


@pytest.fixture
def fake_probe(monkeypatch: pytest.MonkeyPatch) -> FakeProbe:
    """Replace ffprobe with a fake reporting a 125 second file."""
    fake = FakeProbe()
    monkeypatch.setattr("ffshortcuts.tools.probe.run_ffprobe", fake)
    return fake


@pytest.fixture
def ctx(tmp_path: Path) -> Iterator[RuntimeContext]:
    """Runtime context backed by a per-test cache directory."""
    with RuntimeContext(cache=Cache(str(tmp_path / "cache"))) as runtime:
        yield runtime


@pytest.fixture
def media_file(tmp_path: Path) -> Path:
    """An existing (empty) input file; probing is faked."""
    path = tmp_path / "in.mp4"
    path.write_bytes(b"")
    return path


@pytest.fixture
def make_plan() -> Callable[..., OperationPlan]:
    """Build a plan directly, bypassing probing."""

    def _make(
        operation: Operation,
        params: OperationParams,
        *,
        time_range: TimeRange | None = None,
        output: str | None = None,
    ) -> OperationPlan:
        descriptor = OPERATIONS[operation]
        return OperationPlan(
            descriptor=descriptor,
            params=params,
            output_path=output or descriptor.default_output,
            time_range=time_range,
        )

    return _make


@pytest.fixture
def source_file(tmp_path: Path) -> Path:
    """Provide a small synthetic MP4 video for tests.

    Creates a 4-second 200x200 color clip with silent stereo audio.
    Some encoders fail to encode much lower than 200x200.
    """
    ffmpeg = shutil.which("ffmpeg")
    if not ffmpeg or not shutil.which("ffprobe"):
        pytest.skip("ffmpeg and ffprobe must be available in PATH")
    data_dir = tmp_path / "data"
    data_dir.mkdir(parents=True, exist_ok=True)
    out = data_dir / "video.mp4"
    subprocess.run(  # noqa: S603
        [
            ffmpeg,
            "-v",
            "error",
            # Video source
            "-f",
            "lavfi",
            "-i",
            f"color=s=200x200:d={VIDEO_DURATION_SEC}",
            # Audio source (silent stereo)
            "-f",
            "lavfi",
            "-i",
            f"anullsrc=r=48000:cl=stereo:d={VIDEO_DURATION_SEC}",
            # Shortest to match streams
            "-shortest",
            # Encode video and audio
            "-c:v",
            "libx264",
            "-pix_fmt",
            "yuv420p",
            "-c:a",
            "aac",
            str(out),
        ],
        check=True,
    )
    return out
