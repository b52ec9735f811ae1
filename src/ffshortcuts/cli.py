"""Command-line interface entry point."""

from __future__ import annotations

import sys
from typing import Any

from cyclopts import App, CycloptsError
from pydantic import ValidationError
from rich.console import Console

from . import __version__, messages
from .backend import execute_plan, get_descriptor, plan_operation
from .models import Operation, RuntimeContext, RuntimeOptions
from .models.defaults import DEFAULT_FPS, DEFAULT_LOOPS, DEFAULT_SPEED
from .tools import ProbeError

PROG = "ffshortcuts"
VERSION_FLAGS = ("--version", "-v", "-V")
HELP_FLAGS = ("--help", "-h")

console = Console(highlight=False)

app = App(
    name=PROG,
    help="Short, memorable shortcuts for common FFmpeg tasks.",
    version=__version__,
    version_flags=list(VERSION_FLAGS),
    help_flags=list(HELP_FLAGS),
)

Runtime = RuntimeOptions | None


def _status(message: str) -> None:
    """Print tool status lines verbatim; they may contain brackets."""
    if message.endswith("\r"):
        console.print(message[:-1], markup=False, highlight=False, end="\r")
        return
    console.print(message, markup=False, highlight=False)


def _validation_message(err: ValidationError) -> str:
    return "; ".join(str(e["msg"]).removeprefix("Value error, ") for e in err.errors())


def perform(operation: Operation, runtime: RuntimeOptions | None, **values: Any) -> int:
    """Validate, plan and run one operation, reporting progress on the console.

    Returns:
        ``0`` on success, ``1`` on any failure. Never raises for user errors.

    """
    runtime = runtime or RuntimeOptions()
    descriptor = get_descriptor(operation)
    try:
        try:
            params = descriptor.params_model(**values)
        except ValidationError as e:
            console.print(messages.invalid_parameter(_validation_message(e)))
            return 1
        console.print(messages.action(operation, params))
        try:
            ctx = RuntimeContext(
                verbosity=runtime.verbosity,
                dry_run=runtime.dry_run,
                status_callback=_status,
                **({"timeout": runtime.timeout} if runtime.timeout is not None else {}),
            )
        except ValueError as e:
            console.print(messages.invalid_parameter(str(e)))
            return 1
        with ctx:
            try:
                plan = plan_operation(operation, params, ctx, output=runtime.output)
            except ProbeError as e:
                console.print(messages.probe_failed(e.path))
                if runtime.error:
                    console.print(messages.error_detail(str(e)))
                return 1
            if plan.time_range is not None:
                console.print(messages.time_range(plan.time_range))
            _, result = execute_plan(plan, ctx)
        if not result.success:
            if runtime.error:
                console.print(messages.error_detail(result.error))
                if result.log:
                    console.print(messages.error_detail(result.log))
            else:
                console.print(messages.COMMAND_ERROR)
            return 1
        console.print(messages.output_file(result.output or plan.output_path))
        return 0
    finally:
        console.print(messages.DONE)


@app.command(name=Operation.CLIP.value)
def clip(video: str, start: str | None = None, end: str | None = None, /, *, runtime: Runtime = None) -> int:
    """Clip a video.

    Args:
        video: Input video.
        start: Start marker, e.g. 00:00:05. Defaults to the beginning.
        end: End marker, e.g. 00:01:00. Defaults to the end of the video.
    """
    return perform(Operation.CLIP, runtime, source=video, start=start, end=end)


@app.command(name=Operation.TO_MP4.value)
def to_mp4(video: str, /, *, runtime: Runtime = None) -> int:
    """Convert a video (e.g. webm) to mp4."""
    return perform(Operation.TO_MP4, runtime, source=video)


@app.command(name=Operation.AUDIO.value)
def audio(video: str, start: str | None = None, end: str | None = None, /, *, runtime: Runtime = None) -> int:
    """Get the audio of a video as mp3.

    Args:
        video: Input video.
        start: Start marker. Defaults to the beginning.
        end: End marker. Defaults to the end of the video.
    """
    return perform(Operation.AUDIO, runtime, source=video, start=start, end=end)


@app.command(name=Operation.NO_AUDIO.value)
def no_audio(video: str, start: str | None = None, end: str | None = None, /, *, runtime: Runtime = None) -> int:
    """Remove the audio of a video.

    Args:
        video: Input video.
        start: Start marker. Defaults to the beginning.
        end: End marker. Defaults to the end of the video.
    """
    return perform(Operation.NO_AUDIO, runtime, source=video, start=start, end=end)


@app.command(name=Operation.IMG_TO_VIDEO.value)
def img_to_video(image: str, audio: str, /, *, runtime: Runtime = None) -> int:
    """Create a video with an image and audio file."""
    return perform(Operation.IMG_TO_VIDEO, runtime, image=image, audio=audio)


@app.command(name=Operation.AUDIO_TO_VIDEO.value)
def audio_to_video(audio: str, video: str, /, *, runtime: Runtime = None) -> int:
    """Add audio to a video file, replacing its audio track."""
    return perform(Operation.AUDIO_TO_VIDEO, runtime, audio=audio, video=video)


@app.command(name=Operation.LOOP.value)
def loop(video: str, loops: int = DEFAULT_LOOPS, /, *, runtime: Runtime = None) -> int:
    """Loop a video.

    Args:
        video: Input video.
        loops: Number of extra times to play the video. Must be > 0.
    """
    return perform(Operation.LOOP, runtime, source=video, loops=loops)


@app.command(name=Operation.REVERSE.value)
def reverse(video: str, /, *, runtime: Runtime = None) -> int:
    """Reverse the playback of a video."""
    return perform(Operation.REVERSE, runtime, source=video)


@app.command(name=Operation.SCALE.value)
def scale(video: str, width: int, /, *, runtime: Runtime = None) -> int:
    """Scale the size to the given width, keeping the aspect ratio."""
    return perform(Operation.SCALE, runtime, source=video, width=width)


@app.command(name=Operation.RESIZE.value)
def resize(video: str, width: int, height: int, /, *, runtime: Runtime = None) -> int:
    """Resize to the given width and height."""
    return perform(Operation.RESIZE, runtime, source=video, width=width, height=height)


@app.command(name=Operation.FPS.value)
def fps(video: str, fps: float = DEFAULT_FPS, /, *, runtime: Runtime = None) -> int:
    """Set the number of frames per second."""
    return perform(Operation.FPS, runtime, source=video, fps=fps)


@app.command(name=Operation.SPEED.value)
def speed(video: str, speed: float = DEFAULT_SPEED, /, *, runtime: Runtime = None) -> int:
    """Set the video speed, audio included."""
    return perform(Operation.SPEED, runtime, source=video, speed=speed)


@app.command(name=Operation.SPEED_VIDEO.value)
def speed_video(video: str, speed: float = DEFAULT_SPEED, /, *, runtime: Runtime = None) -> int:
    """Set the speed of a video without touching its audio."""
    return perform(Operation.SPEED_VIDEO, runtime, source=video, speed=speed)


@app.command(name=Operation.SPEED_AUDIO.value)
def speed_audio(audio: str, speed: float = DEFAULT_SPEED, /, *, runtime: Runtime = None) -> int:
    """Set the speed of an audio file."""
    return perform(Operation.SPEED_AUDIO, runtime, source=audio, speed=speed)


@app.command(name=Operation.GRAYSCALE.value)
def grayscale(video: str, /, *, runtime: Runtime = None) -> int:
    """Convert a video to black and white."""
    return perform(Operation.GRAYSCALE, runtime, source=video)


@app.command(name=Operation.INVERT.value)
def invert(video: str, /, *, runtime: Runtime = None) -> int:
    """Invert the colors of a video."""
    return perform(Operation.INVERT, runtime, source=video)


@app.command(name=Operation.CONTRAST.value)
def contrast(video: str, /, *, runtime: Runtime = None) -> int:
    """Increase the contrast of a video."""
    return perform(Operation.CONTRAST, runtime, source=video)


COMMAND_NAMES = frozenset(op.value for op in Operation)


VALUE_OPTIONS = frozenset({"--output", "-o", "--verbosity", "--timeout"})  #: Global options taking a value.
SWITCH_OPTIONS = frozenset({"--error", "-e", "--dry-run", "--no-dry-run"})  #: Global on/off options.


def hoist_global_options(argv: list[str]) -> list[str]:
    """Move global options given before the subcommand to after it.

    Runtime options are bound to each subcommand, so
    ``-o out.mp4 scale in.mp4 640`` is parsed as ``scale in.mp4 640 -o out.mp4``.
    ``argv`` is returned unchanged when no subcommand follows the options.
    """
    leading: list[str] = []
    i = 0
    while i < len(argv):
        token = argv[i]
        name, has_value, _ = token.partition("=")
        if token in SWITCH_OPTIONS or (has_value and name in VALUE_OPTIONS):
            leading.append(token)
            i += 1
        elif token in VALUE_OPTIONS and i + 1 < len(argv):
            leading.extend(argv[i : i + 2])
            i += 2
        else:
            break
    if not leading or i >= len(argv) or argv[i] not in COMMAND_NAMES:
        return argv
    return [*argv[i:], *leading]


def _is_known(argv: list[str]) -> bool:
    """Whether ``argv`` starts with a subcommand or a help/version flag."""
    if not argv:
        return False
    first = argv[0]
    return first in COMMAND_NAMES or first in HELP_FLAGS or first in VERSION_FLAGS


def _wants_error_detail(argv: list[str]) -> bool:
    return any(token in ("--error", "-e") for token in argv)


def main(argv: list[str] | None = None) -> int:
    """Run the ffshortcuts CLI."""
    argv = hoist_global_options(sys.argv[1:] if argv is None else list(argv))
    console.print(messages.about(PROG, __version__))
    if not _is_known(argv):
        console.print(messages.command_not_found(PROG))
        return 1
    try:
        result = app(argv, print_error=False, exit_on_error=False)
    except CycloptsError as e:
        if _wants_error_detail(argv):
            console.print(messages.command_parse_error(str(e)))
        else:
            console.print(messages.COMMAND_ERROR)
        return 1
    return result if isinstance(result, int) else 0


if __name__ == "__main__":
    raise SystemExit(main())
