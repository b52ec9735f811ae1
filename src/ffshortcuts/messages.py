"""Rich console markup for user-facing messages."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from rich.markup import escape

from ffshortcuts.backend.builder.filters import format_number
from ffshortcuts.models.types import Operation

if TYPE_CHECKING:
    from collections.abc import Callable

    from ffshortcuts.models.ffprobe import TimeRange
    from ffshortcuts.models.params import OperationParams

SUCCESS = "[green]✔[/]"
WARNING = "[yellow]⚠[/]"
ERROR = "[red]✖[/]"
BULLET = "[bright_cyan] +[/]"

DONE = f" {SUCCESS} [white]Done[/]\n"
COMMAND_ERROR = (
    f" {WARNING} [yellow]Oh no, something went wrong.[/]\n"
    f" {WARNING} [yellow]Use -e to view the error and try again.[/]"
)


def about(name: str, version: str) -> str:
    """Banner printed before every command."""
    return f"[white] {escape(name.upper())}[/] [bright_black]- {escape(version)}[/]"


def command_not_found(name: str) -> str:
    """Hint shown when no subcommand matched."""
    return f" {WARNING} [yellow]Command Not Found[/]\n {WARNING} [yellow]Use \"{escape(name)} -h\" for help[/]"


def command_parse_error(detail: str) -> str:
    """Parser failure with details (``--error``)."""
    return f" {ERROR} [yellow]Failed to recognize command:[/]\n [bright_black]{escape(detail)}[/]"


def invalid_parameter(detail: str) -> str:
    """A parameter failed validation."""
    return f" {ERROR} [yellow]{escape(detail)}[/]"


def probe_failed(path: str) -> str:
    """The input could not be probed for its duration."""
    return f" {ERROR} [yellow]Could not read media info from:[/] [bright_black]{escape(path)}[/]"


def error_detail(detail: str) -> str:
    """Verbose diagnostic text (``--error``)."""
    return f"[bright_black]{escape(detail)}[/]"


def output_file(path: str) -> str:
    """Where the result was written."""
    return f" {SUCCESS} [white]Output File:[/] [bright_black]{escape(path)}[/]"


def time_range(time_range: TimeRange) -> str:
    """Resolved start/end markers."""
    return f"{BULLET} [white][[/] [yellow]{time_range.start} -> {time_range.end}[/] [white]][/]"


def _path(value: object) -> str:
    return escape(str(value))


def _gray(value: object) -> str:
    return f"[bright_black]\\[{_path(value)}][/]"


def _speed(p: Any, suffix: str = "") -> str:
    return (
        f"[white]Set speed to[/] [bright_black][[/] [yellow]{format_number(p.speed)}x[/] [bright_black]][/] "
        f"[white]of[/] {_gray(p.source)}{suffix}"
    )


_ACTIONS: dict[Operation, Callable[[Any], str]] = {
    Operation.CLIP: lambda p: f"[white]Clipping video:[/] [yellow]{_path(p.source)}[/]",
    Operation.TO_MP4: lambda p: f"[white]Converting to MP4:[/] [yellow]{_path(p.source)}[/]",
    Operation.AUDIO: lambda p: f"[white]Get audio from:[/] [yellow]{_path(p.source)}[/]",
    Operation.NO_AUDIO: lambda p: f"[white]Remove audio of:[/] [yellow]{_path(p.source)}[/]",
    Operation.IMG_TO_VIDEO: lambda p: f"[white]Create video with[/] {_gray(p.image)} [white]and[/] {_gray(p.audio)}",
    Operation.AUDIO_TO_VIDEO: lambda p: f"[white]Replace audio in[/] {_gray(p.video)} [white]with[/] {_gray(p.audio)}",
    Operation.LOOP: lambda p: (
        f"[white]Loop video[/] {_gray(p.source)} [bright_black][[/] [yellow]x{p.loops}[/] [bright_black]][/]"
    ),
    Operation.REVERSE: lambda p: f"[white]Reversing video:[/] [bright_black]{_path(p.source)}[/]",
    Operation.SCALE: lambda p: f"[white]Scaling video[/] {_gray(p.source)} [white]to width[/] [yellow]{p.width}[/]",
    Operation.RESIZE: lambda p: (
        f"[white]Resizing video[/] {_gray(p.source)} [white]to[/] "
        f"[bright_black][[/] [yellow]{p.width}x{p.height}[/] [bright_black]][/]"
    ),
    Operation.FPS: lambda p: (
        f"[white]Set to[/] [bright_black][[/] [yellow]{format_number(p.fps)}fps[/] [bright_black]][/] "
        f"[white]of[/] {_gray(p.source)}"
    ),
    Operation.SPEED: _speed,
    Operation.SPEED_VIDEO: lambda p: _speed(p, " [bright_black](no audio)[/]"),
    Operation.SPEED_AUDIO: lambda p: _speed(p, " [bright_black](audio)[/]"),
    Operation.GRAYSCALE: lambda p: f"[white]Applying grayscale to:[/] [bright_black]{_path(p.source)}[/]",
    Operation.INVERT: lambda p: f"[white]Inverting colors in:[/] [bright_black]{_path(p.source)}[/]",
    Operation.CONTRAST: lambda p: f"[white]Increasing contrast of:[/] [bright_black]{_path(p.source)}[/]",
}


def action(operation: Operation, params: OperationParams) -> str:
    """Describe what ``operation`` is about to do."""
    return f"{BULLET} {_ACTIONS[operation](params)}"


__all__ = [
    "COMMAND_ERROR",
    "DONE",
    "about",
    "action",
    "command_not_found",
    "command_parse_error",
    "error_detail",
    "invalid_parameter",
    "output_file",
    "probe_failed",
    "time_range",
]
