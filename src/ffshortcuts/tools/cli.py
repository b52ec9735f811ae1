"""Helpers for executing FFmpeg and ffprobe commands."""

import os
import shlex
import subprocess
import threading
from collections.abc import Callable, Sequence
from functools import partial
from pathlib import Path
from typing import Any

from .helpers import emit_status

_FFMPEG = os.getenv("FFSHORTCUTS_FFMPEG", "ffmpeg")
_FFPROBE = os.getenv("FFSHORTCUTS_FFPROBE", "ffprobe")


def cache_key(cmd: Sequence[str | Path]) -> tuple[Any, ...]:
    """Return a cache key for ``cmd`` based on tokens and file metadata."""
    key_parts: list[Any] = []
    for token in cmd:
        s = str(token)
        key_parts.append(s)
        if s.startswith("-"):
            continue
        path = Path(s)
        if path.is_file():
            try:
                stat = path.stat()
            except OSError:
                continue
            key_parts.extend([int(stat.st_mtime_ns), stat.st_size])
    return tuple(key_parts)


def _run_streaming(
    cmd: list[str],
    *,
    creationflags: int,
    timeout: float | None,
    log: Callable[[str], None],
) -> str:
    """Run a command, streaming combined stdout/stderr and returning output."""
    with subprocess.Popen(  # noqa: S603
        cmd,
        stdout=subprocess.PIPE,
        stderr=subprocess.STDOUT,
        text=True,
        bufsize=1,
        creationflags=creationflags,
    ) as p:
        if p.stdout is None:  # pragma: no cover - defensive
            raise RuntimeError("Failed to capture subprocess stdout")
        timed_out = threading.Event()

        def _kill() -> None:
            timed_out.set()
            p.kill()

        killer = threading.Timer(timeout, _kill) if timeout else None
        if killer is not None:
            killer.start()
        output_chunks: list[str] = []
        try:
            buf = ""
            for line in iter(p.stdout.readline, ""):
                output_chunks.append(line)
                parts = line.split("\r")
                buf += parts[0]
                for part in parts[1:]:
                    log(buf + "\r")
                    buf = part
                if buf.endswith("\n"):
                    log(buf[:-1])
                    buf = ""
            if buf:
                log(buf)
            p.wait()
        finally:
            if killer is not None:
                killer.cancel()
        output = "".join(output_chunks)
        if timed_out.is_set():
            raise subprocess.TimeoutExpired(cmd, timeout or 0, output)
        if p.returncode:
            raise subprocess.CalledProcessError(p.returncode or 1, cmd, output)
        return output


def run(
    exe: str | Path,
    args: Sequence[str | Path],
    *,
    verbose: bool = False,
    status_callback: Callable[[str], None] | None = None,
    list_cmd: bool = False,
    timeout: float | None = None,
) -> str:
    """Run an executable and return its combined stdout/stderr.

    When ``verbose`` is ``True``, stream output lines to the provided
    ``status_callback`` (or the logger) as the process runs. Otherwise capture
    output and return it after completion.

    Raises:
        subprocess.CalledProcessError: If the tool exits non-zero.
        subprocess.TimeoutExpired: If ``timeout`` seconds elapse first.
        FileNotFoundError: If the executable cannot be found.

    """
    cmd = [str(exe), *[str(a) for a in args]]

    def log(message: str) -> None:
        emit_status(message, status_callback=status_callback)

    if list_cmd:
        log(f"Running: {join_command(exe, args)}")

    creationflags = getattr(subprocess, "CREATE_NO_WINDOW", 0)

    if verbose:
        return _run_streaming(cmd, creationflags=creationflags, timeout=timeout, log=log)

    proc = subprocess.run(  # noqa: S603
        cmd,
        stdout=subprocess.PIPE,
        stderr=subprocess.STDOUT,
        text=True,
        creationflags=creationflags,
        check=True,
        timeout=timeout,
    )
    return proc.stdout


run_ffmpeg = partial(run, _FFMPEG)
run_ffprobe = partial(run, _FFPROBE)


def quote_arg(arg: str) -> str:
    """Quote argument for display if needed."""
    if os.name == "nt":
        return subprocess.list2cmdline([arg])
    return shlex.quote(arg)


def join_command(exe: str | Path, args: Sequence[str | Path]) -> str:
    """Format a command for display, one shell word per token."""
    return " ".join(quote_arg(str(part)) for part in (exe, *args))


def format_ffmpeg_cmd(args: Sequence[str | Path]) -> str:
    """Format an ``ffmpeg`` command for display."""
    return join_command(_FFMPEG, args)


def format_ffprobe_cmd(args: Sequence[str | Path]) -> str:
    """Format an ``ffprobe`` command for display."""
    return join_command(_FFPROBE, args)


__all__ = [
    "cache_key",
    "format_ffmpeg_cmd",
    "format_ffprobe_cmd",
    "join_command",
    "quote_arg",
    "run",
    "run_ffmpeg",
    "run_ffprobe",
]
