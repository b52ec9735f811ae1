"""Plan and execute FFmpeg commands."""

from __future__ import annotations

import logging
import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from ffshortcuts.models import OperationParams, OperationPlan, RuntimeContext
from ffshortcuts.models.verbosity import Verbosity
from ffshortcuts.tools import format_ffmpeg_cmd, run_ffmpeg
from ffshortcuts.tools.helpers import emit_status, format_action_label, maybe_log_command

from .builder import build_command
from .operations import get_descriptor

if TYPE_CHECKING:
    from collections.abc import Callable

    from ffshortcuts.models.types import Operation

CONVERSION_FAILED = "Conversion failed"

logger = logging.getLogger(__name__)


def _ensure_output_parent(
    path: Path,
    verbosity: Verbosity,
    status_callback: Callable[[str], None] | None,
) -> None:
    """Create the output parent directory if missing.

    Raises:
        OSError: If directory creation fails.

    """
    parent = path.parent
    if parent.exists():
        if not parent.is_dir():
            raise OSError(f"{CONVERSION_FAILED}: Output directory parent is not a directory: {parent}")
        return
    try:
        parent.mkdir(parents=True, exist_ok=True)
    except OSError as e:  # pragma: no cover - filesystem errors depend on env
        raise OSError(f"{CONVERSION_FAILED}: {e}") from e
    if verbosity > Verbosity.QUIET:
        emit_status(f"Created output directory: {parent}", status_callback=status_callback)


@dataclass
class FFmpegResult:
    """Result of an FFmpeg execution."""

    success: bool
    error: str = ""
    output: str | None = None
    log: str = ""


def plan_operation(
    operation: Operation | str,
    params: OperationParams,
    ctx: RuntimeContext,
    *,
    output: str | Path | None = None,
) -> OperationPlan:
    """Resolve ``params`` into an executable plan.

    Raises:
        KeyError: If ``operation`` is unknown.
        ffshortcuts.tools.ProbeError: If a required time range cannot be resolved.

    """
    return OperationPlan.from_params(get_descriptor(operation), params, ctx, output=output)


def execute_ffmpeg(
    args: tuple[str, ...],
    output: str,
    *,
    verbose: bool = False,
    list_cmd: bool = False,
    timeout: float | None = None,
    status_callback: Callable[[str], None] | None = None,
) -> FFmpegResult:
    """Execute an FFmpeg command and return result."""
    try:
        log = run_ffmpeg(args, verbose=verbose, status_callback=status_callback, list_cmd=list_cmd, timeout=timeout)
    except subprocess.TimeoutExpired as e:
        return FFmpegResult(
            success=False,
            error=f"{CONVERSION_FAILED}: ffmpeg did not finish within {e.timeout:g}s",
            log=_as_text(e.output),
        )
    except subprocess.CalledProcessError as e:
        return FFmpegResult(
            success=False,
            error=f"{CONVERSION_FAILED}: ffmpeg exited with status {e.returncode}",
            log=_as_text(e.output),
        )
    except OSError as e:
        return FFmpegResult(success=False, error=f"{CONVERSION_FAILED}: {e!s}")
    return FFmpegResult(success=True, output=output, log=log or "")


def _as_text(value: str | bytes | None) -> str:
    if value is None:
        return ""
    if isinstance(value, bytes):
        return value.decode(errors="replace")
    return value


def execute_plan(plan: OperationPlan, ctx: RuntimeContext) -> tuple[tuple[tuple[str, ...], ...], FFmpegResult]:
    """Build and run (or, in dry-run mode, only show) the plan's command."""
    args, output = build_command(plan)
    try:
        _ensure_output_parent(Path(output), ctx.verbosity, ctx.status_callback)
    except OSError as e:
        return (), FFmpegResult(success=False, error=str(e))
    if ctx.dry_run:
        banner = f"{format_action_label(dry_run=True)}: {format_ffmpeg_cmd(args)}"
        maybe_log_command(
            verbosity=ctx.verbosity,
            dry_run=True,
            status_callback=ctx.status_callback,
            banner=banner,
        )
        return (args,), FFmpegResult(success=True, output=output)
    logger.debug("Running %s", format_ffmpeg_cmd(args))
    result = execute_ffmpeg(
        args,
        output,
        verbose=ctx.verbosity >= Verbosity.OUTPUT,
        list_cmd=ctx.verbosity >= Verbosity.COMMANDS,
        timeout=ctx.timeout,
        status_callback=ctx.status_callback,
    )
    return (args,), result


def run_operation(
    operation: Operation | str,
    params: OperationParams,
    ctx: RuntimeContext,
    *,
    output: str | Path | None = None,
) -> tuple[tuple[tuple[str, ...], ...], FFmpegResult]:
    """Plan and execute one operation.

    Raises:
        ffshortcuts.tools.ProbeError: If a required time range cannot be resolved.

    """
    plan = plan_operation(operation, params, ctx, output=output)
    return execute_plan(plan, ctx)


__all__ = [
    "CONVERSION_FAILED",
    "FFmpegResult",
    "execute_ffmpeg",
    "execute_plan",
    "plan_operation",
    "run_operation",
]
