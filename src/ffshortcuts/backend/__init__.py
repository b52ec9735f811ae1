"""Backend utilities for building and executing FFmpeg commands."""

from .builder import build_command
from .executor import FFmpegResult, execute_plan, plan_operation, run_operation
from .operations import OPERATIONS, get_descriptor

__all__ = [
    "OPERATIONS",
    "FFmpegResult",
    "build_command",
    "execute_plan",
    "get_descriptor",
    "plan_operation",
    "run_operation",
]
