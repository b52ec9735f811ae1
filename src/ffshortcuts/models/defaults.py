"""Default constants for operation parameters."""

from __future__ import annotations

from ffshortcuts.models.types import DEFAULT_OUTPUT_AUDIO, DEFAULT_OUTPUT_VIDEO

DEFAULT_LOOPS = 1
DEFAULT_FPS = 30.0
DEFAULT_SPEED = 2.0

__all__ = [
    "DEFAULT_FPS",
    "DEFAULT_LOOPS",
    "DEFAULT_OUTPUT_AUDIO",
    "DEFAULT_OUTPUT_VIDEO",
    "DEFAULT_SPEED",
]
