"""Runtime option models shared by every subcommand."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

from cyclopts import Group, Parameter
from pydantic import BaseModel, Field, field_validator

from ffshortcuts.models.verbosity import Verbosity

GLOBAL_GROUP = Group.create_ordered("Global Options")


@Parameter(name="*", group=GLOBAL_GROUP)
class RuntimeOptions(BaseModel):
    """Global runtime behavior options."""

    output: Annotated[
        Path | None,
        Parameter(name=["--output", "-o"]),
    ] = Field(
        default=None,
        description="Output file path. Defaults to video.mp4, or audio.mp3 for audio results.",
    )
    error: Annotated[
        bool,
        Parameter(name=["--error", "-e"], negative=""),
    ] = Field(default=False, description="Display the full error message on failure.")
    verbosity: Verbosity = Field(
        default=Verbosity.QUIET,
        description="Commands: show FFmpeg/ffprobe commands; Output: also show FFmpeg output.",
    )
    dry_run: bool = Field(default=False, description="Print FFmpeg commands without executing them.")
    timeout: float | None = Field(
        default=None,
        gt=0,
        description="Seconds to wait for FFmpeg before giving up. [default: $FFSHORTCUTS_TIMEOUT or no limit]",
    )

    @field_validator("verbosity", mode="before")
    @classmethod
    def _parse_verbosity(cls, v: object) -> Verbosity:
        """Accept numeric values or case-insensitive enum names."""
        if isinstance(v, Verbosity):
            return v
        if isinstance(v, int):
            return Verbosity(v)
        if isinstance(v, str):
            token = v.strip()
            try:
                return Verbosity[token.upper()]
            except KeyError:
                try:
                    return Verbosity(int(token))
                except (ValueError, KeyError):
                    pass
        raise ValueError("verbosity must be one of quiet, commands, output, or 0/1/2")


__all__ = ["GLOBAL_GROUP", "RuntimeOptions"]
