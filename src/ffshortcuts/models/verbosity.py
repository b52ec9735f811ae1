"""Verbosity levels for status output."""

from enum import IntEnum


class Verbosity(IntEnum):
    """How much of the external tool activity to show.

    ``COMMANDS`` lists every ``ffmpeg``/``ffprobe`` command line; ``OUTPUT``
    additionally streams the tool's own output as it runs.
    """

    QUIET = 0
    COMMANDS = 1
    OUTPUT = 2


__all__ = ["Verbosity"]
