"""Per-stream-type flag helpers.

``kind`` is ffmpeg's one-letter stream type: ``"v"`` for video, ``"a"`` for
audio.
"""

MAP_FLAG = "-map"  #: Select a stream for the output.


def selector(input_index: int, kind: str, index: int = 0) -> str:
    """Return a stream selector such as ``1:v:0`` (input, type, position)."""
    return f"{input_index}:{kind}:{index}"


def map_stream(input_index: int, kind: str, index: int = 0) -> tuple[str, ...]:
    """Return ``-map`` args picking one stream of ``kind`` from an input."""
    return (MAP_FLAG, selector(input_index, kind, index))


def map_label(label: str) -> tuple[str, ...]:
    """Return ``-map`` args picking a labeled filter graph output."""
    return (MAP_FLAG, f"[{label}]")


def codec_flag(kind: str) -> tuple[str, ...]:
    return (f"-c:{kind}",)


def copy_stream(kind: str) -> tuple[str, ...]:
    """Return args passing ``kind`` streams through untouched."""
    return (*codec_flag(kind), "copy")


def filter_flag(kind: str) -> tuple[str, ...]:
    return (f"-filter:{kind}",)


def disable_stream(kind: str) -> tuple[str, ...]:
    """Return the flag dropping every ``kind`` stream (``-vn``, ``-an``)."""
    return (f"-{kind}n",)


__all__ = [
    "MAP_FLAG",
    "codec_flag",
    "copy_stream",
    "disable_stream",
    "filter_flag",
    "map_label",
    "map_stream",
    "selector",
]
