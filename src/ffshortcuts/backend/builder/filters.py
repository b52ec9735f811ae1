"""Filter graph strings and numeric formatting for filter arguments."""

import math

STRETCH_PLACES = 2  #: Decimal places kept in the ``setpts`` stretch factor.

GRAYSCALE = "hue=s=0"  #: Drop saturation entirely.
NEGATE = "negate"  #: Invert every color channel.
REVERSE = "reverse"  #: Play frames back to front.
INCREASE_CONTRAST = "curves=preset=increase_contrast"  #: Fixed contrast curve preset.
SQUARE_PIXELS = "setsar=1:1"  #: Reset the sample aspect ratio after scaling.
EVEN_HEIGHT = -2  #: Scale dimension that keeps aspect ratio and rounds to an even size.


def format_number(value: float) -> str:
    """Return the shortest decimal form of ``value`` (``2.0`` -> ``"2"``)."""
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))


def stretch_factor(speed: float) -> float:
    """Return the presentation timestamp multiplier for ``speed``.

    The inverse of ``speed`` rounded half-up to two decimals, so the command
    line never carries floating-point noise such as ``0.3333333333``.

    Raises:
        ValueError: If ``speed`` is not positive.

    """
    if speed <= 0:
        raise ValueError(f"Speed must be greater than 0: {speed}")
    q = 10**STRETCH_PLACES
    return math.floor((1 / speed) * q + 0.5) / q


def setpts(speed: float) -> str:
    """Return the video retiming filter for ``speed``."""
    return f"setpts={format_number(stretch_factor(speed))}*PTS"


def atempo(speed: float) -> str:
    """Return the audio tempo filter for ``speed``."""
    return f"atempo={format_number(speed)}"


def fps(rate: float) -> str:
    """Return the frame rate conversion filter."""
    return f"fps=fps={format_number(rate)}"


def scale_to_width(width: int) -> str:
    """Return a scale chain fixing ``width`` and deriving an even height."""
    return f"scale={width}:{EVEN_HEIGHT},{SQUARE_PIXELS}"


def labeled(source: str, graph: str, label: str) -> str:
    """Return ``[source]graph[label]`` for use in a complex filter graph."""
    return f"[{source}]{graph}[{label}]"


def complex_graph(*chains: str) -> str:
    """Join filter chains into one ``-filter_complex`` graph."""
    return ";".join(chains)


__all__ = [
    "GRAYSCALE",
    "INCREASE_CONTRAST",
    "NEGATE",
    "REVERSE",
    "atempo",
    "complex_graph",
    "format_number",
    "fps",
    "labeled",
    "scale_to_width",
    "setpts",
    "stretch_factor",
]
