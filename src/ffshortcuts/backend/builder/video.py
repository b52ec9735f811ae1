"""Video operation argument builders.

Each builder returns the arguments between the global flags and the output
path of an ``ffmpeg`` invocation.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, cast

from . import audio, filters, trim
from .command_args import COPY_ALL, INPUT_FLAG, SHORTEST
from .stream_args import codec_flag, filter_flag, map_label

if TYPE_CHECKING:
    from ffshortcuts.models.params import (
        ComposeParams,
        FpsParams,
        LoopParams,
        ResizeParams,
        ScaleParams,
        SourceParams,
        SpeedParams,
        TimeRangeParams,
    )
    from ffshortcuts.models.plan import OperationPlan

CODEC: tuple[str, ...] = codec_flag("v")  #: Video codec flag.
ENCODE_H264: tuple[str, ...] = (*CODEC, "libx264")  #: Encode video with x264.
FILTER: tuple[str, ...] = ("-vf",)  #: Simple video filter graph.
FILTER_V: tuple[str, ...] = filter_flag("v")  #: Simple video filter graph, long form.
FILTER_COMPLEX: tuple[str, ...] = ("-filter_complex",)  #: Filter graph spanning several streams.
LOOP_IMAGE: tuple[str, ...] = ("-loop", "1")  #: Repeat a still image input indefinitely.
TUNE_STILL_IMAGE: tuple[str, ...] = ("-tune", "stillimage")  #: x264 tuning for static pictures.
PIX_FMT_YUV420P: tuple[str, ...] = ("-pix_fmt", "yuv420p")  #: Widely playable pixel format.
STREAM_LOOP: tuple[str, ...] = ("-stream_loop",)  #: Replay the following input N extra times.
SIZE: tuple[str, ...] = ("-s",)  #: Exact output frame size.
NEAREST_NEIGHBOR: tuple[str, ...] = (
    "-sws_flags",
    "neighbor",
    "-sws_dither",
    "none",
)  #: Nearest-neighbor scaling without dithering.

VIDEO_LABEL = "v"  #: Filter graph output label for video.
AUDIO_LABEL = "a"  #: Filter graph output label for audio.


def _input(path: str) -> tuple[str, ...]:
    return (*INPUT_FLAG, path)


def _source(plan: OperationPlan) -> str:
    return cast("SourceParams", plan.params).source


def _filtered(plan: OperationPlan, graph: str) -> tuple[str, ...]:
    return _input(_source(plan)) + FILTER + (graph,)


def clip(plan: OperationPlan) -> tuple[str, ...]:
    """Copy a time window of the input, passing audio through."""
    params = cast("TimeRangeParams", plan.params)
    return trim.window(plan) + _input(params.source) + audio.COPY


def convert(plan: OperationPlan) -> tuple[str, ...]:
    """Re-encode to H.264/AAC in the output container."""
    return _input(_source(plan)) + ENCODE_H264 + audio.ENCODE_AAC


def compose(plan: OperationPlan) -> tuple[str, ...]:
    """Build a video from a still image and an audio track."""
    params = cast("ComposeParams", plan.params)
    return (
        LOOP_IMAGE
        + _input(params.image)
        + _input(params.audio)
        + ENCODE_H264
        + TUNE_STILL_IMAGE
        + audio.ENCODE_AAC
        + PIX_FMT_YUV420P
        + SHORTEST
    )


def loop(plan: OperationPlan) -> tuple[str, ...]:
    """Repeat the input ``loops`` extra times without re-encoding."""
    params = cast("LoopParams", plan.params)
    return STREAM_LOOP + (str(params.loops),) + _input(params.source) + COPY_ALL


def reverse(plan: OperationPlan) -> tuple[str, ...]:
    """Reverse playback."""
    return _filtered(plan, filters.REVERSE)


def scale(plan: OperationPlan) -> tuple[str, ...]:
    """Scale to a width, keeping aspect ratio with an even height."""
    params = cast("ScaleParams", plan.params)
    return _filtered(plan, filters.scale_to_width(params.width)) + ENCODE_H264 + audio.COPY


def resize(plan: OperationPlan) -> tuple[str, ...]:
    """Resize to exact dimensions with nearest-neighbor sampling."""
    params = cast("ResizeParams", plan.params)
    return (
        _input(params.source)
        + SIZE
        + (f"{params.width}x{params.height}",)
        + NEAREST_NEIGHBOR
        + ENCODE_H264
        + audio.COPY
    )


def set_fps(plan: OperationPlan) -> tuple[str, ...]:
    """Convert the frame rate."""
    params = cast("FpsParams", plan.params)
    return _input(params.source) + FILTER_V + (filters.fps(params.fps),)


def set_speed(plan: OperationPlan) -> tuple[str, ...]:
    """Change the speed of both video and audio via one complex graph."""
    params = cast("SpeedParams", plan.params)
    graph = filters.complex_graph(
        filters.labeled("0:v", filters.setpts(params.speed), VIDEO_LABEL),
        filters.labeled("0:a", filters.atempo(params.speed), AUDIO_LABEL),
    )
    return _input(params.source) + FILTER_COMPLEX + (graph,) + map_label(VIDEO_LABEL) + map_label(AUDIO_LABEL)


def set_speed_video_only(plan: OperationPlan) -> tuple[str, ...]:
    """Change the video speed, leaving audio untouched."""
    params = cast("SpeedParams", plan.params)
    return _input(params.source) + FILTER_V + (filters.setpts(params.speed),)


def grayscale(plan: OperationPlan) -> tuple[str, ...]:
    """Remove all color."""
    return _filtered(plan, filters.GRAYSCALE)


def invert(plan: OperationPlan) -> tuple[str, ...]:
    """Invert the colors."""
    return _filtered(plan, filters.NEGATE)


def contrast(plan: OperationPlan) -> tuple[str, ...]:
    """Apply the increased contrast preset."""
    return _filtered(plan, filters.INCREASE_CONTRAST)
