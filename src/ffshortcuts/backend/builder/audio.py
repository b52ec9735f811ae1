"""Audio stream args and audio operation builders."""

from __future__ import annotations

from typing import TYPE_CHECKING, cast

from . import filters, trim
from .command_args import COPY_ALL, INPUT_FLAG, SHORTEST
from .stream_args import codec_flag, copy_stream, disable_stream, filter_flag, map_stream

if TYPE_CHECKING:
    from ffshortcuts.models.params import ReplaceAudioParams, SpeedParams, TimeRangeParams
    from ffshortcuts.models.plan import OperationPlan

CODEC: tuple[str, ...] = codec_flag("a")  #: Audio codec flag used to specify encoder or copy mode.
COPY: tuple[str, ...] = copy_stream("a")  #: Pass audio stream through without re-encoding.
ENCODE_AAC: tuple[str, ...] = (*CODEC, "aac")  #: Encode audio to AAC.
FORMAT_MP3: tuple[str, ...] = ("-f", "mp3")  #: Write an MP3 file.
DISABLE: tuple[str, ...] = disable_stream("a")  #: Drop all audio streams.
DISABLE_VIDEO: tuple[str, ...] = disable_stream("v")  #: Drop all video streams.
FILTER_A: tuple[str, ...] = filter_flag("a")  #: Simple audio filter graph.
STRICT_EXPERIMENTAL: tuple[str, ...] = ("-strict", "experimental")  #: Allow the experimental AAC encoder.


def extract_mp3(plan: OperationPlan) -> tuple[str, ...]:
    """Extract a time window of the audio track as MP3."""
    params = cast("TimeRangeParams", plan.params)
    return trim.window(plan) + (*INPUT_FLAG, params.source) + FORMAT_MP3 + DISABLE_VIDEO


def strip(plan: OperationPlan) -> tuple[str, ...]:
    """Copy a time window of the input without its audio."""
    params = cast("TimeRangeParams", plan.params)
    return trim.window(plan) + (*INPUT_FLAG, params.source) + COPY_ALL + DISABLE


def replace(plan: OperationPlan) -> tuple[str, ...]:
    """Lay a new audio track over a video, keeping the video stream as is."""
    params = cast("ReplaceAudioParams", plan.params)
    return (
        (*INPUT_FLAG, params.audio)
        + (*INPUT_FLAG, params.video)
        + map_stream(1, "v")
        + map_stream(0, "a")
        + copy_stream("v")
        + ENCODE_AAC
        + STRICT_EXPERIMENTAL
        + SHORTEST
    )


def set_speed(plan: OperationPlan) -> tuple[str, ...]:
    """Change the audio tempo."""
    params = cast("SpeedParams", plan.params)
    return (*INPUT_FLAG, params.source) + FILTER_A + (filters.atempo(params.speed),)
