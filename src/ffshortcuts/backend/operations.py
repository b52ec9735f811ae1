"""Registry of supported operations."""

from __future__ import annotations

from ffshortcuts.models.params import (
    ComposeParams,
    FpsParams,
    LoopParams,
    ReplaceAudioParams,
    ResizeParams,
    ScaleParams,
    SourceParams,
    SpeedParams,
    TimeRangeParams,
)
from ffshortcuts.models.plan import OperationDescriptor
from ffshortcuts.models.types import Operation

from .builder import audio, video

_DESCRIPTORS: tuple[OperationDescriptor, ...] = (
    OperationDescriptor(Operation.CLIP, TimeRangeParams, video.clip, "Clip a video"),
    OperationDescriptor(Operation.TO_MP4, SourceParams, video.convert, "Convert a video (e.g. webm) to mp4"),
    OperationDescriptor(Operation.AUDIO, TimeRangeParams, audio.extract_mp3, "Get the audio of a video as mp3"),
    OperationDescriptor(Operation.NO_AUDIO, TimeRangeParams, audio.strip, "Remove the audio of a video"),
    OperationDescriptor(
        Operation.IMG_TO_VIDEO, ComposeParams, video.compose, "Create a video with an image and audio file"
    ),
    OperationDescriptor(Operation.AUDIO_TO_VIDEO, ReplaceAudioParams, audio.replace, "Add audio to a video file"),
    OperationDescriptor(Operation.LOOP, LoopParams, video.loop, "Loop a video"),
    OperationDescriptor(Operation.REVERSE, SourceParams, video.reverse, "Reverse the playback of a video"),
    OperationDescriptor(Operation.SCALE, ScaleParams, video.scale, "Scale the size to the given width"),
    OperationDescriptor(Operation.RESIZE, ResizeParams, video.resize, "Resize to the given width and height"),
    OperationDescriptor(Operation.FPS, FpsParams, video.set_fps, "Set the number of frames per second"),
    OperationDescriptor(Operation.SPEED, SpeedParams, video.set_speed, "Set the video and audio speed"),
    OperationDescriptor(
        Operation.SPEED_VIDEO, SpeedParams, video.set_speed_video_only, "Set the speed of a video without audio"
    ),
    OperationDescriptor(Operation.SPEED_AUDIO, SpeedParams, audio.set_speed, "Set the speed of an audio file"),
    OperationDescriptor(Operation.GRAYSCALE, SourceParams, video.grayscale, "Convert a video to black and white"),
    OperationDescriptor(Operation.INVERT, SourceParams, video.invert, "Invert the colors of a video"),
    OperationDescriptor(Operation.CONTRAST, SourceParams, video.contrast, "Increase the contrast of a video"),
)

OPERATIONS: dict[Operation, OperationDescriptor] = {d.operation: d for d in _DESCRIPTORS}

_missing = set(Operation) - OPERATIONS.keys()
if _missing:  # pragma: no cover - guarded by tests
    raise RuntimeError(f"Operations without a descriptor: {sorted(op.value for op in _missing)}")


def get_descriptor(operation: Operation | str) -> OperationDescriptor:
    """Return the descriptor for ``operation`` or its subcommand name.

    Raises:
        KeyError: If no such operation exists.

    """
    try:
        return OPERATIONS[Operation(operation)]
    except ValueError as e:
        raise KeyError(f"Unknown operation: {operation}") from e


__all__ = ["OPERATIONS", "get_descriptor"]
