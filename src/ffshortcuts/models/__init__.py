"""Expose models and type definitions."""

from .context import RuntimeContext
from .ffprobe import MediaDurationInfo, TimeRange
from .params import (
    ComposeParams,
    FpsParams,
    LoopParams,
    OperationParams,
    ReplaceAudioParams,
    ResizeParams,
    ScaleParams,
    SourceParams,
    SpeedParams,
    TimeRangeParams,
)
from .plan import OperationDescriptor, OperationPlan
from .runtime import RuntimeOptions
from .types import Operation
from .verbosity import Verbosity

__all__ = [
    "ComposeParams",
    "FpsParams",
    "LoopParams",
    "MediaDurationInfo",
    "Operation",
    "OperationDescriptor",
    "OperationParams",
    "OperationPlan",
    "ReplaceAudioParams",
    "ResizeParams",
    "RuntimeContext",
    "RuntimeOptions",
    "ScaleParams",
    "SourceParams",
    "SpeedParams",
    "TimeRange",
    "TimeRangeParams",
    "Verbosity",
]
