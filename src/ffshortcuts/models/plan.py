"""Operation descriptors and execution plans."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from ffshortcuts.tools.timerange import resolve_time_range

from .params import OperationParams, TimeRangeParams
from .types import Operation

if TYPE_CHECKING:
    from .context import RuntimeContext
    from .ffprobe import TimeRange


@dataclass(frozen=True)
class OperationDescriptor:
    """Binds an operation to its parameters, argument builder and output default."""

    operation: Operation
    params_model: type[OperationParams]
    build: Callable[[OperationPlan], tuple[str, ...]]
    description: str

    @property
    def name(self) -> str:
        """Subcommand name."""
        return self.operation.value

    @property
    def default_output(self) -> str:
        """Output path used when none is given."""
        return self.operation.default_output

    @property
    def uses_time_range(self) -> bool:
        """Whether the operation needs resolved start/end markers."""
        return issubclass(self.params_model, TimeRangeParams)


@dataclass(frozen=True, slots=True)
class OperationPlan:
    """Everything needed to build one ffmpeg invocation."""

    descriptor: OperationDescriptor
    params: OperationParams
    output_path: str
    time_range: TimeRange | None = None

    @property
    def operation(self) -> Operation:
        """Operation kind for this plan."""
        return self.descriptor.operation

    @classmethod
    def from_params(
        cls,
        descriptor: OperationDescriptor,
        params: OperationParams,
        ctx: RuntimeContext,
        *,
        output: str | Path | None = None,
    ) -> OperationPlan:
        """Resolve the output path and, when needed, the time range.

        Raises:
            TypeError: If ``params`` does not match the descriptor.
            ffshortcuts.tools.probe.ProbeError: If the time range cannot be resolved.

        """
        if not isinstance(params, descriptor.params_model):
            raise TypeError(
                f"{descriptor.name} expects {descriptor.params_model.__name__}, got {type(params).__name__}"
            )
        time_range = None
        if isinstance(params, TimeRangeParams):
            time_range = resolve_time_range(ctx, params.source, params.start, params.end)
        output_path = str(output) if output else descriptor.default_output
        return cls(descriptor=descriptor, params=params, output_path=output_path, time_range=time_range)


__all__ = ["OperationDescriptor", "OperationPlan"]
