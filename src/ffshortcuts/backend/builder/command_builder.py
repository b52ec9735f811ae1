"""Build FFmpeg command arguments from an operation plan."""

from ffshortcuts.models.plan import OperationPlan

from .command_args import OVERWRITE_OUTPUT

# Outputs land on fixed default names, so overwrite them without prompting.
GLOBAL_FLAGS: tuple[str, ...] = OVERWRITE_OUTPUT


def build_command(plan: OperationPlan) -> tuple[tuple[str, ...], str]:
    """Return FFmpeg arguments and the output path for ``plan``.

    The executable is not included; every path is a single token.
    """
    args = GLOBAL_FLAGS + plan.descriptor.build(plan) + (plan.output_path,)
    return args, plan.output_path


__all__ = ["GLOBAL_FLAGS", "build_command"]
