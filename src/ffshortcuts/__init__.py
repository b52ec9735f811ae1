"""Core package for ffshortcuts utilities."""

__version__ = "1.0.0"

from .backend import build_command, execute_plan, plan_operation, run_operation  # noqa: E402
from .models import Operation, RuntimeContext  # noqa: E402

__all__ = [
    "Operation",
    "RuntimeContext",
    "__version__",
    "build_command",
    "execute_plan",
    "plan_operation",
    "run_operation",
]
