"""Time range argument helpers."""

from ffshortcuts.models.plan import OperationPlan

START: tuple[str, ...] = ("-ss",)  #: Seek to this start timestamp before decoding.
END: tuple[str, ...] = ("-to",)  #: Stop reading the input at this timestamp.


def window(plan: OperationPlan) -> tuple[str, ...]:
    """Return input-side ``-ss``/``-to`` args for the plan's resolved range.

    Raises:
        ValueError: If the plan carries no time range.

    """
    if plan.time_range is None:
        raise ValueError(f"{plan.descriptor.name} requires a resolved time range")
    return START + (plan.time_range.start,) + END + (plan.time_range.end,)
