"""Runtime context shared across ffshortcuts components."""

from __future__ import annotations

import os
import shutil
import tempfile
from contextlib import suppress
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Self

from diskcache import Cache

from ffshortcuts.models.verbosity import Verbosity

if TYPE_CHECKING:
    from collections.abc import Callable
    from types import TracebackType

_CACHE_ENV = "FFSHORTCUTS_CACHE"
_TIMEOUT_ENV = "FFSHORTCUTS_TIMEOUT"


def default_timeout() -> float | None:
    """Return the subprocess timeout configured in the environment, if any.

    Raises:
        ValueError: If ``$FFSHORTCUTS_TIMEOUT`` is not a positive number.

    """
    raw = os.getenv(_TIMEOUT_ENV, "").strip()
    if not raw:
        return None
    try:
        value = float(raw)
    except ValueError as e:
        raise ValueError(f"{_TIMEOUT_ENV} must be a number of seconds: {raw!r}") from e
    if value <= 0:
        raise ValueError(f"{_TIMEOUT_ENV} must be greater than 0: {raw!r}")
    return value


@dataclass(slots=True)
class RuntimeContext:
    """Runtime flags, cache and limits for probing and encoding.

    Without an explicit ``cache`` the context uses ``$FFSHORTCUTS_CACHE`` when
    set, otherwise a private temporary directory removed on :meth:`close`.
    """

    verbosity: Verbosity = Verbosity.QUIET
    dry_run: bool = False
    status_callback: Callable[[str], None] | None = None
    cache: Cache = None  # type: ignore[assignment]
    timeout: float | None = field(default_factory=default_timeout)
    _owns_cache_dir: bool = field(default=False, init=False, repr=False)

    def __post_init__(self) -> None:
        """Open the default cache when none was supplied."""
        if self.cache is not None:
            return
        directory = os.getenv(_CACHE_ENV)
        if directory:
            self.cache = Cache(directory)
            return
        self.cache = Cache(tempfile.mkdtemp(prefix="ffshortcuts-"))
        self._owns_cache_dir = True

    def close(self) -> None:
        """Close the cache and drop its directory when it is temporary."""
        self.cache.close()
        if self._owns_cache_dir:
            shutil.rmtree(self.cache.directory, ignore_errors=True)
            self._owns_cache_dir = False

    def __enter__(self) -> Self:
        """Return ``self`` when entering a context."""
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        """Close resources when exiting a context."""
        self.close()

    def __del__(self) -> None:  # pragma: no cover - cleanup
        """Ensure cache is closed on garbage collection."""
        with suppress(Exception):
            self.cache.close()


__all__ = ["RuntimeContext", "default_timeout"]
