"""Tests for the runtime context and its environment configuration."""

from __future__ import annotations

from pathlib import Path

import pytest

from ffshortcuts.models import RuntimeContext
from ffshortcuts.models.context import default_timeout


def test_private_cache_is_removed_on_close() -> None:
    """Without configuration the cache lives in a temporary directory."""
    with RuntimeContext() as ctx:
        directory = Path(ctx.cache.directory)
        ctx.cache["key"] = "value"
        assert directory.is_dir()
    assert not directory.exists()


def test_configured_cache_is_kept(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """A cache directory from the environment survives the context."""
    cache_dir = tmp_path / "probe-cache"
    monkeypatch.setenv("FFSHORTCUTS_CACHE", str(cache_dir))
    with RuntimeContext() as ctx:
        ctx.cache["key"] = "value"
    assert cache_dir.is_dir()
    with RuntimeContext() as ctx:
        assert ctx.cache["key"] == "value"


def test_timeout_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """The default timeout comes from ``FFSHORTCUTS_TIMEOUT``."""
    assert default_timeout() is None
    monkeypatch.setenv("FFSHORTCUTS_TIMEOUT", "90")
    assert default_timeout() == 90.0
    with RuntimeContext() as ctx:
        assert ctx.timeout == 90.0


@pytest.mark.parametrize("raw", ["soon", "0", "-5"])
def test_invalid_timeout_from_environment(raw: str, monkeypatch: pytest.MonkeyPatch) -> None:
    """Unusable timeouts are rejected."""
    monkeypatch.setenv("FFSHORTCUTS_TIMEOUT", raw)
    with pytest.raises(ValueError, match="FFSHORTCUTS_TIMEOUT"):
        default_timeout()
