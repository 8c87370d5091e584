"""Pytest configuration and fixtures.

Provides environment isolation, marker handling and small test doubles for
observing callback invocations. Fixtures here are autouse unless noted.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import pytest

from resultkit.config import NAMING_ENV, STATUS_FIELD_ENV, VALUE_FIELD_ENV

# =============================================================================
# Test Doubles
# =============================================================================


@dataclass
class CallRecorder:
    """Callable test double that records every argument it is called with.

    Returns ``returns`` when set, otherwise echoes its argument. Use to assert
    that a combinator did (or did not) invoke a callback.
    """

    returns: Any = None
    calls: list[Any] = field(default_factory=list)

    def __call__(self, value: Any) -> Any:
        self.calls.append(value)
        return value if self.returns is None else self.returns

    @property
    def called(self) -> bool:
        return bool(self.calls)


@dataclass
class AsyncCallRecorder(CallRecorder):
    """Coroutine-function flavour of ``CallRecorder``."""

    async def __call__(self, value: Any) -> Any:  # type: ignore[override]
        return CallRecorder.__call__(self, value)


@pytest.fixture
def recorder() -> CallRecorder:
    return CallRecorder()


@pytest.fixture
def async_recorder() -> AsyncCallRecorder:
    return AsyncCallRecorder()


# =============================================================================
# Environment Isolation (Autouse)
# =============================================================================


@pytest.fixture(autouse=True)
def block_dotenv(request, monkeypatch):
    """Prevent python-dotenv from loading project .env files during tests.

    Opt-out: @pytest.mark.allow_dotenv
    """
    if request.node.get_closest_marker("allow_dotenv"):
        return
    monkeypatch.setattr(
        "resultkit.config.load_dotenv", lambda *_args, **_kwargs: False
    )


@pytest.fixture(autouse=True)
def isolate_codec_env(monkeypatch):
    """Start every test without RESULTKIT_* variables and restore them afterwards.

    Setting before deleting makes monkeypatch remember the original state, so
    values written by python-dotenv during a test are rolled back too.
    """
    for key in (STATUS_FIELD_ENV, VALUE_FIELD_ENV, NAMING_ENV):
        monkeypatch.setenv(key, "")
        monkeypatch.delenv(key)
