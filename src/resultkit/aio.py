"""Async adaptation of the result combinators.

These methods only sequence awaitables the caller already supplied; they never
schedule work of their own. Branches and selectors may be plain functions or
coroutine functions: whatever they return is awaited when it is awaitable.
Only the live side is ever invoked or awaited, so an Error result skips the Ok
transform entirely.
"""

from __future__ import annotations

import inspect
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

    from resultkit.result import Result


async def _settle[T](value: T | Awaitable[T]) -> T:
    if inspect.isawaitable(value):
        return await value
    return value


class ResultAsync[TOk, TError]:
    """Mixin providing awaitable counterparts of the combinators for ``Result``."""

    __slots__ = ()

    if TYPE_CHECKING:
        _is_ok: bool
        _ok: TOk
        _error: TError

        @classmethod
        def ok(cls, value: Any) -> Result[Any, Any]: ...

        @classmethod
        def error(cls, error: Any) -> Result[Any, Any]: ...

    async def resolve(self) -> Result[Any, Any]:
        """Await the live payload when it is awaitable.

        Turns ``Result[Awaitable[T], E]``, ``Result[T, Awaitable[E]]`` or
        ``Result[Awaitable[T], Awaitable[E]]`` into a plain ``Result[T, E]``.
        """
        if self._is_ok:
            return type(self).ok(await _settle(self._ok))
        return type(self).error(await _settle(self._error))

    async def tap_async(
        self, action: Callable[[TOk], Awaitable[object] | object]
    ) -> Result[TOk, TError]:
        """Await ``action`` on the Ok payload for its effect; return self."""
        if self._is_ok:
            await _settle(action(self._ok))
        return self  # type: ignore[return-value]

    async def match_async[T](
        self,
        on_ok: Callable[[TOk], Awaitable[T] | T],
        on_error: Callable[[TError], Awaitable[T] | T],
    ) -> T:
        """Invoke exactly one branch and await its value if needed."""
        if self._is_ok:
            return await _settle(on_ok(self._ok))
        return await _settle(on_error(self._error))

    async def switch_async(
        self,
        on_ok: Callable[[TOk], Awaitable[object] | object],
        on_error: Callable[[TError], Awaitable[object] | object],
    ) -> None:
        if self._is_ok:
            await _settle(on_ok(self._ok))
        else:
            await _settle(on_error(self._error))

    async def select_async[TMap, TMapError](
        self,
        on_ok: Callable[[TOk], Awaitable[TMap] | TMap],
        on_error: Callable[[TError], Awaitable[TMapError] | TMapError] | None = None,
    ) -> Result[TMap, TMapError]:
        """Async ``select``: transform the live payload, awaiting as needed."""
        if self._is_ok:
            return type(self).ok(await _settle(on_ok(self._ok)))
        if on_error is None:
            return type(self).error(self._error)
        return type(self).error(await _settle(on_error(self._error)))

    async def select_error_async[TMap](
        self, on_error: Callable[[TError], Awaitable[TMap] | TMap]
    ) -> Result[TOk, TMap]:
        if self._is_ok:
            return type(self).ok(self._ok)
        return type(self).error(await _settle(on_error(self._error)))

    async def select_many_async[TMap](
        self,
        bind: Callable[
            [TOk], Awaitable[Result[TMap, TError]] | Result[Any, Any]
        ],
    ) -> Result[TMap, TError]:
        """Async ``select_many``.

        ``bind`` may return a result, an awaitable of a result, or a result
        whose live payload is awaitable. An Error result returns immediately
        without calling ``bind``.
        """
        if not self._is_ok:
            return type(self).error(self._error)
        bound = await _settle(bind(self._ok))
        return await bound.resolve()
