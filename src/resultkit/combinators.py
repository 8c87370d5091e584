"""Synchronous combinators: map, bind and zip over a single result.

Every combinator here is total: it returns a new result and never raises on
its own. Exceptions raised by the callbacks passed in propagate unchanged.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator

    from resultkit.result import Result


class ResultCombinators[TOk, TError]:
    """Mixin providing the map/bind/zip algebra for ``Result``."""

    __slots__ = ()

    if TYPE_CHECKING:
        _is_ok: bool
        _ok: TOk
        _error: TError

        @classmethod
        def ok(cls, value: Any) -> Result[Any, Any]: ...

        @classmethod
        def error(cls, error: Any) -> Result[Any, Any]: ...

    def select[TMap, TMapError](
        self,
        on_ok: Callable[[TOk], TMap],
        on_error: Callable[[TError], TMapError] | None = None,
    ) -> Result[TMap, TMapError]:
        """Transform the live payload, keeping the same side live.

        With only ``on_ok``, an Error result is re-wrapped untouched.
        """
        if self._is_ok:
            return type(self).ok(on_ok(self._ok))
        if on_error is None:
            return type(self).error(self._error)
        return type(self).error(on_error(self._error))

    map = select

    def select_error[TMap](
        self, on_error: Callable[[TError], TMap]
    ) -> Result[TOk, TMap]:
        """Transform the Error payload; an Ok result is re-wrapped untouched."""
        if self._is_ok:
            return type(self).ok(self._ok)
        return type(self).error(on_error(self._error))

    map_error = select_error

    def select_many[TMap, TOut](
        self,
        bind: Callable[[TOk], Result[TMap, TError]],
        project: Callable[[TOk, TMap], TOut] | None = None,
    ) -> Result[Any, TError]:
        """Chain a result-returning step onto an Ok result.

        An Error result short-circuits: ``bind`` is never called. When
        ``project`` is given, it combines the original Ok payload with the
        bound one, which lets several steps share earlier values::

            total = first.select_many(lambda a: second(a), lambda a, b: a + b)
        """
        if not self._is_ok:
            return type(self).error(self._error)
        if project is None:
            return bind(self._ok)
        original = self._ok
        return bind(original).select(lambda bound: project(original, bound))

    bind = select_many

    def zip[TOther, TOut](
        self,
        other: Result[TOther, TError],
        selector: Callable[[TOk, TOther], TOut] | None = None,
    ) -> Result[Any, TError]:
        """Combine two results that share an Error type.

        The left error wins over the right one. With both Ok, the payloads are
        paired in a tuple, or passed to ``selector`` when given.
        """
        if not self._is_ok:
            return type(self).error(self._error)
        if other.is_error:
            return type(self).error(other.value)
        if selector is None:
            return type(self).ok((self._ok, other.value))
        return type(self).ok(selector(self._ok, other.value))

    def tap(self, action: Callable[[TOk], object]) -> Result[TOk, TError]:
        """Run ``action`` on the Ok payload for its effect; return self."""
        if self._is_ok:
            action(self._ok)
        return self  # type: ignore[return-value]

    def as_iterable(self) -> Iterator[TOk]:
        """Yield the Ok payload once, or nothing for an Error result."""
        if self._is_ok:
            yield self._ok

    def to_list(self) -> list[TOk]:
        return [self._ok] if self._is_ok else []
