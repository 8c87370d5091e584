"""Extraction helpers: turn a result back into plain values.

``try_ok``, ``try_error``, ``try_get``, ``default_value``, ``default_with``,
``to_optional`` and ``deconstruct`` never raise. ``get_value_or_raise`` and
``raise_if_error`` are the opt-in raising forms.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, NamedTuple

from resultkit.errors import InvalidResultError

if TYPE_CHECKING:
    from collections.abc import Callable

    from resultkit.result import Result


class Deconstructed[TOk, TError](NamedTuple):
    """Result projected into a flag and two optional payloads."""

    success: bool
    ok: TOk | None
    error: TError | None


class ResultExtraction[TOk, TError]:
    """Mixin providing safe extraction and unwrap helpers for ``Result``."""

    __slots__ = ()

    if TYPE_CHECKING:
        _is_ok: bool
        _ok: TOk
        _error: TError

    def try_ok(self) -> tuple[bool, TOk | None]:
        """Return ``(True, value)`` for Ok, ``(False, None)`` for Error."""
        if self._is_ok:
            return True, self._ok
        return False, None

    def try_error(self) -> tuple[bool, TError | None]:
        """Return ``(True, error)`` for Error, ``(False, None)`` for Ok."""
        if self._is_ok:
            return False, None
        return True, self._error

    def try_get(self) -> tuple[bool, TOk | None, TError | None]:
        """Return ``(is_ok, value, error)``; the slot that is not live is ``None``.

        Example:
            found, value, error = parse(text).try_get()
            if not found:
                log.warning("parse failed: %s", error)
        """
        if self._is_ok:
            return True, self._ok, None
        return False, None, self._error

    def get_value_or_raise(
        self,
        *,
        format_message: Callable[[TError], str] | None = None,
        make_exception: Callable[[TError], BaseException] | None = None,
    ) -> TOk:
        """Return the Ok payload or raise for an Error result.

        Without options, an exception payload is raised as-is and any other
        payload is wrapped in ``InvalidResultError``. ``format_message`` renders
        the ``InvalidResultError`` message; ``make_exception`` builds the
        exception to raise instead.

        Raises:
            TypeError: If both ``format_message`` and ``make_exception`` are given.
        """
        _check_raise_options(format_message, make_exception)
        if self._is_ok:
            return self._ok
        raise self._to_exception(format_message, make_exception)

    def raise_if_error(
        self,
        *,
        format_message: Callable[[TError], str] | None = None,
        make_exception: Callable[[TError], BaseException] | None = None,
    ) -> None:
        """Raise for an Error result, same rules as ``get_value_or_raise``."""
        _check_raise_options(format_message, make_exception)
        if not self._is_ok:
            raise self._to_exception(format_message, make_exception)

    def default_value(self, fallback: TOk) -> TOk:
        return self._ok if self._is_ok else fallback

    def default_with(self, fallback: Callable[[TError], TOk]) -> TOk:
        """Return the Ok payload, or compute one from the Error payload."""
        if self._is_ok:
            return self._ok
        return fallback(self._error)

    def to_optional(self) -> TOk | None:
        """Return the Ok payload, or ``None`` for an Error result.

        Only unambiguous when the Ok payload itself is never ``None``.
        """
        return self._ok if self._is_ok else None

    def as_optional(self) -> Result[TOk | None, TError]:
        """Widen the Ok payload type to ``TOk | None``; the value is unchanged."""
        return self  # type: ignore[return-value]

    def deconstruct(self) -> Deconstructed[TOk, TError]:
        """Project into ``Deconstructed(success, ok, error)``.

        Example:
            match result.deconstruct():
                case (True, value, _):
                    ...
                case (False, _, error):
                    ...
        """
        if self._is_ok:
            return Deconstructed(True, self._ok, None)
        return Deconstructed(False, None, self._error)

    def _to_exception(
        self,
        format_message: Callable[[TError], str] | None,
        make_exception: Callable[[TError], BaseException] | None,
    ) -> BaseException:
        if make_exception is not None:
            return make_exception(self._error)
        if format_message is not None:
            return InvalidResultError(format_message(self._error), error=self._error)
        if isinstance(self._error, BaseException):
            return self._error
        return InvalidResultError(f"{self._error}", error=self._error)


def _check_raise_options(
    format_message: object | None, make_exception: object | None
) -> None:
    if format_message is not None and make_exception is not None:
        raise TypeError("Pass either format_message or make_exception, not both")
