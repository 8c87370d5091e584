"""Result value type for explicit error handling.

A ``Result`` holds exactly one of two payloads: the Ok value of a successful
operation or the Error value of a failed one. It is immutable, compares and
hashes by its tag and live payload, and is consumed through ``match`` or one of
the combinators mixed in from ``combinators``, ``extraction`` and ``aio``.
"""

from __future__ import annotations

import dataclasses
import logging
import types
import typing
from typing import TYPE_CHECKING, Any

from resultkit.aio import ResultAsync
from resultkit.combinators import ResultCombinators
from resultkit.errors import InvalidCastError
from resultkit.extraction import ResultExtraction

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

    from pydantic import GetCoreSchemaHandler
    from pydantic_core import CoreSchema

log = logging.getLogger(__name__)


@dataclasses.dataclass(frozen=True, slots=True)
class Success:
    """Ok payload for operations whose only outcome is "it worked"."""


class Result[TOk, TError](
    ResultCombinators[TOk, TError],
    ResultExtraction[TOk, TError],
    ResultAsync[TOk, TError],
):
    """Either an Ok payload or an Error payload, never both.

    Build values with ``Result.ok`` / ``Result.error`` (or the module-level
    ``ok`` / ``error`` helpers). The payload on the side that is not live is
    always ``None`` and carries no meaning.

    Must stay a plain slotted class: pydantic only consults
    ``__get_pydantic_core_schema__`` for ``Result[...]`` when the origin is not
    a dataclass.

    Example:
        parsed = Result.ok(42).select(lambda n: n * 2)
        parsed.match(lambda n: f"got {n}", lambda e: f"failed: {e}")

        match parsed:
            case Result(True, value):
                ...
    """

    __slots__ = ("_error", "_is_ok", "_ok")
    __match_args__ = ("is_ok", "value")

    def __init__(
        self, is_ok: bool, ok: TOk | None = None, error: TError | None = None
    ) -> None:
        object.__setattr__(self, "_is_ok", is_ok)
        object.__setattr__(self, "_ok", ok if is_ok else None)
        object.__setattr__(self, "_error", None if is_ok else error)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"Result is immutable; cannot assign {name!r}")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"Result is immutable; cannot delete {name!r}")

    def __reduce__(self) -> tuple[Any, ...]:
        return type(self), (self._is_ok, self._ok, self._error)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Result):
            return NotImplemented
        return (self._is_ok, self.value) == (other._is_ok, other.value)

    def __hash__(self) -> int:
        return hash((self._is_ok, self.value))

    @classmethod
    def ok(cls, value: TOk) -> Result[TOk, TError]:
        """Build a successful result."""
        return cls(True, value, None)

    @classmethod
    def error(cls, error: TError) -> Result[TOk, TError]:
        """Build a failed result."""
        return cls(False, None, error)

    @classmethod
    def success(cls) -> Result[Success, TError]:
        """Build an Ok result that carries no information beyond success."""
        return cls(True, Success())  # type: ignore[arg-type]

    @classmethod
    def from_value(
        cls, value: TOk | TError, ok_type: type[TOk], error_type: type[TError]
    ) -> Result[TOk, TError]:
        """Place a bare value on whichever side its type belongs to.

        Raises:
            InvalidCastError: If the value is an instance of neither type, or of
                both (including when ``ok_type`` and ``error_type`` coincide).
        """
        is_ok_value = isinstance(value, _runtime_type(ok_type))
        is_error_value = isinstance(value, _runtime_type(error_type))
        if is_ok_value and is_error_value:
            raise InvalidCastError(
                f"Ambiguous conversion of {value!r}: it is both "
                f"{_type_name(ok_type)} and {_type_name(error_type)}",
                hint="Use Result.ok() or Result.error() to pick a side explicitly.",
            )
        if is_ok_value:
            return cls.ok(value)  # type: ignore[arg-type]
        if is_error_value:
            return cls.error(value)  # type: ignore[arg-type]
        raise InvalidCastError(
            f"Unable to convert value {value!r} of type {_type_name(type(value))} "
            f"to Result[{_type_name(ok_type)}, {_type_name(error_type)}]"
        )

    @property
    def is_ok(self) -> bool:
        return self._is_ok

    @property
    def is_error(self) -> bool:
        return not self._is_ok

    @property
    def value(self) -> Any:
        """The live payload, untyped.

        Meant for generic tooling (assertion helpers, codecs). Typed code should
        prefer ``match``, ``try_ok`` or ``try_error``.
        """
        return self._ok if self._is_ok else self._error

    def unsafe_ok(self, target: type | None = None) -> TOk:
        """Return the Ok payload or raise ``InvalidCastError`` on an Error result.

        ``target`` only names the expected type in the error message.
        """
        if self._is_ok:
            return self._ok  # type: ignore[return-value]
        raise InvalidCastError(
            f"Unable to cast 'Error' result value {self._error} of type "
            f"{_type_name(type(self._error))} to type "
            f"{_type_name(target) if target is not None else 'of the Ok payload'}"
        )

    def unsafe_error(self, target: type | None = None) -> TError:
        """Return the Error payload or raise ``InvalidCastError`` on an Ok result.

        ``target`` only names the expected type in the error message.
        """
        if not self._is_ok:
            return self._error  # type: ignore[return-value]
        raise InvalidCastError(
            f"Unable to cast 'Ok' result value {self._ok} of type "
            f"{_type_name(type(self._ok))} to type "
            f"{_type_name(target) if target is not None else 'of the Error payload'}"
        )

    def match[T](
        self, on_ok: Callable[[TOk], T], on_error: Callable[[TError], T]
    ) -> T:
        """Invoke exactly one branch with the live payload and return its value."""
        if self._is_ok:
            return on_ok(self._ok)  # type: ignore[arg-type]
        return on_error(self._error)  # type: ignore[arg-type]

    def switch(
        self, on_ok: Callable[[TOk], object], on_error: Callable[[TError], object]
    ) -> None:
        """Invoke exactly one side-effecting branch with the live payload."""
        if self._is_ok:
            on_ok(self._ok)  # type: ignore[arg-type]
        else:
            on_error(self._error)  # type: ignore[arg-type]

    def __str__(self) -> str:
        return str(self.value)

    def __repr__(self) -> str:
        return f"Ok({self._ok!r})" if self._is_ok else f"Error({self._error!r})"

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source: Any, handler: GetCoreSchemaHandler
    ) -> CoreSchema:
        from resultkit.codec import result_core_schema

        return result_core_schema(source, handler)


def ok[T](value: T) -> Result[T, str]:
    """Build an Ok result; the error side defaults to ``str``."""
    return Result.ok(value)


def error[E](error: E) -> Result[Success, E]:
    """Build an Error result; the Ok side defaults to ``Success``."""
    return Result.error(error)


def try_call[T](fn: Callable[[], T]) -> Result[T, Exception]:
    """Run ``fn`` and capture a raised ``Exception`` as the Error payload.

    ``BaseException`` subclasses that are not ``Exception`` (``KeyboardInterrupt``,
    ``SystemExit``, ``asyncio.CancelledError``) propagate.
    """
    try:
        value = fn()
    except Exception as exc:
        log.debug("try_call captured %s: %s", type(exc).__name__, exc)
        return Result.error(exc)
    return Result.ok(value)


async def try_call_async[T](fn: Callable[[], Awaitable[T]]) -> Result[T, Exception]:
    """Await ``fn()`` and capture a raised ``Exception`` as the Error payload.

    Cancellation is never captured.
    """
    try:
        value = await fn()
    except Exception as exc:
        log.debug("try_call_async captured %s: %s", type(exc).__name__, exc)
        return Result.error(exc)
    return Result.ok(value)


def _runtime_type(tp: Any) -> Any:
    # list[int] and friends are checked against their origin class; unions
    # become the tuple of their members' classes.
    origin = typing.get_origin(tp)
    if origin is typing.Union or origin is types.UnionType:
        return tuple(_runtime_type(arg) for arg in typing.get_args(tp))
    return origin or tp


def _type_name(tp: Any) -> str:
    name = getattr(tp, "__qualname__", None) or repr(tp)
    module = getattr(tp, "__module__", None)
    if module and module != "builtins":
        return f"{module}.{name}"
    return name
