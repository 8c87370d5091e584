"""Sequence-level helpers: filter and fold many results into one.

``get_ok_values``, ``get_error_values`` and ``choose_result`` are lazy. The two
``to_single_result*`` folds return tuples so the folded result stays hashable
when its payloads are.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, overload

from resultkit.result import Result

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable, Iterator


def get_ok_values[T, E](results: Iterable[Result[T, E]]) -> Iterator[T]:
    """Yield the Ok payloads in order, skipping Error results."""
    for result in results:
        if result.is_ok:
            yield result.value


def get_error_values[T, E](results: Iterable[Result[T, E]]) -> Iterator[E]:
    """Yield the Error payloads in order, skipping Ok results."""
    for result in results:
        if result.is_error:
            yield result.value


def choose_result[T, U, E](
    values: Iterable[T], selector: Callable[[T], Result[U, E]]
) -> Iterator[U]:
    """Map values through ``selector`` and keep only the Ok outputs."""
    return get_ok_values(map(selector, values))


@overload
def to_single_result[T, E](
    results: Iterable[Result[T, E]], selector: None = None
) -> Result[tuple[T, ...], E]: ...


@overload
def to_single_result[T, U, E](
    results: Iterable[T], selector: Callable[[T], Result[U, E]]
) -> Result[tuple[U, ...], E]: ...


def to_single_result(
    results: Iterable[Any], selector: Callable[[Any], Result[Any, Any]] | None = None
) -> Result[tuple[Any, ...], Any]:
    """Fold results into one, failing fast on the first Error.

    Stops consuming ``results`` (and calling ``selector``) at the first Error,
    which is returned as-is. Otherwise returns Ok with every payload in order.
    """
    if selector is not None:
        results = map(selector, results)
    values: list[Any] = []
    for result in results:
        if result.is_error:
            return Result.error(result.value)
        values.append(result.value)
    return Result.ok(tuple(values))


@overload
def to_single_result_with_all_errors[T, E](
    results: Iterable[Result[T, E]], selector: None = None
) -> Result[tuple[T, ...], tuple[E, ...]]: ...


@overload
def to_single_result_with_all_errors[T, U, E](
    results: Iterable[T], selector: Callable[[T], Result[U, E]]
) -> Result[tuple[U, ...], tuple[E, ...]]: ...


def to_single_result_with_all_errors(
    results: Iterable[Any], selector: Callable[[Any], Result[Any, Any]] | None = None
) -> Result[tuple[Any, ...], tuple[Any, ...]]:
    """Fold results into one, collecting every Error.

    Always consumes the whole sequence. Returns Error with all error payloads
    when there is at least one, else Ok with all Ok payloads, both in order.
    """
    if selector is not None:
        results = map(selector, results)
    values: list[Any] = []
    errors: list[Any] = []
    for result in results:
        if result.is_ok:
            values.append(result.value)
        else:
            errors.append(result.value)
    if errors:
        return Result.error(tuple(errors))
    return Result.ok(tuple(values))
