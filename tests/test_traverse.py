"""Sequence helpers: filtering, choosing and folding many results."""

from __future__ import annotations

from collections.abc import Iterator

import pytest

from resultkit import (
    Result,
    choose_result,
    get_error_values,
    get_ok_values,
    to_single_result,
    to_single_result_with_all_errors,
)

pytestmark = pytest.mark.unit

MIXED = [Result.error("E1"), Result.ok(42), Result.error("E2"), Result.ok(99)]


def consumed(items: list[Result[int, str]], seen: list[int]) -> Iterator[Result[int, str]]:
    """Yield items while recording the index of each one pulled."""
    for index, item in enumerate(items):
        seen.append(index)
        yield item


def even(n: int) -> Result[int, str]:
    return Result.ok(n) if n % 2 == 0 else Result.error(f"{n} is odd")


def test_get_ok_values_keeps_order() -> None:
    assert list(get_ok_values(MIXED)) == [42, 99]


def test_get_error_values_keeps_order() -> None:
    assert list(get_error_values(MIXED)) == ["E1", "E2"]


def test_filters_are_lazy() -> None:
    seen: list[int] = []

    values = get_ok_values(consumed(MIXED, seen))

    assert seen == []
    assert next(values) == 42
    assert seen == [0, 1]


def test_choose_result_keeps_ok_outputs() -> None:
    assert list(choose_result([1, 2, 3, 4], even)) == [2, 4]


def test_to_single_result_fails_fast() -> None:
    seen: list[int] = []

    assert to_single_result(consumed(MIXED, seen)) == Result.error("E1")
    assert seen == [0]


def test_to_single_result_collects_all_ok() -> None:
    assert to_single_result([Result.ok(2), Result.ok(4)]) == Result.ok((2, 4))
    assert to_single_result([]) == Result.ok(())


def test_to_single_result_with_selector_stops_calling_it(recorder) -> None:
    def check(n: int) -> Result[int, str]:
        recorder(n)
        return even(n)

    assert to_single_result([2, 3, 4], check) == Result.error("3 is odd")
    assert recorder.calls == [2, 3]


def test_with_all_errors_collects_every_error() -> None:
    seen: list[int] = []

    result = to_single_result_with_all_errors(consumed(MIXED, seen))

    assert result == Result.error(("E1", "E2"))
    assert seen == [0, 1, 2, 3]


def test_with_all_errors_on_all_ok() -> None:
    assert to_single_result_with_all_errors([Result.ok(2), Result.ok(4)]) == Result.ok((2, 4))


def test_with_all_errors_and_selector() -> None:
    result = to_single_result_with_all_errors([1, 2, 3], even)

    assert result == Result.error(("1 is odd", "3 is odd"))


def test_folded_results_are_hashable() -> None:
    assert hash(to_single_result([Result.ok(1)])) == hash(Result.ok((1,)))
