"""Value comparison and exception expectations built on TestFailure."""

from __future__ import annotations

from typing import Any, Callable

from casetable.assertions.base import SourceLocation, TestFailure, check, fail
from casetable.assertions.comparators import Comparator, equal
from casetable.formatting import is_sequence, is_string_like, to_string


def compare(
    actual: Any,
    expected: Any,
    comparator: Comparator | None = None,
    location: SourceLocation | None = None,
) -> None:
    """Fail unless ``comparator(actual, expected)`` holds.

    When both values are sequences (and neither is string-like) the sizes are
    compared first, then each element pair in index order.
    """
    comparator = comparator or equal
    location = location or SourceLocation.caller()

    if _is_sequence_pair(actual, expected):
        _compare_sequences(actual, expected, comparator, location)
        return

    check(
        comparator(actual, expected),
        f"Comparison failed - actual: {to_string(actual)}, expected: {to_string(expected)}",
        location,
    )


def _is_sequence_pair(actual: Any, expected: Any) -> bool:
    if is_string_like(actual) or is_string_like(expected):
        return False
    return is_sequence(actual) and is_sequence(expected)


def _compare_sequences(
    actual: Any,
    expected: Any,
    comparator: Comparator,
    location: SourceLocation,
) -> None:
    actual_size = len(actual)
    expected_size = len(expected)
    check(
        actual_size == expected_size,
        f"size mismatch - actual: {actual_size}, expected: {expected_size}",
        location,
    )

    for index, (a, b) in enumerate(zip(actual, expected)):
        check(
            comparator(a, b),
            f"Item mismatch at index {index} - "
            f"actual: {to_string(actual)}, expected: {to_string(expected)}",
            location,
        )


def expect_exception(
    kind: type[BaseException] | tuple[type[BaseException], ...],
    func: Callable[[], Any],
    location: SourceLocation | None = None,
) -> None:
    """Fail unless calling ``func`` raises ``kind``.

    A TestFailure raised inside ``func`` always propagates unchanged, even when
    ``kind`` would otherwise match it.
    """
    location = location or SourceLocation.caller()
    try:
        func()
    except TestFailure:
        raise
    except kind:
        return
    except KeyboardInterrupt:
        raise
    except BaseException as e:
        raise TestFailure("Expected a different exception type", location) from e
    fail("Expected exception but none was thrown", location)
