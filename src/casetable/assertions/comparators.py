"""Comparators accepted by :func:`casetable.assertions.compare`.

A comparator is any ``(actual, expected) -> bool`` callable. For sequences it
is applied to each pair of elements.
"""

from __future__ import annotations

import operator
from typing import Any, Callable

import numpy as np

Comparator = Callable[[Any, Any], bool]


def equal(actual: Any, expected: Any) -> bool:
    """Value equality; numpy arrays compare equal only with matching shape and elements."""
    if isinstance(actual, np.ndarray) or isinstance(expected, np.ndarray):
        return bool(np.array_equal(actual, expected))
    result = operator.eq(actual, expected)
    if isinstance(result, np.ndarray):
        return bool(np.all(result))
    return bool(result)


def approx(rel_tol: float = 1e-9, abs_tol: float = 0.0) -> Comparator:
    """Tolerant numeric equality: ``|a - b| <= abs_tol + rel_tol * |b|``."""
    if rel_tol < 0 or abs_tol < 0:
        raise ValueError("tolerances must be non-negative")

    def _approx(actual: Any, expected: Any) -> bool:
        return bool(np.isclose(actual, expected, rtol=rel_tol, atol=abs_tol))

    return _approx


OPERATORS: dict[str, Comparator] = {
    "lt": lambda a, b: a < b,
    "le": lambda a, b: a <= b,
    "gt": lambda a, b: a > b,
    "ge": lambda a, b: a >= b,
}

less_than = OPERATORS["lt"]
less_equal = OPERATORS["le"]
greater_than = OPERATORS["gt"]
greater_equal = OPERATORS["ge"]
