"""Render values for assertion messages.

Each rule is a ``(predicate, renderer)`` pair; :func:`to_string` tries them in
order and uses the first whose predicate accepts the value. Enum members are
checked before numbers and strings because ``IntEnum`` and ``StrEnum`` members
are also ints and strs.
"""

from __future__ import annotations

import enum
import numbers
from collections.abc import Callable, Sequence
from typing import Any

import numpy as np

FormatRule = tuple[Callable[[Any], bool], Callable[[Any, set[int]], str]]

STRING_TYPES = (str, bytes, bytearray)


def is_string_like(value: Any) -> bool:
    return isinstance(value, STRING_TYPES) or isinstance(value, np.str_)


def is_sequence(value: Any) -> bool:
    """True for finite ordered sequences that are not string-like."""
    if is_string_like(value):
        return False
    if isinstance(value, np.ndarray):
        return value.ndim >= 1
    return isinstance(value, Sequence)


def _is_number(value: Any) -> bool:
    return isinstance(value, (bool, numbers.Number, np.bool_, np.number))


def _format_enum(value: enum.Enum, seen: set[int]) -> str:
    return "(enum)" + to_string(value.value, seen)


def _format_number(value: Any, seen: set[int]) -> str:
    if isinstance(value, np.generic):
        value = value.item()
    if isinstance(value, float):
        return repr(value)
    return str(value)


def _format_string(value: Any, seen: set[int]) -> str:
    if isinstance(value, (bytes, bytearray)):
        value = bytes(value).decode("utf-8", errors="backslashreplace")
    return f'"{value}"'


def _format_sequence(value: Any, seen: set[int]) -> str:
    # a sequence that contains itself renders the repeat as {...}
    if id(value) in seen:
        return "{...}"
    seen.add(id(value))
    try:
        return "{" + ",".join(to_string(item, seen) for item in value) + "}"
    finally:
        seen.discard(id(value))


def _format_opaque(value: Any) -> str:
    return f"<{type(value).__name__}>"


FORMAT_RULES: tuple[FormatRule, ...] = (
    (lambda v: isinstance(v, enum.Enum), _format_enum),
    (_is_number, _format_number),
    (is_string_like, _format_string),
    (is_sequence, _format_sequence),
)


def to_string(value: Any, _seen: set[int] | None = None) -> str:
    """Return a human-readable rendering of ``value``; never raises."""
    if _seen is None:
        _seen = set()
    for matches, render in FORMAT_RULES:
        if matches(value):
            return render(value, _seen)
    return _format_opaque(value)
