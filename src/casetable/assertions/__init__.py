"""Assertion system for table-driven test cases."""

from casetable.assertions.base import SourceLocation, TestFailure, check, fail
from casetable.assertions.comparators import (
    approx,
    equal,
    greater_equal,
    greater_than,
    less_equal,
    less_than,
)
from casetable.assertions.compare import compare, expect_exception

__all__ = [
    "SourceLocation",
    "TestFailure",
    "approx",
    "check",
    "compare",
    "equal",
    "expect_exception",
    "fail",
    "greater_equal",
    "greater_than",
    "less_equal",
    "less_than",
]
