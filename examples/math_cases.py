"""Example table-driven suites.

Run with ``python examples/math_cases.py`` or, from this directory,
``casetable run math_cases:app``.
"""

import enum
import sys

from casetable import TestApp, approx, check, compare, expect_exception


class Sign(enum.Enum):
    NEGATIVE = -1
    ZERO = 0
    POSITIVE = 1


def sign(x: float) -> Sign:
    if x < 0:
        return Sign.NEGATIVE
    return Sign.POSITIVE if x > 0 else Sign.ZERO


def check_add(a, b, expected):
    compare(a + b, expected)


def check_mean(values, expected):
    check(len(values) > 0, "mean of nothing")
    compare(sum(values) / len(values), expected, comparator=approx(rel_tol=1e-6))


def check_sign(x, expected):
    compare(sign(x), expected)


def check_split(text, expected):
    compare(text.split(","), expected)


app = TestApp()

app.add_test("Add", check_add)([
    ("ints", 1, 1, 2),
    ("floats", 0.5, 0.25, 0.75),
])

app.add_test("Mean", check_mean)([
    ("thirds", [1.0, 2.0, 4.0], 7.0 / 3.0),
    ("single", [5.0], 5.0),
])

app.add_test("Sign", check_sign)([
    ("negative", -3, Sign.NEGATIVE),
    ("zero", 0, Sign.ZERO),
])

app.add_test("Split", check_split).add_test_case("csv", "a,b,c", ["a", "b", "c"])

app.add_test("Errors", lambda: expect_exception(ZeroDivisionError, lambda: 1 / 0)).add_test_case(
    "divide-by-zero"
)


if __name__ == "__main__":
    sys.exit(app.main(sys.argv))
