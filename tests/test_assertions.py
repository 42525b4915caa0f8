"""Tests for the assertion helpers."""

import sys
from pathlib import Path

import numpy as np
import pytest

from casetable.assertions import (
    SourceLocation,
    TestFailure,
    approx,
    check,
    compare,
    equal,
    expect_exception,
    fail,
    greater_equal,
    less_than,
)


# --- fail / check ---


def test_fail_always_raises():
    with pytest.raises(TestFailure) as exc_info:
        fail("boom")
    assert exc_info.value.message == "boom"
    assert str(exc_info.value) == "boom"


def test_fail_records_caller_location():
    with pytest.raises(TestFailure) as exc_info:
        fail("boom")
    location = exc_info.value.location
    assert Path(location.file).name == "test_assertions.py"
    assert location.line == exc_info.tb.tb_lineno
    assert location.column >= 1


def test_fail_uses_explicit_location():
    where = SourceLocation(file="table.py", line=12, column=3)
    with pytest.raises(TestFailure) as exc_info:
        fail("boom", where)
    assert exc_info.value.location is where
    assert str(where) == "table.py:12:3"


def test_check_true_is_noop():
    check(True)
    check(1 == 1, "never shown")


def test_check_false_raises_with_message():
    with pytest.raises(TestFailure, match="values differ"):
        check(False, "values differ")


def test_check_default_message():
    with pytest.raises(TestFailure, match="Check failed"):
        check(0)


def test_check_location_points_at_caller():
    with pytest.raises(TestFailure) as exc_info:
        check(False)
    assert exc_info.value.location.line == exc_info.tb.tb_lineno


def test_failure_is_not_an_assertion_error():
    assert not issubclass(TestFailure, AssertionError)
    assert issubclass(TestFailure, Exception)


# --- compare: scalars and strings ---


def test_compare_equal_scalars():
    compare(2, 2)
    compare(1.5, 1.5)
    compare("abc", "abc")
    compare(True, True)


def test_compare_scalar_mismatch_message():
    with pytest.raises(TestFailure) as exc_info:
        compare(4, 5)
    assert exc_info.value.message == "Comparison failed - actual: 4, expected: 5"


def test_compare_string_mismatch_quotes_values():
    with pytest.raises(TestFailure) as exc_info:
        compare("abc", "abd")
    assert exc_info.value.message == (
        'Comparison failed - actual: "abc", expected: "abd"'
    )


def test_compare_strings_are_not_compared_as_sequences():
    with pytest.raises(TestFailure) as exc_info:
        compare("ab", "abc")
    assert "size mismatch" not in exc_info.value.message
    assert "Comparison failed" in exc_info.value.message


def test_compare_sequence_against_scalar_uses_scalar_shape():
    with pytest.raises(TestFailure, match="Comparison failed - actual: \\{1,2\\}"):
        compare([1, 2], 3)


def test_compare_with_custom_comparator():
    compare(10, 3, comparator=greater_equal)
    with pytest.raises(TestFailure):
        compare(10, 3, comparator=less_than)


def test_compare_location_points_at_caller():
    with pytest.raises(TestFailure) as exc_info:
        compare(1, 2)
    assert exc_info.value.location.line == exc_info.tb.tb_lineno


# --- compare: sequences ---


def test_compare_equal_sequences():
    compare([1, 2, 3], [1, 2, 3])
    compare((1, 2), [1, 2])
    compare([], [])
    compare(range(3), [0, 1, 2])


def test_compare_sequence_size_mismatch():
    with pytest.raises(TestFailure) as exc_info:
        compare([1, 2, 3], [1, 2])
    assert exc_info.value.message == "size mismatch - actual: 3, expected: 2"


def test_compare_sequence_item_mismatch_names_index():
    with pytest.raises(TestFailure) as exc_info:
        compare([1, 2, 3], [1, 2, 4])
    message = exc_info.value.message
    assert "index 2" in message
    assert "{1,2,3}" in message
    assert "{1,2,4}" in message
    assert message == "Item mismatch at index 2 - actual: {1,2,3}, expected: {1,2,4}"


def test_compare_sequence_reports_first_mismatch_only():
    with pytest.raises(TestFailure, match="index 0"):
        compare([9, 9], [1, 2])


def test_compare_sequence_applies_comparator_per_element():
    compare([1.0, 2.0], [1.0 + 1e-12, 2.0], comparator=approx())
    with pytest.raises(TestFailure, match="index 1"):
        compare([1.0, 2.0], [1.0, 2.1], comparator=approx(abs_tol=0.01))


def test_compare_nested_sequences():
    compare([[1, 2], [3]], [[1, 2], [3]])
    with pytest.raises(TestFailure, match="index 1 - actual: \\{\\{1,2\\},\\{3\\}\\}"):
        compare([[1, 2], [3]], [[1, 2], [4]])


def test_compare_numpy_arrays():
    compare(np.array([1, 2, 3]), [1, 2, 3])
    with pytest.raises(TestFailure, match="index 2"):
        compare(np.array([1, 2, 3]), np.array([1, 2, 4]))


# --- approx ---


def test_approx_tolerances():
    assert approx()(0.1 + 0.2, 0.3)
    assert not approx()(1.0, 1.1)
    assert approx(rel_tol=0.2)(1.0, 1.1)
    assert approx(abs_tol=0.5)(1.0, 1.4)


def test_approx_rejects_negative_tolerance():
    with pytest.raises(ValueError):
        approx(rel_tol=-1.0)


# --- expect_exception ---


def _raise(exc: BaseException):
    def _f():
        raise exc

    return _f


def test_expect_exception_matching_kind():
    expect_exception(ValueError, _raise(ValueError("bad")))


def test_expect_exception_accepts_subclass():
    expect_exception(LookupError, _raise(KeyError("k")))


def test_expect_exception_accepts_tuple_of_kinds():
    expect_exception((TypeError, ValueError), _raise(TypeError("t")))


def test_expect_exception_none_thrown():
    with pytest.raises(TestFailure) as exc_info:
        expect_exception(ValueError, lambda: None)
    assert exc_info.value.message == "Expected exception but none was thrown"


def test_expect_exception_wrong_kind():
    with pytest.raises(TestFailure) as exc_info:
        expect_exception(ValueError, _raise(KeyError("k")))
    assert exc_info.value.message == "Expected a different exception type"
    assert isinstance(exc_info.value.__cause__, KeyError)


def test_expect_exception_propagates_inner_failure_unchanged():
    inner = TestFailure("inner", SourceLocation("inner.py", 1, 1))
    with pytest.raises(TestFailure) as exc_info:
        expect_exception(ValueError, _raise(inner))
    assert exc_info.value is inner


def test_expect_exception_inner_failure_not_swallowed_by_broad_kind():
    inner = TestFailure("inner", SourceLocation("inner.py", 1, 1))
    with pytest.raises(TestFailure) as exc_info:
        expect_exception(Exception, _raise(inner))
    assert exc_info.value is inner


def test_compare_self_referencing_sequences_fails_cleanly():
    a = [1]
    a.append(a)
    b = [2]
    b.append(b)

    with pytest.raises(TestFailure) as exc_info:
        compare(a, b)
    assert exc_info.value.message == (
        "Item mismatch at index 0 - actual: {1,{...}}, expected: {2,{...}}"
    )


def test_expect_exception_system_exit_is_wrong_kind():
    with pytest.raises(TestFailure) as exc_info:
        expect_exception(ValueError, lambda: sys.exit(2))
    assert exc_info.value.message == "Expected a different exception type"
    assert isinstance(exc_info.value.__cause__, SystemExit)


def test_expect_exception_matches_base_exception_kind():
    expect_exception(SystemExit, lambda: sys.exit(2))


def test_expect_exception_lets_keyboard_interrupt_through():
    with pytest.raises(KeyboardInterrupt):
        expect_exception(ValueError, _raise(KeyboardInterrupt()))


# --- equal with numpy arrays ---


def test_equal_handles_numpy_arrays():
    assert equal(np.array([1, 2]), np.array([1, 2]))
    assert not equal(np.array([1, 2]), np.array([1, 3]))
    assert not equal(np.array([1, 2]), np.array([1, 2, 3]))
    assert equal(np.array([[1, 2], [3, 4]]), [[1, 2], [3, 4]])


def test_compare_sequences_of_numpy_arrays():
    compare([np.array([1, 2])], [np.array([1, 2])])
    compare(np.array([[1, 2], [3, 4]]), np.array([[1, 2], [3, 4]]))
    with pytest.raises(TestFailure, match="index 1"):
        compare(np.array([[1, 2], [3, 4]]), np.array([[1, 2], [3, 5]]))
