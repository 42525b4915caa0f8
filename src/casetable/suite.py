"""Named groups of table-driven test cases."""

from __future__ import annotations

import inspect
from abc import ABC, abstractmethod
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any, Callable, TYPE_CHECKING

from casetable.errors import ConfigurationError

if TYPE_CHECKING:
    from casetable.executor import TestExecutor
    from casetable.reporting.console import ResultLogger


@dataclass(frozen=True)
class TestCase:
    """One named invocation of a suite's test function."""

    __test__ = False

    name: str
    args: tuple[Any, ...] = field(default_factory=tuple)


class BaseTestSuite(ABC):
    """What the application needs from a suite, whatever its function looks like."""

    name: str

    @abstractmethod
    def run_all(self, executor: TestExecutor, logger: ResultLogger) -> None:
        """Execute every registered case in registration order."""
        ...

    @abstractmethod
    def run_one(
        self, executor: TestExecutor, logger: ResultLogger, case_name: str
    ) -> None:
        """Execute only the first case registered under ``case_name``."""
        ...

    @abstractmethod
    def case_names(self) -> list[str]:
        """Names of the registered cases, in registration order."""
        ...


class TestSuite(BaseTestSuite):
    """A test function bound to an ordered list of argument tuples.

    Cases are validated against the function's signature when they are
    registered, so every case in a suite calls the function the same way.

    Example::

        suite = TestSuite("Math", check_add)
        suite.add_test_case("1+1", 1, 1, 2)
        suite([("2+2", 2, 2, 4), TestCase("3+3", (3, 3, 6))])
    """

    __test__ = False

    def __init__(self, name: str, test_func: Callable[..., Any]):
        self.name = name
        self.test_func = test_func
        self._cases: list[TestCase] = []
        try:
            self._signature: inspect.Signature | None = inspect.signature(test_func)
        except (TypeError, ValueError):
            self._signature = None

    @property
    def cases(self) -> tuple[TestCase, ...]:
        return tuple(self._cases)

    def case_names(self) -> list[str]:
        return [case.name for case in self._cases]

    def add_test_case(self, name: str, *args: Any) -> TestSuite:
        self._append(TestCase(name, tuple(args)))
        return self

    def add_test_cases(self, cases: Iterable[TestCase | tuple[Any, ...]]) -> TestSuite:
        """Register several cases.

        Each item is either a :class:`TestCase` or a ``(name, *args)`` tuple.
        """
        for item in cases:
            if isinstance(item, TestCase):
                self._append(item)
            elif isinstance(item, tuple) and item and isinstance(item[0], str):
                self._append(TestCase(item[0], tuple(item[1:])))
            else:
                raise ConfigurationError(
                    f"Invalid test case for suite '{self.name}': {item!r}; "
                    "expected a TestCase or a (name, *args) tuple"
                )
        return self

    def __call__(self, cases: Iterable[TestCase | tuple[Any, ...]]) -> TestSuite:
        return self.add_test_cases(cases)

    def _append(self, case: TestCase) -> None:
        if self._signature is not None:
            try:
                self._signature.bind(*case.args)
            except TypeError as e:
                raise ConfigurationError(
                    f"Test case '{case.name}' does not match the signature of "
                    f"test suite '{self.name}': {e}"
                ) from e
        self._cases.append(case)

    def _action(self, case: TestCase) -> Callable[[], Any]:
        return lambda: self.test_func(*case.args)

    def run_all(self, executor: TestExecutor, logger: ResultLogger) -> None:
        if not self._cases:
            raise ConfigurationError(
                f"Test suite '{self.name}' does not have any test cases"
            )

        for case in self._cases:
            executor.execute(self.name, case.name, self._action(case), logger)

    def run_one(
        self, executor: TestExecutor, logger: ResultLogger, case_name: str
    ) -> None:
        case = next((c for c in self._cases if c.name == case_name), None)
        if case is None:
            raise ConfigurationError(
                f"Test case '{case_name}' does not exist in test suite '{self.name}'"
            )

        executor.execute(self.name, case.name, self._action(case), logger)
