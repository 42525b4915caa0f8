from __future__ import annotations

import logging
import sys
from collections.abc import Sequence
from enum import Enum
from typing import Any, Callable

from casetable.config import RunConfig
from casetable.errors import ConfigurationError
from casetable.executor import TestExecutor
from casetable.reporting.console import ResultLogger
from casetable.results import TestResults
from casetable.suite import BaseTestSuite, TestSuite
from casetable.verbose import close_logger, get_logger, setup_logger

EXIT_SUCCESS = 0
EXIT_FAILURE = 1


class RunState(str, Enum):
    NOT_STARTED = "not_started"
    RUNNING = "running"
    COMPLETED = "completed"
    ABORTED = "aborted"


class TestApp:
    """Owns the registered suites and runs them once.

    Usage::

        app = TestApp()
        app.add_test("Math", check_add)([
            ("1+1", 1, 1, 2),
            ("2+2", 2, 2, 4),
        ])
        sys.exit(app.main(sys.argv))
    """

    __test__ = False

    def __init__(self, config: RunConfig | None = None):
        self.config = config or RunConfig()
        self.state = RunState.NOT_STARTED
        self._suites: list[BaseTestSuite] = []
        self._results: TestResults | None = None

    @property
    def suites(self) -> tuple[BaseTestSuite, ...]:
        return tuple(self._suites)

    @property
    def results(self) -> TestResults | None:
        """Outcomes recorded by the last run, including an aborted one."""
        return self._results

    def add_test(self, name: str, test_func: Callable[..., Any]) -> TestSuite:
        suite = TestSuite(name, test_func)
        self._suites.append(suite)
        return suite

    def main(self, argv: Sequence[str] | None = None) -> int:
        """Run the selected suites and return a process exit code.

        ``argv`` is accepted for symmetry with ``sys.argv`` but not parsed.
        """
        if self.state is not RunState.NOT_STARTED:
            raise RuntimeError("TestApp.main() can only be called once")

        debug_logger = get_logger()
        executor = TestExecutor(debug_logger=debug_logger)
        logger = ResultLogger()
        self._results = executor.results
        self.state = RunState.RUNNING

        try:
            debug_logger = self._debug_logger()
            executor.debug_logger = debug_logger
            debug_logger.debug(f"Starting run of {len(self._suites)} suite(s)")

            for suite in self._selected_suites():
                if self.config.case is not None:
                    suite.run_one(executor, logger, self.config.case)
                else:
                    suite.run_all(executor, logger)

            results = executor.results
            logger.log_summary(results)
            self.state = RunState.COMPLETED
            debug_logger.debug(f"Run completed: {results.to_dict()}")

            if results.num_failed > 0:
                return EXIT_FAILURE
            return EXIT_SUCCESS
        except KeyboardInterrupt:
            self.state = RunState.ABORTED
            debug_logger.warning("Run interrupted by user (Ctrl+C)")
            print("ERROR: interrupted", file=sys.stderr)
            return EXIT_FAILURE
        except Exception as e:
            self.state = RunState.ABORTED
            debug_logger.error(f"Run aborted: {e}")
            print(f"ERROR: {e}", file=sys.stderr)
            return EXIT_FAILURE
        finally:
            if debug_logger is not get_logger():
                close_logger(debug_logger)

    def _selected_suites(self) -> list[BaseTestSuite]:
        if not self.config.suites:
            return list(self._suites)

        known = {suite.name for suite in self._suites}
        missing = [name for name in self.config.suites if name not in known]
        if missing:
            raise ConfigurationError(
                f"Unknown test suite(s): {', '.join(missing)}. "
                f"Available: {', '.join(s.name for s in self._suites)}"
            )
        wanted = set(self.config.suites)
        return [suite for suite in self._suites if suite.name in wanted]

    def _debug_logger(self) -> logging.Logger:
        if self.config.debug_log is None and not self.config.verbose:
            return get_logger()
        return setup_logger(
            self.config.debug_log,
            verbose=self.config.verbose,
            logger_name=f"casetable_run_{id(self)}",
        )
