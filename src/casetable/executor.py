from __future__ import annotations

import logging
import time
from enum import Enum
from typing import Any, Callable

from casetable.assertions.base import TestFailure
from casetable.reporting.console import ResultLogger
from casetable.results import TestResults
from casetable.verbose import get_logger


class Outcome(str, Enum):
    PASSED = "passed"
    FAILED = "failed"
    ERRORED = "errored"


class TestExecutor:
    """Runs single test invocations and records their outcomes.

    This is the only place test failures and errors are caught; ``execute``
    records exactly one outcome per call and does not raise. The one
    exception is KeyboardInterrupt, which is left to the caller.
    """

    __test__ = False

    def __init__(self, debug_logger: logging.Logger | None = None):
        self.debug_logger = debug_logger or get_logger()
        self._results = TestResults()

    @property
    def results(self) -> TestResults:
        return self._results

    def execute(
        self,
        suite_name: str,
        case_name: str,
        action: Callable[[], Any],
        logger: ResultLogger,
    ) -> Outcome:
        logger.log_running_test(suite_name, case_name)
        outcome = Outcome.ERRORED

        start = time.perf_counter()
        try:
            action()
            outcome = Outcome.PASSED
        except TestFailure as e:
            outcome = Outcome.FAILED
            logger.log_failure(suite_name, case_name, e)
        except Exception as e:
            logger.log_error(
                suite_name,
                case_name,
                f"Unhandled exception: {type(e).__name__}: {e}",
            )
        except KeyboardInterrupt:
            raise
        except BaseException as e:
            logger.log_error(
                suite_name,
                case_name,
                f"Unhandled unknown exception ({type(e).__name__})",
            )
        duration = time.perf_counter() - start

        self.debug_logger.debug(
            f"{suite_name}::{case_name} {outcome.value} in {duration:.3f}s"
        )
        self._results.add(suite_name, outcome is Outcome.PASSED)
        return outcome
