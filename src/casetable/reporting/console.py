"""Human-readable progress, failure and summary output."""

from __future__ import annotations

import sys
from typing import TextIO, TYPE_CHECKING

if TYPE_CHECKING:
    from casetable.assertions.base import TestFailure
    from casetable.results import TestResults

BANNER_RULE = "#" * 32


class ResultLogger:
    """Writes run output to text streams.

    Progress lines and the summary go to ``out``; failure and error
    diagnostics go to ``err``. Both default to whatever ``sys.stdout`` and
    ``sys.stderr`` are at write time.
    """

    def __init__(self, out: TextIO | None = None, err: TextIO | None = None):
        self._out = out
        self._err = err
        self._current_suite: str | None = None

    @property
    def out(self) -> TextIO:
        return self._out or sys.stdout

    @property
    def err(self) -> TextIO:
        return self._err or sys.stderr

    def log_running_test(self, suite_name: str, case_name: str) -> None:
        if self._current_suite != suite_name:
            self._current_suite = suite_name
            print(f"{BANNER_RULE} {suite_name} {BANNER_RULE}", file=self.out)
        print(f"Executing {suite_name}::{case_name}", file=self.out, flush=True)

    def log_failure(
        self, suite_name: str, case_name: str, failure: TestFailure
    ) -> None:
        loc = failure.location
        print(
            f"FAIL: {suite_name}::{case_name} - "
            f"{loc.file}:{loc.line}:{loc.column} - {failure.message}",
            file=self.err,
            flush=True,
        )

    def log_error(self, suite_name: str, case_name: str, message: str) -> None:
        print(
            f"ERROR: {suite_name}::{case_name} - {message}", file=self.err, flush=True
        )

    def log_summary(self, results: TestResults) -> None:
        print(
            f"\nResults: {results.num_passed} passed, {results.num_failed} failed "
            f"({results.total} total)",
            file=self.out,
            flush=True,
        )
