"""Table-driven test suites: register cases, run them, report outcomes."""

import logging

from casetable.app import TestApp
from casetable.assertions import (
    SourceLocation,
    TestFailure,
    approx,
    check,
    compare,
    expect_exception,
    fail,
)
from casetable.config import RunConfig, load_config
from casetable.errors import ConfigurationError
from casetable.executor import Outcome, TestExecutor
from casetable.formatting import to_string
from casetable.reporting.console import ResultLogger
from casetable.results import TestResults
from casetable.suite import BaseTestSuite, TestCase, TestSuite

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "BaseTestSuite",
    "ConfigurationError",
    "Outcome",
    "ResultLogger",
    "RunConfig",
    "SourceLocation",
    "TestApp",
    "TestCase",
    "TestExecutor",
    "TestFailure",
    "TestResults",
    "TestSuite",
    "approx",
    "check",
    "compare",
    "expect_exception",
    "fail",
    "load_config",
    "to_string",
]
