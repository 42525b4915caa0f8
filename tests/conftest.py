"""Pytest configuration and fixtures."""

import logging

import pytest

from casetable.executor import TestExecutor
from casetable.reporting.console import ResultLogger


@pytest.fixture(autouse=True)
def cleanup_loggers():
    """Clean up casetable run loggers after each test to prevent name collisions."""
    yield

    loggers_to_remove = [
        name
        for name in logging.Logger.manager.loggerDict.keys()
        if name.startswith("casetable_")
    ]

    for name in loggers_to_remove:
        logger = logging.getLogger(name)
        for handler in list(logger.handlers):
            handler.close()
        logger.handlers.clear()
        del logging.Logger.manager.loggerDict[name]


@pytest.fixture
def executor():
    return TestExecutor()


@pytest.fixture
def result_logger():
    """ResultLogger bound to the (capsys-patched) standard streams."""
    return ResultLogger()
