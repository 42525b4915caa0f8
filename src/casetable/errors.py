"""Errors raised when the harness itself is used incorrectly."""


class ConfigurationError(ValueError):
    """Harness misuse, such as an empty suite or an unknown case name.

    These abort the run instead of being recorded as a test outcome.
    """
