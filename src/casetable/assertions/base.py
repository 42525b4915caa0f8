"""Base data structures for the assertion system."""

from __future__ import annotations

import inspect
import sys
from dataclasses import dataclass
from typing import NoReturn


@dataclass(frozen=True)
class SourceLocation:
    """Where an assertion was made.

    Attributes:
        file: Path of the source file as reported by the interpreter.
        line: 1-based line number.
        column: 1-based column, or 0 when the interpreter does not expose
            column positions for the frame.
    """

    file: str
    line: int
    column: int = 0

    @classmethod
    def caller(cls, depth: int = 1) -> SourceLocation:
        """Location of the code that called the function invoking this.

        ``depth=1`` means "the caller of my caller", which is what assertion
        helpers want when they default their ``location`` argument.
        """
        frame = sys._getframe(depth + 1)
        try:
            info = inspect.getframeinfo(frame, context=0)
            positions = getattr(info, "positions", None)
            column = 0
            if positions is not None and positions.col_offset is not None:
                column = positions.col_offset + 1
            return cls(file=info.filename, line=info.lineno, column=column)
        finally:
            del frame

    def __str__(self) -> str:
        return f"{self.file}:{self.line}:{self.column}"


class TestFailure(Exception):
    """Raised by assertion helpers when a check does not hold."""

    __test__ = False

    def __init__(self, message: str, location: SourceLocation):
        super().__init__(message)
        self.message = message
        self.location = location


def fail(message: str, location: SourceLocation | None = None) -> NoReturn:
    """Unconditionally raise a TestFailure."""
    if location is None:
        location = SourceLocation.caller()
    raise TestFailure(message, location)


def check(
    condition: object,
    message: str = "Check failed",
    location: SourceLocation | None = None,
) -> None:
    if not condition:
        fail(message, location or SourceLocation.caller())
