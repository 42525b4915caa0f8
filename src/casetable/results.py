from __future__ import annotations

from typing import Any


class TestResults:
    """Running tally of case outcomes for one run.

    Only the pass count and the failed names are stored; the failed count and
    the total are always derived from them. ``add`` is the only mutator.
    """

    __test__ = False

    def __init__(self):
        self._num_passed = 0
        self._failed_names: list[str] = []

    def add(self, name: str, passed: bool) -> None:
        if passed:
            self._num_passed += 1
        else:
            self._failed_names.append(name)

    @property
    def num_passed(self) -> int:
        return self._num_passed

    @property
    def failed_names(self) -> list[str]:
        return list(self._failed_names)

    @property
    def num_failed(self) -> int:
        return len(self._failed_names)

    @property
    def total(self) -> int:
        return self._num_passed + self.num_failed

    @property
    def all_passed(self) -> bool:
        return self.num_failed == 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "num_passed": self.num_passed,
            "num_failed": self.num_failed,
            "total": self.total,
            "failed_names": self.failed_names,
        }
