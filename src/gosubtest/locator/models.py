"""Locator value types.

Every value here is created fresh per lookup and never mutated.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class TestLocation:
    """The nearest enclosing test declaration above a cursor.

    ``suite_type`` is set only for receiver methods
    (``func (s *Suite) TestX()``).
    """

    test_method_name: str
    start_line: int
    suite_type: str | None = None

    @property
    def is_suite_method(self) -> bool:
        return self.suite_type is not None


@dataclass(frozen=True, slots=True)
class TestInfo:
    """Resolved identity of the test at a cursor."""

    test_method_name: str
    suite_runner_name: str | None = None
    subtest_name: str | None = None

    def to_dict(self) -> dict[str, str | None]:
        return {
            "test_method_name": self.test_method_name,
            "suite_runner_name": self.suite_runner_name,
            "subtest_name": self.subtest_name,
        }
