"""Backward line scans that recover test identity from a cursor.

The "enclosing" test is the closest preceding declaration line, not a true
scope. Code between two functions, or a helper closure that happens to
look like a declaration, can produce a wrong answer; that is an accepted
limitation of matching lines instead of parsing Go.
"""

from __future__ import annotations

from gosubtest.core.logging import get_logger
from gosubtest.locator.document import Document
from gosubtest.locator.models import TestInfo, TestLocation
from gosubtest.locator.patterns import (
    DECLARATION_RULES,
    STANDALONE_TEST,
    SUBTEST_RULES,
    PatternRule,
    suite_registration,
)

log = get_logger(__name__)


def _clamp_cursor(document: Document, cursor_line: int) -> int | None:
    if cursor_line < 0 or document.line_count == 0:
        return None
    return min(cursor_line, document.line_count - 1)


def _scan_up(
    document: Document,
    start: int,
    stop: int,
    rules: tuple[PatternRule, ...],
) -> tuple[int, dict[str, str]] | None:
    """First rule match walking from ``start`` down to ``stop`` inclusive."""
    for i in range(start, stop - 1, -1):
        line = document.line_at(i).text.strip()
        for rule in rules:
            groups = rule.extract(line)
            if groups is not None:
                return i, groups
    return None


def locate_test(document: Document, cursor_line: int) -> TestLocation | None:
    """Nearest test function or suite method declared at or above the cursor."""
    cursor = _clamp_cursor(document, cursor_line)
    if cursor is None:
        return None

    hit = _scan_up(document, cursor, 0, DECLARATION_RULES)
    if hit is None:
        log.debug("locate.no_test", cursor_line=cursor_line)
        return None

    line, groups = hit
    location = TestLocation(
        test_method_name=groups["method"],
        start_line=line,
        suite_type=groups.get("suite"),
    )
    log.debug(
        "locate.test_found",
        test=location.test_method_name,
        start_line=line,
        suite_type=location.suite_type,
    )
    return location


def resolve_suite_runner(document: Document, suite_type: str) -> str | None:
    """Name of the test function that registers ``suite_type`` with a runner.

    Only the first registration call for the type is considered.
    """
    rule = suite_registration(suite_type)
    for j in range(document.line_count):
        if not rule.matches(document.line_at(j).text.strip()):
            continue
        hit = _scan_up(document, j, 0, (STANDALONE_TEST,))
        if hit is None:
            log.debug("locate.runner_outside_test", suite_type=suite_type, line=j)
            return None
        runner = hit[1]["method"]
        log.debug("locate.runner_found", suite_type=suite_type, runner=runner, line=j)
        return runner

    log.debug("locate.runner_missing", suite_type=suite_type)
    return None


def resolve_subtest_name(document: Document, cursor_line: int, start_line: int) -> str | None:
    """Nearest table-test case name between the cursor and ``start_line``."""
    cursor = _clamp_cursor(document, cursor_line)
    if cursor is None:
        return None
    start_line = max(start_line, 0)
    if start_line > cursor:
        return None

    hit = _scan_up(document, cursor, start_line, SUBTEST_RULES)
    if hit is None:
        return None
    line, groups = hit
    log.debug("locate.subtest_found", subtest=groups["name"], line=line)
    return groups["name"]


def find_test_info(document: Document, cursor_line: int) -> TestInfo | None:
    """Locate the test at the cursor and resolve its runner and subtest.

    A suite method whose suite is never registered in the document falls
    back to the bare method name.
    """
    location = locate_test(document, cursor_line)
    if location is None:
        return None

    runner = None
    if location.suite_type is not None:
        runner = resolve_suite_runner(document, location.suite_type)

    return TestInfo(
        test_method_name=location.test_method_name,
        suite_runner_name=runner,
        subtest_name=resolve_subtest_name(document, cursor_line, location.start_line),
    )
