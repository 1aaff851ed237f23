"""Compose `go test -run` names from a resolved TestInfo.

Go names subtests ``Parent/child`` and replaces spaces in ``t.Run`` names
with underscores, so the built name matches what ``go test -v`` prints.
Suite methods run under testify are addressed as ``Runner/Method/``.
"""

from __future__ import annotations

import re

from gosubtest.locator.models import TestInfo

_WHITESPACE_RUN = re.compile(r"\s+")


def normalize(text: str) -> str:
    """Trim and collapse every whitespace run into a single underscore."""
    return _WHITESPACE_RUN.sub("_", text.strip())


def build_test_name(info: TestInfo | None) -> str | None:
    """Full name including the subtest, if one was found."""
    if info is None or not info.test_method_name:
        return None

    if info.suite_runner_name and info.subtest_name is not None:
        return f"{info.suite_runner_name}/{info.test_method_name}/{normalize(info.subtest_name)}"
    if info.suite_runner_name:
        return f"{info.suite_runner_name}/{info.test_method_name}/"
    if info.subtest_name is not None:
        return f"{info.test_method_name}/{normalize(info.subtest_name)}"
    return info.test_method_name


def build_test_function_name(info: TestInfo | None) -> str | None:
    """Name of the whole test function; the subtest is ignored."""
    if info is None or not info.test_method_name:
        return None

    if info.suite_runner_name:
        return f"{info.suite_runner_name}/{info.test_method_name}/"
    return info.test_method_name
