"""Test locator - map a cursor in a Go test file to a `go test -run` name."""

from gosubtest.locator.document import Document, TextDocument
from gosubtest.locator.models import TestInfo, TestLocation
from gosubtest.locator.naming import build_test_function_name, build_test_name, normalize
from gosubtest.locator.scan import (
    find_test_info,
    locate_test,
    resolve_subtest_name,
    resolve_suite_runner,
)

__all__ = [
    "Document",
    "TextDocument",
    "TestInfo",
    "TestLocation",
    "build_test_function_name",
    "build_test_name",
    "find_test_info",
    "locate_test",
    "normalize",
    "resolve_subtest_name",
    "resolve_suite_runner",
]
