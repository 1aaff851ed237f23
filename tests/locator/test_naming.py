"""Tests for locator/naming.py."""

import pytest

from gosubtest.locator.models import TestInfo
from gosubtest.locator.naming import build_test_function_name, build_test_name, normalize


class TestNormalize:
    """Whitespace-to-underscore transform for subtest names."""

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("test case", "test_case"),
            ("test   case   1", "test_case_1"),
            ("  test   case  1  ", "test_case_1"),
            ("test-case-1", "test-case-1"),
            ("a-b c", "a-b_c"),
            ("test case-with-hyphens", "test_case-with-hyphens"),
            ("do nothing - when is testing ticket", "do_nothing_-_when_is_testing_ticket"),
            ("test (case) [1]", "test_(case)_[1]"),
            ("tab\tand\nnewline", "tab_and_newline"),
            ("testcase", "testcase"),
            ("", ""),
            ("   ", ""),
        ],
    )
    def test_normalize(self, raw: str, expected: str) -> None:
        assert normalize(raw) == expected

    @pytest.mark.parametrize("raw", ["", "  a  b ", "x\t\ty", "already_normal", " - "])
    def test_normalize_is_idempotent(self, raw: str) -> None:
        once = normalize(raw)
        assert normalize(once) == once


class TestBuildTestName:
    """Composition table for build_test_name."""

    def test_none_info(self) -> None:
        assert build_test_name(None) is None

    def test_empty_method_name(self) -> None:
        assert build_test_name(TestInfo("", suite_runner_name="TestRunner")) is None

    def test_runner_method_and_subtest(self) -> None:
        info = TestInfo("TestX", suite_runner_name="TestRunner", subtest_name="subtest name")
        assert build_test_name(info) == "TestRunner/TestX/subtest_name"

    def test_runner_and_method_keeps_trailing_slash(self) -> None:
        info = TestInfo("TestX", suite_runner_name="TestRunner")
        assert build_test_name(info) == "TestRunner/TestX/"

    def test_method_and_subtest(self) -> None:
        info = TestInfo("TestF", subtest_name="case A")
        assert build_test_name(info) == "TestF/case_A"

    def test_method_only(self) -> None:
        assert build_test_name(TestInfo("TestF")) == "TestF"


class TestBuildTestFunctionName:
    """build_test_function_name ignores the subtest."""

    def test_none_info(self) -> None:
        assert build_test_function_name(None) is None

    def test_suite_method_with_subtest(self) -> None:
        info = TestInfo("TestX", suite_runner_name="TestRunner", subtest_name="case 1")
        assert build_test_function_name(info) == "TestRunner/TestX/"

    def test_standalone_with_subtest(self) -> None:
        info = TestInfo("TestF", subtest_name="case 1")
        assert build_test_function_name(info) == "TestF"

    def test_standalone_without_subtest(self) -> None:
        assert build_test_function_name(TestInfo("TestF")) == "TestF"
