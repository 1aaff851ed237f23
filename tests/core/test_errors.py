"""Tests for error types and codes."""

import pytest

from gosubtest.core.errors import (
    ConfigError,
    ErrorCode,
    GoSubtestError,
    InternalError,
    LocateError,
)


class TestErrorCode:
    """Error code value tests."""

    @pytest.mark.parametrize(
        ("code", "expected_range"),
        [
            (ErrorCode.CONFIG_PARSE_ERROR, 2000),
            (ErrorCode.CONFIG_INVALID_VALUE, 2000),
            (ErrorCode.NOT_A_TEST_FILE, 3000),
            (ErrorCode.NO_TEST_AT_CURSOR, 3000),
            (ErrorCode.LINE_OUT_OF_RANGE, 3000),
            (ErrorCode.INTERNAL_ERROR, 9000),
        ],
    )
    def test_given_error_code_when_checked_then_in_correct_range(
        self, code: ErrorCode, expected_range: int
    ) -> None:
        """Error codes fall within their designated numeric range."""
        assert expected_range <= code.value < expected_range + 1000


class TestGoSubtestError:
    """Base error behavior tests."""

    def test_given_error_when_to_dict_then_serializes_all_fields(self) -> None:
        """Error serializes to dict with all required fields."""
        # Given
        error = GoSubtestError(
            code=ErrorCode.CONFIG_PARSE_ERROR,
            message="Test message",
            retryable=True,
            details={"key": "value"},
        )

        # When
        result = error.to_dict()

        # Then
        assert result == {
            "code": 2001,
            "error": "CONFIG_PARSE_ERROR",
            "message": "Test message",
            "retryable": True,
            "details": {"key": "value"},
        }

    def test_given_error_when_str_then_human_readable(self) -> None:
        """Error string representation is human readable."""
        error = GoSubtestError(code=ErrorCode.INTERNAL_ERROR, message="Something broke")

        assert str(error) == "[9001] INTERNAL_ERROR: Something broke"

    def test_given_error_when_raised_then_catchable_as_exception(self) -> None:
        with pytest.raises(GoSubtestError):
            raise LocateError.no_test_at_cursor("a_test.go", 3)


class TestConfigError:
    """ConfigError factory method tests."""

    def test_parse_error(self) -> None:
        error = ConfigError.parse_error("/path/config.yaml", "bad indent")

        assert error.code == ErrorCode.CONFIG_PARSE_ERROR
        assert error.details == {"path": "/path/config.yaml", "reason": "bad indent"}

    def test_invalid_value(self) -> None:
        error = ConfigError.invalid_value("debugger.port", 70000, "out of range")

        assert error.code == ErrorCode.CONFIG_INVALID_VALUE
        assert "debugger.port" in error.message
        assert error.details["value"] == "70000"

    def test_file_not_found(self) -> None:
        error = ConfigError.file_not_found("/missing.yaml")

        assert error.code == ErrorCode.CONFIG_FILE_NOT_FOUND
        assert "/missing.yaml" in error.message


class TestLocateError:
    """LocateError factory method tests."""

    def test_not_a_test_file(self) -> None:
        error = LocateError.not_a_test_file("/src/main.go", "_test.go")

        assert error.code == ErrorCode.NOT_A_TEST_FILE
        assert "*_test.go" in error.message

    def test_no_test_at_cursor(self) -> None:
        error = LocateError.no_test_at_cursor("/src/a_test.go", 12)

        assert error.code == ErrorCode.NO_TEST_AT_CURSOR
        assert error.details == {"path": "/src/a_test.go", "line": 12}
        assert str(error).startswith("[3002] NO_TEST_AT_CURSOR:")

    def test_line_out_of_range(self) -> None:
        error = LocateError.line_out_of_range("/src/a_test.go", 50, 20)

        assert error.code == ErrorCode.LINE_OUT_OF_RANGE
        assert error.details["line_count"] == 20


class TestInternalError:
    def test_unexpected(self) -> None:
        error = InternalError.unexpected("boom", stage="scan")

        assert error.code == ErrorCode.INTERNAL_ERROR
        assert error.details == {"stage": "scan"}
