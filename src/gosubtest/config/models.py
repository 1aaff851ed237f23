"""Pydantic configuration models with env var support.

Configuration Hierarchy (highest to lowest precedence):
1. Direct kwargs to load_config()
2. Environment variables (GOSUBTEST__SECTION__KEY)
3. Repo YAML (.gosubtest/config.yaml)
4. Global YAML (~/.config/gosubtest/config.yaml)
5. Built-in defaults (this file)

Environment Variable Format:
    GOSUBTEST__<SECTION>__<KEY>=<VALUE>

Examples:
    GOSUBTEST__LOGGING__LEVEL=DEBUG
    GOSUBTEST__RUNNER__TIMEOUT=2m
    GOSUBTEST__DEBUGGER__PORT=40000
"""

import re
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, field_validator

from gosubtest.config.constants import PORT_MAX, PORT_MIN

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

_GO_DURATION = re.compile(r"^(?:\d+(?:\.\d+)?(?:ns|us|µs|ms|s|m|h))+$")


class LogOutputConfig(BaseModel):
    """Single logging output configuration.

    Env vars: Not directly configurable via env (use YAML for multi-output).
    """

    format: Literal["json", "console"] = "console"
    destination: str = "stderr"  # stderr, stdout, or absolute file path
    level: LogLevel | None = None  # Inherits from parent if None

    @field_validator("destination")
    @classmethod
    def validate_destination(cls, v: str) -> str:
        if v in ("stderr", "stdout"):
            return v
        path = Path(v).expanduser()
        if not path.is_absolute():
            raise ValueError(f"File destination must be absolute path: {v}")
        return str(path)


class LoggingConfig(BaseModel):
    """Logging configuration.

    Env vars:
        GOSUBTEST__LOGGING__LEVEL: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """

    level: LogLevel = Field(
        default="INFO",
        description="Root log level. DEBUG traces every locator decision.",
    )
    outputs: list[LogOutputConfig] = Field(default_factory=lambda: [LogOutputConfig()])


class RunnerConfig(BaseModel):
    """`go test` command configuration.

    Env vars:
        GOSUBTEST__RUNNER__GO_BINARY: go executable (default: go)
        GOSUBTEST__RUNNER__TIMEOUT: -timeout value as a Go duration (default: 30s)
        GOSUBTEST__RUNNER__VERBOSE: Pass -v (default: true)
    """

    go_binary: str = Field(default="go", description="go executable name or path.")
    timeout: str = Field(
        default="30s",
        description="Value for go test -timeout, e.g. 30s, 2m, 1m30s.",
    )
    verbose: bool = Field(default=True, description="Pass -v to go test.")
    extra_args: list[str] = Field(
        default_factory=list,
        description="Extra flags inserted before the package directory, e.g. ['-count=1'].",
    )

    @field_validator("timeout")
    @classmethod
    def validate_timeout(cls, v: str) -> str:
        if not _GO_DURATION.match(v):
            raise ValueError(f"Timeout must be a Go duration like 30s or 1m30s, got {v!r}")
        return v


class DebuggerConfig(BaseModel):
    """Delve (`dlv test`) command configuration.

    Env vars:
        GOSUBTEST__DEBUGGER__DLV_BINARY: dlv executable (default: dlv)
        GOSUBTEST__DEBUGGER__HOST: Listen address (default: 127.0.0.1)
        GOSUBTEST__DEBUGGER__PORT: Listen port (default: 2345)
    """

    dlv_binary: str = Field(default="dlv", description="dlv executable name or path.")
    host: str = Field(
        default="127.0.0.1",
        description="Listen address for the headless server. Keep on loopback.",
    )
    port: int = Field(default=2345, description="Listen port for the headless server.")
    headless: bool = Field(default=True, description="Run dlv without a terminal UI.")
    accept_multiclient: bool = Field(
        default=True,
        description="Allow reconnecting clients to the same dlv server.",
    )
    api_version: int = Field(default=2, description="dlv JSON-RPC API version.")

    @field_validator("port")
    @classmethod
    def validate_port(cls, v: int) -> int:
        if not (PORT_MIN <= v <= PORT_MAX):
            raise ValueError(f"Port must be {PORT_MIN}-{PORT_MAX}, got {v}")
        return v


class LocatorConfig(BaseModel):
    """Test locator configuration.

    Env vars:
        GOSUBTEST__LOCATOR__REQUIRE_TEST_FILE: Refuse files without the suffix
    """

    test_file_suffix: str = Field(default="_test.go", description="Go test file suffix.")
    require_test_file: bool = Field(
        default=True,
        description="Reject files that do not end with test_file_suffix.",
    )


class GoSubtestConfig(BaseModel):
    """Root configuration model."""

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    runner: RunnerConfig = Field(default_factory=RunnerConfig)
    debugger: DebuggerConfig = Field(default_factory=DebuggerConfig)
    locator: LocatorConfig = Field(default_factory=LocatorConfig)
