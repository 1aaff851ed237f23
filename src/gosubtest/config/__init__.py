"""Config module exports."""

from gosubtest.config.loader import load_config
from gosubtest.config.models import (
    DebuggerConfig,
    GoSubtestConfig,
    LocatorConfig,
    LoggingConfig,
    LogOutputConfig,
    RunnerConfig,
)

__all__ = [
    "load_config",
    "DebuggerConfig",
    "GoSubtestConfig",
    "LocatorConfig",
    "LoggingConfig",
    "LogOutputConfig",
    "RunnerConfig",
]
