"""Command construction for running or debugging a located test."""

from gosubtest.runner.commands import (
    TestTarget,
    build_dlv_command,
    build_go_test_command,
    format_command,
    resolve_target,
    run_pattern,
)

__all__ = [
    "TestTarget",
    "build_dlv_command",
    "build_go_test_command",
    "format_command",
    "resolve_target",
    "run_pattern",
]
