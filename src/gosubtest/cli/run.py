"""gosubtest run command - print the go test invocation."""

from pathlib import Path

import click

from gosubtest.cli.utils import (
    FILE_ARGUMENT,
    FUNCTION_OPTION,
    LINE_ARGUMENT,
    get_config,
    target_or_fail,
)
from gosubtest.runner.commands import build_go_test_command, format_command


@click.command()
@FILE_ARGUMENT
@LINE_ARGUMENT
@FUNCTION_OPTION
@click.pass_context
def run_command(ctx: click.Context, file: Path, line: int, whole_function: bool) -> None:
    """Print a `go test` command scoped to the test enclosing LINE of FILE.

    Pipe it to a shell to execute: gosubtest run FILE LINE | sh
    """
    target = target_or_fail(ctx, file, line, whole_function=whole_function)
    click.echo(format_command(build_go_test_command(target, get_config(ctx))))
