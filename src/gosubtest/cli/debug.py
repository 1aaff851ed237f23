"""gosubtest debug command - print the dlv test invocation."""

import json
from pathlib import Path

import click

from gosubtest.cli.utils import (
    FILE_ARGUMENT,
    FUNCTION_OPTION,
    LINE_ARGUMENT,
    get_config,
    target_or_fail,
)
from gosubtest.config.constants import PORT_MAX, PORT_MIN
from gosubtest.runner.commands import build_dlv_command, format_command


@click.command()
@FILE_ARGUMENT
@LINE_ARGUMENT
@FUNCTION_OPTION
@click.option(
    "--port",
    type=click.IntRange(PORT_MIN, PORT_MAX),
    default=None,
    help="Listen port (default: debugger.port from config)",
)
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.pass_context
def debug_command(
    ctx: click.Context,
    file: Path,
    line: int,
    whole_function: bool,
    port: int | None,
    as_json: bool,
) -> None:
    """Print a headless `dlv test` command for the test enclosing LINE of FILE.

    dlv must be started from the package directory, printed alongside.
    """
    target = target_or_fail(ctx, file, line, whole_function=whole_function)
    argv = build_dlv_command(target, get_config(ctx), port=port)
    if as_json:
        click.echo(json.dumps({"cwd": str(target.package_dir), "argv": argv}))
        return
    click.echo(f"cd {format_command([str(target.package_dir)])}")
    click.echo(format_command(argv))
