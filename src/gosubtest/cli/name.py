"""gosubtest name command - print the test name at a line."""

import json
from pathlib import Path

import click

from gosubtest.cli.utils import FILE_ARGUMENT, FUNCTION_OPTION, LINE_ARGUMENT, target_or_fail


@click.command()
@FILE_ARGUMENT
@LINE_ARGUMENT
@FUNCTION_OPTION
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.pass_context
def name_command(
    ctx: click.Context, file: Path, line: int, whole_function: bool, as_json: bool
) -> None:
    """Print the `go test -run` name for the test enclosing LINE of FILE.

    LINE is 1-based, as shown by editors.
    """
    target = target_or_fail(ctx, file, line, whole_function=whole_function)
    if as_json:
        click.echo(json.dumps(target.to_dict()))
    else:
        click.echo(target.name)
