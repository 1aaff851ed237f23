"""CLI utilities."""

from pathlib import Path

import click

from gosubtest.config.models import GoSubtestConfig
from gosubtest.core.errors import GoSubtestError
from gosubtest.runner.commands import TestTarget, resolve_target

FILE_ARGUMENT = click.argument(
    "file", type=click.Path(exists=True, dir_okay=False, path_type=Path)
)
LINE_ARGUMENT = click.argument("line", type=click.IntRange(min=1))
FUNCTION_OPTION = click.option(
    "--function",
    "whole_function",
    is_flag=True,
    help="Target the whole test function instead of the table case at LINE",
)


def get_config(ctx: click.Context) -> GoSubtestConfig:
    return ctx.find_root().obj["config"]  # type: ignore[no-any-return]


def target_or_fail(
    ctx: click.Context, file: Path, line: int, *, whole_function: bool
) -> TestTarget:
    """Resolve the target, turning locator errors into a CLI failure.

    Raises:
        click.ClickException: If no test could be resolved at FILE:LINE
    """
    try:
        return resolve_target(file, line, get_config(ctx), whole_function=whole_function)
    except GoSubtestError as e:
        raise click.ClickException(str(e)) from e
