"""gosubtest CLI - gosubtest command."""

from pathlib import Path

import click

from gosubtest.cli.debug import debug_command
from gosubtest.cli.name import name_command
from gosubtest.cli.run import run_command
from gosubtest.config.loader import load_config
from gosubtest.core.errors import ConfigError
from gosubtest.core.logging import configure_logging, set_request_id


@click.group()
@click.version_option(version="0.1.0", prog_name="gosubtest")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Config file (default: .gosubtest/config.yaml in the current directory)",
)
@click.pass_context
def cli(ctx: click.Context, verbose: bool, config_path: Path | None) -> None:
    """gosubtest - find the Go test, suite method or table case at a line."""
    ctx.ensure_object(dict)
    try:
        config = load_config(config_path=config_path)
    except ConfigError as e:
        raise click.ClickException(str(e)) from e

    if verbose:
        config.logging.level = "DEBUG"
    configure_logging(config=config.logging)
    set_request_id()

    ctx.obj["verbose"] = verbose
    ctx.obj["config"] = config


cli.add_command(name_command, name="name")
cli.add_command(run_command, name="run")
cli.add_command(debug_command, name="debug")


if __name__ == "__main__":
    cli()
