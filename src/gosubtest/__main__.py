"""Entry point for ``python -m gosubtest``."""

from gosubtest.cli.main import cli

if __name__ == "__main__":
    cli()
