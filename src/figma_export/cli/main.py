"""figma-export CLI entry point: Click group with subcommands."""

import click

from figma_export import __version__


@click.group()
@click.version_option(version=__version__, prog_name="figma-export")
def cli() -> None:
    """figma-export - export design tokens from Figma files."""


# Import and register subcommands
from figma_export.cli.colors import colors  # noqa: E402

cli.add_command(colors)
