"""CLI command: figma-export colors -- resolve color styles and print them as JSON."""

from __future__ import annotations

import json
import logging
import sys

import click

from figma_api import ClientTimeout, FigmaClient, TransportError
from figma_export.colors import ColorsLoader
from figma_export.errors import ExportError
from figma_export.params import load_params


@click.command()
@click.option(
    "--config",
    "config_path",
    default="figma-export.json",
    show_default=True,
    type=click.Path(),
    help="JSON config file",
)
@click.option("--filter", "name_filter", default=None, help="Comma separated name patterns, e.g. 'brand/*'")
@click.option("--verbose", is_flag=True, default=False, help="Log Figma requests")
def colors(config_path: str, name_filter: str | None, verbose: bool) -> None:
    """Load colors of every appearance and print them as JSON.

    Reads FIGMA_PERSONAL_TOKEN from the environment. Exits with code 1 on
    configuration, API or export errors.
    """
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    try:
        params = load_params(config_path)
        client = FigmaClient.from_env(timeout=ClientTimeout(request=params.figma.timeout))
    except (ExportError, TransportError) as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    with client:
        loader = ColorsLoader(client, params.figma, params.colors)
        try:
            result = loader.load(filter=name_filter)
        except (ExportError, TransportError) as exc:
            click.echo(f"Error: {exc}", err=True)
            sys.exit(1)

    click.echo(json.dumps(result.to_dict(), indent=2))
