"""Tables command."""

import click

from ..errors import MetastoreError
from . import cli, create_provider
from .logger import configure_logging


@cli.command()
@click.option("-c", "--config", "config_path", required=True, help="Path to the YAML config file")
@click.option("-v", "--verbose", is_flag=True, default=False, help="Verbose mode.")
def tables(config_path: str, verbose: bool) -> None:
    """List the tables declared by the metadata sheet."""
    configure_logging(verbose)
    provider = create_provider(config_path)
    try:
        names = provider.list_tables()
    except MetastoreError as exc:
        raise click.ClickException(str(exc)) from exc
    for name in sorted(names):
        click.echo(name)
