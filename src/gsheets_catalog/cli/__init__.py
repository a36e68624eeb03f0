"""gsheets-catalog command-line interface."""

from __future__ import annotations

from importlib.metadata import version

import click

from ..config import SheetsConfigError, load_sheets_config
from ..errors import BadCredentialsError
from ..provider import SheetsDataProvider

_PACKAGE_NAME = "gsheets-catalog"


def _get_version() -> str:
    """Return the installed package version string."""
    return version(_PACKAGE_NAME)


def create_provider(config_path: str) -> SheetsDataProvider:
    """Load the configuration and create a provider, failing like click does."""
    try:
        config = load_sheets_config(config_path)
    except SheetsConfigError as exc:
        raise click.ClickException(str(exc)) from exc
    try:
        return SheetsDataProvider(config)
    except BadCredentialsError as exc:
        raise click.ClickException(str(exc)) from exc


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(message="%(version)s", package_name=_PACKAGE_NAME)
def cli() -> None:
    """Google Sheets table catalog command-line tool."""


@cli.command(hidden=True)
def help() -> None:
    """Show usage information."""
    click.echo('Use "gsheets-catalog --help" for usage information.')
    click.echo('Use "gsheets-catalog <command> --help" for help on a specific command.')


@cli.command("version")
def version_cmd() -> None:
    """Print the version number."""
    click.echo(_get_version())


# Register subcommands (must be after cli is defined)
from . import read as _read  # noqa: E402, F401
from . import tables as _tables  # noqa: E402, F401
