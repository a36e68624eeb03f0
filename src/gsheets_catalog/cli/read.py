"""Read command."""

import json

import click
from rich.console import Console
from rich.table import Table

from ..remote import RowMatrix
from ..scripting import sheets_exception
from . import cli, create_provider
from .logger import configure_logging


def render_table(table_name: str, values: RowMatrix) -> Table:
    """Build a rich Table showing the raw values, padding short rows."""
    table = Table(title=table_name, show_header=False)
    width = max((len(row) for row in values), default=0)
    for _ in range(width):
        table.add_column()
    for row in values:
        cells = [str(cell) for cell in row]
        table.add_row(*cells, *([""] * (width - len(cells))))
    return table


@cli.command()
@click.option("-c", "--config", "config_path", required=True, help="Path to the YAML config file")
@click.option("--json", "as_json", is_flag=True, default=False, help="Emit one JSON object per table.")
@click.option("-v", "--verbose", is_flag=True, default=False, help="Verbose mode.")
@click.argument("table_names", metavar="TABLE...", nargs=-1, required=True)
def read(config_path: str, as_json: bool, verbose: bool, table_names: tuple[str, ...]) -> None:
    """Print all the values of the given tables.

    Failing tables are logged and skipped; the exit code is 1 when
    at least one table could not be read.
    """
    configure_logging(verbose)
    provider = create_provider(config_path)
    console = Console()
    interceptor = sheets_exception.Interceptor()

    for table_name in table_names:
        with interceptor.table(table_name):
            values = provider.read_all_values(table_name)
            if as_json:
                click.echo(json.dumps({"table": table_name, "values": values}))
            else:
                console.print(render_table(table_name, values))

    if interceptor.failed:
        names = ", ".join(interceptor.failures)
        click.echo(f"{len(interceptor.failures)} table(s) failed: {names}", err=True)
    raise SystemExit(interceptor.exitcode())
