# ABOUTME: The `bookshelf menu` command: interactive add/list session.
# ABOUTME: Runs a MenuSession over a fresh in-memory Library.

import click
from rich.console import Console

from bookshelf.catalog import FixedYearSource, Library
from bookshelf.cli.menu import MenuSession
from bookshelf.cli.options import current_year_option


@click.command()
@current_year_option
def menu(current_year: int | None) -> None:
    """Start the interactive library menu."""
    year_source = FixedYearSource(current_year) if current_year is not None else None
    session = MenuSession(Library(), console=Console(), year_source=year_source)
    session.run()
