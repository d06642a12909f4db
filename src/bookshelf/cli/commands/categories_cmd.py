# ABOUTME: The `bookshelf categories` command.
# ABOUTME: Prints the numbered category table accepted by the menu.

import click
from rich.console import Console

from bookshelf.cli.menu import category_table


@click.command()
def categories() -> None:
    """List the categories a book can be filed under."""
    Console().print(category_table())
