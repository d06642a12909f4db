# ABOUTME: CLI package for Bookshelf, built on Click.
# ABOUTME: Defines the root command group and registers subcommands.

import logging

import click

from bookshelf.cli.commands import categories_cmd, menu_cmd


@click.group()
@click.version_option(package_name="bookshelf")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
def cli(verbose: bool) -> None:
    """Bookshelf - a small in-memory book catalog."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(levelname)s %(name)s: %(message)s",
        )


cli.add_command(menu_cmd.menu)
cli.add_command(categories_cmd.categories)
