# ABOUTME: Shared Click options for Bookshelf CLI commands.
# ABOUTME: Provides reusable decorators for common flags like --current-year.

import click

CURRENT_YEAR_ENVVAR = "BOOKSHELF_CURRENT_YEAR"

current_year_option = click.option(
    "--current-year",
    "current_year",
    type=click.IntRange(min=0),
    envvar=CURRENT_YEAR_ENVVAR,
    default=None,
    help=(
        "Treat this as the current year for validation and book age "
        f"(default: system clock; env: {CURRENT_YEAR_ENVVAR})"
    ),
)
