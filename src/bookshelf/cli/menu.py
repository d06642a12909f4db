# ABOUTME: Interactive text menu over a Library: add books, list them, exit.
# ABOUTME: Prompts via click.prompt and renders through a Rich console.

import logging

import click
from rich.console import Console
from rich.table import Table
from rich.text import Text

from bookshelf.catalog import (
    BookRecord,
    CatalogError,
    Category,
    Library,
    ValidationError,
    YearSource,
)
from bookshelf.catalog.numbers import parse_int

logger = logging.getLogger(__name__)

MENU_ADD = "1"
MENU_LIST = "2"
MENU_EXIT = "3"


def category_table() -> Table:
    """Build the numbered table of categories shown when choosing one."""
    table = Table(title="Categories")
    table.add_column("#", style="bold", width=3)
    table.add_column("Category")
    for identifier, label in Category.describe_choices():
        table.add_row(str(identifier), label)
    return table


class MenuSession:
    """Main-menu loop for one Library.

    The session is a small state machine outside the catalog core: it only
    calls BookRecord, Library.add, Library.list_all and Library.dispose.
    Bad input is reported and the loop carries on; nothing here ends the
    process except choosing exit or aborting the prompt.
    """

    def __init__(
        self,
        library: Library,
        *,
        console: Console | None = None,
        year_source: YearSource | None = None,
    ) -> None:
        self._library = library
        self._console = console or Console()
        self._year_source = year_source

    def run(self) -> None:
        """Loop over the main menu until exit. Always disposes the library."""
        try:
            while True:
                self._console.print("\n[bold]Library menu:[/bold]")
                self._console.print(f"{MENU_ADD}. Add a book")
                self._console.print(f"{MENU_LIST}. List all books")
                self._console.print(f"{MENU_EXIT}. Exit")
                choice = click.prompt("Choose an action (1-3)", type=str).strip()

                if choice == MENU_ADD:
                    self.add_book()
                elif choice == MENU_LIST:
                    self.show_all()
                elif choice == MENU_EXIT:
                    self._console.print("Goodbye.")
                    return
                else:
                    self._error("invalid choice, please pick 1, 2 or 3.")
        finally:
            self._library.dispose()

    def add_book(self) -> BookRecord | None:
        """Prompt for the fields of a new book and add it.

        Returns:
            The added record, or None if any input was rejected.
        """
        self._console.print("\n[bold]New book:[/bold]")
        title = click.prompt("Title", type=str, default="", show_default=False)
        author = click.prompt("Author", type=str, default="", show_default=False)

        raw_year = click.prompt("Publication year", type=str, default="", show_default=False)
        year = parse_int(raw_year)
        if year is None:
            self._error("invalid year format.")
            return None

        self._console.print(category_table())
        raw_category = click.prompt("Category (number or name)", type=str)
        try:
            category = Category.parse(raw_category)
        except ValidationError:
            self._error("invalid category.")
            return None

        try:
            record = BookRecord(title, author, year, category, year_source=self._year_source)
            confirmation = self._library.add(record)
        except CatalogError as exc:
            logger.debug("Add rejected: %s", exc)
            self._error(str(exc))
            return None

        self._console.print(Text(confirmation, style="green"))
        return record

    def show_all(self) -> None:
        """Print every block produced by Library.list_all."""
        self._console.print()
        for block in self._library.list_all():
            self._console.print(Text(block))
            self._console.print()

    def _error(self, message: str) -> None:
        self._console.print(Text.assemble(("Error:", "red"), " ", message))
