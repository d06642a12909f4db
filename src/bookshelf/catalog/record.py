# ABOUTME: The BookRecord value type: one validated catalog entry.
# ABOUTME: Every field is validated on construction and again on each assignment.

import logging

from bookshelf.catalog.category import Category
from bookshelf.catalog.clock import DEFAULT_YEAR_SOURCE, YearSource
from bookshelf.catalog.errors import ValidationError

logger = logging.getLogger(__name__)


def _invalid(field: str, reason: str) -> ValidationError:
    logger.debug("Rejected %s: %s", field, reason)
    return ValidationError(field, reason)


def _clean_text(field: str, value: object) -> str:
    """Trim a text field, rejecting non-strings and blank values."""
    if not isinstance(value, str):
        raise _invalid(field, f"must be text, got {type(value).__name__}")
    text = value.strip()
    if not text:
        raise _invalid(field, "must not be empty")
    return text


class BookRecord:
    """A single book in the catalog.

    Title and author are stored trimmed and are never blank. The publication
    year lies in ``[0, current_year]``, where the current year comes from the
    injected year source at the moment of validation. Age is derived from the
    same source on every access and is never stored.

    No partially built record can exist: the constructor runs the same
    setters used for later mutation, and raises on the first bad field.
    """

    def __init__(
        self,
        title: str,
        author: str,
        publication_year: int,
        category: Category | int | str,
        *,
        year_source: YearSource | None = None,
    ) -> None:
        self._year_source = year_source or DEFAULT_YEAR_SOURCE
        self.title = title
        self.author = author
        self.publication_year = publication_year
        self.category = category

    @property
    def title(self) -> str:
        return self._title

    @title.setter
    def title(self, value: str) -> None:
        self._title = _clean_text("title", value)

    @property
    def author(self) -> str:
        return self._author

    @author.setter
    def author(self, value: str) -> None:
        self._author = _clean_text("author", value)

    @property
    def publication_year(self) -> int:
        return self._publication_year

    @publication_year.setter
    def publication_year(self, value: int) -> None:
        if not isinstance(value, int) or isinstance(value, bool):
            raise _invalid("publication_year", f"must be an integer, got {type(value).__name__}")
        current = self._year_source.current_year()
        if value < 0 or value > current:
            raise _invalid("publication_year", f"must be between 0 and {current}, got {value}")
        self._publication_year = value

    @property
    def category(self) -> Category:
        return self._category

    @category.setter
    def category(self, value: Category | int | str) -> None:
        self._category = Category.parse(value)

    @property
    def age(self) -> int:
        """Years since publication, against the current year at call time."""
        return self._year_source.current_year() - self._publication_year

    def describe(self) -> str:
        """Return a multi-line, human-readable description of this book."""
        age = self.age
        unit = "year" if age == 1 else "years"
        return "\n".join(
            [
                "Book information:",
                f"  Title: {self._title}",
                f"  Author: {self._author}",
                f"  Year: {self._publication_year}",
                f"  Age: {age} {unit}",
                f"  Category: {self._category.label}",
            ]
        )

    def _key(self) -> tuple[str, str, int, Category]:
        return (self._title, self._author, self._publication_year, self._category)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BookRecord):
            return NotImplemented
        return self._key() == other._key()

    # Mutable, so not hashable.
    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return (
            f"BookRecord(title={self._title!r}, author={self._author!r}, "
            f"publication_year={self._publication_year!r}, category={self._category.label})"
        )

    def __str__(self) -> str:
        return f"{self._title} by {self._author} ({self._publication_year})"
