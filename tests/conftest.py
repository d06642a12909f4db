# ABOUTME: Shared pytest fixtures for Bookshelf tests.
# ABOUTME: Provides a pinned year source and ready-made records and libraries.

import pytest

from bookshelf.catalog import BookRecord, Category, FixedYearSource, Library
from tests.fixtures.records import TEST_YEAR


@pytest.fixture
def year_source() -> FixedYearSource:
    """A year source pinned to TEST_YEAR."""
    return FixedYearSource(TEST_YEAR)


@pytest.fixture
def orwell(year_source: FixedYearSource) -> BookRecord:
    """Nineteen Eighty-Four, published 1949."""
    return BookRecord("1984", "George Orwell", 1949, Category.FICTION, year_source=year_source)


@pytest.fixture
def herbert(year_source: FixedYearSource) -> BookRecord:
    """Dune, published 1965."""
    return BookRecord("Dune", "Frank Herbert", 1965, Category.SCIENTIFIC, year_source=year_source)


@pytest.fixture
def library() -> Library:
    """An empty library."""
    return Library()
