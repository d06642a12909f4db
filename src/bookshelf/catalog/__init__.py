# ABOUTME: Public API for the Bookshelf catalog core.
# ABOUTME: Exports the record and library types, categories, errors, and year sources.

from bookshelf.catalog.category import Category
from bookshelf.catalog.clock import FixedYearSource, SystemYearSource, YearSource
from bookshelf.catalog.errors import CatalogError, NullRecordError, ValidationError
from bookshelf.catalog.library import EMPTY_LIBRARY, Library
from bookshelf.catalog.record import BookRecord

__all__ = [
    "EMPTY_LIBRARY",
    "BookRecord",
    "CatalogError",
    "Category",
    "FixedYearSource",
    "Library",
    "NullRecordError",
    "SystemYearSource",
    "ValidationError",
    "YearSource",
]
