# ABOUTME: Sources of the "current year" used for year validation and age.
# ABOUTME: Injectable so validity and age can be computed against a pinned year.

from datetime import date
from typing import Protocol, runtime_checkable


@runtime_checkable
class YearSource(Protocol):
    """Protocol for anything that can report the current calendar year."""

    def current_year(self) -> int: ...


class SystemYearSource:
    """Reads the year from the system clock on every call."""

    def current_year(self) -> int:
        return date.today().year

    def __repr__(self) -> str:
        return "SystemYearSource()"


class FixedYearSource:
    """Always reports the same year. Used by tests and the --current-year option."""

    def __init__(self, year: int) -> None:
        self._year = year

    def current_year(self) -> int:
        return self._year

    def __repr__(self) -> str:
        return f"FixedYearSource({self._year})"


DEFAULT_YEAR_SOURCE: YearSource = SystemYearSource()
