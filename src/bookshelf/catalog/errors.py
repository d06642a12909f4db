# ABOUTME: Exceptions raised by the Bookshelf catalog core.
# ABOUTME: Both are ValueError subclasses so a driver can catch them together.


class CatalogError(ValueError):
    """Base class for all catalog errors."""


class ValidationError(CatalogError):
    """Raised when a record field receives malformed input.

    Attributes:
        field: Name of the offending field (``title``, ``author``, ...).
        reason: Human-readable description of the violated constraint.
    """

    def __init__(self, field: str, reason: str) -> None:
        super().__init__(f"{field}: {reason}")
        self.field = field
        self.reason = reason


class NullRecordError(CatalogError):
    """Raised when None is passed where a record is required."""
