# ABOUTME: The closed set of literature categories a book can carry.
# ABOUTME: Members are pinned to stable numeric identifiers used by the menu.

from enum import Enum

from bookshelf.catalog.errors import ValidationError
from bookshelf.catalog.numbers import parse_int


class Category(Enum):
    """Classification tag attached to every book record.

    Values are explicit identifiers, not declaration positions, so the
    numbers shown in the menu stay valid if members are ever reordered.
    """

    FICTION = 0
    METHODICAL = 1
    REFERENCE = 2
    SCIENTIFIC = 3
    OTHER = 4

    @property
    def label(self) -> str:
        """Display label, e.g. ``Fiction``."""
        return self.name.capitalize()

    def __str__(self) -> str:
        return self.label

    @classmethod
    def parse(cls, value: "Category | int | str") -> "Category":
        """Resolve a member from itself, its identifier, or its name.

        Raises:
            ValidationError: If the value names no category.
        """
        if isinstance(value, cls):
            return value
        # bool is an int subclass; True must not mean METHODICAL
        if isinstance(value, int) and not isinstance(value, bool):
            try:
                return cls(value)
            except ValueError:
                pass
        elif isinstance(value, str):
            text = value.strip()
            identifier = parse_int(text)
            if identifier is not None:
                return cls.parse(identifier)
            member = cls.__members__.get(text.upper())
            if member is not None:
                return member
        raise ValidationError("category", f"unknown category {value!r}")

    @classmethod
    def describe_choices(cls) -> list[tuple[int, str]]:
        """Return ``(identifier, label)`` pairs in identifier order."""
        return [(member.value, member.label) for member in sorted(cls, key=lambda m: m.value)]
