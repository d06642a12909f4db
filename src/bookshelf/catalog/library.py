# ABOUTME: The in-memory Library that owns an ordered collection of BookRecords.
# ABOUTME: Supports add, full enumeration as display text, and idempotent disposal.

import logging
from collections.abc import Iterator
from types import TracebackType

from bookshelf.catalog.errors import NullRecordError
from bookshelf.catalog.record import BookRecord

logger = logging.getLogger(__name__)

EMPTY_LIBRARY = "The library is empty."


class Library:
    """Ordered, exclusively owned collection of book records.

    Insertion order is preserved and duplicates are allowed. The library
    trusts that any BookRecord handed to it is already valid; its only
    check is that something was actually handed over.
    """

    def __init__(self) -> None:
        self._entries: list[BookRecord] = []

    @property
    def entries(self) -> tuple[BookRecord, ...]:
        """Snapshot of the records currently held, in insertion order."""
        return tuple(self._entries)

    def add(self, record: BookRecord | None) -> str:
        """Append a record to the library.

        Returns:
            A confirmation message naming the added title.

        Raises:
            NullRecordError: If record is None.
            TypeError: If record is not a BookRecord.
        """
        if record is None:
            raise NullRecordError("record must not be None")
        if not isinstance(record, BookRecord):
            raise TypeError(f"expected BookRecord, got {type(record).__name__}")

        self._entries.append(record)
        logger.debug("Added %r (%d in library)", record, len(self._entries))
        return f"Book '{record.title}' added."

    def list_all(self) -> Iterator[str]:
        """Yield a display block per record, numbered from 1.

        An empty library yields the EMPTY_LIBRARY indicator once instead.
        Each call returns a new generator over the current contents.
        """
        if not self._entries:
            yield EMPTY_LIBRARY
            return
        for number, record in enumerate(self._entries, start=1):
            yield f"Book #{number}:\n{record.describe()}"

    def dispose(self) -> None:
        """Release every owned record. Safe to call more than once."""
        if not self._entries:
            return
        logger.debug("Disposing %d record(s)", len(self._entries))
        self._entries.clear()

    def __enter__(self) -> "Library":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.dispose()

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[BookRecord]:
        return iter(tuple(self._entries))
