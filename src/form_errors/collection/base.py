"""ErrorCollection — the path-addressable error tree interface.

Three variants implement it:

* :class:`~form_errors.collection.plain.PlainErrorCollection` owns its
  slots and grows through :meth:`ErrorCollection.add_error`.
* :class:`~form_errors.collection.merged.MergedErrorCollection` is a
  read-only view over two collections.
* :data:`EMPTY_ERRORS` is the shared "nothing here" instance returned
  for every unpopulated path.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .path import ErrorKey, ErrorPath
    from .record import ErrorRecord

logger = logging.getLogger("form_errors.collection")


class ErrorCollection(ABC):
    """Error records indexed by field path.

    Every key owns two independent slots: the records attached exactly at
    that key, and a child collection for deeper paths. Queries only ever
    read the former; :meth:`children` is the only way into the latter.
    """

    @abstractmethod
    def add_error(self, segments: Sequence[ErrorKey], record: ErrorRecord) -> None:
        """Append *record* at the path given by *segments*."""

    @abstractmethod
    def get(self, path: ErrorPath) -> list[ErrorRecord] | None:
        """Return the records at exactly *path*, or ``None`` if absent."""

    @abstractmethod
    def has(self, path: ErrorPath) -> bool:
        """Return ``True`` if *path* holds at least one record."""

    @abstractmethod
    def children(self, path: ErrorPath) -> ErrorCollection:
        """Return the sub-collection rooted at *path*.

        Unpopulated paths resolve to :data:`EMPTY_ERRORS` itself.
        """

    @property
    @abstractmethod
    def all(self) -> list[ErrorRecord]:
        """Records attached at this level, excluding descendants."""

    def last(self, path: ErrorPath) -> str | None:
        """Return the message of the most recent record at *path*."""
        records = self.get(path)
        if records:
            return records[-1].message
        return None

    def merge(self, other: ErrorCollection) -> ErrorCollection:
        """Return a read-only view combining this collection with *other*.

        Neither operand is copied or modified. Reads concatenate this
        collection's records before *other*'s, and :meth:`last` prefers
        this side. Writes through the view go to this side only.
        """
        from .merged import MergedErrorCollection

        return MergedErrorCollection(self, other)


class _EmptyErrorCollection(ErrorCollection):
    """Immutable collection with no records at any path."""

    def add_error(self, segments: Sequence[ErrorKey], record: ErrorRecord) -> None:
        logger.warning(
            "Ignoring error %r written to the shared empty collection", record.message
        )

    def get(self, path: ErrorPath) -> list[ErrorRecord] | None:
        return None

    def has(self, path: ErrorPath) -> bool:
        return False

    def last(self, path: ErrorPath) -> str | None:
        return None

    def children(self, path: ErrorPath) -> ErrorCollection:
        return self

    @property
    def all(self) -> list[ErrorRecord]:
        return []

    def __repr__(self) -> str:
        return "EMPTY_ERRORS"


EMPTY_ERRORS: ErrorCollection = _EmptyErrorCollection()
