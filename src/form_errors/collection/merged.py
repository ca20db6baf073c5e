"""MergedErrorCollection — a lazy, read-only union of two collections."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

from .base import EMPTY_ERRORS, ErrorCollection

if TYPE_CHECKING:
    from .path import ErrorKey, ErrorPath
    from .record import ErrorRecord


class MergedErrorCollection(ErrorCollection):
    """Delegates every query to *left* and *right* without copying either.

    *left* leads: its records come first in :meth:`get` and :attr:`all`,
    and its :meth:`last` wins whenever it has one. Chained merges are
    evaluated left to right, so ``a.merge(b).merge(c)`` gives ``a`` the
    highest precedence.

    Writes are forwarded to *left* only. Add to the operand you mean
    rather than through the merged view.
    """

    def __init__(self, left: ErrorCollection, right: ErrorCollection) -> None:
        self.left = left
        self.right = right

    def add_error(self, segments: Sequence[ErrorKey], record: ErrorRecord) -> None:
        self.left.add_error(segments, record)

    def get(self, path: ErrorPath) -> list[ErrorRecord] | None:
        left = self.left.get(path)
        right = self.right.get(path)
        if left is None and right is None:
            return None
        return [*(left or []), *(right or [])]

    def has(self, path: ErrorPath) -> bool:
        return self.left.has(path) or self.right.has(path)

    def last(self, path: ErrorPath) -> str | None:
        message = self.left.last(path)
        if message is None:
            return self.right.last(path)
        return message

    def children(self, path: ErrorPath) -> ErrorCollection:
        left = self.left.children(path)
        right = self.right.children(path)
        if left is EMPTY_ERRORS and right is EMPTY_ERRORS:
            return EMPTY_ERRORS
        return left.merge(right)

    @property
    def all(self) -> list[ErrorRecord]:
        return [*self.left.all, *self.right.all]

    def __repr__(self) -> str:
        return f"MergedErrorCollection({self.left!r}, {self.right!r})"
