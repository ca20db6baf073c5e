"""PlainErrorCollection — the owning tree node."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

from ..primitives.exceptions import InvalidPathError
from .base import EMPTY_ERRORS, ErrorCollection
from .path import to_segments

if TYPE_CHECKING:
    from .path import ErrorKey, ErrorPath
    from .record import ErrorRecord


class PlainErrorCollection(ErrorCollection):
    """A tree node that owns its local records and lazily created children.

    Not safe for concurrent writers: populate it from one place, then
    hand it out for reading.
    """

    def __init__(self) -> None:
        self._errors: dict[str, list[ErrorRecord]] = {}
        self._children: dict[str, PlainErrorCollection] = {}

    def add_error(self, segments: Sequence[ErrorKey], record: ErrorRecord) -> None:
        keys = tuple(str(key) for key in segments)
        if not keys:
            raise InvalidPathError(segments)

        node = self
        for key in keys[:-1]:
            child = node._children.get(key)
            if child is None:
                child = PlainErrorCollection()
                node._children[key] = child
            node = child

        node._errors.setdefault(keys[-1], []).append(record)

    def _node_for(self, segments: tuple[str, ...]) -> PlainErrorCollection | None:
        node: PlainErrorCollection | None = self
        for key in segments:
            if node is None:
                return None
            node = node._children.get(key)
        return node

    def _slot(self, path: ErrorPath) -> list[ErrorRecord] | None:
        segments = to_segments(path)
        if not segments:
            return None
        node = self._node_for(segments[:-1])
        if node is None:
            return None
        return node._errors.get(segments[-1])

    def get(self, path: ErrorPath) -> list[ErrorRecord] | None:
        records = self._slot(path)
        if records is None:
            return None
        return list(records)

    def has(self, path: ErrorPath) -> bool:
        return bool(self._slot(path))

    def children(self, path: ErrorPath) -> ErrorCollection:
        segments = to_segments(path)
        if not segments:
            return EMPTY_ERRORS
        node = self._node_for(segments)
        if node is None:
            return EMPTY_ERRORS
        return node

    @property
    def all(self) -> list[ErrorRecord]:
        return [record for records in self._errors.values() for record in records]

    def __repr__(self) -> str:
        return (
            f"PlainErrorCollection(keys={list(self._errors)}, "
            f"children={list(self._children)})"
        )
