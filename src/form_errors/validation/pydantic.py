"""Building error collections from pydantic validation failures."""

from __future__ import annotations

from collections.abc import Mapping, Sequence

from pydantic import ValidationError as PydanticValidationError

from ..collection.path import join_path, to_segments
from ..collection.plain import PlainErrorCollection
from ..collection.record import ErrorRecord


def collection_from_validation_error(
    exc: PydanticValidationError,
) -> PlainErrorCollection:
    """Index each error of *exc* under its ``loc``.

    List indices in ``loc`` become segments as-is, so ``("roles", 0)``
    is reachable as ``"roles.0"``. Model-level errors without a ``loc``
    land under the empty-string key.
    """
    collection = PlainErrorCollection()
    for error in exc.errors():
        loc = tuple(error.get("loc", ())) or ("",)
        msg = error.get("msg", "validation error")
        collection.add_error(loc, ErrorRecord(message=msg, path=join_path(loc)))
    return collection


def collection_from_mapping(
    errors: Mapping[str, Sequence[str]],
) -> PlainErrorCollection:
    """Build a collection from the ``{field: [messages]}`` shape."""
    collection = PlainErrorCollection()
    for field_name, messages in errors.items():
        segments = to_segments(field_name)
        for message in messages:
            collection.add_error(segments, ErrorRecord(message=message, path=field_name))
    return collection
