"""Building collections from flat error lists."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from .path import to_segments
from .plain import PlainErrorCollection
from .record import ErrorRecord

logger = logging.getLogger("form_errors.collection")

RecordLike = ErrorRecord | Mapping[str, Any]


def create_error_collection(
    records: Iterable[RecordLike] = (),
) -> PlainErrorCollection:
    """Index *records* by their dotted ``path``.

    Records without a path land under the empty-string key. Records that
    share a path keep their input order.
    """
    collection = PlainErrorCollection()
    count = 0
    for item in records:
        record = (
            item if isinstance(item, ErrorRecord) else ErrorRecord.model_validate(item)
        )
        collection.add_error(to_segments(record.path or ""), record)
        count += 1
    logger.debug("Created error collection from %d record(s)", count)
    return collection
