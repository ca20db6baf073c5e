"""ErrorRecord — a single validation message."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class ErrorRecord(BaseModel):
    """One error message, optionally addressed to a dotted field path.

    ``path`` only routes the record into a collection at construction
    time; collections never read it again.
    """

    model_config = ConfigDict(frozen=True)

    message: str
    path: str | None = None
