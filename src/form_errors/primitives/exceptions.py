"""Exceptions for form-errors."""

from __future__ import annotations

from typing import Any


class FormErrorsError(Exception):
    """Root exception for the form-errors library."""

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": self.__class__.__name__,
            "message": str(self),
        }


class InvalidPathError(FormErrorsError):
    """Raised when a write targets an empty segment sequence.

    Queries never raise for unknown paths; only ``add_error`` needs at
    least one segment to know which slot to populate.
    """

    def __init__(self, segments: object) -> None:
        self.segments = segments
        super().__init__(f"Cannot add an error at an empty path: {segments!r}")

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "INVALID_PATH",
            "message": str(self),
            "segments": repr(self.segments),
        }
