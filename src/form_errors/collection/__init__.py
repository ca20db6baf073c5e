"""Path-indexed error collections."""

from __future__ import annotations

from .base import EMPTY_ERRORS, ErrorCollection
from .factory import create_error_collection
from .merged import MergedErrorCollection
from .path import PATH_SEPARATOR, ErrorKey, ErrorPath, join_path, to_segments
from .plain import PlainErrorCollection
from .record import ErrorRecord

__all__ = [
    "EMPTY_ERRORS",
    "PATH_SEPARATOR",
    "ErrorCollection",
    "ErrorKey",
    "ErrorPath",
    "ErrorRecord",
    "MergedErrorCollection",
    "PlainErrorCollection",
    "create_error_collection",
    "join_path",
    "to_segments",
]
