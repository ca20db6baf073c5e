"""form-errors: validation messages indexed by field path."""

from __future__ import annotations

from .collection import (
    EMPTY_ERRORS,
    ErrorCollection,
    ErrorRecord,
    MergedErrorCollection,
    PlainErrorCollection,
    create_error_collection,
)
from .primitives import FormErrorsError, InvalidPathError
from .sources import (
    DEFAULT_ERROR_CODES,
    ErrorCodes,
    ErrorResponse,
    is_server_error,
    is_unauthorized,
    is_validation_error,
    is_validation_error_response,
    process_error,
    process_payload,
)
from .validation import collection_from_mapping, collection_from_validation_error

__all__ = [
    "DEFAULT_ERROR_CODES",
    "EMPTY_ERRORS",
    "ErrorCodes",
    "ErrorCollection",
    "ErrorRecord",
    "ErrorResponse",
    "FormErrorsError",
    "InvalidPathError",
    "MergedErrorCollection",
    "PlainErrorCollection",
    "collection_from_mapping",
    "collection_from_validation_error",
    "create_error_collection",
    "is_server_error",
    "is_unauthorized",
    "is_validation_error",
    "is_validation_error_response",
    "process_error",
    "process_payload",
]
