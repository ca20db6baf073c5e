"""Turning backend failure responses into error collections."""

from __future__ import annotations

from .classifier import (
    is_server_error,
    is_unauthorized,
    is_validation_error,
    is_validation_error_response,
    process_error,
    process_payload,
    response_payload,
)
from .config import DEFAULT_ERROR_CODES, ErrorCodes
from .response import ErrorResponse, parse_error_response

__all__ = [
    "DEFAULT_ERROR_CODES",
    "ErrorCodes",
    "ErrorResponse",
    "is_server_error",
    "is_unauthorized",
    "is_validation_error",
    "is_validation_error_response",
    "parse_error_response",
    "process_error",
    "process_payload",
    "response_payload",
]
