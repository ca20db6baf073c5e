"""Classifying failed HTTP calls and extracting their field errors.

Every function here fails closed: a malformed or unexpected input is
"not a validation error" and yields an empty collection, never an
exception.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

import httpx

from ..collection.factory import create_error_collection
from ..collection.plain import PlainErrorCollection
from .config import DEFAULT_ERROR_CODES, ErrorCodes
from .response import ErrorResponse, parse_error_response

logger = logging.getLogger("form_errors.sources")

_RESPONSE_KEYS = ("success", "code", "errors")


def response_payload(error: Any) -> Any | None:
    """Return the decoded JSON body carried by an ``httpx.HTTPStatusError``."""
    if not isinstance(error, httpx.HTTPStatusError):
        return None
    try:
        return error.response.json()
    except ValueError:
        logger.debug(
            "HTTP %s response body is not JSON", error.response.status_code
        )
        return None


def is_server_error(error: Any) -> bool:
    """True if *error* carries a ``{success, code, errors}`` payload."""
    payload = response_payload(error)
    if not isinstance(payload, Mapping):
        return False
    return all(key in payload for key in _RESPONSE_KEYS)


def is_validation_error_response(
    response: ErrorResponse, codes: ErrorCodes = DEFAULT_ERROR_CODES
) -> bool:
    return response.code in codes.validation


def is_validation_error(error: Any, codes: ErrorCodes = DEFAULT_ERROR_CODES) -> bool:
    if not is_server_error(error):
        return False
    response = parse_error_response(response_payload(error))
    return response is not None and is_validation_error_response(response, codes)


def is_unauthorized(error: Any, codes: ErrorCodes = DEFAULT_ERROR_CODES) -> bool:
    if not is_server_error(error):
        return False
    payload = response_payload(error)
    return bool(payload.get("code") == codes.unauthorized)


def process_payload(
    payload: Any, codes: ErrorCodes = DEFAULT_ERROR_CODES
) -> PlainErrorCollection:
    """Build a collection from a decoded error response body."""
    response = parse_error_response(payload)
    if response is None or not is_validation_error_response(response, codes):
        return create_error_collection()
    return create_error_collection(response.errors)


def process_error(
    error: Any, codes: ErrorCodes = DEFAULT_ERROR_CODES
) -> PlainErrorCollection:
    """Build a collection from a failed HTTP call.

    Usage::

        try:
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            errors = process_error(exc)
            errors.last("user.email")
    """
    if not is_server_error(error):
        logger.debug("Not a structured server error: %s", type(error).__name__)
        return create_error_collection()
    return process_payload(response_payload(error), codes)
