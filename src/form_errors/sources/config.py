"""Response codes recognised by the error classifier."""

from __future__ import annotations

from dataclasses import dataclass, field


def default_validation_codes() -> frozenset[str]:
    return frozenset({"ERROR_VALIDATION", "ERROR_DATA_VALIDATION"})


@dataclass(frozen=True)
class ErrorCodes:
    """Codes the backend uses in the ``code`` field of an error response.

    Usage::

        codes = ErrorCodes(validation=frozenset({"E_INVALID"}))
        collection = process_error(exc, codes=codes)
    """

    validation: frozenset[str] = field(default_factory=default_validation_codes)
    unauthorized: str = "ERROR_UNAUTHORIZED"


DEFAULT_ERROR_CODES = ErrorCodes()
