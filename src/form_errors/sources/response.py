"""ErrorResponse — the backend's structured failure payload."""

from __future__ import annotations

import logging
from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic import ValidationError as PydanticValidationError

from ..collection.record import ErrorRecord

logger = logging.getLogger("form_errors.sources")


class ErrorResponse(BaseModel):
    """``{"success": false, "code": "...", "errors": [{"message", "path"}]}``."""

    model_config = ConfigDict(frozen=True)

    success: bool
    code: str
    errors: list[ErrorRecord]


def parse_error_response(payload: Any) -> ErrorResponse | None:
    """Validate *payload* into an :class:`ErrorResponse`.

    Returns ``None`` for anything that does not match the shape exactly.
    """
    if isinstance(payload, ErrorResponse):
        return payload
    try:
        return ErrorResponse.model_validate(payload)
    except PydanticValidationError as exc:
        logger.debug(
            "Payload is not an error response (%d problem(s))", exc.error_count()
        )
        return None
