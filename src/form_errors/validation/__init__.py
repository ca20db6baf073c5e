"""Adapters from validation results to error collections."""

from __future__ import annotations

from .pydantic import collection_from_mapping, collection_from_validation_error

__all__ = [
    "collection_from_mapping",
    "collection_from_validation_error",
]
