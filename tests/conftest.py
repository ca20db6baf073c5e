"""Shared fixtures for form-errors tests."""

from __future__ import annotations

import pytest

from form_errors import PlainErrorCollection, create_error_collection


@pytest.fixture
def signup_errors() -> PlainErrorCollection:
    """A registration form with errors at several depths."""
    return create_error_collection(
        [
            {"message": "error one", "path": "user.username"},
            {"message": "error two", "path": "accessKey"},
            {"message": "error three", "path": "accessKey"},
            {"message": "first roles field error", "path": "user.roles.0"},
            {"message": "second roles field error", "path": "user.roles.1"},
            {
                "message": "Password should contain at least one capital letter",
                "path": "user.password.first",
            },
            {
                "message": "Password should contain at least one special character",
                "path": "user.password.first",
            },
            {
                "message": "Password should match in both fields",
                "path": "user.password.second",
            },
        ]
    )
