import logging

import pytest

from form_errors import EMPTY_ERRORS, ErrorRecord, PlainErrorCollection


def test_unpopulated_paths_share_the_singleton(
    signup_errors: PlainErrorCollection,
) -> None:
    first = signup_errors.children("non-existent")
    second = signup_errors.children("non-existent")

    assert first is second
    assert first is EMPTY_ERRORS
    assert signup_errors.children("user.fieldOne") is signup_errors.children(
        "user.fieldTwo"
    )
    assert signup_errors.children("user.roles.0") is EMPTY_ERRORS


def test_singleton_answers_nothing() -> None:
    assert EMPTY_ERRORS.get("a") is None
    assert EMPTY_ERRORS.has("a") is False
    assert EMPTY_ERRORS.last("faf") is None
    assert EMPTY_ERRORS.children("a.b") is EMPTY_ERRORS
    assert EMPTY_ERRORS.all == []


def test_singleton_ignores_writes(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING, logger="form_errors.collection"):
        EMPTY_ERRORS.add_error(["a"], ErrorRecord(message="dropped"))

    assert EMPTY_ERRORS.has("a") is False
    assert "dropped" in caplog.text


def test_singleton_merge_keeps_other_side() -> None:
    other = PlainErrorCollection()
    other.add_error(["email"], ErrorRecord(message="invalid"))

    merged = EMPTY_ERRORS.merge(other)

    assert merged.last("email") == "invalid"
