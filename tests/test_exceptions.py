from form_errors import FormErrorsError, InvalidPathError


def test_invalid_path_is_a_form_errors_error() -> None:
    exc = InvalidPathError(())

    assert isinstance(exc, FormErrorsError)
    assert "empty path" in str(exc)
    assert exc.to_dict() == {
        "error": "INVALID_PATH",
        "message": str(exc),
        "segments": "()",
    }


def test_base_to_dict() -> None:
    exc = FormErrorsError("boom")

    assert exc.to_dict() == {"error": "FormErrorsError", "message": "boom"}
