from form_errors.collection.path import join_path, to_segments


def test_dotted_string_splits_into_segments() -> None:
    assert to_segments("user.roles.1") == ("user", "roles", "1")


def test_integer_key_normalises_to_string() -> None:
    assert to_segments(0) == ("0",)
    assert to_segments(["roles", 0]) == ("roles", "0")


def test_sequence_segments_are_not_split_again() -> None:
    assert to_segments(["a.b", "c"]) == ("a.b", "c")


def test_empty_string_is_a_real_key() -> None:
    assert to_segments("") == ("",)


def test_absent_paths_have_no_segments() -> None:
    assert to_segments(None) == ()
    assert to_segments([]) == ()


def test_join_path() -> None:
    assert join_path(("user", "roles", 1)) == "user.roles.1"
