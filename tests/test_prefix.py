from returnfix.processors.prefix import measure_marker_prefix


def test_measures_nested_reply_prefix_with_spaces() -> None:
    assert measure_marker_prefix(" > > hello", 0) == 5


def test_plain_indentation_is_not_a_reply_prefix() -> None:
    assert measure_marker_prefix("    hello", 0) == 0


def test_prefix_without_spaces() -> None:
    assert measure_marker_prefix(">>text", 0) == 2


def test_measures_from_given_index() -> None:
    assert measure_marker_prefix("x> y", 1) == 2


def test_returns_zero_at_end_of_text() -> None:
    assert measure_marker_prefix("abc", 3) == 0
    assert measure_marker_prefix("", 0) == 0


def test_custom_character_sets() -> None:
    assert measure_marker_prefix("--=x", 0, chars="-=", required_chars="=") == 3
    assert measure_marker_prefix("--x", 0, chars="-=", required_chars="=") == 0
