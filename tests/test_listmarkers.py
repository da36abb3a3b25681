from returnfix.context import ListMarkerSpec
from returnfix.processors.listmarkers import (
    inert_list_markers,
    is_list_line,
    is_outline_incrementor,
    parse_list_markers,
)


def test_parse_comma_separated_markers_keeps_order() -> None:
    assert parse_list_markers("-,*,[outline])") == (
        ListMarkerSpec("-", False),
        ListMarkerSpec("*", False),
        ListMarkerSpec(")", True),
    )


def test_outline_token_is_case_insensitive() -> None:
    assert parse_list_markers(["[OUTLINE]."]) == (ListMarkerSpec(".", True),)


def test_tokens_are_not_stripped() -> None:
    assert parse_list_markers(["\t", " -"]) == (
        ListMarkerSpec("\t", False),
        ListMarkerSpec(" -", False),
    )


def test_empty_markers_never_match() -> None:
    catalog = parse_list_markers(",[outline]")
    assert catalog == (ListMarkerSpec("", False), ListMarkerSpec("", True))
    assert not is_list_line("- item", 0, catalog)
    assert not is_list_line("1) item", 0, catalog)


def test_literal_marker_matches_line_prefix() -> None:
    catalog = parse_list_markers(["-", "\t"])
    assert is_list_line("intro\n- item", 6, catalog)
    assert is_list_line("\tindented", 0, catalog)
    assert not is_list_line("plain line", 0, catalog)


def test_outline_numbers_and_roman_numerals() -> None:
    catalog = parse_list_markers(["[outline])", "[outline]."])
    assert is_list_line("12) item", 0, catalog)
    assert is_list_line("iv. item", 0, catalog)
    assert is_list_line("IV. item", 0, catalog)


def test_outline_repeated_letters() -> None:
    catalog = parse_list_markers(["[outline])"])
    assert is_list_line("a) first", 0, catalog)
    assert is_list_line("bb) second", 0, catalog)
    assert not is_list_line("ab) mixed", 0, catalog)


def test_outline_rejects_ordinary_sentences() -> None:
    catalog = parse_list_markers(["[outline]."])
    assert not is_list_line("Hello world. More text", 0, catalog)
    assert not is_list_line(". starts with the delimiter", 0, catalog)


def test_outline_delimiter_must_be_on_the_same_line() -> None:
    catalog = parse_list_markers(["[outline])"])
    assert not is_list_line("abc\n1) item", 0, catalog)
    assert is_list_line("abc\n1) item", 4, catalog)


def test_position_past_end_is_not_a_list_line() -> None:
    assert not is_list_line("- item", 6, parse_list_markers(["-"]))


def test_outline_incrementor_rules() -> None:
    assert is_outline_incrementor("42")
    assert is_outline_incrementor("xiv")
    assert is_outline_incrementor("Zz")
    assert is_outline_incrementor("q")
    assert not is_outline_incrementor("a1")
    assert not is_outline_incrementor("")


def test_inert_list_markers() -> None:
    assert inert_list_markers(["-", "", "[Outline]", "[outline])"]) == ["", "[Outline]"]
    assert inert_list_markers("-,*,") == [""]
    assert inert_list_markers(iter(["-", ""])) == [""]
