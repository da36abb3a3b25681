import pytest

from returnfix.context import ProcessingOptions, TransformResult
from returnfix.processors.returns import (
    REPLY_END_MARKER,
    REPLY_START_MARKER,
    remove_extra_returns,
    transform,
)


def run(text: str, **overrides) -> TransformResult:
    return remove_extra_returns(text, ProcessingOptions(**overrides))


def test_single_returns_join_and_paragraph_breaks_stay() -> None:
    result = run("Para one line a\npara one line b\n\nPara two")
    assert result == TransformResult("Para one line a para one line b\n\nPara two", 1)


def test_no_extra_space_after_trailing_space() -> None:
    assert run("Line one \nLine two") == TransformResult("Line one Line two", 1)


def test_return_at_start_of_line_is_removed_without_space() -> None:
    assert run("\nabc") == TransformResult("abc", 1)


def test_return_kept_before_list_lines_only() -> None:
    result = run("Notes:\n- first\n- second\nDone", list_markers=("-",))
    assert result == TransformResult("Notes:\n- first\n- second Done", 1)


def test_outline_list_with_default_markers() -> None:
    result = run("Steps:\n1) mix\n2) bake\nDone")
    assert result == TransformResult("Steps:\n1) mix\n2) bake Done", 1)


def test_mixed_incrementor_is_not_a_list() -> None:
    assert run("see\nab) not a list").text == "see ab) not a list"


def test_no_list_markers_joins_everything() -> None:
    assert run("a\n- b", list_markers=()).text == "a - b"


def test_pre_block_passes_through() -> None:
    result = run("Before\n<pre>\nCode a\nCode b\n</pre>\nAfter")
    assert result == TransformResult("Before Code a\nCode b\nAfter", 1)
    assert "<pre>" not in result.text
    assert "</pre>" not in result.text


def test_unterminated_pre_block_runs_to_end() -> None:
    assert run("<pre>\nraw\ntext") == TransformResult("raw\ntext", 0)


def test_short_lines_keep_their_returns() -> None:
    assert run("hi\nthere is more text", min_line_length=20) == TransformResult("hi\nthere is more text", 0)


def test_long_lines_still_join_above_threshold() -> None:
    result = run("this line is long enough to join\nnext", min_line_length=20)
    assert result.text == "this line is long enough to join next"


def test_short_lines_keep_paragraph_breaks() -> None:
    assert run("hi\n\nyo", min_line_length=20).text == "hi\n\nyo"


def test_reply_block_is_marked_and_unquoted() -> None:
    result = run("My answer\n> quoted one\n> quoted two\nThanks")
    assert result.text == (
        "My answer\n\n"
        + REPLY_START_MARKER
        + "quoted one quoted two"
        + REPLY_END_MARKER
        + "\n\nThanks"
    )
    assert result.returns_removed == 1


def test_reply_block_without_markers() -> None:
    result = run("My answer\n> quoted one\n> quoted two\nThanks", email_markers_enabled=False)
    assert result.text == "My answer\n\nquoted one quoted two\n\nThanks"


def test_text_starting_with_reply_is_seeded_with_marker() -> None:
    assert run("> hello\n> world") == TransformResult(REPLY_START_MARKER + "hello world", 1)
    assert run("> hello\n> world", email_markers_enabled=False).text == "hello world"


def test_paragraph_break_inside_reply() -> None:
    result = run("> a b\n>\n> c d\nEnd")
    assert result.text == REPLY_START_MARKER + "a b\n\nc d" + REPLY_END_MARKER + "\n\nEnd"
    assert result.returns_removed == 0


def test_quoted_pre_tag_is_plain_text() -> None:
    result = run("Intro\n> <pre>\n> x\nEnd")
    assert result.text == "Intro\n\n" + REPLY_START_MARKER + "<pre> x" + REPLY_END_MARKER + "\n\nEnd"


def test_region_limits_processing() -> None:
    options = ProcessingOptions(restrict_to_region=True)
    result = transform("aaa\nbbb\nccc\nddd", 4, 11, options)
    assert result == TransformResult("aaa\nbbb ccc", 1)


def test_region_ignored_without_restriction() -> None:
    assert transform("a\nb", 1, 2, ProcessingOptions()).text == "a b"


def test_region_starting_inside_reply_does_not_reopen_it() -> None:
    text = "> one\n> two\nthree"
    result = transform(text, 6, len(text), ProcessingOptions(restrict_to_region=True))
    assert result.text == "> one\ntwo" + REPLY_END_MARKER + "\n\nthree"


def test_empty_text() -> None:
    assert run("") == TransformResult("", 0)


@pytest.mark.parametrize(
    "text",
    [
        "Para one line a\npara one line b\n\nPara two",
        "Notes:\n- first\n- second\nDone",
        "Line one \nLine two",
    ],
)
def test_second_run_changes_nothing(text: str) -> None:
    options = ProcessingOptions(list_markers=("-",))
    settled = remove_extra_returns(text, options).text
    assert remove_extra_returns(settled, options) == TransformResult(settled, 0)


def test_options_default_when_omitted() -> None:
    assert transform("a\nb", 0, 3) == TransformResult("a b", 1)


def test_reply_opening_after_blank_line() -> None:
    result = run("text\n\n> q1\n> q2\nEnd")
    assert result.text == "text\n\n" + REPLY_START_MARKER + "q1 q2" + REPLY_END_MARKER + "\n\nEnd"
    assert result.returns_removed == 1


def test_quoted_list_items_keep_their_lines() -> None:
    result = run("Intro\n> - a\n> - b\nEnd", list_markers=("-",))
    assert result.text == "Intro\n\n" + REPLY_START_MARKER + "- a\n- b" + REPLY_END_MARKER + "\n\nEnd"
    assert result.returns_removed == 0


def test_short_line_strips_next_reply_prefix() -> None:
    result = run("> hi\n> there is a long line\nEnd", min_line_length=20)
    assert result.text == REPLY_START_MARKER + "hi\nthere is a long line" + REPLY_END_MARKER + "\n\nEnd"
    assert result.returns_removed == 0


def test_short_line_before_reply_skips_start_marker() -> None:
    # Short lines take precedence over reply boundaries, so only the end is marked
    result = run("hi\n> quoted line here ok\nEnd", min_line_length=5)
    assert result.text == "hi\nquoted line here ok" + REPLY_END_MARKER + "\n\nEnd"


def test_inert_markers_do_not_log(isolated_log_file, capsys) -> None:
    result = run("x\ny", list_markers=("-", ""))
    assert result == TransformResult("x y", 1)
    assert not isolated_log_file.exists()
    assert capsys.readouterr().err == ""
