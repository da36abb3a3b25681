"""
Quote prefix measurement for Returnfix.

Inline email replies start each line with a run such as " > > ". This module
measures such runs so the extra returns remover can strip them and detect
where a quoted reply begins and ends.
"""

# Characters that may appear in a reply prefix, and the ones that make it one
REPLY_PREFIX_CHARS = " >"
REPLY_SIGN_CHARS = ">"


def measure_marker_prefix(text: str, start: int, chars: str = REPLY_PREFIX_CHARS,
                          required_chars: str = REPLY_SIGN_CHARS) -> int:
    """
    Measures the run of characters from `chars` starting at `start`.

    Args:
        text: Text to scan
        start: Index in `text` at which the run begins
        chars: Characters allowed in the run
        required_chars: At least one of these must occur in the run

    Returns:
        Length of the run, or 0 if it contains none of `required_chars`
        (a line of plain indentation is not a reply prefix)
    """
    found_required = False
    i = start
    while 0 <= i < len(text) and text[i] in chars:
        if text[i] in required_chars:
            found_required = True
        i += 1
    return i - start if found_required else 0
