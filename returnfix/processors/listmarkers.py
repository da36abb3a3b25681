"""
List marker handling for Returnfix.

This module parses the user's list marker settings into ListMarkerSpec values
and decides whether a line starts a list item. A marker is either a plain
prefix such as "-" or "*", or an outline marker written "[outline]<delim>",
which matches an incrementing symbol followed by the delimiter ("3)", "iv.",
"bb)").
"""

from typing import TYPE_CHECKING, Iterable, List, Sequence, Tuple, Union

if TYPE_CHECKING:
    from ..context import ListMarkerSpec


OUTLINE_TOKEN = "[outline]"

# Arabic digits plus lowercase Roman numerals
OUTLINE_ALPHABET = frozenset("0123456789ivxlcdm")


def parse_list_markers(raw_markers: Union[str, Iterable[str]]) -> Tuple['ListMarkerSpec', ...]:
    """
    Parses raw marker strings into an ordered catalog of ListMarkerSpec.

    Args:
        raw_markers: A comma-separated string, or a sequence of raw markers.
            Tokens are not stripped, so tab and space markers survive.

    Returns:
        Tuple of specs in the given order
    """
    from ..context import ListMarkerSpec

    if isinstance(raw_markers, str):
        tokens = raw_markers.split(",")
    else:
        tokens = list(raw_markers)

    catalog: List[ListMarkerSpec] = []
    for token in tokens:
        if token[:len(OUTLINE_TOKEN)].lower() == OUTLINE_TOKEN:
            spec = ListMarkerSpec(literal=token[len(OUTLINE_TOKEN):], is_outline=True)
        else:
            spec = ListMarkerSpec(literal=token, is_outline=False)
        catalog.append(spec)
    return tuple(catalog)


def inert_list_markers(raw_markers: Union[str, Iterable[str]]) -> List[str]:
    """Raw markers that parse to an empty literal and so can never match."""
    tokens = raw_markers.split(",") if isinstance(raw_markers, str) else list(raw_markers)
    return [raw for raw, spec in zip(tokens, parse_list_markers(tokens)) if not spec.literal]


def is_outline_incrementor(incrementor: str) -> bool:
    """
    Checks whether `incrementor` looks like an outline counter.

    Accepts numbers and Roman numerals ("12", "iv", "XL") or one letter
    repeated ("a", "bb", "CCC"); rejects anything else, including mixes.
    """
    if not incrementor:
        return False
    folded = incrementor.casefold()
    if all(ch in OUTLINE_ALPHABET for ch in folded):
        return True
    first = folded[0]
    return all(ch == first for ch in folded)


def matches_list_marker(text: str, pos: int, spec: 'ListMarkerSpec') -> bool:
    """Checks a single catalog entry against the line starting at `pos`."""
    if not spec.literal or pos >= len(text):
        return False
    if not spec.is_outline:
        return text.startswith(spec.literal, pos)

    # An incrementor never spans a line break, so stop looking at the line end
    line_end = text.find("\n", pos)
    if line_end == -1:
        line_end = len(text)
    delimiter_pos = text.find(spec.literal, pos, line_end)
    if delimiter_pos <= pos:
        return False
    return is_outline_incrementor(text[pos:delimiter_pos])


def is_list_line(text: str, pos: int, catalog: Sequence['ListMarkerSpec']) -> bool:
    """
    Checks whether the line starting at `pos` is a list item.

    Args:
        text: Text being processed
        pos: Index of the candidate line's first character
        catalog: Parsed markers, tried in order

    Returns:
        True if any marker in the catalog matches
    """
    return any(matches_list_marker(text, pos, spec) for spec in catalog)
