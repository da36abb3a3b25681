"""
Extra hard return removal for Returnfix.

Unformatted email arrives with a hard return after every line. This module
strips all but the returns that carry structure: paragraph breaks, list
items, short lines, <pre> blocks and the boundaries of inline replies. The
" > > " prefixes of quoted reply lines are removed, and quoted passages can
be framed with marker lines.

The remover makes one pass over the text. At each hard return it looks at the
line that follows and applies the first matching rule:

    1. a <pre> block starts at the cursor: copy it through untouched
    2. no hard return left: copy the rest of the region
    3. the line is shorter than the minimum length: keep the return
    4. a quoted reply starts on the next line: keep, mark reply start
    5. a quoted reply ends on this line: keep, mark reply end
    6. a double return follows: keep the paragraph break
    7. the next line is a list item: keep the return
    8. otherwise: replace the return with a space
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING, List, Optional, Sequence

from .listmarkers import is_list_line, parse_list_markers
from .prefix import measure_marker_prefix
from .verbatim import is_verbatim_start, skip_verbatim_block

if TYPE_CHECKING:
    from ..context import ListMarkerSpec, ProcessingOptions, TransformResult


REPLY_START_MARKER = "----Original Message----\n\n"
REPLY_END_MARKER = "\n------------------------"


@dataclass
class _ScanCursor:
    """Scanner position plus what it knows about the line it is on."""
    n: int
    line_start: int
    is_current_line_reply: bool = False
    ignore_verbatim: bool = False


@dataclass(frozen=True)
class _Lookahead:
    """What follows the hard return at `return_pos`."""
    return_pos: int
    reply_len: int = 0
    is_double_return: bool = False
    next_reply_len: int = 0
    is_list_item: bool = False

    @property
    def is_next_line_reply(self) -> bool:
        return self.reply_len != 0 or self.next_reply_len != 0

    @property
    def single_end(self) -> int:
        """Start of the next line's text after a single return."""
        return self.return_pos + 1 + self.reply_len

    @property
    def full_end(self) -> int:
        """Start of the next line's text, skipping a second return if present."""
        if self.is_double_return:
            return self.single_end + 1 + self.next_reply_len
        return self.single_end


def _look_past_return(text: str, return_pos: int, catalog: Sequence['ListMarkerSpec']) -> _Lookahead:
    after_return = return_pos + 1
    reply_len = measure_marker_prefix(text, after_return)
    next_line = after_return + reply_len

    is_double_return = next_line < len(text) and text[next_line] == "\n"
    next_reply_len = measure_marker_prefix(text, next_line + 1) if is_double_return else 0
    is_list_item = next_line < len(text) and is_list_line(text, next_line, catalog)

    return _Lookahead(return_pos, reply_len, is_double_return, next_reply_len, is_list_item)


def transform(text: str, region_start: int, region_end: int,
              options: Optional['ProcessingOptions'] = None) -> 'TransformResult':
    """
    Removes extra hard returns from `text[region_start:region_end]`.

    Args:
        text: The full text, not just the region
        region_start: Index at which processing starts
        region_end: Index at which processing stops
        options: Processing options; defaults when None. With
            restrict_to_region off, the region is the whole text.

    Returns:
        TransformResult with the text before the region plus the processed
        region, and the number of returns deleted. Text from `region_end` on
        is not included; the caller reattaches it.
    """
    from ..context import ProcessingOptions, TransformResult

    if options is None:
        options = ProcessingOptions()
    if not options.restrict_to_region:
        region_start, region_end = 0, len(text)

    catalog = parse_list_markers(options.list_markers)
    min_line_length = options.min_line_length
    markers_enabled = options.email_markers_enabled

    # Nothing at or after the region end is looked at or emitted
    s = text[:region_end]
    end = len(s)
    out: List[str] = [s[:region_start]]
    returns_removed = 0

    cursor = _ScanCursor(n=region_start, line_start=region_start)

    # The first line has no hard return before it, so check it for a reply
    # prefix here
    first_reply_len = measure_marker_prefix(s, region_start)
    if first_reply_len:
        if region_start == 0:
            if markers_enabled:
                out.append(REPLY_START_MARKER)
        # Otherwise the reply began before the region and is already open
        cursor.n = cursor.line_start = region_start + first_reply_len
        cursor.is_current_line_reply = True
        cursor.ignore_verbatim = True

    while cursor.n < end:
        n = cursor.n

        if not cursor.ignore_verbatim and is_verbatim_start(s, n):
            cursor.n = cursor.line_start = skip_verbatim_block(s, n, out)
            cursor.is_current_line_reply = False
            continue

        return_pos = s.find("\n", n)
        if return_pos == -1:
            out.append(s[n:])
            cursor.n = end
            break

        ahead = _look_past_return(s, return_pos, catalog)
        line = s[n:return_pos]
        prefix_consumed = ahead.is_next_line_reply

        if return_pos - cursor.line_start < min_line_length:
            out.append(line + "\n")
            next_n = ahead.single_end
            prefix_consumed = ahead.reply_len != 0
        elif not cursor.is_current_line_reply and ahead.is_next_line_reply:
            out.append(line + "\n\n")
            if markers_enabled:
                out.append(REPLY_START_MARKER)
            next_n = ahead.full_end
        elif cursor.is_current_line_reply and not ahead.is_next_line_reply:
            out.append(line)
            if markers_enabled:
                out.append(REPLY_END_MARKER)
            out.append("\n\n")
            next_n = ahead.full_end
        elif ahead.is_double_return:
            out.append(line + "\n\n")
            next_n = ahead.full_end
        elif ahead.is_list_item:
            out.append(line + "\n")
            next_n = ahead.single_end
        else:
            # No space for an empty line or after a trailing space
            if return_pos == cursor.line_start or s[return_pos - 1] == " ":
                out.append(line)
            else:
                out.append(line + " ")
            returns_removed += 1
            next_n = ahead.single_end

        cursor.n = cursor.line_start = next_n
        cursor.is_current_line_reply = ahead.is_next_line_reply
        cursor.ignore_verbatim = prefix_consumed

    return TransformResult("".join(out), returns_removed)


def remove_extra_returns(text: str, options: Optional['ProcessingOptions'] = None) -> 'TransformResult':
    """Removes extra hard returns from the whole of `text`."""
    from ..context import ProcessingOptions

    if options is None:
        options = ProcessingOptions()
    return transform(text, 0, len(text), options)
