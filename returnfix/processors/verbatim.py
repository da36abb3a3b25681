"""
<pre> block handling for Returnfix.

Text between a "<pre>" line and a "</pre>" line is copied through without any
hard return removal. The tag lines themselves are dropped.
"""

from dataclasses import dataclass
from typing import List, Tuple


@dataclass(frozen=True)
class TagLine:
    """A tag expected to sit on a line by itself: the tag plus its line break."""
    tag: str

    def starts_at(self, text: str, pos: int) -> bool:
        return text.startswith(self.tag, pos)

    def find(self, text: str, pos: int) -> int:
        return text.find(self.tag, pos)

    def end_at(self, text: str, pos: int) -> int:
        """Index just past the tag line beginning at `pos`, including its break."""
        end = pos + len(self.tag)
        if text.startswith("\n", end):
            end += 1
        return min(end, len(text))


OPEN_PRE = TagLine("<pre>")
CLOSE_PRE = TagLine("</pre>")


def is_verbatim_start(text: str, pos: int) -> bool:
    """Checks whether a <pre> block opens exactly at `pos`."""
    return OPEN_PRE.starts_at(text, pos)


def skip_verbatim_block(text: str, pos: int, output: List[str]) -> int:
    """
    Copies the <pre> block opening at `pos` into `output` unchanged.

    A block without a closing tag runs to the end of `text`.

    Args:
        text: Text being processed, already cut at the end of the region
        pos: Index of the opening tag
        output: Buffer that receives the block's interior

    Returns:
        Index just past the closing tag line
    """
    interior_start, interior_end, resume = locate_verbatim_block(text, pos)
    output.append(text[interior_start:interior_end])
    return resume


def locate_verbatim_block(text: str, pos: int) -> Tuple[int, int, int]:
    """
    Finds the interior of the <pre> block opening at `pos`.

    Returns:
        (interior start, interior end, index to resume scanning at)
    """
    interior_start = OPEN_PRE.end_at(text, pos)
    close_pos = CLOSE_PRE.find(text, pos)
    if close_pos == -1:
        return interior_start, len(text), len(text)
    # "<pre></pre>" on one line leaves nothing inside
    interior_start = min(interior_start, close_pos)
    return interior_start, close_pos, CLOSE_PRE.end_at(text, close_pos)
