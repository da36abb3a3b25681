"""
Processing orchestration for Returnfix.

This module connects the host window's session state to the extra returns
remover: it picks the region to process, runs the transform, puts any
unselected trailing text back, and records what happened.
"""

from typing import TYPE_CHECKING, Callable, Optional, Tuple

if TYPE_CHECKING:
    from .context import ProcessingOptions, ReturnfixSession, TransformResult


def resolve_region(session: 'ReturnfixSession', options: 'ProcessingOptions') -> Tuple[int, int]:
    """
    Picks the [start, end) region to process.

    The whole text is processed unless selected-region mode is on and the
    session has a non-empty selection.
    """
    start, end = session.selection_start, session.selection_end
    if not options.restrict_to_region or start >= end:
        return 0, len(session.text)
    return start, end


def splice_region(original: str, processed: str, region_end: int) -> str:
    """Appends the text after the processed region back onto the result."""
    return processed + original[region_end:]


def run_processing(session: 'ReturnfixSession', options: Optional['ProcessingOptions'] = None,
                   status_callback: Optional[Callable[[str], None]] = None) -> 'TransformResult':
    """
    Removes extra hard returns from the session text.

    Args:
        session: ReturnfixSession holding the text and selection
        options: Options for this run; the session's options when None
        status_callback: Optional callback for status messages

    Returns:
        TransformResult whose text is the full updated document. The session
        text and selection are updated to match.
    """
    from dataclasses import replace
    from .logging import log_message
    from .processors.returns import transform

    if options is None:
        options = session.options

    start, end = resolve_region(session, options)
    # A region covering the whole text needs no splicing
    if options.restrict_to_region and (start, end) == (0, len(session.text)):
        options = replace(options, restrict_to_region=False)

    log_message(f"Starting extra returns removal on [{start}, {end}) of {len(session.text)} characters.")
    if status_callback:
        status_callback("Removing extra hard returns...")

    original_text = session.text
    result = transform(original_text, start, end, options)
    if options.restrict_to_region:
        full_text = splice_region(original_text, result.text, end)
        session.selection_end = len(result.text)
    else:
        full_text = result.text
        session.selection_start = session.selection_end = 0

    session.text = full_text
    session.log_change('remove_extra_returns',
                       f"Removed {result.returns_removed} hard returns",
                       len(original_text), len(full_text))

    log_message(f"Finished extra returns removal: {result.returns_removed} returns removed.")
    if status_callback:
        status_callback("Extra returns removal complete.")

    return replace(result, text=full_text)
