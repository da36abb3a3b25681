"""
Data file handling for Returnfix.

This module loads default processing options for the host window from the
.data.txt file. The file is only ever read; options changed in the window
last for the session.

Example:

    # LIST_MARKERS
    -
    *
    \\t
    [outline])
    [outline].

    # MIN_LINE_LENGTH
    0

    # EMAIL_MARKERS
    on

    # SELECTED_REGION_ONLY
    off

    # DEFAULT_FILE_DIR
    ~/Documents
"""

import os
from dataclasses import replace
from pathlib import Path
from typing import TYPE_CHECKING, List, Optional

if TYPE_CHECKING:
    from .context import ReturnfixSession


# Data file constants
DATA_FILE_NAME = ".data.txt"
LIST_MARKERS_SECTION_MARKER = "# LIST_MARKERS"
MIN_LINE_LENGTH_SECTION_MARKER = "# MIN_LINE_LENGTH"
EMAIL_MARKERS_SECTION_MARKER = "# EMAIL_MARKERS"
SELECTED_REGION_SECTION_MARKER = "# SELECTED_REGION_ONLY"
DEFAULT_DIR_SECTION_MARKER = "# DEFAULT_FILE_DIR"

SECTION_NAMES = {
    LIST_MARKERS_SECTION_MARKER: 'list_markers',
    MIN_LINE_LENGTH_SECTION_MARKER: 'min_line_length',
    EMAIL_MARKERS_SECTION_MARKER: 'email_markers',
    SELECTED_REGION_SECTION_MARKER: 'selected_region',
    DEFAULT_DIR_SECTION_MARKER: 'default_dir',
}

TRUE_VALUES = {"on", "yes", "true", "1"}
FALSE_VALUES = {"off", "no", "false", "0"}


def default_data_file_path() -> str:
    """Path of .data.txt, next to the returnfix package directory."""
    script_dir = os.path.dirname(os.path.abspath(__file__))
    parent_dir = os.path.dirname(script_dir)
    return os.path.join(parent_dir, DATA_FILE_NAME)


def decode_marker_line(line: str) -> str:
    """Turns the \\t and \\s escapes of a LIST_MARKERS line into tab and space."""
    return line.replace("\\t", "\t").replace("\\s", " ")


def parse_flag(value: str) -> Optional[bool]:
    lowered = value.lower()
    if lowered in TRUE_VALUES:
        return True
    if lowered in FALSE_VALUES:
        return False
    return None


def load_data_file(ctx: 'ReturnfixSession' = None, data_file_path: Optional[str] = None) -> 'ReturnfixSession':
    """
    Loads default options and the default directory from the .data.txt file.

    Args:
        ctx: Optional ReturnfixSession to populate, creates new one if None
        data_file_path: File to read; defaults to .data.txt beside the package

    Returns:
        ReturnfixSession whose options reflect the file. Values that are
        missing or malformed keep their built-in defaults.
    """
    from .context import ReturnfixSession, ProcessingOptions
    from .logging import log_message
    from .processors.listmarkers import inert_list_markers

    if ctx is None:
        ctx = ReturnfixSession()

    options = ProcessingOptions()
    ctx.options = options
    ctx.default_file_directory = None

    if data_file_path is None:
        data_file_path = default_data_file_path()

    log_message(f"Attempting to load data file: {data_file_path}")

    if not os.path.exists(data_file_path):
        log_message(f"Data file '{data_file_path}' not found. Using default options.", level="WARNING")
        return ctx

    try:
        with open(data_file_path, 'r', encoding='utf-8') as f:
            lines = f.read().splitlines()
    except OSError as e:
        log_message(f"Error loading data file '{data_file_path}': {e}. Using default options.", level="ERROR")
        return ctx

    current_section = None
    list_markers: List[str] = []
    seen_list_markers = False

    for i, line in enumerate(lines):
        # strip out any leading BOM / ZERO-WIDTH chars
        stripped_line = line.strip().lstrip('\ufeff\u200b\u00A0')

        if stripped_line in SECTION_NAMES:
            current_section = SECTION_NAMES[stripped_line]
            log_message(f"Found section marker: {stripped_line}", level="DEBUG")
            if current_section == 'list_markers':
                seen_list_markers = True
            continue

        if not current_section or not stripped_line or stripped_line.startswith('# '):
            continue

        if current_section == 'list_markers':
            list_markers.append(decode_marker_line(stripped_line))

        elif current_section == 'min_line_length':
            try:
                value = int(stripped_line)
            except ValueError:
                value = -1
            if value >= 0:
                options = replace(options, min_line_length=value)
            else:
                log_message(f"Line {i + 1}: invalid minimum line length '{stripped_line}'", level="WARNING")

        elif current_section in ('email_markers', 'selected_region'):
            flag = parse_flag(stripped_line)
            if flag is None:
                log_message(f"Line {i + 1}: expected on/off, got '{stripped_line}'", level="WARNING")
            elif current_section == 'email_markers':
                options = replace(options, email_markers_enabled=flag)
            else:
                options = replace(options, restrict_to_region=flag)

        elif current_section == 'default_dir':
            if ctx.default_file_directory is None:
                potential_path = Path(stripped_line).expanduser()
                if potential_path.is_dir():
                    ctx.default_file_directory = potential_path
                    log_message(f"Loaded default directory: '{ctx.default_file_directory}'")
                else:
                    log_message(f"Invalid default directory path in file: '{stripped_line}'", level="WARNING")

    if seen_list_markers:
        options = replace(options, list_markers=tuple(list_markers))
        for marker in inert_list_markers(list_markers):
            log_message(f"List marker {marker!r} has no literal and will never match", level="WARNING")

    ctx.options = options
    log_message(f"Loaded {len(options.list_markers)} list markers, minimum line length "
                f"{options.min_line_length}, email markers {'on' if options.email_markers_enabled else 'off'}.")
    return ctx
