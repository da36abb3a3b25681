"""
Logging utilities for Returnfix.

Every entry goes to stderr and is appended to the run log, so a session in
the window leaves a record of which options were loaded and how many hard
returns each run removed. Entries below `min_level` are dropped; set it to
"DEBUG" to trace how .data.txt was parsed.
"""

import datetime
import sys


LOG_LEVELS = {"DEBUG": 10, "INFO": 20, "WARNING": 30, "ERROR": 40}

# Global log file path and threshold
log_file_path = "returnfix_execution.log"
min_level = "INFO"


def is_enabled(level: str) -> bool:
    """Unknown level names are treated as INFO."""
    return LOG_LEVELS.get(level, LOG_LEVELS["INFO"]) >= LOG_LEVELS.get(min_level, LOG_LEVELS["INFO"])


def log_message(message: str, level: str = "INFO"):
    """
    Writes a timestamped entry to stderr and the run log.

    Args:
        message: The message to log
        level: DEBUG, INFO, WARNING or ERROR
    """
    if not is_enabled(level):
        return

    timestamp = datetime.datetime.now().strftime("%Y-%m-%d %H:%M:%S")
    log_entry = f"[{timestamp}] [{level}] {message}"
    print(log_entry, file=sys.stderr)
    try:
        with open(log_file_path, "a", encoding="utf-8") as f:
            f.write(log_entry + "\n")
    except OSError as e:
        # The run goes on without a log file
        print(f"Cannot append to {log_file_path}: {e}", file=sys.stderr)
