"""
Context and state management for Returnfix.

This module contains the immutable values passed into the extra returns
remover (options, parsed list markers, results) and the ReturnfixSession
dataclass that holds the host window's state between runs.
"""

import datetime
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional, Any, Tuple


DEFAULT_LIST_MARKERS: Tuple[str, ...] = ("-", "*", "\t", "[outline])", "[outline].")


@dataclass(frozen=True)
class ListMarkerSpec:
    """A parsed list marker: a plain line prefix, or an outline delimiter."""
    literal: str
    is_outline: bool = False


@dataclass(frozen=True)
class ProcessingOptions:
    """Options for one extra returns removal; never changed during a run."""
    list_markers: Tuple[str, ...] = DEFAULT_LIST_MARKERS
    min_line_length: int = 0
    email_markers_enabled: bool = True
    restrict_to_region: bool = False


@dataclass(frozen=True)
class TransformResult:
    """Text produced by a run and the number of hard returns it deleted."""
    text: str
    returns_removed: int = 0


@dataclass
class ReturnfixSession:
    """Host window state: the text being edited and what has been done to it."""
    text: str = ""
    filepath: Optional[str] = None

    # Current selection in the editor, as [start, end)
    selection_start: int = 0
    selection_end: int = 0

    # Configuration data
    options: ProcessingOptions = field(default_factory=ProcessingOptions)
    default_file_directory: Optional[Path] = None

    # Processing state
    processing_log: List[Dict[str, Any]] = field(default_factory=list)
    changes_made: List[str] = field(default_factory=list)

    def log_change(self, step: str, description: str, before_length: int = None, after_length: int = None):
        """Log a processing step change."""
        self.processing_log.append({
            'step': step,
            'description': description,
            'before_length': len(self.text) if before_length is None else before_length,
            'after_length': len(self.text) if after_length is None else after_length,
            'timestamp': datetime.datetime.now()
        })
        self.changes_made.append(f"{step}: {description}")

    def get_processing_summary(self) -> str:
        """Get a summary of all processing steps performed."""
        if not self.processing_log:
            return "No processing steps completed."

        summary = "Processing Summary:\n"
        for i, log_entry in enumerate(self.processing_log, 1):
            summary += f"{i}. {log_entry['step']}: {log_entry['description']}\n"
        return summary
