"""
Result messages for Returnfix.

Turns the number of hard returns removed by a run into a line for the status
bar. The randomized reporter varies the wording from run to run; nothing
depends on which phrasing is picked.
"""

import random
from abc import ABC, abstractmethod
from typing import Optional, Sequence


NOTHING_REMOVED_MESSAGE = "No extra hard returns found."


class ResultReporter(ABC):
    """Formats the outcome of an extra returns removal."""

    def summarize(self, returns_removed: int) -> str:
        if returns_removed <= 0:
            return NOTHING_REMOVED_MESSAGE
        return self.format_count(returns_removed)

    @abstractmethod
    def format_count(self, returns_removed: int) -> str:
        """Message for a positive count."""


class PlainResultReporter(ResultReporter):
    """Always reports with the same sentence."""

    def format_count(self, returns_removed: int) -> str:
        noun = "return" if returns_removed == 1 else "returns"
        return f"Removed {returns_removed} extra hard {noun}."


class RandomizedResultReporter(ResultReporter):
    """Picks one of several phrasings for each report."""

    DEFAULT_TEMPLATES = (
        "Removed {count} extra hard return(s).",
        "{count} hard return(s) gone for good.",
        "Joined {count} broken line(s) back together.",
        "Swept away {count} stray line break(s).",
        "Your text is {count} hard return(s) lighter.",
    )

    def __init__(self, templates: Optional[Sequence[str]] = None, rng: Optional[random.Random] = None):
        self.templates = tuple(templates) if templates else self.DEFAULT_TEMPLATES
        self.rng = rng or random.Random()

    def format_count(self, returns_removed: int) -> str:
        return self.rng.choice(self.templates).format(count=returns_removed)
