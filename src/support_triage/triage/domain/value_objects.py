"""
Triage Value Objects
====================

Immutable value objects for the triage domain.

Value objects are defined by their attributes rather than an identity.
They are immutable and can be freely shared.
"""

from dataclasses import dataclass
from typing import Dict, Tuple

from support_triage.config import PriorityLevel


class VisualIndicator(str):
    """Severity glyphs prefixed to a formatted response."""
    RED = "🔴"
    YELLOW = "🟡"
    GREEN = "🟢"
    NEUTRAL = "⚪"


# Opaque identifiers interpreted by the messaging integration
SUGGESTED_ACTIONS: Dict[str, Tuple[str, ...]] = {
    PriorityLevel.HIGH: ("flag-urgent", "notify-urgent", "escalate-to-engineering"),
    PriorityLevel.MEDIUM: ("flag-medium", "notify-standard"),
    PriorityLevel.LOW: ("flag-low", "schedule-followup"),
}

NO_MATCH_ACTIONS: Tuple[str, ...] = ("acknowledge", "request-clarification")


@dataclass(frozen=True)
class MatchedKeywords:
    """
    Lexicon phrases found in a message, grouped by tier.

    Each tuple keeps lexicon order, not the order phrases occur in the message.
    """
    high: Tuple[str, ...] = ()
    medium: Tuple[str, ...] = ()
    low: Tuple[str, ...] = ()

    @property
    def all(self) -> Tuple[str, ...]:
        """Combined matches: high tier first, then medium, then low."""
        return self.high + self.medium + self.low

    @property
    def count(self) -> int:
        return len(self.high) + len(self.medium) + len(self.low)

    def for_level(self, level: str) -> Tuple[str, ...]:
        """Get the matches of a single tier."""
        return {
            PriorityLevel.HIGH: self.high,
            PriorityLevel.MEDIUM: self.medium,
            PriorityLevel.LOW: self.low,
        }[level]
