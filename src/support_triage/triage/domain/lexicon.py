"""
Keyword Lexicon
===============

Fixed trigger phrases for each priority tier.

Phrases are lowercase and matched as substrings of the lowercased message.
Tuples keep the lists immutable; no phrase belongs to more than one tier.
"""

from typing import Dict, Tuple

from support_triage.config import PriorityLevel


HIGH_PRIORITY_KEYWORDS: Tuple[str, ...] = (
    "broken", "crash", "emergency", "urgent", "not working",
    "error", "failed", "down", "critical", "outage",
)

MEDIUM_PRIORITY_KEYWORDS: Tuple[str, ...] = (
    "issue", "problem", "help", "question", "how to",
    "stuck", "trouble", "not sure", "confused", "slow",
)

LOW_PRIORITY_KEYWORDS: Tuple[str, ...] = (
    "thanks", "thank you", "feature", "suggestion", "idea",
    "maybe", "when", "can you", "would like",
)

# Insertion order is tier precedence
KEYWORD_LEXICON: Dict[str, Tuple[str, ...]] = {
    PriorityLevel.HIGH: HIGH_PRIORITY_KEYWORDS,
    PriorityLevel.MEDIUM: MEDIUM_PRIORITY_KEYWORDS,
    PriorityLevel.LOW: LOW_PRIORITY_KEYWORDS,
}
