"""
Keyword Classifier
==================

Assigns a priority tier to a support message by substring matching
against the keyword lexicon.
"""

from typing import Dict, Optional, Tuple

from support_triage.config import PriorityLevel
from support_triage.triage.domain.entities import ClassificationResult, MAX_URGENCY_SCORE
from support_triage.triage.domain.lexicon import KEYWORD_LEXICON
from support_triage.triage.domain.value_objects import MatchedKeywords, SUGGESTED_ACTIONS


# Tier -> (base score, increment per matched phrase)
URGENCY_WEIGHTS: Dict[str, Tuple[float, float]] = {
    PriorityLevel.HIGH: (8.0, 0.5),
    PriorityLevel.MEDIUM: (4.0, 0.3),
    PriorityLevel.LOW: (1.0, 0.1),
}

NO_MATCH_REASON = "No priority keywords detected"

_TIER_MARKERS = {
    PriorityLevel.HIGH: "🟥",
    PriorityLevel.MEDIUM: "🟨",
    PriorityLevel.LOW: "🟩",
}


class KeywordClassifier:
    """
    Stateless keyword classifier.

    Matching is case-insensitive substring containment with no word-boundary
    checks, so "not working" also matches "I am not working on this".
    """

    def classify(self, message: Optional[str]) -> ClassificationResult:
        """
        Classify a message into a priority tier.

        Args:
            message: Raw support message, any length or casing. Anything
                that is not a string classifies as an empty message

        Returns:
            ClassificationResult with matches, score, level and reason
        """
        text = message.lower() if isinstance(message, str) else ""

        matched = MatchedKeywords(
            high=self._find(PriorityLevel.HIGH, text),
            medium=self._find(PriorityLevel.MEDIUM, text),
            low=self._find(PriorityLevel.LOW, text),
        )

        level = self.select_level(matched)
        deciding = matched.for_level(level)

        if deciding:
            reason = f"Found {level} priority keywords: {', '.join(deciding)}"
            no_match_message = None
        else:
            reason = NO_MATCH_REASON
            no_match_message = self.build_no_match_message()

        return ClassificationResult(
            priority_level=level,
            needs_urgent_triage=bool(matched.high),
            matched_keywords=matched,
            urgency_score=self.urgency_score(matched),
            reason=reason,
            suggested_actions=SUGGESTED_ACTIONS[level],
            no_match_message=no_match_message,
        )

    def _find(self, level: str, text: str) -> Tuple[str, ...]:
        return tuple(k for k in KEYWORD_LEXICON[level] if k in text)

    @staticmethod
    def select_level(matched: MatchedKeywords) -> str:
        """Strict tier precedence; low when nothing matched."""
        if matched.high:
            return PriorityLevel.HIGH
        if matched.medium:
            return PriorityLevel.MEDIUM
        return PriorityLevel.LOW

    @staticmethod
    def urgency_score(matched: MatchedKeywords) -> float:
        """
        Score in [0, 10] from the deciding tier and its match count.

        Rounded to two decimals so 1 + 0.1 * 2 reports 1.2.
        """
        for level, (base, step) in URGENCY_WEIGHTS.items():
            count = len(matched.for_level(level))
            if count:
                return round(min(MAX_URGENCY_SCORE, base + step * count), 2)
        return 0.0

    def build_no_match_message(self) -> str:
        """Rephrasing guidance listing the whole lexicon per tier."""
        lines = [
            "Your message doesn't match any known issue type. Please try "
            "rephrasing your request using one or more of the following keywords:",
            "",
        ]
        for level, keywords in KEYWORD_LEXICON.items():
            lines.append(f"{_TIER_MARKERS[level]} {level.capitalize()} Priority: {', '.join(keywords)}")
        return "\n".join(lines)
