"""
Triage Domain Entities
======================

Domain objects for the message triage module.

Contains pure Python business objects for keyword classification
and response formatting. Both are built fresh per message and never stored.
"""

from dataclasses import dataclass
from typing import Optional, Tuple

from support_triage.config import PRIORITY_LEVELS
from support_triage.core import InvalidInputException
from support_triage.triage.domain.value_objects import MatchedKeywords

MAX_URGENCY_SCORE = 10.0

@dataclass(frozen=True)
class ClassificationResult:
    """
    Result of keyword classification.

    `needs_urgent_triage` is true exactly when the level is high. Both fields
    are kept because downstream integrations branch on either one.
    """
    priority_level: str
    needs_urgent_triage: bool
    matched_keywords: MatchedKeywords
    urgency_score: float
    reason: str
    suggested_actions: Tuple[str, ...] = ()
    no_match_message: Optional[str] = None

    def __post_init__(self):
        """Validate classification result."""
        if self.priority_level not in PRIORITY_LEVELS:
            raise InvalidInputException(
                f"Unknown priority level: {self.priority_level!r}",
                fields=["priority_level"]
            )
        if not 0.0 <= self.urgency_score <= MAX_URGENCY_SCORE:
            raise InvalidInputException(
                "Urgency score must be between 0 and 10",
                fields=["urgency_score"]
            )
        if self.no_match_message and self.matched_keywords.count:
            raise InvalidInputException(
                "no_match_message is only set when nothing matched",
                fields=["no_match_message"]
            )

    @property
    def keywords_found(self) -> Tuple[str, ...]:
        """All matched phrases, high tier first."""
        return self.matched_keywords.all

def _is_str_sequence(value) -> bool:
    return isinstance(value, (tuple, list)) and all(isinstance(v, str) for v in value)

@dataclass(frozen=True)
class ResponseSubject:
    """
    The subset of a classification the formatter needs.

    Lets callers that only hold a level, flag and keyword list (for example a
    JSON payload from another service) format a reply without reclassifying.
    Every field is type-checked on construction, so a subject that exists is
    safe to format.
    """
    priority_level: str
    needs_urgent_triage: bool
    reason: str
    keywords_found: Tuple[str, ...]
    suggested_actions: Tuple[str, ...] = ()
    no_match_message: Optional[str] = None

    def __post_init__(self):
        if self.priority_level not in PRIORITY_LEVELS:
            raise InvalidInputException(
                f"Unknown priority level: {self.priority_level!r}",
                fields=["priority_level"]
            )

        invalid = []
        if not isinstance(self.needs_urgent_triage, bool):
            invalid.append("needs_urgent_triage")
        if not isinstance(self.reason, str):
            invalid.append("reason")
        if not _is_str_sequence(self.keywords_found):
            invalid.append("keywords_found")
        if not _is_str_sequence(self.suggested_actions):
            invalid.append("suggested_actions")
        if self.no_match_message is not None and not isinstance(self.no_match_message, str):
            invalid.append("no_match_message")

        if invalid:
            raise InvalidInputException(
                f"Invalid response subject: {', '.join(invalid)}",
                fields=invalid
            )

    @classmethod
    def from_classification(cls, result: ClassificationResult) -> "ResponseSubject":
        """Create from a full classification result."""
        return cls(
            priority_level=result.priority_level,
            needs_urgent_triage=result.needs_urgent_triage,
            reason=result.reason,
            keywords_found=result.keywords_found,
            suggested_actions=result.suggested_actions,
            no_match_message=result.no_match_message,
        )

@dataclass(frozen=True)
class FormattedResponse:
    """Human-readable reply rendered from a classification."""
    formatted_response: str
    suggested_actions: Tuple[str, ...]
    visual_indicator: str
    summary: str
    response_id: str
    timestamp: str

@dataclass(frozen=True)
class TriageOutcome:
    """Classification and formatted reply for one message."""
    classification: ClassificationResult
    response: FormattedResponse
