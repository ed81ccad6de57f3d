"""
Triage Domain Layer
===================

Domain layer for message triage.

Contains:
- Lexicon: Fixed keyword lists per priority tier
- Entities: ClassificationResult, ResponseSubject, FormattedResponse, TriageOutcome
- Value Objects: MatchedKeywords, VisualIndicator, suggested action sets
- KeywordClassifier and ResponseFormatter: the stateless triage rules

This layer is framework-agnostic and contains pure business logic.
"""

from support_triage.triage.domain.lexicon import (
    HIGH_PRIORITY_KEYWORDS,
    MEDIUM_PRIORITY_KEYWORDS,
    LOW_PRIORITY_KEYWORDS,
    KEYWORD_LEXICON
)
from support_triage.triage.domain.value_objects import (
    MatchedKeywords,
    VisualIndicator,
    SUGGESTED_ACTIONS,
    NO_MATCH_ACTIONS
)
from support_triage.triage.domain.entities import (
    ClassificationResult,
    ResponseSubject,
    FormattedResponse,
    TriageOutcome,
    MAX_URGENCY_SCORE
)
from support_triage.triage.domain.classifier import KeywordClassifier, NO_MATCH_REASON
from support_triage.triage.domain.formatter import (
    ResponseFormatter,
    RESPONSE_ID_PREFIX,
    NO_MATCH_SUMMARY
)

__all__ = [
    "HIGH_PRIORITY_KEYWORDS",
    "MEDIUM_PRIORITY_KEYWORDS",
    "LOW_PRIORITY_KEYWORDS",
    "KEYWORD_LEXICON",
    "MatchedKeywords",
    "VisualIndicator",
    "SUGGESTED_ACTIONS",
    "NO_MATCH_ACTIONS",
    "ClassificationResult",
    "ResponseSubject",
    "FormattedResponse",
    "TriageOutcome",
    "MAX_URGENCY_SCORE",
    "KeywordClassifier",
    "NO_MATCH_REASON",
    "ResponseFormatter",
    "RESPONSE_ID_PREFIX",
    "NO_MATCH_SUMMARY",
]
