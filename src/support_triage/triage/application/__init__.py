"""
Triage Application Layer
=========================

Application layer for message triage.

Contains:
- Services: Classification and formatting orchestration
- DTOs: Data transfer objects for API serialization
"""

from support_triage.triage.application.dto import (
    ClassifyRequest,
    FormatRequest,
    ClassificationResponse,
    MatchedKeywordsInfo,
    FormattedResponseInfo,
    AnalyzeResponse,
    KeywordsResponse
)
from support_triage.triage.application.services import (
    TriageService,
    IClock
)

__all__ = [
    # DTOs
    "ClassifyRequest",
    "FormatRequest",
    "ClassificationResponse",
    "MatchedKeywordsInfo",
    "FormattedResponseInfo",
    "AnalyzeResponse",
    "KeywordsResponse",
    # Services
    "TriageService",
    # Interfaces
    "IClock",
]
