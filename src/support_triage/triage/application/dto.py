"""
Triage Application DTOs
========================

Data Transfer Objects for Triage API layer.

Pydantic models for request/response validation.
"""

from pydantic import BaseModel, Field, field_validator
from typing import List, Optional, Literal

from support_triage.config import settings
from support_triage.triage.domain import (
    ClassificationResult, FormattedResponse, ResponseSubject, TriageOutcome,
    KEYWORD_LEXICON
)


# ========== Type Aliases for Literals ==========
PriorityLevelStr = Literal["high", "medium", "low"]


# ========== Request DTOs ==========

class ClassifyRequest(BaseModel):
    """Request model for message classification."""
    message: str = Field(..., description="The support message to analyze")

    @field_validator("message")
    @classmethod
    def validate_message_length(cls, v: str) -> str:
        """Reject messages longer than the configured limit."""
        if len(v) > settings.max_message_length:
            raise ValueError(
                f"Message too long (max {settings.max_message_length} characters)"
            )
        return v


class FormatRequest(BaseModel):
    """
    Request model for response formatting.

    Mirrors the classification fields the formatter reads. Suggested
    actions may be omitted and are then derived from the priority level.
    """
    priority_level: PriorityLevelStr
    needs_urgent_triage: bool
    reason: str
    keywords_found: List[str]
    suggested_actions: List[str] = Field(default_factory=list)
    no_match_message: Optional[str] = None

    def to_domain(self) -> ResponseSubject:
        """Convert to domain value object."""
        return ResponseSubject(
            priority_level=self.priority_level,
            needs_urgent_triage=self.needs_urgent_triage,
            suggested_actions=tuple(self.suggested_actions),
            reason=self.reason,
            keywords_found=tuple(self.keywords_found),
            no_match_message=self.no_match_message
        )


# ========== Response DTOs ==========

class MatchedKeywordsInfo(BaseModel):
    """Matched phrases per tier, in lexicon order."""
    high: List[str]
    medium: List[str]
    low: List[str]
    all: List[str]
    count: int


class ClassificationResponse(BaseModel):
    """Response model for message classification."""
    priority_level: PriorityLevelStr
    needs_urgent_triage: bool
    matched_keywords: MatchedKeywordsInfo
    keywords_found: List[str]
    urgency_score: float = Field(..., ge=0.0, le=10.0)
    reason: str
    suggested_actions: List[str]
    no_match_message: Optional[str] = None

    @classmethod
    def from_domain(cls, result: ClassificationResult) -> "ClassificationResponse":
        """Create from domain entity."""
        matched = result.matched_keywords
        return cls(
            priority_level=result.priority_level,
            needs_urgent_triage=result.needs_urgent_triage,
            matched_keywords=MatchedKeywordsInfo(
                high=list(matched.high),
                medium=list(matched.medium),
                low=list(matched.low),
                all=list(matched.all),
                count=matched.count
            ),
            keywords_found=list(result.keywords_found),
            urgency_score=result.urgency_score,
            reason=result.reason,
            suggested_actions=list(result.suggested_actions),
            no_match_message=result.no_match_message
        )


class FormattedResponseInfo(BaseModel):
    """Response model for a formatted reply."""
    formatted_response: str
    suggested_actions: List[str]
    visual_indicator: str
    summary: str
    response_id: str
    timestamp: str

    @classmethod
    def from_domain(cls, response: FormattedResponse) -> "FormattedResponseInfo":
        """Create from domain entity."""
        return cls(
            formatted_response=response.formatted_response,
            suggested_actions=list(response.suggested_actions),
            visual_indicator=response.visual_indicator,
            summary=response.summary,
            response_id=response.response_id,
            timestamp=response.timestamp
        )


class AnalyzeResponse(BaseModel):
    """Response model for the combined classify-then-format pipeline."""
    classification: ClassificationResponse
    response: FormattedResponseInfo

    @classmethod
    def from_domain(cls, outcome: TriageOutcome) -> "AnalyzeResponse":
        return cls(
            classification=ClassificationResponse.from_domain(outcome.classification),
            response=FormattedResponseInfo.from_domain(outcome.response)
        )


class KeywordsResponse(BaseModel):
    """The keyword lexicon per tier."""
    high: List[str]
    medium: List[str]
    low: List[str]

    @classmethod
    def from_lexicon(cls) -> "KeywordsResponse":
        return cls(**{level: list(words) for level, words in KEYWORD_LEXICON.items()})
