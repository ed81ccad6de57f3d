"""
Triage Application Services
============================

Application services for message classification and response formatting.

Orchestrates the domain classifier and formatter and supplies the clock
the formatter stamps replies with.
"""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Any, Mapping, Optional, Union

from pydantic import ValidationError

from support_triage.core import InvalidInputException
from support_triage.shared.infrastructure.logging import get_logger, log_latency
from support_triage.triage.application.dto import FormatRequest
from support_triage.triage.domain import (
    ClassificationResult, FormattedResponse, KeywordClassifier,
    ResponseFormatter, ResponseSubject, TriageOutcome
)

logger = get_logger(__name__)


# ========== Interfaces ==========

class IClock(ABC):
    """Interface for the formatting time source."""

    @abstractmethod
    def now(self) -> datetime:
        """Current time, timezone-aware."""


# ========== Application Services ==========

FormatInput = Union[ClassificationResult, ResponseSubject, Mapping[str, Any]]


class TriageService:
    """
    Service for keyword triage of support messages.

    Stateless apart from its collaborators; safe to share between requests.
    """

    def __init__(
        self,
        clock: IClock,
        classifier: Optional[KeywordClassifier] = None,
        formatter: Optional[ResponseFormatter] = None
    ):
        self._clock = clock
        self._classifier = classifier or KeywordClassifier()
        self._formatter = formatter or ResponseFormatter()

    def classify(self, message: Optional[str]) -> ClassificationResult:
        """
        Classify a message by keyword tier.

        Args:
            message: Raw support message

        Returns:
            ClassificationResult with level, matches and urgency score
        """
        length = len(message) if isinstance(message, str) else 0
        with log_latency(logger, "classification", message_length=length):
            result = self._classifier.classify(message)

        logger.info(
            "Message classified",
            extra={
                "priority_level": result.priority_level,
                "needs_urgent_triage": result.needs_urgent_triage,
                "keyword_count": result.matched_keywords.count,
                "urgency_score": result.urgency_score
            }
        )
        return result

    def format(self, classification: FormatInput) -> FormattedResponse:
        """
        Format a classification into a reply.

        Args:
            classification: A ClassificationResult, a ResponseSubject, or a
                mapping with the FormatRequest fields

        Returns:
            FormattedResponse stamped with the service clock

        Raises:
            InvalidInputException: If the input is missing required fields
                or carries values of the wrong type
        """
        subject = self._to_subject(classification)
        response = self._formatter.format(subject, self._clock.now())

        logger.info(
            "Response formatted",
            extra={
                "response_id": response.response_id,
                "visual_indicator": response.visual_indicator,
                "action_count": len(response.suggested_actions)
            }
        )
        return response

    def triage(self, message: Optional[str]) -> TriageOutcome:
        """Classify a message and format the reply in one step."""
        classification = self.classify(message)
        return TriageOutcome(
            classification=classification,
            response=self.format(classification)
        )

    def _to_subject(self, classification: FormatInput) -> Union[ClassificationResult, ResponseSubject]:
        if isinstance(classification, (ClassificationResult, ResponseSubject)):
            return classification

        if not isinstance(classification, Mapping):
            raise InvalidInputException(
                f"Cannot format a {type(classification).__name__}; "
                "expected a classification or mapping"
            )

        try:
            return FormatRequest.model_validate(dict(classification)).to_domain()
        except ValidationError as e:
            fields = [".".join(str(p) for p in err["loc"]) for err in e.errors()]
            logger.warning(
                "Rejected malformed classification",
                extra={"fields": fields}
            )
            raise InvalidInputException(
                f"Invalid classification input: {', '.join(fields)}",
                fields=fields
            ) from e
