"""
Response Formatter
==================

Renders a classification into the reply posted back to the sender.

All wording lives here. The formatter is pure: the caller supplies the
formatting time, which is the only source of the timestamp and response id.
"""

from datetime import datetime, timedelta, timezone
from typing import Union

from support_triage.config import PriorityLevel
from support_triage.triage.domain.entities import (
    ClassificationResult, FormattedResponse, ResponseSubject
)
from support_triage.triage.domain.value_objects import (
    NO_MATCH_ACTIONS, SUGGESTED_ACTIONS, VisualIndicator
)


RESPONSE_ID_PREFIX = "tri_"
NO_MATCH_SUMMARY = "No keywords detected - Instructional response sent"
SEPARATOR = "-" * 39

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


class ResponseFormatter:
    """
    Builds formatted replies from classification results.

    Following DRY principle - all reply wording in one place.
    """

    RESPONSE_MESSAGES = {
        PriorityLevel.HIGH: (
            "Your message has been received and marked as *high priority*. "
            "Our support team will work on it immediately to resolve the issue."
        ),
        PriorityLevel.MEDIUM: (
            "Your message has been received and will be attended to shortly. "
            "We've noted some issues that require attention, and our team will follow up soon."
        ),
        PriorityLevel.LOW: (
            "Your message has been received. It doesn't appear urgent, "
            "but we'll review it and get back to you when possible."
        ),
    }

    def format(
        self,
        classification: Union[ClassificationResult, ResponseSubject],
        now: datetime
    ) -> FormattedResponse:
        """
        Render a classification.

        Args:
            classification: Full result or the minimal subject subset
            now: Formatting time; naive datetimes are taken as UTC

        Returns:
            FormattedResponse with body, actions, indicator and summary
        """
        subject = classification
        if isinstance(classification, ClassificationResult):
            subject = ResponseSubject.from_classification(classification)

        timestamp = self.format_timestamp(now)
        response_id = self.build_response_id(now)

        if subject.no_match_message:
            return FormattedResponse(
                formatted_response=subject.no_match_message,
                suggested_actions=NO_MATCH_ACTIONS,
                visual_indicator=VisualIndicator.NEUTRAL,
                summary=NO_MATCH_SUMMARY,
                response_id=response_id,
                timestamp=timestamp,
            )

        level = subject.priority_level
        urgent = subject.needs_urgent_triage or level == PriorityLevel.HIGH
        indicator = self.select_indicator(subject)
        actions = tuple(subject.suggested_actions) or SUGGESTED_ACTIONS[level]
        keywords = ", ".join(subject.keywords_found) or "None"

        # Urgent wording wins even if the level field disagrees
        prose = self.RESPONSE_MESSAGES[PriorityLevel.HIGH if urgent else level]

        body = "\n".join([
            f"{indicator} {prose}",
            "",
            "📝 Summary",
            SEPARATOR,
            f"• Priority Level: {level.upper()}",
            f"• Urgent Triage: {'Yes' if subject.needs_urgent_triage else 'No'}",
            f"• Reason: {subject.reason}",
            f"• Keywords Detected: {keywords}",
            f"• Suggested Actions: {', '.join(actions)}",
            SEPARATOR,
            f"Timestamp: {timestamp}",
            f"Response ID: {response_id}",
        ])

        summary = (
            f"Priority: {level.upper()} | "
            f"Keywords: {len(subject.keywords_found)} | "
            f"Urgent: {'YES' if subject.needs_urgent_triage else 'NO'}"
        )

        return FormattedResponse(
            formatted_response=body,
            suggested_actions=actions,
            visual_indicator=indicator,
            summary=summary,
            response_id=response_id,
            timestamp=timestamp,
        )

    @staticmethod
    def select_indicator(subject: ResponseSubject) -> str:
        if subject.needs_urgent_triage or subject.priority_level == PriorityLevel.HIGH:
            return VisualIndicator.RED
        if subject.priority_level == PriorityLevel.MEDIUM:
            return VisualIndicator.YELLOW
        return VisualIndicator.GREEN

    @staticmethod
    def format_timestamp(now: datetime) -> str:
        """ISO-8601 in UTC with millisecond precision, e.g. 2024-05-01T12:00:00.000Z."""
        return _as_utc(now).isoformat(timespec="milliseconds").replace("+00:00", "Z")

    @staticmethod
    def build_response_id(now: datetime) -> str:
        millis = (_as_utc(now) - _EPOCH) // timedelta(milliseconds=1)
        return f"{RESPONSE_ID_PREFIX}{millis}"


def _as_utc(moment: datetime) -> datetime:
    if moment.tzinfo is None:
        return moment.replace(tzinfo=timezone.utc)
    return moment.astimezone(timezone.utc)
