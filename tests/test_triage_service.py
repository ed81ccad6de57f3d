"""Tests for the triage application service."""

from datetime import timedelta

import pytest

from support_triage.config import PriorityLevel
from support_triage.core import InvalidInputException, ValidationException
from support_triage.triage.domain import ResponseSubject, VisualIndicator


def test_classify_delegates_to_classifier(service):
    result = service.classify("URGENT: checkout is down")

    assert result.priority_level == PriorityLevel.HIGH
    assert result.matched_keywords.high == ("urgent", "down")


def test_format_uses_service_clock(service, clock, fixed_timestamp, fixed_response_id):
    result = service.classify("I have an issue with login")

    first = service.format(result)
    clock.moment = clock.moment + timedelta(seconds=1)
    second = service.format(result)

    assert first.response_id == fixed_response_id
    assert first.timestamp == fixed_timestamp
    assert second.response_id == "tri_1714564801000"


def test_format_accepts_mapping(service):
    response = service.format({
        "priority_level": "medium",
        "needs_urgent_triage": False,
        "reason": "Found medium priority keywords: issue",
        "keywords_found": ["issue"],
    })

    assert response.visual_indicator == VisualIndicator.YELLOW
    assert response.suggested_actions == ("flag-medium", "notify-standard")
    assert response.summary == "Priority: MEDIUM | Keywords: 1 | Urgent: NO"


def test_format_accepts_response_subject(service):
    subject = ResponseSubject(
        priority_level=PriorityLevel.LOW,
        needs_urgent_triage=False,
        reason="manual",
        keywords_found=(),
    )

    response = service.format(subject)

    assert response.visual_indicator == VisualIndicator.GREEN


def test_mapping_with_no_match_message_short_circuits(service):
    response = service.format({
        "priority_level": "low",
        "needs_urgent_triage": False,
        "reason": "No priority keywords detected",
        "keywords_found": [],
        "no_match_message": "Please rephrase",
    })

    assert response.formatted_response == "Please rephrase"
    assert response.visual_indicator == VisualIndicator.NEUTRAL


def test_missing_priority_level_is_invalid_input(service):
    with pytest.raises(InvalidInputException) as exc_info:
        service.format({
            "needs_urgent_triage": False,
            "reason": "x",
            "keywords_found": [],
        })

    assert "priority_level" in exc_info.value.fields
    assert isinstance(exc_info.value, ValidationException)


@pytest.mark.parametrize("payload,field", [
    ({"priority_level": "urgent", "needs_urgent_triage": False, "reason": "x", "keywords_found": []}, "priority_level"),
    ({"priority_level": "low", "needs_urgent_triage": False, "reason": 5, "keywords_found": []}, "reason"),
    ({"priority_level": "low", "needs_urgent_triage": False, "reason": "x", "keywords_found": "issue"}, "keywords_found"),
    ({"priority_level": "low", "reason": "x", "keywords_found": []}, "needs_urgent_triage"),
])
def test_malformed_mapping_is_invalid_input(service, payload, field):
    with pytest.raises(InvalidInputException) as exc_info:
        service.format(payload)

    assert field in exc_info.value.fields


def test_non_mapping_input_is_invalid_input(service):
    with pytest.raises(InvalidInputException):
        service.format("high")


def test_triage_runs_both_stages(service):
    outcome = service.triage("The app keeps crashing and is broken")

    assert outcome.classification.urgency_score == 9.0
    assert outcome.response.visual_indicator == VisualIndicator.RED
    assert outcome.classification.reason in outcome.response.formatted_response


def test_triage_without_keywords_returns_guidance(service):
    outcome = service.triage("hello there")

    assert outcome.response.visual_indicator == VisualIndicator.NEUTRAL
    assert outcome.response.formatted_response == outcome.classification.no_match_message
