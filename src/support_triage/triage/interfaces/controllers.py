"""
Triage Controllers (API Routes)
================================

FastAPI routes for message triage endpoints.

Controllers delegate to application services.
"""

from typing import Any, Dict

from fastapi import APIRouter, Body, Depends, HTTPException, Request

from support_triage.triage.application import (
    TriageService,
    ClassifyRequest, ClassificationResponse,
    FormattedResponseInfo, AnalyzeResponse, KeywordsResponse
)
from support_triage.shared.infrastructure.logging import get_logger

logger = get_logger(__name__)
router = APIRouter(prefix="/triage", tags=["Message Triage"])


# ========== Example payloads for Swagger ==========

CLASSIFY_REQUEST_EXAMPLE = {
    "message": "The app keeps crashing and is broken"
}

CLASSIFY_RESPONSE_EXAMPLE = {
    "priority_level": "high",
    "needs_urgent_triage": True,
    "matched_keywords": {
        "high": ["broken", "crash"],
        "medium": [],
        "low": [],
        "all": ["broken", "crash"],
        "count": 2
    },
    "keywords_found": ["broken", "crash"],
    "urgency_score": 9.0,
    "reason": "Found high priority keywords: broken, crash",
    "suggested_actions": ["flag-urgent", "notify-urgent", "escalate-to-engineering"],
    "no_match_message": None
}

FORMAT_REQUEST_EXAMPLE = {
    "priority_level": "medium",
    "needs_urgent_triage": False,
    "reason": "Found medium priority keywords: issue",
    "keywords_found": ["issue"],
    "suggested_actions": ["flag-medium", "notify-standard"]
}

FORMAT_RESPONSE_EXAMPLE = {
    "formatted_response": "🟡 Your message has been received and will be attended to shortly. ...",
    "suggested_actions": ["flag-medium", "notify-standard"],
    "visual_indicator": "🟡",
    "summary": "Priority: MEDIUM | Keywords: 1 | Urgent: NO",
    "response_id": "tri_1714564800000",
    "timestamp": "2024-05-01T12:00:00.000Z"
}


# ========== Dependencies ==========

def get_triage_service(request: Request) -> TriageService:
    """Get triage service from app state."""
    service = getattr(request.app.state, "triage_service", None)
    if service is None:
        raise HTTPException(
            status_code=503,
            detail="Triage service not initialized"
        )
    return service


# ========== Route Handlers ==========

@router.post(
    "/classify",
    response_model=ClassificationResponse,
    summary="Classify a support message by keyword tier",
    description="""
    Match the message against the high, medium and low keyword lists
    (case-insensitive substring match) and return the priority level,
    matched keywords, urgency score (0-10) and suggested actions.

    When nothing matches, `no_match_message` lists every keyword so the
    sender can rephrase.
    """,
    responses={
        200: {
            "description": "Message classified",
            "content": {"application/json": {"example": CLASSIFY_RESPONSE_EXAMPLE}}
        }
    }
)
async def classify_message(
    request: Request,
    payload: ClassifyRequest = Body(..., examples=[CLASSIFY_REQUEST_EXAMPLE]),
    service: TriageService = Depends(get_triage_service)
):
    correlation_id = getattr(request.state, "correlation_id", "unknown")
    logger.debug(
        "Classifying message",
        extra={"correlation_id": correlation_id, "message_preview": payload.message[:100]}
    )

    result = service.classify(payload.message)
    return ClassificationResponse.from_domain(result)


@router.post(
    "/format",
    response_model=FormattedResponseInfo,
    summary="Format a classification into a reply",
    description="""
    Render the reply for a classification. `priority_level`,
    `needs_urgent_triage`, `reason` and `keywords_found` are required;
    `suggested_actions` defaults to the level's action set.

    A non-empty `no_match_message` is returned verbatim with a neutral
    indicator.
    """,
    responses={
        200: {
            "description": "Reply formatted",
            "content": {"application/json": {"example": FORMAT_RESPONSE_EXAMPLE}}
        },
        422: {
            "description": "Classification input is malformed"
        }
    }
)
async def format_response(
    request: Request,
    payload: Dict[str, Any] = Body(..., examples=[FORMAT_REQUEST_EXAMPLE]),
    service: TriageService = Depends(get_triage_service)
):
    # Validated by TriageService.format; failures surface as 422
    response = service.format(payload)
    return FormattedResponseInfo.from_domain(response)


@router.post(
    "/analyze",
    response_model=AnalyzeResponse,
    summary="Classify a message and format the reply",
    description="Run classification and formatting in one call."
)
async def analyze_message(
    request: Request,
    payload: ClassifyRequest = Body(..., examples=[CLASSIFY_REQUEST_EXAMPLE]),
    service: TriageService = Depends(get_triage_service)
):
    correlation_id = getattr(request.state, "correlation_id", "unknown")

    outcome = service.triage(payload.message)

    logger.info(
        "Message triaged",
        extra={
            "correlation_id": correlation_id,
            "priority_level": outcome.classification.priority_level,
            "response_id": outcome.response.response_id
        }
    )
    return AnalyzeResponse.from_domain(outcome)


@router.get(
    "/keywords",
    response_model=KeywordsResponse,
    summary="List the keyword lexicon",
    description="The trigger phrases for each priority tier, in match order."
)
async def list_keywords():
    return KeywordsResponse.from_lexicon()


# Export router for inclusion in main app
triage_router = router
