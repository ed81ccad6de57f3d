"""HTTP tests for the triage API using FastAPI's TestClient."""

from support_triage.triage.domain import HIGH_PRIORITY_KEYWORDS


def test_health(client):
    response = client.get("/health")

    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "healthy"
    assert data["checks"]["triage_service"] == "available"


def test_root_lists_triage_endpoints(client):
    data = client.get("/").json()

    assert data["modules"]["triage"]["prefix"] == "/triage"


def test_classify_endpoint(client):
    response = client.post("/triage/classify", json={"message": "The app keeps crashing and is broken"})

    assert response.status_code == 200
    data = response.json()
    assert data["priority_level"] == "high"
    assert data["needs_urgent_triage"] is True
    assert data["matched_keywords"]["high"] == ["broken", "crash"]
    assert data["matched_keywords"]["count"] == 2
    assert data["keywords_found"] == ["broken", "crash"]
    assert data["urgency_score"] == 9.0
    assert data["no_match_message"] is None


def test_classify_accepts_empty_message(client):
    response = client.post("/triage/classify", json={"message": ""})

    assert response.status_code == 200
    data = response.json()
    assert data["urgency_score"] == 0.0
    assert data["no_match_message"]


def test_classify_requires_message(client):
    response = client.post("/triage/classify", json={})

    assert response.status_code == 422


def test_classify_rejects_oversized_message(client):
    response = client.post("/triage/classify", json={"message": "a" * 10001})

    assert response.status_code == 422


def test_format_endpoint(client, fixed_timestamp, fixed_response_id):
    response = client.post("/triage/format", json={
        "priority_level": "medium",
        "needs_urgent_triage": False,
        "reason": "Found medium priority keywords: issue",
        "keywords_found": ["issue"],
        "suggested_actions": ["flag-medium", "notify-standard"],
    })

    assert response.status_code == 200
    data = response.json()
    assert data["visual_indicator"] == "🟡"
    assert data["response_id"] == fixed_response_id
    assert data["timestamp"] == fixed_timestamp
    assert data["summary"] == "Priority: MEDIUM | Keywords: 1 | Urgent: NO"
    assert data["formatted_response"].endswith(f"Response ID: {fixed_response_id}")


def test_format_missing_field_returns_422(client):
    response = client.post(
        "/triage/format",
        json={"needs_urgent_triage": True, "reason": "x", "keywords_found": []},
        headers={"X-Correlation-ID": "corr-123"},
    )

    assert response.status_code == 422
    data = response.json()
    assert "priority_level" in data["fields"]
    assert data["correlation_id"] == "corr-123"
    assert response.headers["X-Correlation-ID"] == "corr-123"


def test_analyze_endpoint(client):
    response = client.post("/triage/analyze", json={"message": "thanks, this is a great idea"})

    assert response.status_code == 200
    data = response.json()
    assert data["classification"]["priority_level"] == "low"
    assert data["classification"]["urgency_score"] == 1.2
    assert data["response"]["visual_indicator"] == "🟢"
    assert "• Keywords Detected: thanks, idea" in data["response"]["formatted_response"]


def test_analyze_without_keywords(client):
    data = client.post("/triage/analyze", json={"message": "hello there"}).json()

    assert data["response"]["visual_indicator"] == "⚪"
    assert data["response"]["suggested_actions"] == ["acknowledge", "request-clarification"]


def test_keywords_endpoint(client):
    data = client.get("/triage/keywords").json()

    assert data["high"] == list(HIGH_PRIORITY_KEYWORDS)
    assert "how to" in data["medium"]
    assert "would like" in data["low"]


def test_correlation_id_is_generated(client):
    response = client.get("/health")

    assert response.headers["X-Correlation-ID"]
