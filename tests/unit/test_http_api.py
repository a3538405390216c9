"""Unit tests for the FastAPI chat adapter."""

from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi.testclient import TestClient

from adapters.http_api import create_app, word_chunks
from chat_engine.engine import AuralisEngine
from chat_engine.knowledge import KnowledgeStore
from chat_engine.responses import PRICING_ANSWERS
from chat_engine.store import InMemoryConversationStore


def _engine() -> AuralisEngine:
    return AuralisEngine(knowledge=KnowledgeStore(lambda: []))


@pytest.mark.unit
def test_chat_streams_reply_word_by_word():
    """
    Story: The widget posts "pricing?" with a session id. The reply is the
    generic pricing paragraph, streamed as plain text where every word carries
    a trailing space, and the session id is echoed back.
    """
    client = TestClient(create_app(_engine()))

    response = client.post("/api/chat", json={"message": "pricing?", "sessionId": "s1"})

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/plain")
    assert response.headers["x-session-id"] == "s1"
    assert response.text == PRICING_ANSWERS[-1][1] + " "


@pytest.mark.unit
@pytest.mark.parametrize("body", [{}, {"message": ""}, {"sessionId": "s1"}])
def test_missing_message_is_rejected(body):
    client = TestClient(create_app(_engine()))

    response = client.post("/api/chat", json=body)

    assert response.status_code == 400
    assert response.json() == {"error": "Message is required"}


@pytest.mark.unit
def test_new_session_and_transcript_are_saved_to_repository():
    """
    Story: No session id is sent, so the repository creates one. The user
    message and the bot reply are both saved under that id.
    """
    repository = MagicMock()
    repository.create_session.return_value = "db-session"
    client = TestClient(create_app(_engine(), repository))

    response = client.post("/api/chat", json={"message": "pricing?"})

    assert response.headers["x-session-id"] == "db-session"
    repository.save_message.assert_any_call("db-session", "user", "pricing?")
    repository.save_message.assert_any_call("db-session", "bot", PRICING_ANSWERS[-1][1])


@pytest.mark.unit
def test_session_id_falls_back_to_timestamp():
    repository = MagicMock()
    repository.create_session.return_value = None
    client = TestClient(create_app(_engine(), repository))

    response = client.post("/api/chat", json={"message": "hi"})

    assert response.headers["x-session-id"].startswith("session-")


@pytest.mark.unit
def test_engine_failure_returns_500(caplog):
    engine = MagicMock()
    engine.handle = AsyncMock(side_effect=RuntimeError("boom"))
    client = TestClient(create_app(engine))

    response = client.post("/api/chat", json={"message": "hi", "sessionId": "s1"})

    assert response.status_code == 500
    assert response.json() == {"error": "boom"}
    record = next(r for r in caplog.records if r.name == "adapters.http_api")
    assert record.getMessage() == "Chat API error: boom"
    assert record.exc_info is not None


@pytest.mark.unit
def test_welcome_endpoint_uses_page():
    client = TestClient(create_app(_engine()))

    response = client.get("/api/chat/welcome", params={"page": "/portfolio"})

    assert response.status_code == 200
    assert response.json()["suggestions"] == ["Education projects", "Finance solutions", "Healthcare tech"]


@pytest.mark.unit
def test_health_with_scheduled_refresh():
    engine = _engine()
    with TestClient(create_app(engine, refresh_seconds=3600)) as client:
        response = client.get("/health")
    assert response.json() == {"status": "healthy", "knowledge_loaded": False}


@pytest.mark.unit
@pytest.mark.asyncio
async def test_word_chunks_keeps_one_chunk_per_word():
    chunks = [c async for c in word_chunks("Hello  world")]
    assert chunks == ["Hello ", " ", "world "]


@pytest.mark.unit
@pytest.mark.parametrize(
    "kwargs",
    [
        {"content": b"not json", "headers": {"Content-Type": "application/json"}},
        {"json": {"message": 5}},
        {"json": ["pricing?"]},
    ],
)
def test_malformed_body_is_rejected_like_missing_message(kwargs):
    """
    Story: The widget sends a broken body: invalid JSON, a number instead of
    text, or a list. Each gets the same 400 error shape as a missing message.
    """
    client = TestClient(create_app(_engine()))

    response = client.post("/api/chat", **kwargs)

    assert response.status_code == 400
    assert response.json() == {"error": "Message is required"}


@pytest.mark.unit
def test_anonymous_sessions_stay_bounded():
    """
    Story: Many visitors post without a session id, so each post opens a new
    session. The conversation store never holds more than its limit.
    """
    store = InMemoryConversationStore(max_sessions=50)
    engine = AuralisEngine(knowledge=KnowledgeStore(lambda: []), store=store)
    client = TestClient(create_app(engine))

    for i in range(200):
        client.post("/api/chat", json={"message": "hi", "sessionId": f"visitor-{i}"})

    assert len(store) == 50
