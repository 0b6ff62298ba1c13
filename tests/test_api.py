"""Tests for API endpoints (no external API keys or SMTP server required)."""

from unittest.mock import AsyncMock, MagicMock, patch

from fastapi.testclient import TestClient

from src.api.main import app
from src.pipeline_config import ProviderRole
from src.summarization.errors import ApiError, SummarizationFailedError
from src.summarization.orchestrator import Summarizer

client = TestClient(app)


def test_health():
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "healthy"}


def test_routes_registered():
    routes = [r.path for r in app.routes]  # type: ignore[union-attr]
    assert "/summarize" in routes
    assert "/share" in routes


# --- /summarize ---


def test_summarize_validation():
    """Missing fields fail schema validation."""
    response = client.post("/summarize", json={"transcript": "hello"})
    assert response.status_code == 422


def test_summarize_blank_fields_return_400():
    with patch("src.api.routes.summarize.get_summarizer") as mock_get:
        response = client.post("/summarize", json={"transcript": "  ", "prompt": "Summarize"})
    assert response.status_code == 400
    assert response.json()["detail"] == "Transcript and prompt are required."
    mock_get.assert_not_called()


def test_summarize_success():
    summarizer = MagicMock()
    summarizer.summarize = AsyncMock(return_value="Short summary.")

    with patch("src.api.routes.summarize.get_summarizer", return_value=summarizer):
        response = client.post(
            "/summarize",
            json={"transcript": "Alice: hi. Bob: hello.", "prompt": "Summarize in one sentence"},
        )

    assert response.status_code == 200
    assert response.json() == {"summary": "Short summary."}
    summarizer.summarize.assert_awaited_once_with(
        "Alice: hi. Bob: hello.", "Summarize in one sentence"
    )


def test_summarize_failure_is_opaque():
    """Internal error text (which may name providers or keys) never reaches the caller."""
    summarizer = MagicMock()
    summarizer.summarize = AsyncMock(
        side_effect=SummarizationFailedError("groq said: invalid key sk-secret")
    )

    with patch("src.api.routes.summarize.get_summarizer", return_value=summarizer):
        response = client.post("/summarize", json={"transcript": "text", "prompt": "Summarize"})

    assert response.status_code == 500
    assert response.json() == {"detail": "Failed to generate summary."}
    assert "sk-secret" not in response.text


def test_summarize_end_to_end_with_fallback(make_client, recorded_sleep):
    """A real Summarizer over a fake provider pair: Groq fails, OpenAI answers."""
    fake = make_client(
        responses={
            ProviderRole.PRIMARY: [ApiError(503, "groq")],
            ProviderRole.SECONDARY: ["Fallback summary."],
        }
    )
    summarizer = Summarizer(fake, sleep=recorded_sleep)

    with patch("src.api.routes.summarize.get_summarizer", return_value=summarizer):
        response = client.post("/summarize", json={"transcript": "text", "prompt": "Summarize"})

    assert response.status_code == 200
    assert response.json()["summary"] == "Fallback summary."


# --- /share ---


def test_share_requires_recipients():
    """Empty recipients fail validation before any mail is sent."""
    with patch("src.api.routes.share.send_summary_email") as mock_send:
        response = client.post("/share", json={"summary": "X", "recipients": []})

    assert response.status_code == 400
    assert response.json()["detail"] == "Summary and at least one recipient are required."
    mock_send.assert_not_called()


def test_share_requires_summary():
    with patch("src.api.routes.share.send_summary_email") as mock_send:
        response = client.post("/share", json={"summary": "", "recipients": ["a@example.com"]})

    assert response.status_code == 400
    mock_send.assert_not_called()


def test_share_missing_fields():
    response = client.post("/share", json={"summary": "X"})
    assert response.status_code == 422


def test_share_success():
    with patch("src.api.routes.share.send_summary_email") as mock_send:
        response = client.post(
            "/share",
            json={"summary": "X", "recipients": ["a@example.com", " b@example.com ", ""]},
        )

    assert response.status_code == 200
    assert response.json() == {"message": "Summary shared successfully."}
    mock_send.assert_called_once_with("X", ["a@example.com", "b@example.com"])


def test_share_mail_failure_returns_500():
    with patch(
        "src.api.routes.share.send_summary_email",
        side_effect=OSError("SMTP auth failed for bot@example.com"),
    ):
        response = client.post("/share", json={"summary": "X", "recipients": ["a@example.com"]})

    assert response.status_code == 500
    assert response.json() == {"detail": "Failed to share summary."}
