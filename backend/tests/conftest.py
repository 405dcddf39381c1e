"""Shared test configuration and fixtures."""

import pytest

from api.router import limiter


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "integration: calls the real Gemini API (needs GEMINI_API_KEY)"
    )


@pytest.fixture(autouse=True)
def _reset_rate_limits():
    """Every test starts with a fresh per-minute budget."""
    limiter.reset()
    yield


@pytest.fixture
def fake_gemini(monkeypatch):
    """Replace Gemini calls with canned responses.

    Returns a dict: set ``objects`` to a list of responses returned in order
    by generate_object, ``transcription`` for transcribe_image. Every prompt
    sent is appended to ``prompts``.
    """
    from services import gemini_client

    state = {"objects": [], "transcription": None, "prompts": [], "schemas": []}

    async def _generate_object(prompt, schema):
        state["prompts"].append(prompt)
        state["schemas"].append(schema)
        return state["objects"].pop(0) if state["objects"] else None

    async def _transcribe_image(image_bytes, mime_type):
        state["prompts"].append(f"<image {mime_type}>")
        return state["transcription"]

    monkeypatch.setattr(gemini_client, "generate_object", _generate_object)
    monkeypatch.setattr(gemini_client, "transcribe_image", _transcribe_image)
    return state
