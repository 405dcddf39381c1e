"""Google Gemini API wrapper with error handling."""

import json
import logging
from typing import Any

from google import genai
from google.genai import types

from config import settings

logger = logging.getLogger(__name__)

_client: genai.Client | None = None

TRANSCRIBE_PROMPT = (
    "Transcribe all readable text in this resume image exactly as written. "
    "Return plain text only, preserving line breaks between sections."
)


def get_client() -> genai.Client | None:
    global _client
    if not settings.gemini_api_key:
        logger.warning("No GEMINI_API_KEY set - Gemini features disabled")
        return None
    if _client is None:
        _client = genai.Client(api_key=settings.gemini_api_key)
    return _client


def _strip_code_fences(text: str) -> str:
    text = text.strip()
    if text.startswith("```"):
        text = text.split("\n", 1)[1] if "\n" in text else text[3:]
        if text.endswith("```"):
            text = text[:-3]
        text = text.strip()
    return text


async def generate_object(prompt: str, schema: dict[str, Any]) -> dict | None:
    """Ask Gemini for a JSON object loosely conforming to ``schema``.

    Fields may be missing from the result; callers validate. Returns None if
    Gemini is unconfigured, the call fails, or the reply is not a JSON object.
    """
    client = get_client()
    if client is None:
        return None

    try:
        response = await client.aio.models.generate_content(
            model=settings.gemini_model,
            contents=prompt,
            config=types.GenerateContentConfig(
                temperature=0.2,
                max_output_tokens=8192,
                response_mime_type="application/json",
                response_json_schema=schema,
            ),
        )

        data = json.loads(_strip_code_fences(response.text or ""))

    except json.JSONDecodeError as e:
        logger.error("Failed to parse Gemini response as JSON: %s", e)
        return None
    except Exception as e:
        logger.error("Gemini API error: %s", e)
        return None

    if not isinstance(data, dict):
        logger.error("Gemini returned %s instead of a JSON object", type(data).__name__)
        return None
    return data


async def transcribe_image(image_bytes: bytes, mime_type: str) -> str | None:
    """Read the text out of a resume image. Returns None on any failure."""
    client = get_client()
    if client is None:
        return None

    try:
        response = await client.aio.models.generate_content(
            model=settings.gemini_model,
            contents=[
                types.Part.from_bytes(data=image_bytes, mime_type=mime_type),
                TRANSCRIBE_PROMPT,
            ],
            config=types.GenerateContentConfig(temperature=0.0),
        )
        return (response.text or "").strip()
    except Exception as e:
        logger.error("Gemini image transcription error: %s", e)
        return None
