"""Gemini adapter for short text generation (food classification prompts).
"""

from typing import Any, Dict, Optional
import logging

import httpx

from app.exceptions import UpstreamError

logger = logging.getLogger("nutrition.gemini")


def build_request(prompt: str, temperature: float = 0.0, max_output_tokens: int = 10) -> Dict[str, Any]:
    return {
        "contents": [{"parts": [{"text": prompt}]}],
        "generationConfig": {
            "temperature": temperature,
            "maxOutputTokens": max_output_tokens,
        },
    }


def extract_text(data: Any) -> Optional[str]:
    """First candidate's first text part, or None when the payload has another shape"""
    try:
        text = data["candidates"][0]["content"]["parts"][0]["text"]
    except (KeyError, IndexError, TypeError):
        return None
    return text.strip() if isinstance(text, str) and text.strip() else None


def generate_text(
    prompt: str,
    *,
    api_key: str,
    url: str,
    timeout: float = 10.0,
    transport: Optional[httpx.BaseTransport] = None,
) -> str:
    """Send prompt to the generateContent endpoint and return the reply text.

    Raises:
        UpstreamError: non-2xx reply (carrying the upstream status), transport
            failure, or a reply without text
    """
    try:
        with httpx.Client(timeout=timeout, transport=transport) as client:
            resp = client.post(url, params={"key": api_key}, json=build_request(prompt))
    except httpx.HTTPError as exc:
        logger.error("Gemini request failed: %s", exc)
        raise UpstreamError("Failed to categorize food item", error=str(exc)) from exc

    try:
        data = resp.json()
    except ValueError:
        data = None

    if resp.is_error:
        logger.warning("Gemini returned HTTP %s", resp.status_code)
        raise UpstreamError(
            "Error calling food classification API",
            error=resp.text,
            http_status=resp.status_code,
        )

    text = extract_text(data)
    if text is None:
        logger.error("Unexpected Gemini response format: %s", resp.text[:500])
        raise UpstreamError("Unexpected response format from classification API")
    return text
