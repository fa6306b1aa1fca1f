"""Decoding and structural validation of model output.

The validator only checks shape: the payload must be a JSON object carrying
``summary``, ``score``, ``concerns`` and ``suggestions`` with sensible types.
Value ranges are not policed; a score of 130 is returned as 130.
"""

import json
import logging
import re
from typing import Any

from pydantic import ValidationError

from ..core.types import AnalysisResult
from ..exceptions import ContentInvalidError
from ..prompts import REQUIRED_KEYS

log = logging.getLogger(__name__)

_JSON_FENCE = re.compile(r"^```(?:json)?\s*(.*?)\s*```$", re.DOTALL | re.IGNORECASE)


def extract_response_text(response: Any) -> str:
    """Pull the first candidate's text out of a provider response.

    Accepts SDK response objects exposing ``.text`` as well as raw
    ``generateContent`` JSON bodies (``candidates[0].content.parts[0].text``).
    """
    if isinstance(response, str):
        text = response
    elif isinstance(response, dict):
        try:
            text = response["candidates"][0]["content"]["parts"][0]["text"]
        except (KeyError, IndexError, TypeError):
            text = None
    else:
        try:
            text = response.text
        except (ValueError, AttributeError):
            # The SDK raises ValueError when the candidate carries no text part
            text = None

    if not isinstance(text, str) or not text.strip():
        raise ContentInvalidError("AI response was empty.")
    return text.strip()


def _strip_fence(text: str) -> str:
    match = _JSON_FENCE.match(text)
    return match.group(1) if match else text


def decode_payload(text: str) -> dict[str, Any]:
    """Parse ``text`` as a JSON object with all required keys present."""
    candidate = _strip_fence(text.strip())
    try:
        data = json.loads(candidate)
    except json.JSONDecodeError as e:
        raise ContentInvalidError("AI response was not valid JSON.") from e

    if not isinstance(data, dict):
        raise ContentInvalidError(
            f"AI response must be a JSON object, got {type(data).__name__}."
        )

    missing = [key for key in REQUIRED_KEYS if key not in data]
    if missing:
        raise ContentInvalidError(
            f"AI response is missing required keys: {', '.join(missing)}."
        )
    return data


def validate_analysis_payload(text: str) -> AnalysisResult:
    """Decode and validate a raw text payload into an ``AnalysisResult``."""
    data = decode_payload(text)

    score = data["score"]
    if isinstance(score, bool) or not isinstance(score, int | float):
        raise ContentInvalidError("AI response score must be a number.")

    try:
        return AnalysisResult.model_validate(data)
    except ValidationError as e:
        log.debug("Analysis payload failed validation: %s", e)
        raise ContentInvalidError(f"AI response has an invalid shape: {e}") from e
