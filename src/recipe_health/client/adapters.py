"""Transport adapters for the generative-text service.

The inference client talks to an adapter rather than to the SDK directly,
so tests can inject scripted fakes and other providers can be plugged in.
An adapter performs exactly one request per ``generate`` call and returns
the raw response text; retries and timeouts belong to the client.
"""

from collections.abc import Callable
import logging
from typing import Protocol, TypeAlias, runtime_checkable

from google import genai
from google.genai import types

from ..response.validation import extract_response_text
from .models import GenerationRequest, RequestMode

log = logging.getLogger(__name__)


@runtime_checkable
class GenerationAdapter(Protocol):
    """Minimal provider surface used by ``InferenceClient``."""

    async def generate(self, request: GenerationRequest) -> str: ...  # noqa: D102


AdapterFactory: TypeAlias = Callable[[str], GenerationAdapter]


class GoogleGenAIAdapter:
    """Adapter for the Gemini ``generateContent`` endpoint via google-genai."""

    def __init__(self, api_key: str, client: genai.Client | None = None):
        # One SDK client per adapter, and adapters are built per call; the
        # credential lives in the SDK client, never in prompt text
        self._client = client or genai.Client(api_key=api_key)

    def build_config(self, request: GenerationRequest) -> types.GenerateContentConfig:
        schema = (
            dict(request.response_schema or {})
            if request.mode is RequestMode.STRUCTURED
            else None
        )
        return types.GenerateContentConfig(
            system_instruction=request.system_instruction,
            temperature=request.temperature,
            response_mime_type="application/json",
            response_schema=schema,
        )

    async def generate(self, request: GenerationRequest) -> str:
        log.debug(
            "Sending generateContent request (model=%s, mode=%s)",
            request.model,
            request.mode.name,
        )
        response = await self._client.aio.models.generate_content(
            model=request.model,
            contents=request.prompt,
            config=self.build_config(request),
        )
        return extract_response_text(response)


def default_adapter_factory(api_key: str) -> GenerationAdapter:
    return GoogleGenAIAdapter(api_key)
