"""Request shaping in the google-genai adapter."""

from types import MappingProxyType, SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import pytest

from recipe_health.client import (
    GenerationAdapter,
    GenerationRequest,
    GoogleGenAIAdapter,
    RequestMode,
)
from recipe_health.exceptions import ContentInvalidError
from recipe_health.prompts import AnalysisPromptBuilder


def make_request(mode: RequestMode) -> GenerationRequest:
    schema = (
        MappingProxyType(AnalysisPromptBuilder().response_schema())
        if mode is RequestMode.STRUCTURED
        else None
    )
    return GenerationRequest(
        model="gemini-2.5-flash",
        prompt="Ingredients:\n1. oats",
        system_instruction="Reply with JSON.",
        temperature=0.3,
        mode=mode,
        response_schema=schema,
    )


def mock_sdk_client(text: str | None = '{"ok": true}') -> MagicMock:
    client = MagicMock()
    client.aio.models.generate_content = AsyncMock(
        return_value=SimpleNamespace(text=text)
    )
    return client


@pytest.mark.unit
def test_adapter_satisfies_protocol(mock_api_key):
    assert isinstance(
        GoogleGenAIAdapter(mock_api_key, client=mock_sdk_client()), GenerationAdapter
    )


@pytest.mark.unit
def test_structured_config_carries_schema(mock_api_key):
    adapter = GoogleGenAIAdapter(mock_api_key, client=mock_sdk_client())

    config = adapter.build_config(make_request(RequestMode.STRUCTURED))

    assert config.response_mime_type == "application/json"
    assert config.temperature == 0.3
    assert config.system_instruction == "Reply with JSON."
    assert config.response_schema is not None


@pytest.mark.unit
def test_unstructured_config_has_no_schema(mock_api_key):
    adapter = GoogleGenAIAdapter(mock_api_key, client=mock_sdk_client())

    config = adapter.build_config(make_request(RequestMode.UNSTRUCTURED))

    assert config.response_mime_type == "application/json"
    assert config.response_schema is None


@pytest.mark.unit
@pytest.mark.asyncio
async def test_generate_sends_prompt_and_returns_text(mock_api_key):
    sdk = mock_sdk_client('  {"summary": "x"}  ')
    adapter = GoogleGenAIAdapter(mock_api_key, client=sdk)

    text = await adapter.generate(make_request(RequestMode.UNSTRUCTURED))

    assert text == '{"summary": "x"}'
    kwargs = sdk.aio.models.generate_content.await_args.kwargs
    assert kwargs["model"] == "gemini-2.5-flash"
    assert kwargs["contents"] == "Ingredients:\n1. oats"


@pytest.mark.unit
@pytest.mark.asyncio
async def test_generate_rejects_empty_text(mock_api_key):
    adapter = GoogleGenAIAdapter(mock_api_key, client=mock_sdk_client(None))

    with pytest.raises(ContentInvalidError, match="empty"):
        await adapter.generate(make_request(RequestMode.STRUCTURED))


@pytest.mark.unit
def test_request_rejects_mismatched_schema():
    with pytest.raises(ValueError, match="requires a response_schema"):
        GenerationRequest(
            model="m",
            prompt="p",
            system_instruction="s",
            temperature=0.3,
            mode=RequestMode.STRUCTURED,
        )
    with pytest.raises(ValueError, match="must not carry"):
        GenerationRequest(
            model="m",
            prompt="p",
            system_instruction="s",
            temperature=0.3,
            mode=RequestMode.UNSTRUCTURED,
            response_schema=MappingProxyType({}),
        )
