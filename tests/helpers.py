import asyncio
from collections.abc import Iterable
import json
from typing import Any

from recipe_health.client import GenerationRequest


def analysis_json(**overrides: Any) -> str:
    """A well-formed model reply; keys can be overridden or removed (None)."""
    payload: dict[str, Any] = {
        "summary": "Balanced recipe with good fiber.",
        "score": 78,
        "concerns": ["Moderate sodium."],
        "suggestions": ["Use low-sodium stock."],
    }
    for key, value in overrides.items():
        if value is None:
            payload.pop(key, None)
        else:
            payload[key] = value
    return json.dumps(payload)


class ScriptedAdapter:
    """Fake transport that replays one scripted outcome per attempt.

    Each outcome is either a response string or an exception instance to
    raise. Every received request is recorded for assertions. When the
    script runs out, the last outcome repeats.
    """

    def __init__(self, outcomes: Iterable[str | BaseException]):
        self.outcomes = list(outcomes)
        self.requests: list[GenerationRequest] = []

    @property
    def calls(self) -> int:
        return len(self.requests)

    async def generate(self, request: GenerationRequest) -> str:
        self.requests.append(request)
        index = min(len(self.requests), len(self.outcomes)) - 1
        outcome = self.outcomes[index]
        if isinstance(outcome, BaseException):
            raise outcome
        return outcome


class HangingAdapter:
    """Adapter whose requests never complete; only a timeout ends them."""

    def __init__(self):
        self.calls = 0
        self.cancelled = 0

    async def generate(self, request: GenerationRequest) -> str:  # noqa: ARG002
        self.calls += 1
        try:
            await asyncio.Event().wait()
        except asyncio.CancelledError:
            self.cancelled += 1
            raise
        return ""


class RecordingSleep:
    """Stand-in for ``asyncio.sleep`` that records delays without waiting."""

    def __init__(self):
        self.delays: list[float] = []

    async def __call__(self, seconds: float) -> None:
        self.delays.append(seconds)
