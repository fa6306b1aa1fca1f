"""Builds the instruction payload for a recipe health analysis.

The rendered prompt is a pure function of the normalized ingredient list so
that identical input always produces byte-identical requests.
"""

import copy
from types import MappingProxyType
from typing import Any

from .base import BasePromptBuilder

REQUIRED_KEYS: tuple[str, ...] = ("summary", "score", "concerns", "suggestions")

SYSTEM_INSTRUCTION = "You are a nutritionist that only replies with valid JSON."

# Minimal schema accepted by the structured-output endpoint. Extra keywords
# such as ``additionalProperties`` are rejected by the API.
ANALYSIS_RESPONSE_SCHEMA: MappingProxyType[str, Any] = MappingProxyType(
    {
        "type": "object",
        "properties": {
            "summary": {"type": "string"},
            "score": {"type": "number"},
            "concerns": {"type": "array", "items": {"type": "string"}},
            "suggestions": {"type": "array", "items": {"type": "string"}},
        },
        "required": list(REQUIRED_KEYS),
    }
)

_TASK_LINES: tuple[str, ...] = (
    "Analyze the healthiness of this recipe based on the ingredients provided.",
    "Return a short JSON object with the following keys:",
    "summary: one sentence overview of overall nutrition quality.",
    "score: number from 0-100 where higher is healthier.",
    "concerns: array of specific nutrition issues.",
    "suggestions: array of improvement ideas with brief explanations.",
)


class AnalysisPromptBuilder(BasePromptBuilder):
    """Renders the task, the result contract, and a numbered ingredient list."""

    def create_prompt(self, ingredients: list[str]) -> str:
        numbered = "\n".join(f"{i}. {item}" for i, item in enumerate(ingredients, 1))
        return "\n".join((*_TASK_LINES, f"Ingredients:\n{numbered}"))

    def response_schema(self) -> dict[str, Any]:
        """Return a fresh, mutable copy of the structured output schema."""
        return copy.deepcopy(dict(ANALYSIS_RESPONSE_SCHEMA))


def build_prompt(ingredients: list[str]) -> str:
    """Convenience wrapper around ``AnalysisPromptBuilder.create_prompt``."""
    return AnalysisPromptBuilder().create_prompt(ingredients)
