"""Prompt construction for recipe health analysis."""

from .analysis_prompt_builder import (
    ANALYSIS_RESPONSE_SCHEMA,
    REQUIRED_KEYS,
    SYSTEM_INSTRUCTION,
    AnalysisPromptBuilder,
    build_prompt,
)
from .base import BasePromptBuilder

__all__ = [
    "ANALYSIS_RESPONSE_SCHEMA",
    "REQUIRED_KEYS",
    "SYSTEM_INSTRUCTION",
    "AnalysisPromptBuilder",
    "BasePromptBuilder",
    "build_prompt",
]
