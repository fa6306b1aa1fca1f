"""Recipe health analysis backed by a resilient Gemini inference client."""

import importlib.metadata
import logging

from recipe_health.client import InferenceClient
from recipe_health.config import ClientConfig, config_scope, resolve_config
from recipe_health.core.types import AnalysisResult, IngredientDescriptor
from recipe_health.degradation import heuristic_analysis, offline_stub
from recipe_health.exceptions import (
    CallerInputError,
    ConfigurationError,
    ContentInvalidError,
    HardFailureError,
    InferenceError,
    RecipeHealthError,
)
from recipe_health.frontdoor import analyze_recipe, handle_analyze_request
from recipe_health.ingredients import normalize_ingredients, require_ingredients
from recipe_health.prompts import build_prompt
from recipe_health.telemetry import TelemetryContext, TelemetryReporter

try:
    __version__ = importlib.metadata.version("recipe-health")
except importlib.metadata.PackageNotFoundError:
    __version__ = "development"

# Null handler so importing apps without logging config see no warnings
logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [  # noqa: RUF022
    # Entry points
    "analyze_recipe",
    "handle_analyze_request",
    "InferenceClient",
    # Building blocks
    "normalize_ingredients",
    "require_ingredients",
    "build_prompt",
    "heuristic_analysis",
    "offline_stub",
    # Configuration
    "ClientConfig",
    "config_scope",
    "resolve_config",
    # Types
    "AnalysisResult",
    "IngredientDescriptor",
    # Errors
    "RecipeHealthError",
    "CallerInputError",
    "ConfigurationError",
    "InferenceError",
    "ContentInvalidError",
    "HardFailureError",
    # Telemetry
    "TelemetryContext",
    "TelemetryReporter",
]
