"""Core data types for recipe health analysis."""

from .types import AnalysisResult, IngredientDescriptor

__all__ = ["AnalysisResult", "IngredientDescriptor"]
