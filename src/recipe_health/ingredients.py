"""Ingredient normalization.

Turns heterogeneous caller input (plain strings, name/quantity/unit records,
or ``IngredientDescriptor`` instances) into the ordered list of description
strings that the prompt builder and the local heuristic both consume.
"""

from collections.abc import Iterable, Mapping
import logging
from typing import Any

from .core.types import IngredientDescriptor
from .exceptions import CallerInputError

log = logging.getLogger(__name__)

MISSING_INGREDIENTS_MESSAGE = "Ingredients are required for analysis."


def describe_ingredient(item: Any) -> str:
    """Render one caller-supplied item, or ``""`` when it cannot be used."""
    if isinstance(item, str):
        return item.strip()
    if isinstance(item, IngredientDescriptor):
        return item.render()
    if isinstance(item, Mapping):
        return IngredientDescriptor.from_mapping(item).render()
    return ""


def normalize_ingredients(items: Iterable[Any] | None) -> list[str]:
    """Normalize caller input into trimmed, non-empty descriptions.

    Input order is preserved. Unusable elements (records without a name,
    blank strings, numbers, ``None``) are dropped rather than raising, so the
    only failure signal is an empty list. Normalizing an already-normalized
    list returns it unchanged.
    """
    if not isinstance(items, Iterable) or isinstance(items, str | bytes | Mapping):
        return []

    normalized: list[str] = []
    dropped = 0
    for item in items:
        description = describe_ingredient(item)
        if description:
            normalized.append(description)
        else:
            dropped += 1

    if dropped:
        log.debug("Dropped %d unusable ingredient entries", dropped)
    return normalized


def require_ingredients(items: Iterable[Any] | None) -> list[str]:
    """Normalize and reject empty results as a caller-input failure."""
    normalized = normalize_ingredients(items)
    if not normalized:
        raise CallerInputError(MISSING_INGREDIENTS_MESSAGE)
    return normalized
