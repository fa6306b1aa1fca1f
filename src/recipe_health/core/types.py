"""Core data types shared across the analysis flow.

``IngredientDescriptor`` is the structured form of caller input and
``AnalysisResult`` is the only shape the client ever returns, whether the
result came from the remote model, the offline stub, or the local heuristic.
"""

from __future__ import annotations

from collections.abc import Mapping
import dataclasses
import typing

from pydantic import BaseModel, ConfigDict

# Record keys accepted for the ingredient name, in lookup order.
NAME_KEYS: tuple[str, ...] = ("name", "ingredientName", "ingredient_name")


def _format_quantity(quantity: object) -> str:
    """Render a quantity without float noise (``2.0`` -> ``2``)."""
    if not quantity:
        return ""
    if isinstance(quantity, float) and quantity.is_integer():
        quantity = int(quantity)
    return str(quantity).strip()


@dataclasses.dataclass(frozen=True, slots=True)
class IngredientDescriptor:
    """A single ingredient as supplied by a caller."""

    name: str
    quantity: int | float | str | None = None
    unit: str | None = None

    @classmethod
    def from_mapping(cls, record: Mapping[str, typing.Any]) -> IngredientDescriptor:
        """Build a descriptor from a loosely-typed record.

        The first string value among ``NAME_KEYS`` is the name; a record
        without one produces an empty name, which renders to ``""``.
        """
        name = ""
        for key in NAME_KEYS:
            value = record.get(key)
            if isinstance(value, str):
                name = value
                break
        unit = record.get("unit")
        return cls(
            name=name,
            quantity=record.get("quantity"),
            unit=unit if isinstance(unit, str) else None,
        )

    def render(self) -> str:
        """Return ``"<quantity> <unit> <name>"`` with absent parts omitted.

        A descriptor with no name renders to an empty string so it is
        dropped by normalization rather than sent as a bare measurement.
        """
        name = self.name.strip()
        if not name:
            return ""
        parts = [_format_quantity(self.quantity), (self.unit or "").strip(), name]
        return " ".join(p for p in parts if p).strip()


class AnalysisResult(BaseModel):
    """Nutrition-quality assessment of one recipe.

    ``score`` is 0-100 by convention. Provider output outside that range is
    kept as-is; display layers may clamp.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    summary: str
    score: int | float
    concerns: list[str]
    suggestions: list[str]

    def to_dict(self) -> dict[str, typing.Any]:
        """JSON-ready mapping with exactly the four result keys."""
        return self.model_dump(mode="json")
