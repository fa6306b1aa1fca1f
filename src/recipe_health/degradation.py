"""Degraded results used when the remote model cannot be consulted.

Two independent outputs:

- ``offline_stub()`` is a fixed, clearly labeled sample used only when no
  credential is configured (local development).
- ``heuristic_analysis()`` is a deterministic keyword score derived from the
  ingredient list, used when the service stays unavailable after all retries.

Neither path performs I/O.
"""

from collections.abc import Iterable
from dataclasses import dataclass
import re

from .core.types import AnalysisResult

BASELINE_SCORE = 60
MAX_LIST_ITEMS = 6

OFFLINE_SUMMARY = (
    "Unable to contact AI service. Returning sample feedback for development use only."
)
HEURISTIC_SUMMARY = "Heuristic estimate due to temporary AI unavailability."


@dataclass(frozen=True, slots=True)
class KeywordRule:
    keyword: str
    weight: int

    @property
    def favorable(self) -> bool:
        return self.weight > 0


# Concerning indicators first, then favorable ones; list order drives the
# order of concerns and suggestions in the result.
KEYWORD_RULES: tuple[KeywordRule, ...] = (
    *(
        KeywordRule(k, -7)
        for k in (
            "bacon",
            "cream",
            "butter",
            "sugar",
            "syrup",
            "shortening",
            "lard",
            "processed",
            "deep fried",
            "salt",
            "sodium",
            "sausage",
            "palm oil",
        )
    ),
    *(
        KeywordRule(k, 5)
        for k in (
            "broccoli",
            "spinach",
            "kale",
            "oat",
            "whole",
            "brown rice",
            "lentil",
            "bean",
            "legume",
            "olive oil",
            "tomato",
            "carrot",
            "berry",
            "nuts",
            "seeds",
            "yogurt",
            "fish",
        )
    ),
)

_WHOLE_GRAIN = re.compile(r"whole")
_VEGETABLE = re.compile(r"vegetable|broccoli|spinach|kale|tomato|carrot")
_SATURATED_FAT = re.compile(r"cream|butter")


def offline_stub() -> AnalysisResult:
    """Canned result for credential-less operation; ignores the ingredients."""
    return AnalysisResult(
        summary=OFFLINE_SUMMARY,
        score=45,
        concerns=[
            "High saturated fat from bacon and heavy cream.",
            "Limited fiber due to refined pasta.",
        ],
        suggestions=[
            "Swap in whole wheat pasta to add fiber.",
            "Use turkey bacon and replace half the cream with Greek yogurt.",
        ],
    )


def _dedupe_and_cap(items: Iterable[str], limit: int = MAX_LIST_ITEMS) -> list[str]:
    return list(dict.fromkeys(items))[:limit]


def heuristic_analysis(ingredients: Iterable[str]) -> AnalysisResult:
    """Score ingredients against ``KEYWORD_RULES`` with substring matching.

    The text scanned is the space-joined, lower-cased ingredient list, so a
    keyword matches at most once however many ingredients contain it.
    """
    text = " ".join(ingredients).lower()

    score = BASELINE_SCORE
    concerns: list[str] = []
    suggestions: list[str] = []
    for rule in KEYWORD_RULES:
        if rule.keyword not in text:
            continue
        score += rule.weight
        if rule.favorable:
            suggestions.append(f"Good: includes {rule.keyword}")
        else:
            concerns.append(f"Contains {rule.keyword}")

    if not _WHOLE_GRAIN.search(text):
        suggestions.append("Consider whole-grain swaps for more fiber.")
    if not _VEGETABLE.search(text):
        suggestions.append("Add a serve of vegetables.")
    if _SATURATED_FAT.search(text):
        suggestions.append(
            "Reduce saturated fat (e.g., yogurt or olive-oil based alternatives)."
        )

    return AnalysisResult(
        summary=HEURISTIC_SUMMARY,
        score=max(0, min(100, score)),
        concerns=_dedupe_and_cap(concerns),
        suggestions=_dedupe_and_cap(suggestions),
    )
