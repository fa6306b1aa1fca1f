"""Scenario-first entry points over ``InferenceClient``.

``handle_analyze_request`` mirrors the contract of the analyze route: it
takes the decoded JSON body and returns a status code plus the JSON payload,
so any web framework can mount it with a few lines of glue.
"""

from __future__ import annotations

from collections.abc import Mapping
import logging
from typing import TYPE_CHECKING, Any

from recipe_health.client import InferenceClient
from recipe_health.config import resolve_config
from recipe_health.exceptions import CallerInputError
from recipe_health.ingredients import require_ingredients

if TYPE_CHECKING:  # pragma: no cover - typing only
    from collections.abc import Iterable

    from recipe_health.config import ClientConfig
    from recipe_health.core.types import AnalysisResult

log = logging.getLogger(__name__)


async def analyze_recipe(
    ingredients: Iterable[Any],
    *,
    cfg: ClientConfig | None = None,
    client: InferenceClient | None = None,
) -> AnalysisResult:
    """Analyze one recipe's ingredients.

    Args:
        ingredients: Strings and/or ``{"name", "quantity", "unit"}`` records.
        cfg: Optional resolved configuration. If omitted, ``resolve_config()``
            is used.
        client: Optional pre-built client; takes precedence over ``cfg``.

    Example:
        ```python
        result = await analyze_recipe(["2 cup rolled oats", {"name": "berries"}])
        print(result.score, result.suggestions)
        ```
    """
    active = client or InferenceClient(cfg or resolve_config())
    return await active.analyze(ingredients)


async def handle_analyze_request(
    body: Any,
    *,
    client: InferenceClient | None = None,
) -> tuple[int, dict[str, Any]]:
    """Handle a decoded ``{"ingredients": [...]}`` request body.

    Returns ``(200, {"analysis": {...}})`` on success. An absent, malformed
    or empty ingredient list yields a 400 validation payload without
    building or invoking the client. ``ContentInvalidError`` and
    ``HardFailureError`` propagate to the caller's error middleware.
    """
    raw = body.get("ingredients") if isinstance(body, Mapping) else None
    try:
        normalized = require_ingredients(raw if isinstance(raw, list) else None)
    except CallerInputError as e:
        log.info("Rejected analyze request: %s", e)
        return 400, {"error": "validation_failed", "message": str(e)}

    active = client or InferenceClient(resolve_config())
    prompt = active.prompt_builder.create_prompt(normalized)
    analysis = await active.analyze_prompt(prompt, normalized)
    return 200, {"analysis": analysis.to_dict()}
