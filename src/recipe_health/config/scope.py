"""Configuration scoping for entry-time overrides.

A scoped ``ClientConfig`` only affects ``resolve_config()`` calls made inside
the scope. Clients that already hold a config are unaffected.
"""

from collections.abc import Generator
from contextlib import contextmanager
import contextvars

from .types import ClientConfig

_ambient_config: contextvars.ContextVar[ClientConfig] = contextvars.ContextVar(
    "recipe_health_config"
)


def get_ambient_config() -> ClientConfig | None:
    """Return the config set by an enclosing ``config_scope``, if any."""
    try:
        return _ambient_config.get()
    except LookupError:
        return None


@contextmanager
def config_scope(config: ClientConfig) -> Generator[None]:
    """Temporarily use a different resolved configuration.

    Async-safe: the value lives in a context variable, so concurrent tasks
    each see their own scope.

    Example:
        with config_scope(resolve_config().with_overrides(max_retries=0)):
            result = await analyze_recipe(["oats", "berries"])
    """
    token = _ambient_config.set(config)
    try:
        yield
    finally:
        _ambient_config.reset(token)
