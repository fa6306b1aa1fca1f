"""Configuration for the recipe health inference client.

Configuration is resolved once into an immutable ``ClientConfig`` and passed
explicitly to the client:

- ``ClientSettings``: pydantic-settings schema reading the environment
- ``ClientConfig``: frozen value used at call time (API key redacted in repr)
- ``resolve_config``: programmatic > environment > defaults
- ``config_scope``: async-safe scoped override for tests and tools
"""

from .api import config_from_settings, resolve_config
from .introspection import get_config_info, print_config_debug
from .schema import DEFAULT_MODEL, ENV_ALIASES, ClientSettings
from .scope import config_scope, get_ambient_config
from .types import ClientConfig

__all__ = [  # noqa: RUF022
    "resolve_config",
    "config_from_settings",
    "config_scope",
    "get_ambient_config",
    "ClientConfig",
    "ClientSettings",
    "DEFAULT_MODEL",
    "ENV_ALIASES",
    "get_config_info",
    "print_config_debug",
]
