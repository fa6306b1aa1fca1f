"""Public API for configuration resolution.

Precedence: programmatic overrides > environment (optionally seeded from a
``.env`` file) > defaults. A surrounding ``config_scope`` replaces the
environment and defaults entirely.
"""

import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from ..exceptions import ConfigurationError
from .schema import ENV_ALIASES, ClientSettings
from .scope import get_ambient_config
from .types import ClientConfig

log = logging.getLogger(__name__)


def config_from_settings(settings: ClientSettings) -> ClientConfig:
    """Freeze validated settings into a ``ClientConfig``."""
    return ClientConfig(**settings.to_dict())


def resolve_config(
    programmatic: dict[str, Any] | None = None,
    *,
    env_file: str | Path | None = None,
) -> ClientConfig:
    """Resolve the inference client configuration.

    Args:
        programmatic: Field overrides with the highest precedence. Unknown
            fields are ignored.
        env_file: Optional ``.env`` file read in addition to the process
            environment. Process environment values win over file values.

    Returns:
        The resolved, immutable ``ClientConfig``.

    Raises:
        ConfigurationError: If any value fails validation.
        FileNotFoundError: If ``env_file`` is given but does not exist.
    """
    overrides = {k: v for k, v in (programmatic or {}).items() if k in ENV_ALIASES}

    ambient = get_ambient_config()
    if ambient is not None:
        return ambient.with_overrides(**overrides)

    if env_file is not None and not Path(env_file).exists():
        raise FileNotFoundError(f"Environment file not found: {env_file}")

    try:
        # Keyed by the primary alias so init values outrank environment values
        settings = ClientSettings(
            _env_file=env_file,
            **{ENV_ALIASES[k][0]: v for k, v in overrides.items()},
        )
    except ValidationError as e:
        raise ConfigurationError(f"Invalid client configuration: {e}") from e

    config = config_from_settings(settings)
    log.debug("Resolved configuration: %s", config)
    return config
