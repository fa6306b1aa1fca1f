"""Configuration introspection for debugging and the CLI."""

from typing import Any

from .api import resolve_config
from .schema import ENV_ALIASES
from .types import ClientConfig

# ruff: noqa: T201


def get_config_warnings(config: ClientConfig) -> list[str]:
    """Non-fatal configuration issues worth surfacing."""
    warnings = []
    if not config.has_credential:
        warnings.append(
            "No API key configured - analyses return the offline sample result"
        )
    if config.max_retries == 0:
        warnings.append("Retries disabled - any outage degrades to the heuristic")
    if config.timeout_ms < 1000:
        warnings.append("Timeout is under one second - most requests will time out")
    return warnings


def get_config_info(config: ClientConfig | None = None) -> dict[str, Any]:
    """Redacted configuration summary suitable for JSON output."""
    from ..client.retry import worst_case_latency_ms

    cfg = config or resolve_config()
    return {
        "config": cfg.redacted_dict(),
        "environment_variables": {k: list(v) for k, v in ENV_ALIASES.items()},
        "worst_case_latency_ms": worst_case_latency_ms(cfg),
        "warnings": get_config_warnings(cfg),
    }


def print_config_debug(config: ClientConfig | None = None) -> None:
    """Print a human-readable configuration summary."""
    info = get_config_info(config)
    print("Effective configuration:")
    for field, value in info["config"].items():
        print(f"  {field}: {value}")
    print(f"\nWorst-case call latency: {info['worst_case_latency_ms']} ms")
    if info["warnings"]:
        print("\nWarnings:")
        for warning in info["warnings"]:
            print(f"  - {warning}")
