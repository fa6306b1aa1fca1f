"""Configuration schema and validation using Pydantic.

This module defines the settings schema that validates and coerces values
from the environment (and optional ``.env`` files) into the inference
client's configuration. Environment names follow the deployment surface:
``GOOGLE_API_KEY``, ``GEMINI_MODEL`` and the ``AI_*`` timing knobs.
"""

from typing import Any

from pydantic import AliasChoices, Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_MODEL = "gemini-2.5-flash"

# Environment variable names per field, first name wins when several are set.
ENV_ALIASES: dict[str, tuple[str, ...]] = {
    "api_key": ("GOOGLE_API_KEY", "GEMINI_API_KEY"),
    "model": ("GEMINI_MODEL",),
    "timeout_ms": ("AI_REQUEST_TIMEOUT_MS",),
    "max_retries": ("AI_MAX_RETRIES",),
    "backoff_base_ms": ("AI_BACKOFF_BASE_MS",),
    "backoff_max_ms": ("AI_BACKOFF_MAX_MS",),
    "jitter_ms": ("AI_BACKOFF_JITTER_MS",),
    "temperature": ("AI_TEMPERATURE",),
}


def _aliases(field: str) -> AliasChoices:
    return AliasChoices(*ENV_ALIASES[field])


class ClientSettings(BaseSettings):
    """Pydantic settings schema for the inference client.

    Values are matched only through ``ENV_ALIASES``, whether they come from
    the environment, a ``.env`` file or init keywords. Use ``resolve_config``
    to pass overrides by field name.
    """

    model_config = SettingsConfigDict(
        env_file=None,  # Only used when explicitly requested
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    api_key: str | None = Field(
        default=None,
        validation_alias=_aliases("api_key"),
        description="Google Generative Language API key; absent means offline mode",
    )

    model: str = Field(
        default=DEFAULT_MODEL,
        validation_alias=_aliases("model"),
        description="Gemini model identifier",
        min_length=1,
    )

    timeout_ms: int = Field(
        default=12_000,
        validation_alias=_aliases("timeout_ms"),
        description="Per-attempt request timeout in milliseconds",
        gt=0,
    )

    max_retries: int = Field(
        default=4,
        validation_alias=_aliases("max_retries"),
        description="Retries after the first attempt for availability errors",
        ge=0,
    )

    backoff_base_ms: int = Field(
        default=300,
        validation_alias=_aliases("backoff_base_ms"),
        description="Base delay doubled on every retry",
        ge=0,
    )

    backoff_max_ms: int = Field(
        default=4_000,
        validation_alias=_aliases("backoff_max_ms"),
        description="Upper bound for a single backoff delay",
        ge=0,
    )

    jitter_ms: int = Field(
        default=250,
        validation_alias=_aliases("jitter_ms"),
        description="Maximum random jitter added to each backoff delay",
        ge=0,
    )

    temperature: float = Field(
        default=0.3,
        validation_alias=_aliases("temperature"),
        ge=0.0,
        le=2.0,
    )

    @field_validator("api_key", mode="before")
    @classmethod
    def blank_key_is_missing(cls, v: Any) -> Any:
        """Treat an empty or whitespace-only key as not configured."""
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @model_validator(mode="after")
    def validate_backoff_bounds(self) -> "ClientSettings":
        """The backoff cap may not be below the base delay."""
        if self.backoff_max_ms < self.backoff_base_ms:
            raise ValueError(
                f"backoff_max_ms ({self.backoff_max_ms}) must be >= "
                f"backoff_base_ms ({self.backoff_base_ms})"
            )
        return self

    def to_dict(self) -> dict[str, Any]:
        """Plain dictionary keyed by field name."""
        return {name: getattr(self, name) for name in ENV_ALIASES}
