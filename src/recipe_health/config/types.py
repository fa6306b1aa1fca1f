"""Resolved client configuration.

``ClientConfig`` is built once per process (or per scope) and passed into
the inference client. It is immutable; ``with_overrides`` returns a copy.
"""

from typing import NamedTuple


class ClientConfig(NamedTuple):
    """Immutable inference client configuration."""

    api_key: str | None
    model: str
    timeout_ms: int
    max_retries: int
    backoff_base_ms: int
    backoff_max_ms: int
    jitter_ms: int = 250
    temperature: float = 0.3

    @property
    def has_credential(self) -> bool:
        return bool(self.api_key)

    @property
    def timeout_seconds(self) -> float:
        return self.timeout_ms / 1000

    @property
    def max_attempts(self) -> int:
        """Total attempts per call: the first one plus ``max_retries``."""
        return self.max_retries + 1

    def __str__(self) -> str:
        """String representation with redacted API key for safe logging."""
        api_key_display = "[REDACTED]" if self.api_key else None
        return (
            f"ClientConfig(api_key={api_key_display!r}, model={self.model!r}, "
            f"timeout_ms={self.timeout_ms!r}, max_retries={self.max_retries!r}, "
            f"backoff_base_ms={self.backoff_base_ms!r}, "
            f"backoff_max_ms={self.backoff_max_ms!r}, jitter_ms={self.jitter_ms!r}, "
            f"temperature={self.temperature!r})"
        )

    def __repr__(self) -> str:
        """Repr with redacted API key for safe debugging."""
        return self.__str__()

    def with_overrides(self, **overrides: object) -> "ClientConfig":
        """Return a copy with known fields replaced; unknown fields are ignored."""
        known = {k: v for k, v in overrides.items() if k in self._fields}
        return self._replace(**known)

    def redacted_dict(self) -> dict[str, object]:
        """Field mapping safe to print or serialize."""
        data: dict[str, object] = dict(self._asdict())
        data["api_key"] = "[SET]" if self.api_key else "[NOT SET]"
        return data
