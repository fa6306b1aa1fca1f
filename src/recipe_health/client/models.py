from dataclasses import dataclass, field
from enum import Enum, auto
from types import MappingProxyType
from typing import Any


class RequestMode(Enum):
    STRUCTURED = auto()  # explicit response_schema in the generation config
    UNSTRUCTURED = auto()  # JSON instruction prompt only


class ErrorClass(Enum):
    AVAILABILITY = auto()
    SCHEMA_REJECTED = auto()
    HARD = auto()


@dataclass(frozen=True)
class GenerationRequest:
    model: str
    prompt: str
    system_instruction: str
    temperature: float
    mode: RequestMode
    response_schema: MappingProxyType[str, Any] | None = None

    def __post_init__(self):
        # Mode and schema must agree
        if self.mode is RequestMode.STRUCTURED and self.response_schema is None:
            raise ValueError(f"Mode {self.mode} requires a response_schema")
        if self.mode is RequestMode.UNSTRUCTURED and self.response_schema is not None:
            raise ValueError(f"Mode {self.mode} must not carry a response_schema")


@dataclass
class AttemptState:
    """Mutable per-call retry state; never shared between calls."""

    attempt_index: int = 0
    mode: RequestMode = RequestMode.STRUCTURED
    last_error: BaseException | None = field(default=None, repr=False)

    @property
    def attempts_made(self) -> int:
        return self.attempt_index + 1

    def switch_to_unstructured(self) -> None:
        self.mode = RequestMode.UNSTRUCTURED
