"""Retry policy for availability-class failures.

The policy is pure: it takes the resolved config and answers "retry after
how long, or give up?". Sleeping and randomness are injected by the caller
so tests never wait on real timers.
"""

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
import random

from ..config.types import ClientConfig


class RetryAction(Enum):
    RETRY = "retry"
    GIVE_UP = "give_up"


@dataclass(frozen=True, slots=True)
class RetryDecision:
    action: RetryAction
    delay_seconds: float = 0.0

    @property
    def should_retry(self) -> bool:
        return self.action is RetryAction.RETRY


class RetryPolicy:
    """Capped exponential backoff with additive jitter.

    delay(n) = min(base * 2**n + jitter, cap), jitter uniform in [0, jitter_ms).
    """

    def __init__(
        self,
        config: ClientConfig,
        rng: Callable[[], float] = random.random,
    ):
        self.max_retries = config.max_retries
        self.base_ms = config.backoff_base_ms
        self.max_ms = config.backoff_max_ms
        self.jitter_ms = config.jitter_ms
        self._rng = rng

    def backoff_delay_ms(self, attempt_index: int) -> int:
        """Delay before the retry that follows attempt ``attempt_index``."""
        if attempt_index < 0:
            raise ValueError("attempt_index must be >= 0")
        jitter = int(self._rng() * self.jitter_ms)
        return min(self.base_ms * (2**attempt_index) + jitter, self.max_ms)

    def decide(self, attempt_index: int) -> RetryDecision:
        """Decide what follows a failed availability-class attempt."""
        if attempt_index >= self.max_retries:
            return RetryDecision(RetryAction.GIVE_UP)
        return RetryDecision(
            RetryAction.RETRY, self.backoff_delay_ms(attempt_index) / 1000
        )

    def max_backoff_total_ms(self) -> int:
        """Sum of the largest possible delays across all retries."""
        return sum(
            min(self.base_ms * (2**n) + self.jitter_ms, self.max_ms)
            for n in range(self.max_retries)
        )


def worst_case_latency_ms(config: ClientConfig) -> int:
    """Upper bound on one analysis call, in milliseconds.

    Every attempt may run to its timeout and every retry may wait the
    largest jittered backoff. One more timeout is added for the schema-less
    attempt granted when the structured request is rejected on the last
    attempt of the budget.
    """
    attempts = config.max_attempts + 1
    return attempts * config.timeout_ms + RetryPolicy(config).max_backoff_total_ms()
