"""Resilient inference client for recipe health analysis.

One ``analyze_prompt`` call walks this state machine:

    no credential            -> offline stub (no network)
    attempt ok               -> validated AnalysisResult
    attempt content invalid  -> ContentInvalidError (no retry)
    attempt schema rejected  -> switch to schema-less mode, next attempt
    attempt availability     -> backoff, next attempt; when exhausted the
                                local heuristic result is returned
    attempt hard error       -> HardFailureError

Attempts are strictly sequential, each bounded by ``timeout_ms``. The client
holds no mutable state between calls and is safe to share between tasks.
"""

import asyncio
from collections.abc import Awaitable, Callable, Iterable
import logging
import random
from types import MappingProxyType
from typing import Any

from ..config.types import ClientConfig
from ..core.types import AnalysisResult
from ..degradation import heuristic_analysis, offline_stub
from ..exceptions import ContentInvalidError
from ..ingredients import require_ingredients
from ..prompts import SYSTEM_INSTRUCTION, AnalysisPromptBuilder
from ..response.validation import validate_analysis_payload
from ..telemetry import TelemetryContext, TelemetryContextProtocol
from .adapters import AdapterFactory, GenerationAdapter, default_adapter_factory
from .error_handler import GenerationErrorHandler
from .models import AttemptState, ErrorClass, GenerationRequest, RequestMode
from .retry import RetryPolicy, worst_case_latency_ms

log = logging.getLogger(__name__)

# --- Telemetry scopes/keys ---
T_ANALYZE = "inference.analyze"
T_ATTEMPT = "attempt"


class InferenceClient:
    """Turns a normalized ingredient list into an ``AnalysisResult``.

    Args:
        config: Resolved client configuration.
        adapter: Transport to use. When omitted, one is built per call from
            ``adapter_factory`` and the configured credential.
        adapter_factory: Builds an adapter from an API key.
        sleep: Awaitable sleep used for backoff (seconds).
        rng: Uniform [0, 1) source for backoff jitter.
        telemetry: Optional telemetry context.
    """

    def __init__(
        self,
        config: ClientConfig,
        adapter: GenerationAdapter | None = None,
        *,
        adapter_factory: AdapterFactory = default_adapter_factory,
        sleep: Callable[[float], Awaitable[Any]] = asyncio.sleep,
        rng: Callable[[], float] = random.random,
        telemetry: TelemetryContextProtocol | None = None,
    ):
        self.config = config
        self._adapter = adapter
        self._adapter_factory = adapter_factory
        self._sleep = sleep
        self.retry_policy = RetryPolicy(config, rng=rng)
        self.prompt_builder = AnalysisPromptBuilder()
        self.error_handler = GenerationErrorHandler()
        self.tele = telemetry or TelemetryContext()

    def worst_case_latency_ms(self) -> int:
        """Upper bound for a single call, for callers sizing outer timeouts."""
        return worst_case_latency_ms(self.config)

    async def analyze(self, ingredients: Iterable[Any]) -> AnalysisResult:
        """Normalize caller input, build the prompt and run the analysis.

        Raises:
            CallerInputError: If no usable ingredient remains.
            ContentInvalidError: If the service answered with unusable output.
            HardFailureError: For non-retriable provider errors.
        """
        normalized = require_ingredients(ingredients)
        prompt = self.prompt_builder.create_prompt(normalized)
        return await self.analyze_prompt(prompt, normalized)

    async def analyze_prompt(
        self, prompt: str, ingredients: list[str]
    ) -> AnalysisResult:
        """Run the attempt loop for an already-rendered prompt.

        ``ingredients`` must be the normalized list the prompt was built from;
        it feeds the heuristic when the service stays unavailable.
        """
        if not self.config.has_credential:
            log.info("No API key configured; returning offline sample analysis")
            return offline_stub()

        with self.tele(T_ANALYZE, model=self.config.model):
            adapter = self._adapter or self._adapter_factory(str(self.config.api_key))
            state = AttemptState()
            while True:
                try:
                    with self.tele(
                        T_ATTEMPT,
                        attempt=state.attempt_index,
                        mode=state.mode.name,
                    ):
                        self.tele.count("attempts")
                        return await self._attempt(adapter, prompt, state)
                except ContentInvalidError as e:
                    e.attempts = state.attempts_made
                    log.error(
                        "AI response unusable on attempt %d: %s",
                        state.attempts_made,
                        e,
                    )
                    raise
                except Exception as error:
                    state.last_error = error
                    error_class = self.error_handler.classify(error)

                if (
                    error_class is ErrorClass.SCHEMA_REJECTED
                    and state.mode is RequestMode.STRUCTURED
                ):
                    log.warning(
                        "Structured request rejected (%s); retrying without schema",
                        state.last_error,
                    )
                    self.tele.count("schema_fallbacks")
                    state.switch_to_unstructured()
                    state.attempt_index += 1
                    continue

                if error_class is not ErrorClass.AVAILABILITY:
                    log.error(
                        "AI request failed with non-retryable error.",
                        exc_info=state.last_error,
                    )
                    raise self.error_handler.hard_failure(
                        state.last_error,
                        mode=state.mode,
                        attempts=state.attempts_made,
                    ) from state.last_error

                self.tele.count("retryable_errors")
                decision = self.retry_policy.decide(state.attempt_index)
                if not decision.should_retry:
                    log.warning(
                        "AI service unavailable after %d attempt(s) (%s); "
                        "returning heuristic estimate",
                        state.attempts_made,
                        state.last_error,
                    )
                    self.tele.count("degraded")
                    return heuristic_analysis(ingredients)

                log.warning(
                    "AI request failed with retryable error. Retrying in %.2fs "
                    "(Attempt %d/%d)",
                    decision.delay_seconds,
                    state.attempts_made + 1,
                    self.config.max_attempts,
                )
                await self._sleep(decision.delay_seconds)
                state.attempt_index += 1

    def build_request(self, prompt: str, mode: RequestMode) -> GenerationRequest:
        structured = mode is RequestMode.STRUCTURED
        return GenerationRequest(
            model=self.config.model,
            prompt=prompt,
            system_instruction=SYSTEM_INSTRUCTION,
            temperature=self.config.temperature,
            mode=mode,
            response_schema=(
                MappingProxyType(self.prompt_builder.response_schema())
                if structured
                else None
            ),
        )

    async def _attempt(
        self,
        adapter: GenerationAdapter,
        prompt: str,
        state: AttemptState,
    ) -> AnalysisResult:
        request = self.build_request(prompt, state.mode)
        # Cancels the in-flight request on expiry; TimeoutError is retriable
        async with asyncio.timeout(self.config.timeout_seconds):
            text = await adapter.generate(request)
        return validate_analysis_payload(text)

