"""Inference client and its supporting components.

``InferenceClient`` is the entry point; the remaining names are exposed for
custom adapters and for tests that drive the retry policy directly.
"""

from .adapters import (
    AdapterFactory,
    GenerationAdapter,
    GoogleGenAIAdapter,
    default_adapter_factory,
)
from .error_handler import GenerationErrorHandler
from .inference_client import InferenceClient
from .models import AttemptState, ErrorClass, GenerationRequest, RequestMode
from .retry import RetryAction, RetryDecision, RetryPolicy, worst_case_latency_ms

__all__ = [  # noqa: RUF022
    # Orchestration
    "InferenceClient",
    # Transport
    "AdapterFactory",
    "GenerationAdapter",
    "GoogleGenAIAdapter",
    "default_adapter_factory",
    "GenerationRequest",
    # Retry and classification
    "RetryPolicy",
    "RetryDecision",
    "RetryAction",
    "worst_case_latency_ms",
    "GenerationErrorHandler",
    "ErrorClass",
    "AttemptState",
    "RequestMode",
]
