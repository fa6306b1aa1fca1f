"""
Configuration for real API integration tests.
"""

import os

import pytest

from recipe_health import InferenceClient, resolve_config


@pytest.fixture(scope="session")
def real_inference_client():
    """Inference client backed by the real Gemini API."""
    if not os.getenv("GOOGLE_API_KEY"):
        pytest.skip("GOOGLE_API_KEY required for API tests")

    return InferenceClient(resolve_config({"max_retries": 2}))
