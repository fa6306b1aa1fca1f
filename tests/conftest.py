"""
Global test configuration: environment isolation, markers and fake transports.
"""

from collections.abc import Callable
import logging
import os
from typing import Any

import pytest

from recipe_health.client import InferenceClient
from recipe_health.config import ClientConfig
from tests.helpers import RecordingSleep

_ENV_PREFIXES = ("GEMINI_", "AI_", "RECIPE_HEALTH_")
_ENV_NAMES = ("GOOGLE_API_KEY", "DEBUG")


# --- Environment Isolation (Autouse) ---
@pytest.fixture(autouse=True)
def isolate_client_env(request, monkeypatch):
    """Ensure a clean configuration environment for each test.

    Removes the API key, model and ``AI_*`` timing variables so tests only
    see what they set explicitly.

    Escape hatches:
      - @pytest.mark.allow_env_pollution: keep current env unchanged
      - tests marked with @pytest.mark.api bypass isolation so the real
        environment can be used when explicitly running API tests.
    """
    if request.node.get_closest_marker("allow_env_pollution") or (
        "api" in request.node.keywords
    ):
        return

    for key in list(os.environ.keys()):
        if key.startswith(_ENV_PREFIXES) or key in _ENV_NAMES:
            monkeypatch.delenv(key, raising=False)


# --- Logging Fixtures ---
@pytest.fixture(scope="session", autouse=True)
def quiet_noisy_libraries():
    """Sets the log level for noisy external libraries to WARNING."""
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("google_genai").setLevel(logging.WARNING)


# --- Test Environment Markers ---
def pytest_configure(config):
    """Configure custom markers for test organization."""
    markers = [
        "unit: Fast, isolated unit tests",
        "contract: Behavioral guarantees of the public client surface",
        "api: Real API integration tests (requires API key)",
        "allow_env_pollution: Skip environment isolation for this test",
    ]
    for marker in markers:
        config.addinivalue_line("markers", marker)


def pytest_collection_modifyitems(config, items):  # noqa: ARG001
    """Automatically skip API tests when API key is unavailable."""
    if not (os.getenv("GOOGLE_API_KEY") and os.getenv("ENABLE_API_TESTS")):
        skip_api = pytest.mark.skip(
            reason="API tests require GOOGLE_API_KEY and ENABLE_API_TESTS=1",
        )
        for item in items:
            if "api" in item.keywords:
                item.add_marker(skip_api)


# --- Core Fixtures ---


@pytest.fixture
def mock_api_key():
    """Provide a consistent, fake API key for tests."""
    return "test_api_key_12345_67890_abcdef_ghijkl"


@pytest.fixture
def live_config(mock_api_key) -> ClientConfig:
    """Credentialed configuration with small, fixed timings."""
    return ClientConfig(
        api_key=mock_api_key,
        model="gemini-2.5-flash",
        timeout_ms=12_000,
        max_retries=4,
        backoff_base_ms=300,
        backoff_max_ms=4_000,
    )


@pytest.fixture
def offline_config(live_config) -> ClientConfig:
    return live_config.with_overrides(api_key=None)


@pytest.fixture
def recording_sleep() -> RecordingSleep:
    return RecordingSleep()


@pytest.fixture
def make_client(live_config, recording_sleep) -> Callable[..., InferenceClient]:
    """Factory for clients wired to a scripted adapter and a recording sleep.

    Jitter is pinned to zero unless ``rng`` is passed.
    """

    def _make(
        adapter: Any = None,
        *,
        config: ClientConfig | None = None,
        rng: Callable[[], float] = lambda: 0.0,
    ) -> InferenceClient:
        return InferenceClient(
            config or live_config,
            adapter,
            sleep=recording_sleep,
            rng=rng,
        )

    return _make
