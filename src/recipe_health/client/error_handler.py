"""Error classification for Gemini generation requests.

Every failed attempt lands in one of three classes:

- AVAILABILITY: the service is temporarily unable to answer (HTTP 429/5xx,
  timeouts, connection resets or disconnects, overload messages). Retried with backoff and
  degraded to the local heuristic once the budget is spent.
- SCHEMA_REJECTED: the structured-output request shape was refused
  (INVALID_ARGUMENT, response_schema complaints). Triggers the one-way switch
  to schema-less requests.
- HARD: everything else (bad credentials, permissions). Surfaced at once.
"""

import re

from google.genai import errors as genai_errors
import httpx

from ..exceptions import HardFailureError
from .models import ErrorClass, RequestMode

_AVAILABILITY_PATTERN = re.compile(
    r"UNAVAILABLE|OVERLOADED|RESOURCE_EXHAUSTED|timeout|timed out|ETIMEDOUT"
    r"|ECONNRESET|connection reset|disconnected|HTTP_429|HTTP_5\d\d",
    re.IGNORECASE,
)
_SCHEMA_PATTERN = re.compile(
    r"response_schema|responseSchema|INVALID_ARGUMENT|invalid schema", re.IGNORECASE
)
_CREDENTIAL_PATTERN = re.compile(
    r"API_KEY_INVALID|API key not valid|API key expired|PERMISSION_DENIED"
    r"|UNAUTHENTICATED",
    re.IGNORECASE,
)

_TRANSPORT_ERRORS: tuple[type[BaseException], ...] = (
    TimeoutError,
    ConnectionError,
    httpx.TimeoutException,
    httpx.NetworkError,
    httpx.RemoteProtocolError,
)


class GenerationErrorHandler:
    """Classifies attempt failures and builds caller-facing hard failures"""

    def classify(self, error: BaseException) -> ErrorClass:
        if isinstance(error, _TRANSPORT_ERRORS):
            return ErrorClass.AVAILABILITY

        error_str = str(error)

        if isinstance(error, genai_errors.APIError):
            if error.code == 429 or (error.code or 0) >= 500:
                return ErrorClass.AVAILABILITY
            if _CREDENTIAL_PATTERN.search(error_str):
                return ErrorClass.HARD
            if error.status == "INVALID_ARGUMENT":
                return ErrorClass.SCHEMA_REJECTED

        if _CREDENTIAL_PATTERN.search(error_str):
            return ErrorClass.HARD
        if _AVAILABILITY_PATTERN.search(error_str):
            return ErrorClass.AVAILABILITY
        if _SCHEMA_PATTERN.search(error_str):
            return ErrorClass.SCHEMA_REJECTED
        return ErrorClass.HARD

    def hard_failure(
        self,
        error: BaseException,
        *,
        mode: RequestMode,
        attempts: int,
    ) -> HardFailureError:
        """Wrap a non-retriable error with context about where it happened."""
        error_str = str(error)
        if _CREDENTIAL_PATTERN.search(error_str):
            message = (
                "AI service rejected the credentials. Check GOOGLE_API_KEY. "
                f"Original error: {error}"
            )
        elif mode is RequestMode.UNSTRUCTURED and _SCHEMA_PATTERN.search(error_str):
            message = (
                "AI service rejected the request even without a response schema. "
                f"Original error: {error}"
            )
        else:
            message = f"AI request failed after {attempts} attempt(s): {error}"
        return HardFailureError(message, attempts=attempts)
