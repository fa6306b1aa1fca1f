"""Exceptions for recipe health analysis.

Only ``CallerInputError``, ``ContentInvalidError`` and ``HardFailureError``
ever reach callers of the inference client. Availability problems (timeouts,
rate limits, overload) are absorbed by retries and local degradation.
"""


class RecipeHealthError(Exception):
    """Base exception for recipe health analysis errors"""


class CallerInputError(RecipeHealthError):
    """Raised when the ingredient list is empty or unusable after normalization"""


class ConfigurationError(RecipeHealthError):
    """Raised when client configuration values are invalid"""


class InferenceError(RecipeHealthError):
    """Base for errors surfaced by the inference client"""

    def __init__(self, message: str, *, attempts: int = 0):
        super().__init__(message)
        self.attempts = attempts


class ContentInvalidError(InferenceError):
    """Raised when the remote service answered but the answer is unusable.

    Covers empty text, text that is not JSON, and JSON that lacks one of the
    required analysis keys. Never retried.
    """


class HardFailureError(InferenceError):
    """Raised for non-retriable provider errors (auth, credentials, quota)"""
