"""Response decoding and validation."""

from .validation import decode_payload, extract_response_text, validate_analysis_payload

__all__ = ["decode_payload", "extract_response_text", "validate_analysis_payload"]
