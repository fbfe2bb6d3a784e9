"""유틸리티 모듈."""

from .validation import (
    validate_email_address,
    validate_hex_color,
    summarize_validation_error,
)

__all__ = [
    "validate_email_address",
    "validate_hex_color",
    "summarize_validation_error",
]
