"""
Utility functions and helpers.

This package contains the input validation and identifier
normalization helpers shared by the core and the providers.
"""

from .validators import (
    normalize_change_id,
    sanitize_fqdn,
    validate_change_request,
    validate_poll_timing,
)

__all__ = [
    "normalize_change_id",
    "sanitize_fqdn",
    "validate_change_request",
    "validate_poll_timing",
]
