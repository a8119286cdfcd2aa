"""
Validators - Input checks for DNS record changes

This module provides the structural checks applied to change requests and
poll timing, plus the helpers that normalize names and change identifiers
before they are reused.
"""

import logging
from typing import List

logger = logging.getLogger(__name__)

# Route 53 stores TTL as a signed 64-bit integer
MAX_TTL = 2**63 - 1


def validate_change_request(
    zone_id: str, name: str, values: List[str], ttl: int
) -> None:
    """
    Validate the fields of a record change before it is sent to a provider.

    Args:
        zone_id: Hosted zone identifier
        name: Fully-qualified record name
        values: Record values
        ttl: Time-to-live in seconds

    Raises:
        ValueError: If any field is missing or out of range
    """
    if not isinstance(zone_id, str) or not zone_id.strip():
        raise ValueError("Zone identifier must be a non-empty string")

    if not isinstance(name, str) or not name.strip():
        raise ValueError("Record name must be a non-empty string")

    if not values:
        raise ValueError(f"At least one value is required for record {name}")

    for value in values:
        if not isinstance(value, str):
            raise ValueError(f"Record value must be a string, got {value!r}")

    if isinstance(ttl, bool) or not isinstance(ttl, int):
        raise ValueError(f"TTL must be an integer, got {ttl!r}")

    if ttl < 0 or ttl > MAX_TTL:
        raise ValueError(f"TTL must be between 0 and {MAX_TTL}, got {ttl}")


def validate_poll_timing(interval: float, max_wait: float) -> None:
    """
    Validate completion poll timing.

    Raises:
        ValueError: If either value is negative
    """
    if interval < 0:
        raise ValueError(f"Poll interval must not be negative, got {interval}")
    if max_wait < 0:
        raise ValueError(f"Maximum wait must not be negative, got {max_wait}")


def normalize_change_id(change_id: str) -> str:
    """
    Strip the path prefix from a provider-issued change identifier.

    Route 53 returns ids such as ``/change/C123`` when a change is submitted
    but expects the bare ``C123`` form in status queries. Bare identifiers are
    returned unchanged.

    Args:
        change_id: Raw or already normalized change identifier

    Returns:
        The bare change identifier

    Raises:
        ValueError: If nothing is left of the identifier
    """
    if not change_id or not change_id.strip():
        raise ValueError("Change identifier must not be empty")

    bare = change_id.strip().lstrip("/")
    _prefix, separator, rest = bare.partition("/")
    if separator:
        bare = rest

    if not bare:
        raise ValueError(f"Change identifier '{change_id}' has no id after its prefix")

    return bare


def sanitize_fqdn(fqdn: str) -> str:
    """
    Normalize a record name for comparison.

    Args:
        fqdn: The FQDN to sanitize

    Returns:
        Lowercase FQDN without surrounding whitespace or trailing dot
    """
    if not fqdn:
        return fqdn

    return fqdn.strip().rstrip(".").lower()
