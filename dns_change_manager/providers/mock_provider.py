"""
Mock DNS provider for testing and demonstration.

This module provides a mock DNS provider that stores record sets in memory
and simulates change propagation for safe testing and demonstration purposes.
"""

import logging
from typing import Dict, List, Optional, Tuple

from .base_provider import DNSProvider
from ..core.models import ChangeStatus
from ..exceptions import ProviderError
from ..utils.validators import normalize_change_id, sanitize_fqdn

logger = logging.getLogger(__name__)


class MockDNSProvider(DNSProvider):
    """Mock DNS provider for testing and demonstration purposes."""

    def __init__(self, config: Dict = None):
        """Initialize mock provider."""
        config = config or {}
        self.pending_checks = int(config.get("pending_checks", 0))
        self.record_sets: Dict[str, Dict[Tuple[str, str], Dict]] = {}
        self.changes: Dict[str, Dict] = {}
        self.status_queries = 0
        self._next_change = 1
        logger.info("Mock DNS provider initialized")

    def submit_change(
        self,
        zone_id: str,
        action: str,
        name: str,
        record_type: str,
        ttl: int,
        values: List[str],
        comment: Optional[str] = None,
    ) -> Tuple[str, str]:
        """Apply a change to the in-memory zone."""
        zone = self.record_sets.setdefault(zone_id, {})
        key = (sanitize_fqdn(name), record_type)

        if action == "CREATE":
            if key in zone:
                raise ProviderError(
                    f"Record set {name} {record_type} already exists in zone {zone_id}"
                )
            zone[key] = {"ttl": ttl, "values": list(values)}
        elif action == "UPSERT":
            zone[key] = {"ttl": ttl, "values": list(values)}
        elif action == "DELETE":
            existing = zone.get(key)
            if existing is None or existing["values"] != list(values):
                raise ProviderError(
                    f"Record set {name} {record_type} not found for deletion in zone {zone_id}"
                )
            del zone[key]
        else:
            raise ProviderError(f"Unsupported change action: {action}")

        change_id = f"/change/C{self._next_change}"
        self._next_change += 1

        status = ChangeStatus.PENDING.value if self.pending_checks > 0 else self.terminal_status
        self.changes[normalize_change_id(change_id)] = {
            "remaining": self.pending_checks,
            "comment": comment,
        }
        logger.info(f"Mock: {action} {record_type} {name} -> {', '.join(values)}")
        return change_id, status

    def get_change_status(self, change_id: str) -> str:
        """Report PENDING until the configured number of checks has passed."""
        self.status_queries += 1
        change = self.changes.get(change_id)
        if change is None:
            raise ProviderError(f"No such change: {change_id}")

        if change["remaining"] > 0:
            change["remaining"] -= 1
            return ChangeStatus.PENDING.value
        return self.terminal_status

    def get_record_set(self, zone_id: str, name: str, record_type: str) -> Optional[Dict]:
        """Return a stored record set, if any."""
        return self.record_sets.get(zone_id, {}).get((sanitize_fqdn(name), record_type))
