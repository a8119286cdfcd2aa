"""
Base DNS provider interface.

This module defines the abstract base class that all DNS providers must implement.
"""

from abc import ABC, abstractmethod
from typing import List, Optional, Tuple

from ..core.models import ChangeStatus


class DNSProvider(ABC):
    """Abstract base class for DNS providers."""

    # Status a change reaches once it is served by every nameserver
    terminal_status = ChangeStatus.INSYNC.value

    @abstractmethod
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
        """Apply one record set mutation and return (change id, status)."""
        pass

    @abstractmethod
    def get_change_status(self, change_id: str) -> str:
        """Return the current status of a previously submitted change."""
        pass

    def is_change_complete(self, status: str) -> bool:
        """Check whether a status means the change has fully propagated."""
        return status == self.terminal_status
