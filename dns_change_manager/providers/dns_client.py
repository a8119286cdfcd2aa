"""
DNS Client - Unified interface for DNS provider APIs

This module provides a common interface for different DNS providers,
currently supporting AWS Route53, BIND and an in-memory mock.
"""

import logging
from typing import Dict, List, Optional, Tuple

from .base_provider import DNSProvider
from .bind_provider import BINDProvider
from .mock_provider import MockDNSProvider
from .route53_provider import Route53Provider
from ..exceptions import ConfigurationError

logger = logging.getLogger(__name__)

PROVIDERS = {
    "route53": Route53Provider,
    "bind": BINDProvider,
    "mock": MockDNSProvider,
}


class DNSClient:
    """Unified DNS client that supports multiple providers."""

    def __init__(self, config: Dict, provider: Optional[DNSProvider] = None):
        """Initialize DNS client with configuration."""
        self.config = config
        self.provider = provider or self._get_provider()

    def _get_provider(self) -> DNSProvider:
        """Get DNS provider based on configuration."""
        provider_name = self.config.get("default_provider", "route53")
        provider_config = (self.config.get("dns_providers") or {}).get(provider_name) or {}

        provider_class = PROVIDERS.get(provider_name)
        if provider_class is None:
            raise ConfigurationError(
                f"Unknown provider '{provider_name}', expected one of: {', '.join(PROVIDERS)}"
            )

        logger.debug(f"Using DNS provider '{provider_name}'")
        return provider_class(provider_config)

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
        """Submit one record set mutation."""
        return self.provider.submit_change(
            zone_id, action, name, record_type, ttl, values, comment
        )

    def get_change_status(self, change_id: str) -> str:
        """Get the status of a change."""
        return self.provider.get_change_status(change_id)

    def is_change_complete(self, status: str) -> bool:
        """Check whether a status is the provider's terminal state."""
        return self.provider.is_change_complete(status)
