"""
AWS Route 53 DNS provider implementation.

This module submits record set changes to Route 53 hosted zones and queries
their propagation status using boto3.
"""

import logging
from typing import Dict, List, Optional, Tuple

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from .base_provider import DNSProvider
from ..exceptions import ProviderError

logger = logging.getLogger(__name__)


class Route53Provider(DNSProvider):
    """Route 53 provider using the boto3 route53 client."""

    def __init__(self, config: Dict = None, client=None):
        """Initialize Route 53 provider."""
        self.config = config or {}
        self.profile = self.config.get("profile")
        self.region = self.config.get("region")
        self.client = client or self._initialize_client()

        logger.info(
            f"Route 53 provider initialized (profile: {self.profile or 'default'}, "
            f"region: {self.region or 'default'})"
        )

    def _initialize_client(self):
        """Create a route53 client from the configured profile and region."""
        try:
            session = boto3.Session(
                profile_name=self.profile, region_name=self.region
            )
            return session.client("route53")
        except BotoCoreError as e:
            logger.error(f"Failed to initialize Route 53 client: {e}")
            raise ProviderError(f"Failed to initialize Route 53 client: {e}") from e

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
        """Send a single-change batch to a hosted zone."""
        change_batch = {
            "Changes": [
                {
                    "Action": action,
                    "ResourceRecordSet": {
                        "Name": name,
                        "Type": record_type,
                        "TTL": ttl,
                        "ResourceRecords": [{"Value": value} for value in values],
                    },
                }
            ]
        }
        if comment:
            change_batch["Comment"] = comment

        logger.debug(f"Submitting change batch to hosted zone {zone_id}: {change_batch}")
        try:
            response = self.client.change_resource_record_sets(
                HostedZoneId=zone_id, ChangeBatch=change_batch
            )
        except (BotoCoreError, ClientError) as e:
            logger.error(f"Route 53 rejected change for {name} in zone {zone_id}: {e}")
            raise ProviderError(f"Route 53 rejected the change batch: {e}") from e

        change_info = response.get("ChangeInfo", {})
        return change_info.get("Id", ""), change_info.get("Status", "")

    def get_change_status(self, change_id: str) -> str:
        """Query the status of a change."""
        try:
            response = self.client.get_change(Id=change_id)
        except (BotoCoreError, ClientError) as e:
            logger.error(f"Route 53 status query failed for change {change_id}: {e}")
            raise ProviderError(f"Route 53 GetChange request failed: {e}") from e

        return response.get("ChangeInfo", {}).get("Status", "")
