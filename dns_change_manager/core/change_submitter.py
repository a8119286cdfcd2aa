"""
Change Submitter - Sends a single record set mutation to a DNS provider

The submitter is the point where a provider-issued change identifier enters
the system, so it is also where the identifier gets normalized.
"""

import logging

from rich.console import Console

from .models import ChangeHandle, ChangeRequest
from ..exceptions import ProviderError, SubmissionError
from ..utils.validators import normalize_change_id

console = Console()
logger = logging.getLogger(__name__)


class ChangeSubmitter:
    """Builds and sends one change batch for one record set."""

    def __init__(self, dns_client):
        """Initialize submitter with DNS client."""
        self.dns_client = dns_client

    def submit(self, request: ChangeRequest) -> ChangeHandle:
        """
        Submit a record change.

        Args:
            request: The change to apply

        Returns:
            Handle carrying the normalized change id and the inline status

        Raises:
            SubmissionError: If the provider rejected or could not receive the change
        """
        logger.info(
            f"Submitting {request.action.value} {request.record_type.value} "
            f"{request.name} (TTL {request.ttl}) to zone {request.zone_id}"
        )

        try:
            raw_id, status = self.dns_client.submit_change(
                request.zone_id,
                request.action.value,
                request.name,
                request.record_type.value,
                request.ttl,
                list(request.values),
                request.comment,
            )
        except ProviderError as e:
            raise SubmissionError(
                f"Unable to update zone {request.zone_id}",
                zone_id=request.zone_id,
                name=request.name,
            ) from e

        try:
            change_id = normalize_change_id(raw_id)
        except ValueError as e:
            raise SubmissionError(
                f"Provider returned no change id for {request.name}",
                zone_id=request.zone_id,
                name=request.name,
            ) from e

        console.print(f"Change sent, Id {raw_id}")
        logger.info(f"Change {raw_id} accepted with status {status}")
        return ChangeHandle(change_id=change_id, status=status, raw_id=raw_id)
