"""
DNS Change Manager - Submits record changes and waits for them to propagate

Wires the configured DNS provider to the change submitter and the completion
poller and implements the two workflows exposed on the command line.
"""

import logging
from typing import Dict, Optional

from .change_submitter import ChangeSubmitter
from .completion_poller import CompletionPoller
from .models import ChangeRequest, PollConfig
from ..providers.dns_client import DNSClient
from ..utils.validators import normalize_change_id

logger = logging.getLogger(__name__)


class DNSChangeManager:
    """Main class that orchestrates submission and completion polling."""

    def __init__(self, config: Dict, dns_client: Optional[DNSClient] = None, poller=None):
        """Initialize the manager with configuration."""
        self.config = config
        self.dns_client = dns_client or DNSClient(config)
        self.submitter = ChangeSubmitter(self.dns_client)
        self.poller = poller or CompletionPoller(self.dns_client)

    def update_record(
        self, request: ChangeRequest, poll_config: PollConfig, no_wait: bool = False
    ) -> bool:
        """
        Submit a record change and optionally wait for it.

        Returns:
            True when the change is complete or waiting was not requested,
            False when waiting timed out
        """
        handle = self.submitter.submit(request)

        if no_wait:
            logger.info(f"Not waiting for change {handle.change_id}")
            return True

        return self.poller.await_handle(handle, poll_config)

    def wait_for_change(self, change_id: str, poll_config: PollConfig) -> bool:
        """Wait for a change issued earlier, given its raw or bare identifier."""
        bare_id = normalize_change_id(change_id)
        logger.info(f"Waiting for change {bare_id}")
        return self.poller.await_completion(
            bare_id, poll_config.interval, poll_config.max_wait
        )
