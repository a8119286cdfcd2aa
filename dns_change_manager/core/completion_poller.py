"""
Completion Poller - Waits for a submitted change to propagate

Polls a provider's change status at a fixed interval until the provider
reports its terminal state or the maximum wait has passed. Running out of
time is an expected outcome and is reported as False, not raised.
"""

import logging
import time

from rich.console import Console

from .models import ChangeHandle, PollConfig
from ..exceptions import PollError, ProviderError

console = Console()
logger = logging.getLogger(__name__)


class CompletionPoller:
    """Fixed-interval status poller for a single change."""

    def __init__(self, dns_client, clock=time.monotonic, sleep=time.sleep):
        """Initialize poller with DNS client and timing functions."""
        self.dns_client = dns_client
        self.clock = clock
        self.sleep = sleep

    def check_for_completion(self, change_id: str) -> bool:
        """Query the status of a change once."""
        try:
            status = self.dns_client.get_change_status(change_id)
        except ProviderError as e:
            raise PollError(
                f"Failed to check completion for change Id {change_id}",
                change_id=change_id,
            ) from e

        logger.debug(f"Change {change_id} status: {status}")
        return self.dns_client.is_change_complete(status)

    def await_completion(self, change_id: str, interval: float, max_wait: float) -> bool:
        """
        Wait until a change is in sync.

        The first check happens immediately. A max_wait of zero checks exactly
        once and never sleeps.

        Args:
            change_id: Normalized change identifier
            interval: Seconds to sleep between checks
            max_wait: Seconds after the first check before giving up

        Returns:
            True if the change completed, False if the wait timed out

        Raises:
            PollError: If a status query fails
        """
        started = self.clock()
        while True:
            if self.check_for_completion(change_id):
                console.print("Complete!")
                return True

            console.print("Not complete yet")

            # Reaching max_wait is enough here so that max_wait=0 never sleeps
            if self.clock() - started >= max_wait:
                break

            self.sleep(interval)

            if self.clock() - started > max_wait:
                break

        console.print(f"Timed out waiting for completion of change Id {change_id}")
        logger.warning(f"Change {change_id} not in sync after {max_wait}s")
        return False

    def await_handle(self, handle: ChangeHandle, poll_config: PollConfig) -> bool:
        """Wait for a submitted change, skipping the poll if it is already complete."""
        if self.dns_client.is_change_complete(handle.status):
            console.print("Complete!")
            return True

        return self.await_completion(
            handle.change_id, poll_config.interval, poll_config.max_wait
        )
