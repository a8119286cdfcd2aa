"""
DNS Change Manager - Record set changes with completion tracking

Submits record set mutations to a hosted zone through AWS Route53,
BIND dynamic updates or a mock provider, and waits until the
change has propagated.
"""

__version__ = "1.0.0"
__author__ = "DNS Records Manager Team"
__description__ = "Submit DNS record changes and wait for them to propagate"

from .core.dns_change_manager import DNSChangeManager
from .core.models import ChangeRequest, PollConfig
from .providers.dns_client import DNSClient

__all__ = [
    "DNSChangeManager",
    "ChangeRequest",
    "DNSClient",
    "PollConfig",
]
