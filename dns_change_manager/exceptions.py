"""
Exceptions raised by the DNS change workflow.

Provider implementations raise ProviderError; the core wraps it into
SubmissionError or PollError so callers know which step failed.
A poll that runs out of time is not an error and returns False instead.
"""


class DNSChangeError(Exception):
    """Base class for all DNS change errors."""


class ConfigurationError(DNSChangeError):
    """Invalid or unreadable configuration."""


class ProviderError(DNSChangeError):
    """A DNS provider rejected a request or could not be reached."""


class SubmissionError(DNSChangeError):
    """Submitting a record change failed."""

    def __init__(self, message: str, zone_id: str = "", name: str = ""):
        super().__init__(message)
        self.zone_id = zone_id
        self.name = name


class PollError(DNSChangeError):
    """Querying the status of a change failed."""

    def __init__(self, message: str, change_id: str = ""):
        super().__init__(message)
        self.change_id = change_id
