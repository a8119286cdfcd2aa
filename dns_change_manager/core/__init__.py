"""
Core DNS change functionality.

This package contains the change model, the change submitter, the
completion poller and the manager that ties them together.
"""

from .change_submitter import ChangeSubmitter
from .completion_poller import CompletionPoller
from .dns_change_manager import DNSChangeManager
from .models import ChangeAction, ChangeHandle, ChangeRequest, ChangeStatus, PollConfig, RecordType

__all__ = [
    "ChangeAction",
    "ChangeHandle",
    "ChangeRequest",
    "ChangeStatus",
    "ChangeSubmitter",
    "CompletionPoller",
    "DNSChangeManager",
    "PollConfig",
    "RecordType",
]
