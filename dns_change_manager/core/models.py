"""
Data model for record changes.

ChangeRequest describes one mutation of one record set, ChangeHandle is what
a provider hands back for it and PollConfig holds the completion poll timing.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple

from ..utils.validators import validate_change_request, validate_poll_timing


class RecordType(str, Enum):
    """Resource record types accepted by the hosted zone APIs."""

    A = "A"
    AAAA = "AAAA"
    CAA = "CAA"
    CNAME = "CNAME"
    DS = "DS"
    HTTPS = "HTTPS"
    MX = "MX"
    NAPTR = "NAPTR"
    NS = "NS"
    PTR = "PTR"
    SOA = "SOA"
    SPF = "SPF"
    SRV = "SRV"
    SSHFP = "SSHFP"
    SVCB = "SVCB"
    TLSA = "TLSA"
    TXT = "TXT"


class ChangeAction(str, Enum):
    """Mutation applied to a record set."""

    CREATE = "CREATE"
    UPSERT = "UPSERT"
    DELETE = "DELETE"


class ChangeStatus(str, Enum):
    """Change states reported by Route 53."""

    PENDING = "PENDING"
    INSYNC = "INSYNC"


@dataclass(frozen=True)
class ChangeRequest:
    """A single record set mutation for one hosted zone."""

    zone_id: str
    name: str
    record_type: RecordType
    action: ChangeAction
    values: Tuple[str, ...]
    ttl: int
    comment: Optional[str] = None

    def __post_init__(self):
        if isinstance(self.values, str):
            raise ValueError(
                f"Record values must be a list of strings, got the string {self.values!r}"
            )
        # Store enums and a tuple whatever the caller passed in.
        object.__setattr__(self, "record_type", RecordType(self.record_type))
        object.__setattr__(self, "action", ChangeAction(self.action))
        object.__setattr__(self, "values", tuple(self.values))
        validate_change_request(
            self.zone_id, self.name, list(self.values), self.ttl
        )


@dataclass
class ChangeHandle:
    """Provider-issued identifier and last known status of a change."""

    change_id: str
    status: str
    raw_id: str = field(default="")

    def __post_init__(self):
        if not self.raw_id:
            self.raw_id = self.change_id


@dataclass(frozen=True)
class PollConfig:
    """Timing of the completion poll, in seconds."""

    interval: float = 5
    max_wait: float = 120

    def __post_init__(self):
        validate_poll_timing(self.interval, self.max_wait)
