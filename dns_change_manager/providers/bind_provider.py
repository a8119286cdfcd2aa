"""
BIND DNS provider implementation.

This module applies record changes to a BIND primary with RFC 2136 dynamic
updates using the dnspython library. A change is identified by the zone's SOA
serial right after the update and is in sync once every configured secondary
serves that serial or a later one.
"""

import logging
import re
from typing import Dict, List, Optional, Tuple

import dns.exception
import dns.message
import dns.name
import dns.query
import dns.rcode
import dns.rdatatype
import dns.tsigkeyring
import dns.update

from .base_provider import DNSProvider
from ..core.models import ChangeStatus
from ..exceptions import ConfigurationError, ProviderError

logger = logging.getLogger(__name__)

SERIAL_BITS = 32


def serial_reached(current: int, target: int) -> bool:
    """Compare SOA serials using RFC 1982 serial number arithmetic."""
    return (current - target) % (2**SERIAL_BITS) < 2 ** (SERIAL_BITS - 1)


class BINDProvider(DNSProvider):
    """BIND DNS provider implementation using dnspython library."""

    def __init__(self, config: Dict):
        """Initialize BIND provider."""
        self.config = config
        self.nameserver = config.get("nameserver", "127.0.0.1")
        self.port = config.get("port", 53)
        self.timeout = config.get("timeout", 10)
        self.key_file = config.get("key_file", "")
        self.key_name = config.get("key_name", "")
        self.secondaries = self._parse_secondaries(config.get("secondaries") or [])

        self.keyring = None
        if self.key_file and self.key_name:
            try:
                with open(self.key_file, "r") as f:
                    key_content = f.read().strip()

                secret = self._parse_bind_key_file(key_content, self.key_name)

                if secret:
                    self.keyring = dns.tsigkeyring.from_text({self.key_name: secret})
                    logger.info(f"TSIG key loaded from {self.key_file}")
                else:
                    logger.warning(
                        f"Could not extract secret for key '{self.key_name}' from {self.key_file}"
                    )
            except (OSError, ValueError) as e:
                logger.warning(f"Failed to load TSIG key: {e}")
                logger.debug("TSIG authentication will not be available")

        logger.info(
            f"BIND provider initialized for nameserver {self.nameserver}:{self.port} "
            f"with {len(self.secondaries)} secondaries"
        )

    def _parse_secondaries(self, secondaries: List) -> List[Tuple[str, int]]:
        """Turn secondary entries (host strings or mappings) into (host, port) pairs."""
        parsed = []
        for entry in secondaries:
            if not isinstance(entry, dict):
                parsed.append((str(entry), self.port))
                continue
            try:
                parsed.append((entry["nameserver"], int(entry.get("port", self.port))))
            except (KeyError, TypeError, ValueError) as e:
                raise ConfigurationError(
                    f"Invalid BIND secondary {entry!r}, expected nameserver and optional port"
                ) from e
        return parsed

    def _parse_bind_key_file(self, key_content: str, key_name: str) -> Optional[str]:
        """Parse BIND key file format to extract the secret for a specific key."""
        key_pattern = rf'key\s+"{re.escape(key_name)}"\s*{{(.*?)}}'
        match = re.search(key_pattern, key_content, re.DOTALL)
        if match:
            secret_match = re.search(r'secret\s+"([^"]+)"', match.group(1))
            if secret_match:
                return secret_match.group(1)
        return None

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
        """Send a dynamic update and identify it by the resulting SOA serial."""
        if comment:
            logger.debug(f"Dynamic updates carry no comment, ignoring: {comment}")

        try:
            zone = dns.name.from_text(zone_id).to_text(omit_final_dot=True)
            update = self._create_update_message(
                zone, action, name, record_type, ttl, values
            )
            response = dns.query.tcp(
                update, self.nameserver, port=self.port, timeout=self.timeout
            )
        except (dns.exception.DNSException, OSError, ValueError) as e:
            logger.error(f"DNS update for {name} in zone {zone_id} failed: {e}")
            raise ProviderError(f"Failed to {action} {record_type} {name}: {e}") from e

        if response.rcode() != dns.rcode.NOERROR:
            self._handle_dns_error(response, action)

        serial = self._query_serial(zone, self.nameserver, self.port)
        logger.debug(f"Applied {action} {record_type} {name}, zone {zone} serial {serial}")
        return f"/change/{zone}:{serial}", self._propagation_status(zone, serial)

    def get_change_status(self, change_id: str) -> str:
        """Check whether every secondary serves the serial a change produced."""
        zone, separator, serial = change_id.rpartition(":")
        if not separator or not zone or not serial.isdigit():
            raise ProviderError(f"Malformed BIND change id: {change_id}")

        try:
            zone = dns.name.from_text(zone).to_text(omit_final_dot=True)
        except dns.exception.DNSException as e:
            raise ProviderError(f"Malformed zone in BIND change id {change_id}: {e}") from e

        return self._propagation_status(zone, int(serial))

    def _propagation_status(self, zone: str, serial: int) -> str:
        """Return INSYNC once all secondaries have caught up with a serial."""
        for host, port in self.secondaries:
            current = self._query_serial(zone, host, port)
            if not serial_reached(current, serial):
                logger.debug(
                    f"Secondary {host}:{port} serves serial {current} for {zone}, waiting for {serial}"
                )
                return ChangeStatus.PENDING.value
        return self.terminal_status

    def _query_serial(self, zone: str, host: str, port: int) -> int:
        """Read the SOA serial of a zone from one nameserver."""
        try:
            query = dns.message.make_query(zone, dns.rdatatype.SOA)
            response = dns.query.udp(query, host, port=port, timeout=self.timeout)
        except (dns.exception.DNSException, OSError) as e:
            logger.error(f"SOA query for {zone} at {host}:{port} failed: {e}")
            raise ProviderError(f"SOA query for {zone} at {host}:{port} failed: {e}") from e

        if response.rcode() != dns.rcode.NOERROR:
            raise ProviderError(
                f"SOA query for {zone} at {host}:{port} returned "
                f"{dns.rcode.to_text(response.rcode())}"
            )

        for rrset in response.answer:
            if rrset.rdtype == dns.rdatatype.SOA:
                return rrset[0].serial

        raise ProviderError(f"No SOA record for {zone} at {host}:{port}")

    def _create_update_message(
        self,
        zone: str,
        action: str,
        name: str,
        record_type: str,
        ttl: int,
        values: List[str],
    ) -> dns.update.UpdateMessage:
        """Create a DNS update message."""
        update = dns.update.UpdateMessage(zone, keyring=self.keyring)
        fqdn = dns.name.from_text(name)

        if action == "CREATE":
            update.absent(fqdn, record_type)
            update.add(fqdn, ttl, record_type, *values)
        elif action == "UPSERT":
            update.replace(fqdn, ttl, record_type, *values)
        elif action == "DELETE":
            update.present(fqdn, record_type)
            update.delete(fqdn, record_type, *values)
        else:
            raise ValueError(f"Unsupported change action: {action}")

        return update

    def _handle_dns_error(self, response: dns.message.Message, operation: str) -> None:
        """Handle DNS error responses by logging and raising appropriate exceptions."""
        error_message = (
            f"DNS update failed with response code: {dns.rcode.to_text(response.rcode())}"
        )
        if response.answer:
            error_message += f", server response: {response.answer}"
        logger.error(error_message)
        raise ProviderError(f"Failed to {operation} the record: {error_message}")
