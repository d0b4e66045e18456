"""DNS resource record models returned by blacklist lookups."""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict


class RecordType(Enum):
    """Record types requested from a blacklist zone."""

    A = "A"  # Listing return code, usually 127.0.0.x
    TXT = "TXT"  # Human-readable listing reason


@dataclass(frozen=True)
class DNSRecord:
    """Single resource record as answered by the DNS transport.

    Attributes:
        host: Owner name of the record (without trailing dot).
        record_class: DNS class, practically always "IN".
        record_type: A or TXT.
        value: Address text for A records, decoded payload for TXT records.
        ttl: Time-to-live in seconds.
    """

    host: str
    record_class: str
    record_type: RecordType
    value: str
    ttl: int

    def to_dict(self) -> Dict[str, Any]:
        """Render the record as a plain mapping.

        A records carry the value under "ip", TXT records under "txt".

        Returns:
            Dict[str, Any]: Mapping with host, class, type, ip/txt and ttl keys.

        Examples:
            >>> DNSRecord("2.0.0.127.sbl.spamhaus.org", "IN", RecordType.A,
            ...           "127.0.0.2", 300).to_dict()["ip"]
            '127.0.0.2'
        """
        value_key = "ip" if self.record_type == RecordType.A else "txt"
        return {
            "host": self.host,
            "class": self.record_class,
            "type": self.record_type.value,
            value_key: self.value,
            "ttl": self.ttl,
        }
