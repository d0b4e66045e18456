"""Address classification model."""

from enum import Enum


class AddressKind(Enum):
    """Classification of a lookup input.

    Drives which list category applies: IP literals are checked against
    "dnsbl" lists, hostnames against "surbl" lists.
    """

    IP_LITERAL = "ip_literal"
    HOSTNAME = "hostname"
    INVALID = "invalid"

    @property
    def category(self) -> str | None:
        """List category for this kind, or None for invalid input."""
        if self is AddressKind.IP_LITERAL:
            return "dnsbl"
        if self is AddressKind.HOSTNAME:
            return "surbl"
        return None
