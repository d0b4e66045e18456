"""Address utilities for DNSBL and SURBL queries."""

import ipaddress
from typing import Any

from dnsrbl.models.address import AddressKind


def is_valid_ip(address: str) -> bool:
    """Validate if string is a textual IPv4 or IPv6 address.

    Args:
        address: Address string to validate.

    Returns:
        bool: True if valid IP literal, False otherwise.

    Examples:
        >>> is_valid_ip("203.0.113.45")
        True
        >>> is_valid_ip("2001:db8::1")
        True
        >>> is_valid_ip("256.0.0.1")
        False
    """
    try:
        ipaddress.ip_address(address)
        return True
    except ValueError:
        return False


def is_valid_ipv4(ip: str) -> bool:
    """Validate if string is a valid IPv4 address.

    Examples:
        >>> is_valid_ipv4("::1")
        False
    """
    try:
        addr = ipaddress.ip_address(ip)
        return isinstance(addr, ipaddress.IPv4Address)
    except ValueError:
        return False


def classify_address(value: Any) -> AddressKind:
    """Decide whether a lookup input is an IP literal or a hostname.

    Args:
        value: Arbitrary caller input.

    Returns:
        AddressKind: INVALID for non-strings, IP_LITERAL
        for IPv4/IPv6 literals, HOSTNAME for everything else.

    Examples:
        >>> classify_address("127.0.0.2")
        <AddressKind.IP_LITERAL: 'ip_literal'>
        >>> classify_address("dbltest.com")
        <AddressKind.HOSTNAME: 'hostname'>
        >>> classify_address(None)
        <AddressKind.INVALID: 'invalid'>
    """
    if not isinstance(value, str):
        return AddressKind.INVALID
    if is_valid_ip(value):
        return AddressKind.IP_LITERAL
    return AddressKind.HOSTNAME


def reverse_ip(ip: str) -> str:
    """Convert IPv4 address to reverse DNS format for DNSBL queries.

    DNSBL queries require reversed octets. For example:
    127.0.0.2 becomes 2.0.0.127

    Args:
        ip: IPv4 address in dotted-quad format.

    Returns:
        str: Reversed IP address.

    Raises:
        ValueError: If IP is not a valid IPv4 address.

    Examples:
        >>> reverse_ip("203.0.113.45")
        '45.113.0.203'
    """
    if not is_valid_ipv4(ip):
        raise ValueError(f"Invalid IPv4 address: {ip}")

    octets = ip.split(".")
    return ".".join(reversed(octets))


def build_query_name(address: str, kind: AddressKind, list_host: str) -> str:
    """Build the absolute DNS name to query for an address on one list.

    IP literals are octet-reversed, hostnames are prepended as-is. The
    result always ends with a dot.

    Args:
        address: IP literal or hostname to check.
        kind: Classification of address.
        list_host: Blacklist zone (e.g., "sbl.spamhaus.org").

    Returns:
        str: Query name (e.g., "2.0.0.127.sbl.spamhaus.org.").

    Raises:
        ValueError: For IPv6 literals (reverse formatting is not supported)
            and for INVALID input.

    Examples:
        >>> build_query_name("127.0.0.2", AddressKind.IP_LITERAL, "sbl.spamhaus.org")
        '2.0.0.127.sbl.spamhaus.org.'
        >>> build_query_name("dbltest.com", AddressKind.HOSTNAME, "dbl.spamhaus.org")
        'dbltest.com.dbl.spamhaus.org.'
    """
    if kind is AddressKind.IP_LITERAL:
        if not is_valid_ipv4(address):
            raise ValueError(f"IPv6 reverse lookups are not supported: {address}")
        return f"{reverse_ip(address)}.{list_host}."
    if kind is AddressKind.HOSTNAME:
        return f"{address}.{list_host}."
    raise ValueError(f"Cannot build query name for invalid input: {address!r}")
