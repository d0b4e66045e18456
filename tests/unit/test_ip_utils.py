"""Unit tests for address utility functions."""

import pytest

from dnsrbl.models.address import AddressKind
from dnsrbl.utils.ip_utils import (
    build_query_name,
    classify_address,
    is_valid_ip,
    is_valid_ipv4,
    reverse_ip,
)


def test_is_valid_ipv4_valid():
    """Test validation of valid IPv4 addresses."""
    assert is_valid_ipv4("203.0.113.45") is True
    assert is_valid_ipv4("0.0.0.0") is True
    assert is_valid_ipv4("255.255.255.255") is True


def test_is_valid_ipv4_invalid():
    """Test validation rejects invalid IPv4 addresses."""
    assert is_valid_ipv4("256.0.0.1") is False  # Out of range
    assert is_valid_ipv4("192.168.1") is False  # Incomplete
    assert is_valid_ipv4("::1") is False  # IPv6
    assert is_valid_ipv4("") is False


def test_is_valid_ip_accepts_ipv6():
    assert is_valid_ip("::1") is True
    assert is_valid_ip("2001:db8::1") is True
    assert is_valid_ip("::ffff:127.0.0.2") is True
    assert is_valid_ip("mail.nohn.net") is False


def test_classify_ip_literals():
    assert classify_address("127.0.0.2") == AddressKind.IP_LITERAL
    assert classify_address("2001:db8::1") == AddressKind.IP_LITERAL


def test_classify_hostnames():
    assert classify_address("mail.nohn.net") == AddressKind.HOSTNAME
    assert classify_address("dbltest.com") == AddressKind.HOSTNAME
    # Not a valid IP, so treated as a hostname
    assert classify_address("256.0.0.1") == AddressKind.HOSTNAME


@pytest.mark.parametrize("value", ["", "   "])
def test_classify_blank_strings_as_hostnames(value):
    """Test any string input is valid, even when blank."""
    assert classify_address(value) == AddressKind.HOSTNAME


@pytest.mark.parametrize("value", [None, True, False, 0, 1.5, [], {}, b"127.0.0.2"])
def test_classify_invalid(value):
    """Test non-strings are invalid."""
    assert classify_address(value) == AddressKind.INVALID


def test_address_kind_category():
    assert AddressKind.IP_LITERAL.category == "dnsbl"
    assert AddressKind.HOSTNAME.category == "surbl"
    assert AddressKind.INVALID.category is None


def test_reverse_ip():
    """Test IP reversal for DNSBL queries."""
    assert reverse_ip("127.0.0.2") == "2.0.0.127"
    assert reverse_ip("203.0.113.45") == "45.113.0.203"
    assert reverse_ip("8.8.8.8") == "8.8.8.8"  # Palindrome


def test_reverse_ip_invalid():
    with pytest.raises(ValueError, match="Invalid IPv4 address"):
        reverse_ip("::1")


def test_build_query_name_ipv4():
    assert (
        build_query_name("127.0.0.2", AddressKind.IP_LITERAL, "sbl.spamhaus.org")
        == "2.0.0.127.sbl.spamhaus.org."
    )


def test_build_query_name_hostname():
    """Test hostnames are prepended without reversal."""
    assert (
        build_query_name("dbltest.com", AddressKind.HOSTNAME, "dbl.spamhaus.org")
        == "dbltest.com.dbl.spamhaus.org."
    )


def test_build_query_name_rejects_ipv6():
    with pytest.raises(ValueError, match="IPv6 reverse lookups are not supported"):
        build_query_name("2001:db8::1", AddressKind.IP_LITERAL, "sbl.spamhaus.org")


def test_build_query_name_rejects_invalid():
    with pytest.raises(ValueError, match="invalid input"):
        build_query_name(None, AddressKind.INVALID, "sbl.spamhaus.org")
