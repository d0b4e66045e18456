"""pytest fixtures for testing."""

import pytest
from unittest.mock import Mock

from dnsrbl.models.dns_record import DNSRecord, RecordType


# Zones answering for the RFC 5782 test entries
LISTING_ZONES = {
    "sbl.spamhaus.org": "https://www.spamhaus.org/sbl/query/SBL2",
    "sbl-xbl.spamhaus.org": "https://www.spamhaus.org/sbl/query/SBL2",
    "bl.spamcop.net": "Blocked - see https://www.spamcop.net/bl.shtml?127.0.0.2",
    "dbl.spamhaus.org": "https://www.spamhaus.org/query/domain/dbltest.com",
}


def make_records(owner: str, ip: str = "127.0.0.2", txt: str = "listed", ttl: int = 300):
    return [
        DNSRecord(owner, "IN", RecordType.A, ip, ttl),
        DNSRecord(owner, "IN", RecordType.TXT, txt, ttl),
    ]


def fake_dns(query_name, rdtypes):
    """Answer like a public resolver would for the well-known test entries."""
    owner = query_name.rstrip(".")
    for zone, txt in LISTING_ZONES.items():
        if owner == f"2.0.0.127.{zone}" and zone != "dbl.spamhaus.org":
            return make_records(owner, "127.0.0.2", txt)
        if owner == f"dbltest.com.{zone}" and zone == "dbl.spamhaus.org":
            return make_records(owner, "127.0.1.2", txt)
    return []


@pytest.fixture
def record_factory():
    """Build an A+TXT answer for a listed query name."""
    return make_records


@pytest.fixture
def mock_transport():
    """Transport mock with call-count instrumentation."""
    return Mock(side_effect=fake_dns)


@pytest.fixture
def fake_clock():
    """Controllable monotonic timer for cache expiry tests."""

    class Clock:
        def __init__(self):
            self.now = 1000.0

        def __call__(self):
            return self.now

        def advance(self, seconds):
            self.now += seconds

    return Clock()


@pytest.fixture
def spy_cache():
    """Cache double recording every set() call."""

    class SpyCache:
        def __init__(self):
            self.store = {}
            self.sets = []

        def get(self, key):
            return self.store.get(key)

        def set(self, key, records, ttl):
            self.sets.append((key, list(records), ttl))
            self.store[key] = list(records)

    return SpyCache()
