"""Cached blacklist lookups."""

import logging
from typing import Callable, Iterable, Optional, Sequence

from dnsrbl.models.address import AddressKind
from dnsrbl.models.dns_record import DNSRecord, RecordType
from dnsrbl.services.cache import CacheBackend, MemoryCache
from dnsrbl.services.dns_checker import DNSQueryError, DNSResolver
from dnsrbl.utils.ip_utils import build_query_name


logger = logging.getLogger(__name__)

# Applied to empty answers and failed queries alike
NEGATIVE_CACHE_TTL = 3600

QUERY_TYPES = (RecordType.A, RecordType.TXT)

Transport = Callable[[str, Iterable[RecordType]], Sequence[DNSRecord]]


def cache_key(address: str, list_host: str, prefix: str = "dnsrbl") -> str:
    """Build the cache key for an (address, list) pair.

    The address length prefix keeps keys unambiguous even if a part
    contains the delimiter.

    Examples:
        >>> cache_key("127.0.0.2", "sbl.spamhaus.org")
        'dnsrbl|9|127.0.0.2|sbl.spamhaus.org'
    """
    return f"{prefix}|{len(address)}|{address}|{list_host}"


class LookupEngine:
    """Resolves one address against one list, through the cache.

    A cache hit returns immediately. On a miss a single A+TXT query is
    issued; listed answers are cached for the TTL of the first record,
    empty answers and failures for NEGATIVE_CACHE_TTL seconds.
    """

    def __init__(
        self,
        cache: Optional[CacheBackend] = None,
        transport: Optional[Transport] = None,
        cache_prefix: str = "dnsrbl",
    ):
        self.cache = cache if cache is not None else MemoryCache()
        self.transport = transport if transport is not None else DNSResolver()
        self.cache_prefix = cache_prefix

    def lookup(
        self, address: str, kind: AddressKind, list_host: str
    ) -> Sequence[DNSRecord]:
        """Look up address on list_host.

        Args:
            address: IP literal or hostname.
            kind: Classification of address.
            list_host: Blacklist zone.

        Returns:
            Sequence[DNSRecord]: Records for the listing, empty if not listed
            or if the query failed.
        """
        key = cache_key(address, list_host, self.cache_prefix)

        cached = self.cache.get(key)
        if cached is not None:
            logger.debug(f"Cache hit for {address} on {list_host}")
            return list(cached)

        try:
            query_name = build_query_name(address, kind, list_host)
        except ValueError as e:
            logger.warning(f"Skipping {address} on {list_host}: {e}")
            return []

        try:
            records = list(self.transport(query_name, QUERY_TYPES))
        except DNSQueryError as e:
            logger.warning(
                f"DNS query for {query_name} failed ({e.failure_type}), "
                f"treating as not listed"
            )
            records = []
        except Exception as e:
            # Unexpected transport error - treat as not listed
            logger.error(f"Unexpected error querying {query_name}: {e}")
            records = []

        if records:
            # TTL of the first record stands in for the whole answer
            ttl = records[0].ttl
        else:
            ttl = NEGATIVE_CACHE_TTL

        self.cache.set(key, records, ttl)
        logger.debug(
            f"Cached {len(records)} record(s) for {address} on {list_host} for {ttl}s"
        )
        return records
