"""Lookup cache adapters."""

import math
import threading
import time
from typing import Callable, Optional, Protocol, Sequence

from cachetools import TLRUCache

from dnsrbl.models.dns_record import DNSRecord


class CacheBackend(Protocol):
    """Storage capability the lookup engine depends on.

    Implementations must treat a key as absent once its TTL has elapsed.
    """

    def get(self, key: str) -> Optional[Sequence[DNSRecord]]:
        ...

    def set(self, key: str, records: Sequence[DNSRecord], ttl: int) -> None:
        ...


def _time_to_use(key, value, now):
    return now + value[1]


class MemoryCache:
    """In-process cache with per-entry expiry.

    Backed by cachetools.TLRUCache so every entry expires after the TTL it
    was stored with. Unbounded unless maxsize is given; nothing is persisted.

    Example:
        >>> cache = MemoryCache()
        >>> cache.set("dnsrbl|9|127.0.0.2|sbl.spamhaus.org", [], 3600)
        >>> cache.get("dnsrbl|9|127.0.0.2|sbl.spamhaus.org")
        ()
    """

    def __init__(
        self,
        maxsize: float = math.inf,
        timer: Callable[[], float] = time.monotonic,
    ):
        self._cache: TLRUCache = TLRUCache(maxsize, _time_to_use, timer=timer)
        self._lock = threading.Lock()

    def get(self, key: str) -> Optional[Sequence[DNSRecord]]:
        with self._lock:
            entry = self._cache.get(key)
        if entry is None:
            return None
        return entry[0]

    def set(self, key: str, records: Sequence[DNSRecord], ttl: int) -> None:
        # TLRUCache drops entries that are already expired on insert
        with self._lock:
            self._cache[key] = (tuple(records), ttl)

    def __len__(self) -> int:
        with self._lock:
            return len(self._cache)

    def clear(self) -> None:
        with self._lock:
            self._cache.clear()
