"""Reputation checks of one address across configured blacklists."""

import logging
from collections.abc import Mapping
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Dict, List, Optional, Sequence

from dnsrbl.models.address import AddressKind
from dnsrbl.models.dns_record import DNSRecord
from dnsrbl.services.cache import CacheBackend
from dnsrbl.services.lookup import LookupEngine, Transport
from dnsrbl.utils.ip_utils import classify_address


logger = logging.getLogger(__name__)

CATEGORIES = ("dnsbl", "surbl")


class DNSRBL:
    """Checks IPs against DNSBL lists and hostnames against SURBL lists.

    Invalid input never raises: get_all() returns None, is_listed() returns
    False. DNS failures count as "not listed".

    Example:
        >>> rbl = DNSRBL({"dnsbl": ["sbl.spamhaus.org"], "surbl": ["dbl.spamhaus.org"]})
        >>> rbl.is_listed("127.0.0.2")
        True
        >>> rbl.get_listing_blacklists("127.0.0.2")
        ['sbl.spamhaus.org']
    """

    def __init__(
        self,
        blacklists: Mapping,
        cache: Optional[CacheBackend] = None,
        resolver: Optional[Transport] = None,
        max_workers: int = 1,
    ):
        """Initialize the checker.

        Args:
            blacklists: Mapping of "dnsbl"/"surbl" to ordered list hostnames.
            cache: Cache backend; an in-memory cache is used when omitted.
            resolver: DNS transport; a short-timeout DNSResolver when omitted.
            max_workers: Lookups run in parallel by get_all() when > 1.
        """
        self._blacklists: Dict[Any, Sequence[str]] = {c: [] for c in CATEGORIES}
        self.set_blacklists(blacklists)
        self.engine = LookupEngine(cache=cache, transport=resolver)
        self.max_workers = max_workers

    def set_blacklists(self, blacklists: Any) -> bool:
        """Replace the configured lists.

        Args:
            blacklists: Mapping of category to list hostnames. Missing
                categories (or None) default to empty lists.

        Returns:
            bool: False (and no change) if blacklists is not a mapping.
        """
        if not isinstance(blacklists, Mapping):
            return False

        lists = dict(blacklists)
        for category in CATEGORIES:
            if lists.get(category) is None:
                lists[category] = []
        self._blacklists = lists
        return True

    def get_blacklists(self) -> Dict[Any, Sequence[str]]:
        """Return a copy of the configured lists."""
        return {
            key: list(value) if key in CATEGORIES else value
            for key, value in self._blacklists.items()
        }

    def get_all(self, host: Any) -> Optional[Dict[str, List[DNSRecord]]]:
        """Look up host on every list of its category.

        Args:
            host: IP literal or hostname.

        Returns:
            Optional[Dict[str, List[DNSRecord]]]: Records per list hostname
            in configured order, or None for invalid input.
        """
        kind = classify_address(host)
        if kind is AddressKind.INVALID:
            return None

        list_hosts = list(self._blacklists[kind.category])
        if self.max_workers > 1 and len(list_hosts) > 1:
            with ThreadPoolExecutor(max_workers=self.max_workers) as executor:
                # map() yields in submission order
                all_records = list(
                    executor.map(
                        lambda list_host: self.engine.lookup(host, kind, list_host),
                        list_hosts,
                    )
                )
        else:
            all_records = [
                self.engine.lookup(host, kind, list_host) for list_host in list_hosts
            ]

        return {
            list_host: list(records)
            for list_host, records in zip(list_hosts, all_records)
        }

    def get_listing_blacklists(self, host: Any) -> List[str]:
        """Return the list hostnames that list host, in configured order."""
        results = self.get_all(host)
        if results is None:
            return []
        return [list_host for list_host, records in results.items() if records]

    def is_listed(self, host: Any) -> bool:
        """Check if host is listed on at least one list of its category.

        Stops at the first list with a non-empty answer.
        """
        kind = classify_address(host)
        if kind is AddressKind.INVALID:
            return False

        for list_host in self._blacklists[kind.category]:
            if self.engine.lookup(host, kind, list_host):
                logger.debug(f"{host} is listed on {list_host}")
                return True
        return False
