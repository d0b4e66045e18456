"""DNS transport for blacklist queries."""

import logging
from typing import Iterable, Optional, Sequence

import dns.exception
import dns.rdataclass
import dns.resolver

from dnsrbl.models.dns_record import DNSRecord, RecordType


logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 0.5


class DNSQueryError(Exception):
    """Raised when a blacklist query cannot be answered.

    Attributes:
        query_name: Name that was queried.
        failure_type: Category from categorize_failure().
    """

    def __init__(self, query_name: str, failure_type: str, message: str = ""):
        super().__init__(message or f"DNS query for {query_name} failed: {failure_type}")
        self.query_name = query_name
        self.failure_type = failure_type


def categorize_failure(exception: Exception) -> str:
    """Categorize DNS failure into specific failure type.

    Args:
        exception: The DNS exception that occurred.

    Returns:
        str: One of: timeout, invalid_response_type,
             unknown_error.
    """
    if isinstance(exception, dns.exception.Timeout):
        return "timeout"
    elif isinstance(exception, dns.resolver.NoAnswer):
        return "invalid_response_type"
    else:
        return "unknown_error"


def _rdata_value(rdata, record_type: RecordType) -> str:
    if record_type == RecordType.TXT:
        return b"".join(rdata.strings).decode("utf-8", errors="replace")
    return rdata.address


class DNSResolver:
    """Blacklist-tuned DNS transport.

    Wraps dns.resolver.Resolver with a short timeout and a single attempt
    so one unresponsive list cannot dominate overall latency.

    Example:
        >>> resolver = DNSResolver(timeout=0.5)
        >>> records = resolver.query("2.0.0.127.sbl.spamhaus.org.")
    """

    def __init__(
        self,
        timeout: float = DEFAULT_TIMEOUT,
        nameservers: Optional[Sequence[str]] = None,
    ):
        """Initialize the transport.

        Args:
            timeout: Per-query timeout and total lifetime in seconds.
            nameservers: Explicit nameserver IPs; system resolvers otherwise.
        """
        self.resolver = dns.resolver.Resolver()
        self.resolver.timeout = timeout
        self.resolver.lifetime = timeout
        if nameservers:
            self.resolver.nameservers = list(nameservers)

    def __call__(
        self, query_name: str, rdtypes: Iterable[RecordType] = (RecordType.A, RecordType.TXT)
    ) -> list[DNSRecord]:
        return self.query(query_name, rdtypes)

    def query(
        self,
        query_name: str,
        rdtypes: Iterable[RecordType] = (RecordType.A, RecordType.TXT),
    ) -> list[DNSRecord]:
        """Resolve every requested record type for query_name.

        Args:
            query_name: Absolute DNS name to resolve.
            rdtypes: Record types to request, resolved in order.

        Returns:
            list[DNSRecord]: Records in answer order; empty if the name does
            not exist.

        Raises:
            DNSQueryError: On timeout, missing nameservers or any other
                DNS transport error.
        """
        records: list[DNSRecord] = []

        for record_type in rdtypes:
            try:
                answer = self.resolver.resolve(
                    query_name, record_type.value, raise_on_no_answer=False
                )
            except dns.resolver.NXDOMAIN:
                # Definitive "not listed" response
                return []
            except dns.exception.DNSException as e:
                failure_type = categorize_failure(e)
                logger.debug(
                    f"DNS query for {query_name} ({record_type.value}) failed: {failure_type}"
                )
                raise DNSQueryError(query_name, failure_type, str(e)) from e

            rrset = answer.rrset
            if rrset is None:
                continue

            host = rrset.name.to_text(omit_final_dot=True)
            record_class = dns.rdataclass.to_text(rrset.rdclass)
            for rdata in rrset:
                records.append(
                    DNSRecord(
                        host=host,
                        record_class=record_class,
                        record_type=record_type,
                        value=_rdata_value(rdata, record_type),
                        ttl=rrset.ttl,
                    )
                )

        return records
