"""Configuration module for the DNSRBL checker.

Loads and validates environment variables.
"""

import os
from dataclasses import dataclass, field
from typing import Dict, List

from dnsrbl.utils.ip_utils import is_valid_ip


@dataclass
class Config:
    """Application configuration loaded from environment variables."""

    # Blacklist Configuration
    dnsbl_lists: List[str] = field(default_factory=list)
    surbl_lists: List[str] = field(default_factory=list)

    # Resolver Configuration
    dns_timeout: float = 0.5
    dns_nameservers: List[str] = field(default_factory=list)
    dns_concurrency: int = 1

    # Operational Configuration
    verbose: bool = False

    @classmethod
    def from_env(cls) -> "Config":
        """Load configuration from environment variables.

        Raises:
            ValueError: If variables are invalid.

        Returns:
            Config: Validated configuration instance.
        """
        dnsbl_lists = cls._get_list_env("DNSBL_LISTS")
        surbl_lists = cls._get_list_env("SURBL_LISTS")

        try:
            dns_timeout = float(os.getenv("DNS_TIMEOUT", "0.5"))
        except ValueError:
            raise ValueError("DNS_TIMEOUT must be a number of seconds")
        if not 0 < dns_timeout <= 10:
            raise ValueError("DNS_TIMEOUT must be greater than 0 and at most 10 seconds")

        dns_nameservers = cls._get_list_env("DNS_NAMESERVERS")
        for nameserver in dns_nameservers:
            if not is_valid_ip(nameserver):
                raise ValueError(f"DNS_NAMESERVERS contains invalid address: {nameserver}")

        dns_concurrency = int(os.getenv("DNS_CONCURRENCY", "1"))
        if not 1 <= dns_concurrency <= 50:
            raise ValueError("DNS_CONCURRENCY must be between 1 and 50")

        verbose_str = os.getenv("VERBOSE", "false").lower()
        verbose = verbose_str in ("true", "1", "yes")

        return cls(
            dnsbl_lists=dnsbl_lists,
            surbl_lists=surbl_lists,
            dns_timeout=dns_timeout,
            dns_nameservers=dns_nameservers,
            dns_concurrency=dns_concurrency,
            verbose=verbose,
        )

    @staticmethod
    def _get_list_env(key: str) -> List[str]:
        """Split a comma-separated environment variable, dropping blanks."""
        value = os.getenv(key, "")
        return [item.strip() for item in value.split(",") if item.strip()]

    def get_blacklists(self) -> Dict[str, List[str]]:
        """Build the list set handed to DNSRBL.

        Returns:
            Dict[str, List[str]]: Mapping with "dnsbl" and "surbl" keys.
        """
        return {"dnsbl": list(self.dnsbl_lists), "surbl": list(self.surbl_lists)}
