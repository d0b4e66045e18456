"""Command line entry point for the DNSRBL checker."""

import argparse
import logging
import sys
import time

from dnsrbl.config import Config
from dnsrbl.services.dns_checker import DNSResolver
from dnsrbl.services.logger import log_check_result, setup_logging
from dnsrbl.services.reputation import DNSRBL
from dnsrbl.utils.ip_utils import classify_address


logger = logging.getLogger(__name__)

EXIT_CLEAN = 0
EXIT_FATAL = 1
EXIT_LISTED = 2


def check_address(rbl: DNSRBL, address: str) -> bool:
    """Check one address, log the result and print a summary line.

    Returns:
        bool: True if the address is listed anywhere.
    """
    start = time.time()
    category = classify_address(address).category

    listed_on = rbl.get_listing_blacklists(address)
    if listed_on:
        print(f"{address}: listed on {', '.join(listed_on)}")
    else:
        print(f"{address}: not listed")

    log_check_result(
        address=address,
        category=category,
        listed_on=listed_on,
        checked_lists=len(rbl.get_blacklists()[category]),
        duration_ms=int((time.time() - start) * 1000),
    )
    return bool(listed_on)


def main(argv: list[str] | None = None) -> int:
    """Main execution function.

    Returns:
        int: Exit code (0 nothing listed, 2 something listed, 1 fatal error).
    """
    parser = argparse.ArgumentParser(
        prog="dnsrbl",
        description="Check IP addresses (DNSBL) and hostnames (SURBL) against DNS blacklists.",
    )
    parser.add_argument("addresses", nargs="+", metavar="ADDRESS")
    args = parser.parse_args(argv)

    try:
        config = Config.from_env()
        setup_logging(config.verbose)

        if not config.dnsbl_lists and not config.surbl_lists:
            raise ValueError("At least one of DNSBL_LISTS or SURBL_LISTS must be set")

        logger.info(
            f"Configuration loaded: {len(config.dnsbl_lists)} DNSBL and "
            f"{len(config.surbl_lists)} SURBL lists configured"
        )

        rbl = DNSRBL(
            config.get_blacklists(),
            resolver=DNSResolver(
                timeout=config.dns_timeout, nameservers=config.dns_nameservers
            ),
            max_workers=config.dns_concurrency,
        )

        any_listed = False
        for address in args.addresses:
            if check_address(rbl, address):
                any_listed = True

        return EXIT_LISTED if any_listed else EXIT_CLEAN

    except Exception as e:
        logger.error(f"Fatal error: {e}", exc_info=True)
        return EXIT_FATAL


if __name__ == "__main__":
    sys.exit(main())
