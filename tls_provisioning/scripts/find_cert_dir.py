#!/usr/bin/env python3
"""Print the certificate store directory serving a domain."""

import argparse
import sys
from pathlib import Path

from tls_provisioning.lib.cert_store import find_store_for_domain
from tls_provisioning.lib.config import ProvisioningConfig
from tls_provisioning.lib.logging_config import LOGGER


def main(argv: list[str] | None = None) -> int:
    """Look up the store for one domain without issuing anything.

    Returns:
        Exit code (0 if found, 1 on a miss)
    """
    parser = argparse.ArgumentParser(description="Find the certificate directory for a domain")
    parser.add_argument("domain", help="Domain name to look up")
    parser.add_argument(
        "--live-dir",
        type=Path,
        default=ProvisioningConfig.live_dir,
        help="Certbot live directory (default: /etc/letsencrypt/live)",
    )
    parser.add_argument(
        "--search-all-stores",
        action="store_true",
        help="Also match the domain against SANs of every stored certificate",
    )
    args = parser.parse_args(argv)

    store = find_store_for_domain(args.live_dir, args.domain, args.search_all_stores)
    if store is None:
        LOGGER.info("No certificate directory found for %s", args.domain)
        return 1

    print(store.path)
    return 0


if __name__ == "__main__":
    sys.exit(main())
