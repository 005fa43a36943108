#!/usr/bin/env python3
"""Resolve an existing TLS certificate for domains or obtain one with Certbot."""

import argparse
import json
import sys
from pathlib import Path

from tls_provisioning.lib.cert_manager import CertificateManager
from tls_provisioning.lib.config import ProvisioningConfig
from tls_provisioning.lib.errors import (
    InvalidArgumentError,
    IssuanceError,
    MissingDependencyError,
    ProvisioningError,
    UserDeclinedError,
)
from tls_provisioning.lib.logging_config import LOGGER
from tls_provisioning.lib.prompt import always_yes, ask_yes_no

EXIT_DECLINED = 2


def build_config(args: argparse.Namespace) -> ProvisioningConfig:
    """Apply command-line overrides to the default configuration."""
    config = ProvisioningConfig(search_all_stores=args.search_all_stores)
    if args.live_dir is not None:
        config.live_dir = args.live_dir
    if args.webroot is not None:
        config.webroot = args.webroot
    return config


def main(argv: list[str] | None = None) -> int:
    """Print TLS file paths for the requested domains.

    Returns:
        Exit code (0 for success, 2 if the operator declined, 1 for failure)
    """
    parser = argparse.ArgumentParser(
        description="Find or obtain a TLS certificate for one or more domains"
    )
    parser.add_argument("domains", nargs="+", help="Domain names, highest priority first")
    parser.add_argument(
        "--live-dir",
        type=Path,
        default=None,
        help="Certbot live directory (default: /etc/letsencrypt/live)",
    )
    parser.add_argument(
        "--webroot",
        type=Path,
        default=None,
        help="ACME challenge webroot (default: /var/www/acme)",
    )
    parser.add_argument(
        "--search-all-stores",
        action="store_true",
        help="Also match domains listed only as SANs of other certificates",
    )
    parser.add_argument(
        "--yes",
        action="store_true",
        help="Answer yes to every confirmation prompt",
    )
    parser.add_argument(
        "--format",
        choices=("env", "json"),
        default="env",
        help="Output format for the resolved paths (default: env)",
    )
    args = parser.parse_args(argv)

    config = build_config(args)
    manager = CertificateManager(config, confirm=always_yes if args.yes else ask_yes_no)

    try:
        paths = manager.resolve_or_issue(args.domains)
    except (UserDeclinedError, MissingDependencyError) as e:
        LOGGER.warning("%s", e)
        return EXIT_DECLINED
    except InvalidArgumentError as e:
        LOGGER.error("Invalid request: %s", e)
        return 1
    except IssuanceError as e:
        LOGGER.error("Certificate issuance failed: %s", e)
        LOGGER.error("Fix DNS, firewall, or rate limit issues and run again")
        return 1
    except ProvisioningError as e:
        LOGGER.error("Challenge setup failed: %s", e)
        return 1

    env = paths.as_env()
    if args.format == "json":
        print(json.dumps(env, indent=2))
    else:
        for name, value in env.items():
            print(f"{name}={value}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
