#!/usr/bin/env python3
"""Print the Common Name and Subject Alternative Names of certificates."""

import argparse
import sys
from pathlib import Path

from tls_provisioning.lib.cert_utils import describe_identity
from tls_provisioning.lib.errors import NotFoundError
from tls_provisioning.lib.logging_config import LOGGER


def main(argv: list[str] | None = None) -> int:
    """Describe each certificate file given on the command line.

    Returns:
        Exit code (0 for success, 1 if any file is missing)
    """
    parser = argparse.ArgumentParser(description="Show CN and SANs of PEM certificates")
    parser.add_argument("cert_files", nargs="+", type=Path, help="PEM certificate files")
    args = parser.parse_args(argv)

    exit_code = 0
    for cert_file in args.cert_files:
        try:
            print("\n".join(describe_identity(cert_file)))
        except NotFoundError as e:
            LOGGER.error("%s", e)
            exit_code = 1

    return exit_code


if __name__ == "__main__":
    sys.exit(main())
