"""Lookup of per-domain certificate stores under a Certbot live directory."""

from pathlib import Path

from .cert_utils import matches_domain
from .logging_config import LOGGER
from .models import CertificateStore


def is_store_name(domain: str) -> bool:
    """Return True if domain can name a directory directly inside the live directory."""
    return bool(domain) and domain not in (".", "..") and "/" not in domain and "\0" not in domain


def find_store_for_domain(
    base_dir: Path, domain: str, search_all_stores: bool = False
) -> CertificateStore | None:
    """Find the certificate store serving domain.

    The directory named after the domain wins without inspecting its
    certificate. Only when search_all_stores is set are the other stores'
    certificates scanned, which finds domains present only as a SAN.

    Args:
        base_dir: Directory of per-domain stores (e.g. /etc/letsencrypt/live)
        domain: Domain name to look up
        search_all_stores: Scan every store's cert.pem when the fast path misses

    Returns:
        Matching CertificateStore, or None on a miss
    """
    if not is_store_name(domain):
        return None

    candidate = base_dir / domain
    if candidate.is_dir():
        return CertificateStore(candidate)

    if not search_all_stores or not base_dir.is_dir():
        return None

    for store_dir in sorted(path for path in base_dir.iterdir() if path.is_dir()):
        store = CertificateStore(store_dir)
        if matches_domain(store.cert, domain):
            LOGGER.info("Found %s in certificate of store %s", domain, store_dir)
            return store

    return None
