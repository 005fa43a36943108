"""Certificate parsing: Common Name and Subject Alternative Name extraction."""

from pathlib import Path

from cryptography import x509

from .errors import NotFoundError
from .logging_config import LOGGER
from .models import CertificateIdentity


def deserialize_certificate(pem_data: bytes) -> x509.Certificate:
    """Deserialize the first certificate from PEM bytes."""
    return x509.load_pem_x509_certificate(pem_data)


def extract_common_name(cert: x509.Certificate) -> str:
    """Return the first CN of the subject, cut at the first ',' or '/'.

    Returns an empty string when the subject carries no CN.
    """
    attributes = cert.subject.get_attributes_for_oid(x509.NameOID.COMMON_NAME)
    if not attributes:
        return ""
    value = attributes[0].value
    if isinstance(value, bytes):
        value = value.decode("utf-8", errors="replace")
    for separator in (",", "/"):
        value = value.split(separator, 1)[0]
    return value.strip()


def extract_subject_alt_names(cert: x509.Certificate) -> tuple[str, ...]:
    """Return the DNS names of the SAN extension in certificate order."""
    try:
        san = cert.extensions.get_extension_for_class(x509.SubjectAlternativeName).value
    except x509.ExtensionNotFound:
        return ()
    return tuple(name.strip() for name in san.get_values_for_type(x509.DNSName))


def extract_identity(cert_file: Path) -> CertificateIdentity:
    """Read CN and SANs from a PEM certificate file.

    Args:
        cert_file: Path to a PEM encoded certificate (only the first block is read)

    Returns:
        CertificateIdentity; empty when the certificate cannot be read or parsed

    Raises:
        NotFoundError: If cert_file does not exist
    """
    if not cert_file.is_file():
        raise NotFoundError(f"certificate file not found: {cert_file}")

    try:
        cert = deserialize_certificate(cert_file.read_bytes())
        return CertificateIdentity(
            common_name=extract_common_name(cert),
            subject_alt_names=extract_subject_alt_names(cert),
        )
    except (OSError, ValueError, x509.DuplicateExtension, x509.UnsupportedGeneralNameType) as e:
        LOGGER.warning("Unreadable certificate %s: %s", cert_file, e)
        return CertificateIdentity()


def matches_domain(cert_file: Path, domain: str) -> bool:
    """Return True if domain equals the certificate's CN or one of its SANs.

    Comparison is exact and case-sensitive; wildcard names are not expanded.
    A missing certificate file never matches.
    """
    try:
        identity = extract_identity(cert_file)
    except NotFoundError:
        return False
    return domain in identity.names


def describe_identity(cert_file: Path) -> list[str]:
    """Render CN and SANs of a certificate as human readable lines.

    Raises:
        NotFoundError: If cert_file does not exist
    """
    identity = extract_identity(cert_file)
    lines = [
        f"Certificate: {cert_file}",
        f"Common Name (CN): {identity.common_name or '<none>'}",
    ]
    if identity.subject_alt_names:
        lines.append("Subject Alternative Names (SANs):")
        lines.extend(f"  - {name}" for name in identity.subject_alt_names)
    else:
        lines.append("No SANs found in certificate.")
    return lines
