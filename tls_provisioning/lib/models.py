"""Data models for certificate stores, identities, and setup results."""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

CERT_FILENAME = "cert.pem"
CHAIN_FILENAME = "chain.pem"
FULLCHAIN_FILENAME = "fullchain.pem"
PRIVKEY_FILENAME = "privkey.pem"


@dataclass(frozen=True)
class CertificateStore:
    """Directory holding one issued certificate's artifacts."""

    path: Path

    @property
    def cert(self) -> Path:
        return self.path / CERT_FILENAME

    @property
    def chain(self) -> Path:
        return self.path / CHAIN_FILENAME

    @property
    def fullchain(self) -> Path:
        return self.path / FULLCHAIN_FILENAME

    @property
    def privkey(self) -> Path:
        return self.path / PRIVKEY_FILENAME

    def resolved_paths(self) -> "ResolvedCertificatePaths":
        """Return the four artifact paths as absolute paths."""
        store = CertificateStore(self.path.absolute())
        return ResolvedCertificatePaths(
            cert=store.cert,
            chain=store.chain,
            fullchain=store.fullchain,
            privkey=store.privkey,
        )


@dataclass(frozen=True)
class CertificateIdentity:
    """Names a certificate is valid for, as read from the certificate itself."""

    common_name: str = ""
    subject_alt_names: tuple[str, ...] = ()

    @property
    def names(self) -> tuple[str, ...]:
        """CN (when present) followed by the SANs."""
        if self.common_name:
            return (self.common_name, *self.subject_alt_names)
        return self.subject_alt_names


@dataclass(frozen=True)
class ResolvedCertificatePaths:
    """Absolute paths of the TLS files handed back to callers."""

    cert: Path
    chain: Path
    fullchain: Path
    privkey: Path

    def as_env(self) -> dict[str, str]:
        """Return the paths keyed by their shell variable names."""
        return {
            "tls_cert": str(self.cert),
            "tls_chain": str(self.chain),
            "tls_fullchain": str(self.fullchain),
            "tls_privkey": str(self.privkey),
        }


@dataclass(frozen=True)
class CommandResult:
    """Outcome of one external command."""

    args: tuple[str, ...]
    returncode: int
    stdout: str = ""
    stderr: str = ""

    @property
    def ok(self) -> bool:
        return self.returncode == 0


class StepStatus(Enum):
    """Whether an idempotent setup step found its target or had to create it."""

    ALREADY_PRESENT = "already-present"
    CREATED = "created"


class PackageStatus(Enum):
    """Outcome of ensuring a set of packages is installed."""

    OK = "ok"
    DECLINED = "declined"


@dataclass(frozen=True)
class PackageInstallResult:
    """Outcome of ensure_installed with the packages it acted on."""

    status: PackageStatus
    installed: tuple[str, ...] = ()
    missing: tuple[str, ...] = ()


@dataclass
class InfrastructureReport:
    """Per-step result of preparing the HTTP-01 challenge infrastructure."""

    packages: StepStatus = StepStatus.ALREADY_PRESENT
    webroot: StepStatus = StepStatus.ALREADY_PRESENT
    site_config: StepStatus = StepStatus.ALREADY_PRESENT
    site_enabled: StepStatus = StepStatus.ALREADY_PRESENT
    service_enabled: StepStatus = StepStatus.ALREADY_PRESENT
    service_serving: StepStatus = StepStatus.ALREADY_PRESENT
    installed_packages: list[str] = field(default_factory=list)

    @property
    def changed(self) -> bool:
        """True if any step modified the host."""
        return any(
            status is StepStatus.CREATED
            for status in (
                self.packages,
                self.webroot,
                self.site_config,
                self.site_enabled,
                self.service_enabled,
                self.service_serving,
            )
        )
