"""Exception hierarchy for certificate resolution and issuance."""

from collections.abc import Sequence

from .models import CommandResult


class ProvisioningError(Exception):
    """Base class for all provisioning failures."""


class InvalidArgumentError(ProvisioningError, ValueError):
    """Caller passed an unusable domain set."""


class NotFoundError(ProvisioningError, FileNotFoundError):
    """Certificate file does not exist."""


class MissingDependencyError(ProvisioningError):
    """Required packages are missing and installation was declined."""

    def __init__(self, packages: Sequence[str]) -> None:
        self.packages = tuple(packages)
        super().__init__(f"cannot proceed without required packages: {' '.join(self.packages)}")


class UserDeclinedError(ProvisioningError):
    """Operator declined to obtain a new certificate."""

    def __init__(self, domains: Sequence[str]) -> None:
        self.domains = tuple(domains)
        super().__init__(f"certificate issuance declined for: {' '.join(self.domains)}")


class IssuanceError(ProvisioningError):
    """ACME client exited non-zero.

    The client's exit code and stderr are kept unmodified so the operator
    can see the CA's own diagnostics.
    """

    def __init__(self, domains: Sequence[str], returncode: int, stderr: str) -> None:
        self.domains = tuple(domains)
        self.returncode = returncode
        self.stderr = stderr
        message = f"certbot failed for {' '.join(self.domains)} (exit code {returncode})"
        if stderr:
            message = f"{message}: {stderr.strip()}"
        super().__init__(message)


class InfrastructureError(ProvisioningError):
    """A challenge infrastructure step failed."""

    def __init__(self, step: str, result: CommandResult | None = None, detail: str = "") -> None:
        self.step = step
        self.result = result
        if not detail and result is not None:
            detail = result.stderr.strip() or f"exit code {result.returncode}"
        super().__init__(f"{step} failed: {detail}" if detail else f"{step} failed")
