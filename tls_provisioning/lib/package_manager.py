"""Debian package manager client for ensuring required packages are present."""

from collections.abc import Sequence

from .command import CommandRunner
from .errors import InfrastructureError
from .logging_config import LOGGER
from .models import PackageInstallResult, PackageStatus
from .prompt import Confirm, ask_yes_no

INSTALLED_STATUS = "install ok installed"


class PackageManager:
    """dpkg/apt client (installs require root)."""

    def __init__(self, runner: CommandRunner | None = None, confirm: Confirm = ask_yes_no) -> None:
        """Initialize package manager client.

        Args:
            runner: Command runner used for dpkg-query and apt
            confirm: Asked before installing anything
        """
        self.runner = runner or CommandRunner()
        self.confirm = confirm

    def is_installed(self, package: str) -> bool:
        """Check dpkg status of a single package."""
        result = self.runner.run(["dpkg-query", "-W", "--showformat=${Status}\n", package])
        return result.ok and INSTALLED_STATUS in result.stdout

    def missing_packages(self, packages: Sequence[str]) -> list[str]:
        """Return the packages that are not installed, in input order."""
        missing = []
        for package in packages:
            if self.is_installed(package):
                LOGGER.info("%s is already installed", package)
            else:
                LOGGER.info("%s is not installed", package)
                missing.append(package)
        return missing

    def ensure_installed(self, packages: Sequence[str]) -> PackageInstallResult:
        """Install any missing packages after operator confirmation.

        Args:
            packages: Debian package names

        Returns:
            PackageInstallResult with status OK and the packages it installed,
            or status DECLINED and the packages still missing

        Raises:
            InfrastructureError: If apt update or apt install fails
        """
        missing = tuple(self.missing_packages(packages))
        if not missing:
            LOGGER.info("All required packages are already installed")
            return PackageInstallResult(PackageStatus.OK)

        if not self.confirm(f"The following packages are missing: {' '.join(missing)}. Install them now?"):
            LOGGER.warning("Installation of %s declined", " ".join(missing))
            return PackageInstallResult(PackageStatus.DECLINED, missing=missing)

        update = self.runner.run(["apt", "update"])
        if not update.ok:
            raise InfrastructureError("apt update", update)

        install = self.runner.run(["apt", "install", "-y", *missing])
        if not install.ok:
            raise InfrastructureError(f"apt install {' '.join(missing)}", install)

        return PackageInstallResult(PackageStatus.OK, installed=missing)
