"""Certificate manager resolving existing certificates or issuing new ones."""

from collections.abc import Sequence

from .acme_client import AcmeClient
from .cert_store import find_store_for_domain, is_store_name
from .challenge_infra import ChallengeInfrastructure
from .command import CommandRunner
from .config import ProvisioningConfig
from .errors import InvalidArgumentError, IssuanceError, UserDeclinedError
from .logging_config import LOGGER
from .models import CertificateStore, InfrastructureReport, ResolvedCertificatePaths
from .package_manager import PackageManager
from .prompt import Confirm, ask_yes_no
from .web_server import WebServerControl


class CertificateManager:
    """Finds a usable certificate for a set of domains, issuing one via Certbot if needed.

    Host mutation (packages, webroot, Apache site, certbot) only happens
    after a total lookup miss and explicit operator confirmation.
    """

    def __init__(
        self,
        config: ProvisioningConfig,
        confirm: Confirm = ask_yes_no,
        package_manager: PackageManager | None = None,
        web_server: WebServerControl | None = None,
        acme_client: AcmeClient | None = None,
    ) -> None:
        """Initialize certificate manager.

        Args:
            config: Host layout and lookup behaviour
            confirm: Asked before issuing and before installing packages
            package_manager: Defaults to a dpkg/apt client sharing confirm
            web_server: Defaults to systemd/a2ensite control of config.web_service
            acme_client: Defaults to config.certbot_bin
        """
        runner = CommandRunner()
        self.config = config
        self.confirm = confirm
        self.package_manager = package_manager or PackageManager(runner=runner, confirm=confirm)
        self.web_server = web_server or WebServerControl(
            service=config.web_service,
            sites_enabled_dir=config.sites_enabled_dir,
            runner=runner,
        )
        self.acme_client = acme_client or AcmeClient(
            certbot_bin=config.certbot_bin,
            extra_args=config.certbot_extra_args,
            runner=runner,
        )
        self.infrastructure = ChallengeInfrastructure(config, self.package_manager, self.web_server)
        self.last_report: InfrastructureReport | None = None

    def find_existing(self, domains: Sequence[str]) -> CertificateStore | None:
        """Return the store of the first domain that resolves, in request order."""
        for domain in domains:
            store = find_store_for_domain(
                self.config.live_dir, domain, search_all_stores=self.config.search_all_stores
            )
            if store is not None:
                return store
        return None

    def resolve_or_issue(self, domains: Sequence[str]) -> ResolvedCertificatePaths:
        """Return TLS file paths for domains, obtaining a certificate if none exists.

        An existing store for any requested domain is used as-is, even if it
        does not cover the other domains. Otherwise, once confirmed, all
        domains are requested as a single certificate.

        Args:
            domains: Requested domain names, highest priority first

        Returns:
            ResolvedCertificatePaths with absolute cert, chain, fullchain, privkey paths

        Raises:
            InvalidArgumentError: If domains is empty or a name cannot be a store directory
            UserDeclinedError: If the operator declined issuance
            MissingDependencyError: If the operator declined package installation
            InfrastructureError: If preparing the challenge infrastructure failed
            IssuanceError: If certbot exited non-zero
        """
        if isinstance(domains, str):
            raise InvalidArgumentError("domains must be a sequence of names, not a string")
        domains = list(domains)
        if not domains:
            raise InvalidArgumentError("no domains provided")
        if any(not isinstance(domain, str) or not is_store_name(domain) for domain in domains):
            raise InvalidArgumentError(f"invalid domain in request: {domains!r}")

        store = self.find_existing(domains)
        if store is not None:
            LOGGER.info("Using existing certificate directory: %s", store.path)
            return store.resolved_paths()

        LOGGER.info("No existing certificate found for %s", " ".join(domains))
        if not self.confirm(f"Obtain a new certificate for domains: {' '.join(domains)}?"):
            LOGGER.info("Skipping certificate issuance for %s", " ".join(domains))
            raise UserDeclinedError(domains)

        self.last_report = self.infrastructure.prepare()

        LOGGER.info("Running certbot for domains: %s", " ".join(domains))
        result = self.acme_client.obtain_certificate(domains, self.config.webroot)
        if not result.ok:
            raise IssuanceError(domains, result.returncode, result.stderr)

        store = CertificateStore(self.config.live_dir / domains[0])
        paths = store.resolved_paths()
        LOGGER.info("TLS certificate obtained for %s: %s", " ".join(domains), store.path)
        return paths
