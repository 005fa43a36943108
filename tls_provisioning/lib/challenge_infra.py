"""Idempotent setup of the HTTP-01 webroot challenge infrastructure."""

import shutil
from pathlib import Path

from .config import ProvisioningConfig
from .errors import InfrastructureError, MissingDependencyError
from .logging_config import LOGGER
from .models import InfrastructureReport, PackageInstallResult, PackageStatus, StepStatus
from .package_manager import PackageManager
from .web_server import WebServerControl

ACME_SITE_TEMPLATE = """\
<VirtualHost *:80>
\tDocumentRoot {webroot}

\t<Location /.well-known/acme-challenge/>
\t\tRequire all granted
\t</Location>

\tRewriteEngine On
\tRewriteCond %{{REQUEST_URI}} !^/\\.well-known/acme-challenge/
\tRewriteRule ^(.*)$ https://%{{HTTP_HOST}}$1 [R=301,L]
</VirtualHost>
"""


def render_site_config(webroot: Path) -> str:
    """Render the vhost serving ACME challenges and redirecting all else to HTTPS."""
    return ACME_SITE_TEMPLATE.format(webroot=webroot)


class ChallengeInfrastructure:
    """Prepares packages, webroot, and Apache site for webroot challenges.

    Every step checks for its target first and leaves existing state alone,
    so running prepare() repeatedly changes nothing after the first run.
    Nothing is rolled back when a later step fails.
    """

    def __init__(
        self,
        config: ProvisioningConfig,
        package_manager: PackageManager,
        web_server: WebServerControl,
    ) -> None:
        self.config = config
        self.package_manager = package_manager
        self.web_server = web_server

    def prepare(self) -> InfrastructureReport:
        """Run every setup step in order, failing fast.

        Returns:
            InfrastructureReport with the status of each step

        Raises:
            MissingDependencyError: If the operator declined package installation
            InfrastructureError: If any step fails
        """
        report = InfrastructureReport()
        packages = self.ensure_packages()
        report.packages = StepStatus.CREATED if packages.installed else StepStatus.ALREADY_PRESENT
        report.installed_packages = list(packages.installed)
        report.webroot = self.ensure_webroot()
        report.site_config = self.ensure_site_config()
        report.site_enabled = self.ensure_site_enabled()
        report.service_enabled = self.ensure_service_enabled()
        report.service_serving = self.ensure_service_serving(
            reload_required=report.site_enabled is StepStatus.CREATED
        )
        return report

    def ensure_packages(self) -> PackageInstallResult:
        result = self.package_manager.ensure_installed(self.config.required_packages)
        if result.status is PackageStatus.DECLINED:
            raise MissingDependencyError(result.missing)
        return result

    def ensure_webroot(self) -> StepStatus:
        webroot = self.config.webroot
        if webroot.is_dir():
            return StepStatus.ALREADY_PRESENT

        try:
            webroot.mkdir(parents=True, exist_ok=True)
            if self.config.webroot_owner or self.config.webroot_group:
                shutil.chown(webroot, user=self.config.webroot_owner, group=self.config.webroot_group)
        except (OSError, LookupError) as e:
            raise InfrastructureError("create ACME webroot", detail=f"{webroot}: {e}") from e

        LOGGER.info("Created ACME webroot %s", webroot)
        return StepStatus.CREATED

    def ensure_site_config(self) -> StepStatus:
        site_config = self.config.site_config_path
        if site_config.exists():
            LOGGER.info("Keeping existing site config %s", site_config)
            return StepStatus.ALREADY_PRESENT

        try:
            site_config.parent.mkdir(parents=True, exist_ok=True)
            site_config.write_text(render_site_config(self.config.webroot))
        except OSError as e:
            raise InfrastructureError("write ACME site config", detail=f"{site_config}: {e}") from e

        LOGGER.info("Wrote ACME site config %s", site_config)
        return StepStatus.CREATED

    def ensure_site_enabled(self) -> StepStatus:
        site_name = self.config.site_name
        if self.web_server.is_site_enabled(site_name):
            return StepStatus.ALREADY_PRESENT

        result = self.web_server.enable_site(site_name)
        if not result.ok:
            raise InfrastructureError(f"enable site {site_name}", result)
        return StepStatus.CREATED

    def ensure_service_enabled(self) -> StepStatus:
        if self.web_server.is_enabled_at_boot():
            return StepStatus.ALREADY_PRESENT

        result = self.web_server.enable_at_boot()
        if not result.ok:
            raise InfrastructureError(f"enable {self.web_server.service} at boot", result)
        return StepStatus.CREATED

    def ensure_service_serving(self, reload_required: bool = False) -> StepStatus:
        """Make sure the web server runs with the current site set.

        Args:
            reload_required: Reload even if already running (a site was just enabled)
        """
        if not reload_required and self.web_server.is_active():
            return StepStatus.ALREADY_PRESENT

        result = self.web_server.reload_or_start()
        if not result.ok:
            raise InfrastructureError(f"reload or start {self.web_server.service}", result)
        return StepStatus.CREATED
