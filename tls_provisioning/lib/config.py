"""Provisioning configuration dataclasses."""

from dataclasses import dataclass
from pathlib import Path


@dataclass
class ProvisioningConfig:
    """Host layout for certificate lookup and ACME webroot issuance."""

    live_dir: Path = Path("/etc/letsencrypt/live")
    search_all_stores: bool = False
    webroot: Path = Path("/var/www/acme")
    webroot_owner: str | None = "www-data"
    webroot_group: str | None = "www-data"
    sites_available_dir: Path = Path("/etc/apache2/sites-available")
    sites_enabled_dir: Path = Path("/etc/apache2/sites-enabled")
    site_name: str = "acme.conf"
    web_service: str = "apache2"
    required_packages: tuple[str, ...] = ("certbot", "apache2")
    certbot_bin: str = "certbot"
    certbot_extra_args: tuple[str, ...] = ()

    @property
    def site_config_path(self) -> Path:
        """Path of the ACME challenge vhost in sites-available."""
        return self.sites_available_dir / self.site_name
