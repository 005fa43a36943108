"""Apache site and systemd service control."""

from pathlib import Path

from .command import CommandRunner
from .models import CommandResult


class WebServerControl:
    """Controls one Apache site and its systemd unit."""

    def __init__(
        self,
        service: str = "apache2",
        sites_enabled_dir: Path = Path("/etc/apache2/sites-enabled"),
        runner: CommandRunner | None = None,
    ) -> None:
        self.service = service
        self.sites_enabled_dir = sites_enabled_dir
        self.runner = runner or CommandRunner()

    def is_site_enabled(self, site_name: str) -> bool:
        return (self.sites_enabled_dir / site_name).exists()

    def enable_site(self, site_name: str) -> CommandResult:
        return self.runner.run(["a2ensite", site_name])

    def is_enabled_at_boot(self) -> bool:
        return self.runner.run(["systemctl", "is-enabled", "--quiet", self.service]).ok

    def enable_at_boot(self) -> CommandResult:
        return self.runner.run(["systemctl", "enable", self.service])

    def is_active(self) -> bool:
        return self.runner.run(["systemctl", "is-active", "--quiet", self.service]).ok

    def reload(self) -> CommandResult:
        return self.runner.run(["systemctl", "reload", self.service])

    def start(self) -> CommandResult:
        return self.runner.run(["systemctl", "start", self.service])

    def restart(self) -> CommandResult:
        return self.runner.run(["systemctl", "restart", self.service])

    def reload_or_start(self) -> CommandResult:
        """Reload a running service so it serves new sites, start a stopped one.

        A failed reload falls back to a full restart.
        """
        if not self.is_active():
            return self.start()
        result = self.reload()
        if result.ok:
            return result
        return self.restart()
