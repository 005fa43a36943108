"""Certbot invocation in webroot mode."""

from collections.abc import Sequence
from pathlib import Path

from .command import CommandRunner
from .models import CommandResult


class AcmeClient:
    """Certbot command-line client."""

    def __init__(
        self,
        certbot_bin: str = "certbot",
        extra_args: Sequence[str] = (),
        runner: CommandRunner | None = None,
    ) -> None:
        """Initialize ACME client.

        Args:
            certbot_bin: Certbot executable
            extra_args: Appended to every certonly call (e.g. --non-interactive)
            runner: Command runner used for the certbot process
        """
        self.certbot_bin = certbot_bin
        self.extra_args = tuple(extra_args)
        self.runner = runner or CommandRunner()

    def build_command(self, domains: Sequence[str], webroot: Path) -> list[str]:
        """Build the certonly command requesting all domains as one certificate."""
        command = [self.certbot_bin, "certonly", "--webroot", "-w", str(webroot)]
        for domain in domains:
            command.extend(["-d", domain])
        command.extend(self.extra_args)
        return command

    def obtain_certificate(self, domains: Sequence[str], webroot: Path) -> CommandResult:
        """Request one certificate for domains via the HTTP-01 webroot challenge.

        Stdout stays on the terminal so certbot can prompt the operator;
        stderr is captured for error reporting.

        Returns:
            CommandResult; returncode 0 means the store now exists under the
            first domain's name
        """
        return self.runner.run(self.build_command(domains, webroot), capture_stdout=False)
