from __future__ import annotations

import logging
from typing import List, Protocol

from ..errors import ServiceManagerError
from .command import CommandError, fmt_argv, run_cmd

logger = logging.getLogger(__name__)


class ServiceManager(Protocol):
    def reload(self) -> None:
        """Make the service manager re-read its unit files.

        Raises ServiceManagerError on failure.
        """
        ...


class SystemdServiceManager:
    def __init__(self, systemctl: str = "systemctl", *, dry_run: bool = False) -> None:
        self.systemctl = systemctl
        self.dry_run = dry_run

    def reload(self) -> None:
        argv = [self.systemctl, "daemon-reload"]
        try:
            run_cmd(argv, dry_run=self.dry_run)
        except CommandError as e:
            raise ServiceManagerError(
                f"Service manager reload failed: {fmt_argv(argv)}",
                argv=argv,
                returncode=e.result.returncode,
                stderr=e.result.stderr,
            ) from e

    def manual_commands(self, unit_name: str) -> List[str]:
        """Commands left to the operator; the installer never runs these."""
        return [fmt_argv([self.systemctl, verb, unit_name]) for verb in ("start", "stop", "enable")]
