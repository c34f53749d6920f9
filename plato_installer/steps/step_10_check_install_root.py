from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict

from ..config import InstallConfig
from ..errors import PathMismatchError

logger = logging.getLogger(__name__)


class CheckInstallRootStep:
    """Refuse to go further unless the tarball was unpacked in the canonical root.

    Read-only: nothing may be touched before this check passes.
    """

    step_id = "10_check_install_root"
    phase = "PATH_CHECKED"

    def __init__(self, config: InstallConfig, run_dir: str) -> None:
        self.config = config
        self.run_dir = run_dir

    def run(self, state: Dict[str, Any]) -> Dict[str, Any]:
        actual = str(Path(self.run_dir).resolve())
        expected = self.config.install_root.rstrip("/") or "/"

        if actual != expected:
            raise PathMismatchError(actual, expected)

        state.setdefault("execution", {}).setdefault("decisions", {})["install_root"] = actual
        logger.info("Install root OK (%s)", actual)
        return state
