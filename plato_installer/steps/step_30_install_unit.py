from __future__ import annotations

import logging
from typing import Any, Dict

from ..config import InstallConfig
from ..errors import FilesystemError, PreconditionError
from ..lib.filesystem import FileSystem
from ..lib.units import validate_unit

logger = logging.getLogger(__name__)


class InstallUnitStep:
    """Copy the bundled unit over whatever is registered (last write wins)."""

    step_id = "30_install_unit"
    phase = "UNIT_INSTALLED"

    def __init__(self, config: InstallConfig, fs: FileSystem, run_dir: str) -> None:
        self.config = config
        self.fs = fs
        self.run_dir = run_dir

    def run(self, state: Dict[str, Any]) -> Dict[str, Any]:
        src = self.config.bundled_unit(self.run_dir)
        dst = self.config.unit_target

        if not self.fs.exists(src):
            raise FilesystemError("Bundled service unit not found", str(src))

        try:
            text = self.fs.read_text(src)
        except (OSError, UnicodeDecodeError) as e:
            raise FilesystemError(f"Failed to read bundled service unit ({e})", str(src)) from e

        try:
            validate_unit(text, str(src))
        except ValueError as e:
            raise PreconditionError(f"Bundled service unit is not loadable: {e}") from e

        try:
            self.fs.copy_file(src, dst)
        except OSError as e:
            raise FilesystemError(f"Failed to install service unit ({e.strerror or e})", str(dst)) from e

        decisions = state.setdefault("execution", {}).setdefault("decisions", {})
        decisions["unit_source"] = str(src)
        decisions["unit_target"] = str(dst)
        logger.info("Installed %s -> %s", str(src), str(dst))
        return state
