from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Mapping

from ..config import InstallConfig
from ..errors import FilesystemError, PreconditionError
from ..lib.filesystem import FileSystem

logger = logging.getLogger(__name__)


def resolve_home(environ: Mapping[str, str], home_env: str) -> Path:
    home = (environ.get(home_env) or "").strip()
    if not home:
        raise PreconditionError(f"${home_env} is not set; cannot locate the user's home directory")
    p = Path(home)
    if not p.is_absolute():
        raise PreconditionError(f"${home_env} must be an absolute path, got {home!r}")
    return p


class EnsureDataDirStep:
    step_id = "20_ensure_data_dir"
    phase = "DIR_ENSURED"

    def __init__(self, config: InstallConfig, fs: FileSystem, environ: Mapping[str, str]) -> None:
        self.config = config
        self.fs = fs
        self.environ = environ

    def run(self, state: Dict[str, Any]) -> Dict[str, Any]:
        data_dir = resolve_home(self.environ, self.config.home_env) / self.config.data_dir_name
        decisions = state.setdefault("execution", {}).setdefault("decisions", {})
        decisions["data_dir"] = str(data_dir)

        if self.fs.is_dir(data_dir):
            decisions["data_dir_created"] = False
            logger.info("Data directory already present (%s)", str(data_dir))
            return state

        if self.fs.exists(data_dir):
            raise FilesystemError("Data path exists but is not a directory", str(data_dir))

        try:
            self.fs.mkdir(data_dir)
        except OSError as e:
            raise FilesystemError(f"Failed to create data directory ({e.strerror or e})", str(data_dir)) from e

        decisions["data_dir_created"] = True
        logger.info("Created data directory %s", str(data_dir))
        return state
