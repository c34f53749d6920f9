from __future__ import annotations

import logging
import shutil
from pathlib import Path
from typing import Protocol

logger = logging.getLogger(__name__)


class FileSystem(Protocol):
    """The filesystem operations the installer needs.

    Implementations raise OSError on failure; steps translate it.
    """

    def exists(self, path: Path) -> bool:
        ...

    def is_dir(self, path: Path) -> bool:
        ...

    def read_text(self, path: Path) -> str:
        ...

    def mkdir(self, path: Path) -> None:
        ...

    def copy_file(self, src: Path, dst: Path) -> None:
        ...


class LocalFileSystem:
    def __init__(self, *, dry_run: bool = False) -> None:
        self.dry_run = dry_run

    def exists(self, path: Path) -> bool:
        return path.exists()

    def is_dir(self, path: Path) -> bool:
        return path.is_dir()

    def read_text(self, path: Path) -> str:
        return path.read_text(encoding="utf-8")

    def mkdir(self, path: Path) -> None:
        # Single level only; the parent is expected to exist.
        if self.dry_run:
            logger.info("Would create directory %s", str(path))
            return
        path.mkdir()

    def copy_file(self, src: Path, dst: Path) -> None:
        if self.dry_run:
            logger.info("Would copy %s -> %s", str(src), str(dst))
            return
        shutil.copy2(src, dst)
