from __future__ import annotations

import shutil
from pathlib import Path
from typing import List, Tuple

import pytest

from plato_installer.config import InstallConfig
from plato_installer.errors import ServiceManagerError

UNIT_TEXT = """[Unit]
Description=Plato document reader

[Service]
ExecStart=/home/root/plato/plato.sh
Restart=on-failure

[Install]
WantedBy=multi-user.target
"""


class FakeServiceManager:
    def __init__(self, events: List[Tuple[str, str]], *, fail: bool = False) -> None:
        self.events = events
        self.fail = fail
        self.reloads = 0

    def reload(self) -> None:
        self.events.append(("reload", ""))
        if self.fail:
            raise ServiceManagerError("Service manager reload failed", argv=["systemctl", "daemon-reload"], returncode=1)
        self.reloads += 1


class RecordingFileSystem:
    """Real filesystem under tmp_path, with every call recorded."""

    def __init__(self, events: List[Tuple[str, str]], *, copy_error: OSError | None = None) -> None:
        self.events = events
        self.copy_error = copy_error

    def exists(self, path: Path) -> bool:
        return path.exists()

    def is_dir(self, path: Path) -> bool:
        return path.is_dir()

    def read_text(self, path: Path) -> str:
        return path.read_text(encoding="utf-8")

    def mkdir(self, path: Path) -> None:
        self.events.append(("mkdir", str(path)))
        path.mkdir()

    def copy_file(self, src: Path, dst: Path) -> None:
        if self.copy_error is not None:
            raise self.copy_error
        shutil.copy2(src, dst)
        self.events.append(("copy", str(dst)))

    @property
    def mutations(self) -> List[Tuple[str, str]]:
        return [e for e in self.events if e[0] in {"mkdir", "copy"}]


@pytest.fixture
def events() -> List[Tuple[str, str]]:
    return []


@pytest.fixture
def layout(tmp_path):
    """An unpacked tarball, a home directory and a unit directory under tmp_path."""

    root = tmp_path.resolve()
    install_root = root / "home-root" / "plato"
    install_root.mkdir(parents=True)
    (install_root / "plato.service").write_text(UNIT_TEXT, encoding="utf-8")

    home = root / "home-root"
    unit_dir = root / "etc" / "systemd" / "system"
    unit_dir.mkdir(parents=True)

    config = InstallConfig(install_root=str(install_root), unit_dir=str(unit_dir))
    return {
        "config": config,
        "install_root": install_root,
        "home": home,
        "unit_dir": unit_dir,
        "environ": {"HOME": str(home)},
    }
