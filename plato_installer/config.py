from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict


@dataclass(frozen=True)
class InstallConfig:
    install_root: str = "/home/root/plato"
    unit_name: str = "plato.service"
    unit_dir: str = "/etc/systemd/system"
    data_dir_name: str = "books"
    home_env: str = "HOME"
    systemctl: str = "systemctl"

    def bundled_unit(self, run_dir: str) -> Path:
        return Path(run_dir) / self.unit_name

    @property
    def unit_target(self) -> Path:
        return Path(self.unit_dir) / self.unit_name


DEFAULT_CONFIG = InstallConfig()


def _is_plain_name(name: str) -> bool:
    return name not in {".", ".."} and "/" not in name and "\0" not in name


def config_from_mapping(raw: Dict[str, Any]) -> InstallConfig:
    known = {f.name for f in dataclasses.fields(InstallConfig)}
    unknown = sorted(set(raw) - known)
    if unknown:
        raise ValueError(f"Unknown config keys: {', '.join(unknown)}")

    values: Dict[str, str] = {}
    for key, value in raw.items():
        if not isinstance(value, str) or not value.strip():
            raise ValueError(f"config.{key} must be a non-empty string")
        values[key] = value.strip()

    if "install_root" in values and not Path(values["install_root"]).is_absolute():
        raise ValueError("config.install_root must be an absolute path")
    for key in ("data_dir_name", "unit_name"):
        if key in values and not _is_plain_name(values[key]):
            raise ValueError(f"config.{key} must be a single file or directory name, got {values[key]!r}")

    return InstallConfig(**values)


def load_install_config(path: str) -> InstallConfig:
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(path)

    if p.suffix.lower() not in {".yaml", ".yml"}:
        raise ValueError("install config must be YAML")

    try:
        import yaml  # type: ignore
    except Exception as e:
        raise RuntimeError("PyYAML is required to read the install config") from e

    try:
        raw = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as e:
        raise ValueError(f"install config is not valid YAML: {e}") from e
    if not isinstance(raw, dict):
        raise ValueError("install config must contain a mapping/object")

    return config_from_mapping(raw)
