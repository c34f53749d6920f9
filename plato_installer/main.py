from __future__ import annotations

import argparse
import logging
import os
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

from .config import DEFAULT_CONFIG, InstallConfig, load_install_config
from .errors import InstallerError
from .lib.filesystem import FileSystem, LocalFileSystem
from .lib.service_manager import ServiceManager, SystemdServiceManager
from .logging_utils import configure_logging
from .pipeline import run_pipeline
from .steps import (
    CheckInstallRootStep,
    EnsureDataDirStep,
    InstallUnitStep,
    ReloadServiceManagerStep,
)

logger = logging.getLogger(__name__)


def default_run_dir() -> str:
    """Directory the installer was unpacked into (the one holding this package)."""
    return str(Path(__file__).resolve().parent.parent)


def build_steps(
    *,
    config: InstallConfig,
    run_dir: str,
    fs: FileSystem,
    manager: ServiceManager,
    environ: Mapping[str, str],
):
    # Order matters: nothing is mutated before the root check, and the
    # reload only happens once the unit is on disk.
    return [
        CheckInstallRootStep(config, run_dir),
        EnsureDataDirStep(config, fs, environ),
        InstallUnitStep(config, fs, run_dir),
        ReloadServiceManagerStep(manager),
    ]


def run(
    *,
    config: InstallConfig = DEFAULT_CONFIG,
    run_dir: Optional[str] = None,
    fs: Optional[FileSystem] = None,
    manager: Optional[ServiceManager] = None,
    environ: Optional[Mapping[str, str]] = None,
    dry_run: bool = False,
) -> Dict[str, Any]:
    """Run the install; raises InstallerError at the first failing step."""

    state: Dict[str, Any] = {
        "config": {"dry_run": dry_run, "install_root": config.install_root},
        "execution": {"decisions": {}},
    }

    steps = build_steps(
        config=config,
        run_dir=run_dir or default_run_dir(),
        fs=fs if fs is not None else LocalFileSystem(dry_run=dry_run),
        manager=manager if manager is not None else SystemdServiceManager(config.systemctl, dry_run=dry_run),
        environ=environ if environ is not None else os.environ,
    )

    result = run_pipeline(state=state, steps=steps)
    result.state["execution"]["ran_steps"] = result.ran_steps
    return result.state


def main(argv: Optional[list[str]] = None) -> int:
    p = argparse.ArgumentParser(
        prog="install.py",
        description="Register Plato as a systemd service. Run from the unpacked tarball.",
    )
    p.add_argument("--config", default=None, help="YAML file overriding install paths")
    p.add_argument("--log", default=None, help="Also write the log to this file")
    p.add_argument("--dry-run", action="store_true", help="Log what would change without changing it")
    p.add_argument("-v", "--verbose", action="store_true", help="Debug logging")

    args = p.parse_args(argv)

    configure_logging(log_path=args.log, level=logging.DEBUG if args.verbose else logging.INFO)

    try:
        config = load_install_config(args.config) if args.config else DEFAULT_CONFIG
    except (OSError, ValueError, RuntimeError) as e:
        logger.error("Cannot load config %s: %s", args.config, e)
        return 1

    try:
        run(config=config, dry_run=args.dry_run)
    except InstallerError as e:
        logger.error("Install failed at step %s (%s): %s", e.step_id, e.phase, e)
        return 1
    except Exception:
        logger.exception("Installer failed")
        raise

    if args.dry_run:
        logger.info("Dry run complete; nothing was changed. Rerun without --dry-run to install %s", config.unit_name)
        return 0
    hints = SystemdServiceManager(config.systemctl).manual_commands(config.unit_name)
    logger.info("Installed %s. Start it with: %s", config.unit_name, hints[0])
    logger.info("Stop with: %s; start at boot with: %s", hints[1], hints[2])
    return 0
