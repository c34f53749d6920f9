from .step_10_check_install_root import CheckInstallRootStep
from .step_20_ensure_data_dir import EnsureDataDirStep
from .step_30_install_unit import InstallUnitStep
from .step_40_reload_service_manager import ReloadServiceManagerStep

__all__ = [
    "CheckInstallRootStep",
    "EnsureDataDirStep",
    "InstallUnitStep",
    "ReloadServiceManagerStep",
]
