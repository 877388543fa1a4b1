from .step_20_check_network import CheckNetworkStep
from .step_30_check_toolchain import CheckToolchainStep
from .step_40_install_homebrew import InstallHomebrewStep
from .step_50_install_miniconda import InstallMinicondaStep
from .step_55_configure_pip_mirror import ConfigurePipMirrorStep
from .step_60_install_packages import InstallPackagesStep
from .step_70_configure_helix import ConfigureHelixStep
from .step_90_finish import FinishStep

__all__ = [
    "CheckNetworkStep",
    "CheckToolchainStep",
    "InstallHomebrewStep",
    "InstallMinicondaStep",
    "ConfigurePipMirrorStep",
    "InstallPackagesStep",
    "ConfigureHelixStep",
    "FinishStep",
]
