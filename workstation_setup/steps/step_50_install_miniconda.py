from __future__ import annotations

import logging
import tempfile
from pathlib import Path

from ..context import SetupContext
from ..lib.platform_detect import Platform
from ..pipeline import StepResult

logger = logging.getLogger(__name__)

_OS_NAME = {
    Platform.MACOS: "MacOSX",
    Platform.LINUX: "Linux",
}

# Miniconda spells 64-bit ARM differently per OS.
_ARCH_NAME = {
    (Platform.MACOS, "arm64"): "arm64",
    (Platform.LINUX, "arm64"): "aarch64",
}


def miniconda_prefix(ctx: SetupContext) -> Path:
    p = Path(ctx.config.miniconda_prefix).expanduser()
    return p if p.is_absolute() else ctx.home / p


def miniconda_url(ctx: SetupContext) -> str:
    arch = _ARCH_NAME.get((ctx.platform, ctx.arch), "x86_64")
    return f"{ctx.config.miniconda_mirror}/Miniconda3-latest-{_OS_NAME[ctx.platform]}-{arch}.sh"


class InstallMinicondaStep:
    step_id = "50_install_miniconda"
    title = "Install Miniconda"

    def run(self, ctx: SetupContext) -> StepResult:
        if ctx.which("conda"):
            return StepResult.succeeded(self.step_id, "Miniconda already installed")

        prefix = miniconda_prefix(ctx)
        conda = prefix / "bin" / "conda"
        if conda.exists():
            ctx.prepend_path(conda.parent)
            return StepResult.succeeded(self.step_id, f"Miniconda already installed at {prefix}")

        logger.info("Installing Miniconda...")
        url = miniconda_url(ctx)
        with tempfile.TemporaryDirectory(prefix="workstation-setup-") as tmp:
            installer = Path(tmp) / "miniconda.sh"
            ctx.run(["curl", "-L", url, "-o", str(installer)], capture=False)
            ctx.run(["bash", str(installer), "-b", "-p", str(prefix)], capture=False)
            if installer.exists():
                installer.unlink()

        ctx.run([str(conda), "init"])
        ctx.prepend_path(conda.parent)
        return StepResult.succeeded(self.step_id, f"Miniconda installed at {prefix}", changed=True)
