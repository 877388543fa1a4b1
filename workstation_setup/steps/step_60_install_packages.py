from __future__ import annotations

import logging

from ..context import SetupContext
from ..pipeline import StepResult
from .step_40_install_homebrew import brew_bin

logger = logging.getLogger(__name__)


class InstallPackagesStep:
    step_id = "60_install_packages"
    title = "Install packages"

    def run(self, ctx: SetupContext) -> StepResult:
        packages = ctx.config.packages
        if not packages:
            return StepResult.succeeded(self.step_id, "No packages requested")

        logger.info("Installing %s...", ", ".join(packages))
        brew = ctx.which("brew") or str(brew_bin(ctx))
        # Homebrew treats already-installed formulae as a no-op.
        ctx.run([brew, "install", *packages], capture=False)
        return StepResult.succeeded(self.step_id, f"Installed {' '.join(packages)}", changed=True)
