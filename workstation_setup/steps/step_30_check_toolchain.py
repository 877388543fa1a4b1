from __future__ import annotations

import logging

from ..context import SetupContext
from ..errors import PreconditionError
from ..lib.platform_detect import Platform
from ..pipeline import StepResult

logger = logging.getLogger(__name__)


class CheckToolchainStep:
    """Xcode Command Line Tools are required on macOS (Homebrew needs them)."""

    step_id = "30_check_toolchain"
    title = "Check Xcode Command Line Tools"

    def run(self, ctx: SetupContext) -> StepResult:
        if ctx.platform is not Platform.MACOS:
            return StepResult.succeeded(self.step_id, "Toolchain check not applicable")

        probe = ctx.run(["xcode-select", "-p"], check=False)
        if probe.returncode == 0:
            return StepResult.succeeded(self.step_id, "Xcode Command Line Tools installed")

        logger.info("Xcode Command Line Tools are not installed. Installing them now...")
        # The installer is a GUI dialog that finishes on its own schedule.
        ctx.run(["xcode-select", "--install"], check=False, capture=False)
        raise PreconditionError(
            "Please follow the prompts to install Xcode Command Line Tools, then rerun this program."
        )
