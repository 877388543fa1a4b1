from __future__ import annotations

import logging

from ..context import SetupContext
from ..pipeline import StepResult
from .step_40_install_homebrew import shell_profile

logger = logging.getLogger(__name__)


class FinishStep:
    step_id = "90_finish"
    title = "Finish"

    def run(self, ctx: SetupContext) -> StepResult:
        profile = shell_profile(ctx)
        fish = ctx.which("fish") or "fish"
        logger.info(
            "Setup complete! Please restart your terminal or run 'source %s'.",
            profile,
        )
        logger.info(
            "To use Fish shell, run 'fish' or set it as your default shell with 'chsh -s %s'",
            fish,
        )
        return StepResult.succeeded(self.step_id)
