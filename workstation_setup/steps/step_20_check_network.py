from __future__ import annotations

import logging

from ..context import SetupContext
from ..lib.net import check_reachable
from ..pipeline import StepResult

logger = logging.getLogger(__name__)


class CheckNetworkStep:
    step_id = "20_check_network"
    title = "Check connectivity"

    def run(self, ctx: SetupContext) -> StepResult:
        url = ctx.config.network_check_url
        logger.info("Checking connectivity to %s for Homebrew...", url)

        if check_reachable(url, timeout_s=5, env=ctx.environ):
            return StepResult.succeeded(self.step_id, f"{url} is accessible.")

        # Never fatal: downloads later on may still work, just slowly.
        logger.warning(
            "Cannot reach %s. Installation may be slow or fail. "
            "Consider using a VPN or checking your network.",
            url,
        )
        return StepResult.succeeded(self.step_id, f"{url} unreachable (continuing)")
