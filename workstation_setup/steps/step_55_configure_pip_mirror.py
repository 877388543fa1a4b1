from __future__ import annotations

import logging
import os

from ..context import SetupContext
from ..errors import ConfigPermissionError
from ..lib.documents import pip_conf
from ..lib.files import write_document
from ..pipeline import StepResult

logger = logging.getLogger(__name__)


class ConfigurePipMirrorStep:
    """Point pip at a package-index mirror.

    Off unless enabled in config or on the command line.
    """

    step_id = "55_configure_pip_mirror"
    title = "Configure pip mirror"

    def run(self, ctx: SetupContext) -> StepResult:
        cfg = ctx.config
        config_dir = ctx.home / ".pip"
        config_file = config_dir / "pip.conf"
        logger.info("Configuring pip to use %s...", cfg.pip_index_url)

        if config_dir.is_dir() and not os.access(config_dir, os.W_OK):
            logger.info("Fixing permissions for %s...", config_dir)
            fixed = ctx.run(["chmod", "-R", "u+w", str(config_dir)], check=False)
            if fixed.returncode != 0 or not (ctx.dry_run or os.access(config_dir, os.W_OK)):
                raise ConfigPermissionError(
                    f"Cannot fix permissions for {config_dir}. "
                    f"Try running 'sudo chown -R {ctx.user} {config_dir}' and rerun this program."
                )

        write_document(config_file, pip_conf(cfg.pip_index_url, cfg.pip_trusted_host), dry_run=ctx.dry_run)
        return StepResult.succeeded(self.step_id, f"pip configured ({config_file})", changed=True)
