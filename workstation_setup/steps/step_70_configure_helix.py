from __future__ import annotations

import logging

from ..context import SetupContext
from ..lib.documents import HELIX_CONFIG_TOML, HELIX_THEME_TOML, THEME_NAME
from ..lib.files import write_document
from ..pipeline import StepResult

logger = logging.getLogger(__name__)


class ConfigureHelixStep:
    step_id = "70_configure_helix"
    title = "Configure Helix"

    def run(self, ctx: SetupContext) -> StepResult:
        logger.info("Configuring Helix...")
        config_dir = ctx.home / ".config" / "helix"
        themes_dir = config_dir / "themes"

        # Always overwrite: no merge with, or backup of, earlier content.
        write_document(config_dir / "config.toml", HELIX_CONFIG_TOML, dry_run=ctx.dry_run)
        write_document(themes_dir / f"{THEME_NAME}.toml", HELIX_THEME_TOML, dry_run=ctx.dry_run)
        return StepResult.succeeded(self.step_id, f"Helix configured ({config_dir})", changed=True)
