from __future__ import annotations

import logging
import tempfile
from pathlib import Path

from ..context import SetupContext
from ..lib.platform_detect import Platform
from ..lib.shell_profile import append_line
from ..pipeline import StepResult

logger = logging.getLogger(__name__)

_DEFAULT_PREFIX = {
    Platform.MACOS: "/opt/homebrew",
    Platform.LINUX: "/home/linuxbrew/.linuxbrew",
}

_PROFILE = {
    Platform.MACOS: ".zshrc",
    Platform.LINUX: ".bashrc",
}


def brew_prefix(ctx: SetupContext) -> Path:
    return Path(ctx.config.homebrew_prefix or _DEFAULT_PREFIX[ctx.platform])


def brew_bin(ctx: SetupContext) -> Path:
    return brew_prefix(ctx) / "bin" / "brew"


def shell_profile(ctx: SetupContext) -> Path:
    return ctx.home / _PROFILE[ctx.platform]


def shellenv_line(ctx: SetupContext) -> str:
    return f'eval "$({brew_bin(ctx)} shellenv)"'


class InstallHomebrewStep:
    step_id = "40_install_homebrew"
    title = "Install Homebrew"

    def run(self, ctx: SetupContext) -> StepResult:
        if ctx.which("brew"):
            return StepResult.succeeded(self.step_id, "Homebrew already installed")

        if brew_bin(ctx).exists():
            # Installed by an earlier run, but this shell never sourced the profile.
            ctx.load_shell_env(shellenv_line(ctx))
            return StepResult.succeeded(self.step_id, f"Homebrew already installed at {brew_prefix(ctx)}")

        logger.info("Installing Homebrew...")
        with tempfile.TemporaryDirectory(prefix="workstation-setup-") as tmp:
            installer = Path(tmp) / "install.sh"
            ctx.run(["curl", "-fsSL", ctx.config.homebrew_install_url, "-o", str(installer)])
            # Run by path so the script body never ends up in the command log.
            ctx.run(["/bin/bash", str(installer)], capture=False)

        line = shellenv_line(ctx)
        append_line(shell_profile(ctx), line, dry_run=ctx.dry_run)
        ctx.load_shell_env(line)
        if not ctx.which("brew"):
            ctx.prepend_path(brew_bin(ctx).parent)

        # Make sure the repositories are set up.
        ctx.run([str(brew_bin(ctx)), "update"], capture=False)
        return StepResult.succeeded(self.step_id, "Homebrew installed", changed=True)
