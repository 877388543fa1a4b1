from __future__ import annotations

import argparse
import logging
import os
import platform
import sys
from typing import List, Mapping, Optional

from .config import SetupConfig, load_setup_config
from .context import SetupContext
from .errors import SetupError
from .lib.platform_detect import Platform, detect_platform, normalize_arch, platform_identifier
from .lib.privileges import ensure_not_root
from .logging_utils import DEFAULT_LOG_PATH, configure_logging
from .pipeline import PipelineResult, Step, run_pipeline
from .steps import (
    CheckNetworkStep,
    CheckToolchainStep,
    ConfigureHelixStep,
    ConfigurePipMirrorStep,
    FinishStep,
    InstallHomebrewStep,
    InstallMinicondaStep,
    InstallPackagesStep,
)

logger = logging.getLogger(__name__)


def build_steps(*, pip_mirror: bool = False) -> List[Step]:
    steps: List[Step] = [
        CheckNetworkStep(),
        CheckToolchainStep(),
        InstallHomebrewStep(),
        InstallMinicondaStep(),
    ]
    if pip_mirror:
        steps.append(ConfigurePipMirrorStep())
    steps += [
        InstallPackagesStep(),
        ConfigureHelixStep(),
        FinishStep(),
    ]
    return steps


def run(
    *,
    environ: Mapping[str, str],
    config: Optional[SetupConfig] = None,
    dry_run: bool = False,
    pip_mirror: bool = False,
    start_at: Optional[str] = None,
    stop_after: Optional[str] = None,
) -> PipelineResult:
    """Detect the platform, then run the provisioning steps in order."""

    config = config or SetupConfig()

    detected: Platform = detect_platform(platform_identifier(environ))
    logger.info("Detected OS: %s", detected.value)

    ctx = SetupContext.from_environ(
        detected,
        environ,
        config=config,
        dry_run=dry_run,
        arch=normalize_arch(platform.machine()),
    )
    steps = build_steps(pip_mirror=pip_mirror or config.pip_mirror_enabled)
    return run_pipeline(ctx=ctx, steps=steps, start_at=start_at, stop_after=stop_after)


def main(argv: Optional[list[str]] = None, environ: Optional[Mapping[str, str]] = None) -> int:
    p = argparse.ArgumentParser(prog="workstation-setup")
    p.add_argument("--config", default=None, help="Path to a YAML config file")
    p.add_argument("--log", default=DEFAULT_LOG_PATH, help="Path to the setup log")
    p.add_argument("--dry-run", action="store_true", help="Log commands and files without executing/writing")
    p.add_argument("--enable-pip-mirror", action="store_true", help="Also write ~/.pip/pip.conf")
    p.add_argument("--start-at", default=None, help="Start at step_id (e.g. 50_install_miniconda)")
    p.add_argument("--stop-after", default=None, help="Stop after step_id")
    p.add_argument("--verbose", action="store_true", help="Show command output on the console")

    args = p.parse_args(argv)
    environ = dict(os.environ if environ is None else environ)

    # Checked before anything else so a root run leaves no trace.
    try:
        ensure_not_root()
    except SetupError as e:
        print(f"Error: {e}", file=sys.stderr)
        return e.exit_code

    configure_logging(args.log, verbose=bool(args.verbose))

    try:
        result = run(
            environ=environ,
            config=load_setup_config(args.config),
            dry_run=bool(args.dry_run),
            pip_mirror=bool(args.enable_pip_mirror),
            start_at=args.start_at,
            stop_after=args.stop_after,
        )
    except SetupError as e:
        logger.error("Error: %s", e)
        return e.exit_code
    except Exception:
        logger.exception("Setup failed")
        raise

    return result.exit_code


if __name__ == "__main__":
    raise SystemExit(main())
