from __future__ import annotations

import json
import logging
import os
import shlex
import shutil
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Mapping, Optional, Sequence

from .config import SetupConfig
from .errors import ExternalCommandError
from .lib.command import CmdResult, run_cmd
from .lib.platform_detect import Platform

logger = logging.getLogger(__name__)

_DUMP_ENV = "import json, os; print(json.dumps(dict(os.environ)))"


@dataclass
class SetupContext:
    """Environment threaded through every step.

    Holds a private copy of the process environment. Installers update it
    (PATH, shellenv exports) so later steps in the same run can resolve the
    executables they just installed.
    """

    platform: Platform
    environ: Dict[str, str]
    config: SetupConfig = field(default_factory=SetupConfig)
    dry_run: bool = False
    arch: str = "x86_64"

    @classmethod
    def from_environ(
        cls,
        platform: Platform,
        environ: Mapping[str, str],
        **kwargs,
    ) -> "SetupContext":
        return cls(platform=platform, environ=dict(environ), **kwargs)

    @property
    def home(self) -> Path:
        home = self.environ.get("HOME")
        return Path(home) if home else Path.home()

    @property
    def user(self) -> str:
        return self.environ.get("USER") or self.environ.get("LOGNAME") or self.home.name

    @property
    def path_entries(self) -> List[str]:
        return [p for p in self.environ.get("PATH", "").split(os.pathsep) if p]

    def which(self, name: str) -> Optional[str]:
        return shutil.which(name, path=self.environ.get("PATH", ""))

    def prepend_path(self, directory: str | Path) -> None:
        d = str(directory)
        entries = [p for p in self.path_entries if p != d]
        self.environ["PATH"] = os.pathsep.join([d, *entries])
        logger.info("PATH += %s", d)

    def run(self, argv: Sequence[str], **kwargs) -> CmdResult:
        return run_cmd(argv, env=self.environ, dry_run=self.dry_run, **kwargs)

    def load_shell_env(self, snippet: str) -> None:
        """Evaluate a shell snippet and adopt the environment it leaves behind."""

        if self.dry_run:
            logger.info("Would load shell environment from: %s", snippet)
            return

        dump = f"{shlex.quote(sys.executable)} -c {shlex.quote(_DUMP_ENV)}"
        r = self.run(["bash", "-c", f"{snippet} && {dump}"])
        try:
            env = json.loads(r.stdout)
        except ValueError as e:
            raise ExternalCommandError(
                f"Could not read environment after: {snippet}", argv=r.argv, returncode=r.returncode
            ) from e
        if not isinstance(env, dict):
            raise ExternalCommandError(
                f"Could not read environment after: {snippet}", argv=r.argv, returncode=r.returncode
            )
        self.environ = {str(k): str(v) for k, v in env.items()}
        logger.info("Loaded shell environment (PATH=%s)", self.environ.get("PATH", ""))
