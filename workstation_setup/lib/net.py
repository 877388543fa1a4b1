from __future__ import annotations

import logging
from typing import Mapping

from .command import run_cmd

logger = logging.getLogger(__name__)


def check_reachable(url: str, *, timeout_s: int = 5, env: Mapping[str, str] | None = None) -> bool:
    """Best-effort HEAD request. Never raises.

    Read-only, so it also runs in dry-run mode.
    """

    try:
        r = run_cmd(["curl", "-I", "--connect-timeout", str(timeout_s), url], check=False, env=env)
        return r.returncode == 0
    except Exception:
        logger.debug("Reachability probe for %s failed", url, exc_info=True)
        return False
