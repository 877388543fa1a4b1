from __future__ import annotations

import logging
from pathlib import Path

from ..errors import ConfigWriteError

logger = logging.getLogger(__name__)


def has_line(profile: Path, line: str) -> bool:
    if not profile.exists():
        return False
    try:
        existing = profile.read_text(encoding="utf-8", errors="replace").splitlines()
    except OSError as e:
        raise ConfigWriteError(f"Cannot read {profile}: {e}") from e
    return line.strip() in (ln.strip() for ln in existing)


def append_line(profile: Path, line: str, *, dry_run: bool = False) -> bool:
    """Append a line to a shell profile unless it is already there.

    Returns True if the file was changed.
    """

    if has_line(profile, line):
        logger.info("%s already contains: %s", profile, line)
        return False

    if dry_run:
        logger.info("Would append to %s: %s", profile, line)
        return True

    try:
        profile.parent.mkdir(parents=True, exist_ok=True)
        prefix = ""
        if profile.exists():
            content = profile.read_text(encoding="utf-8", errors="replace")
            if content and not content.endswith("\n"):
                prefix = "\n"
        with profile.open("a", encoding="utf-8") as f:
            f.write(f"{prefix}{line}\n")
    except OSError as e:
        raise ConfigWriteError(
            f"Failed to append to {profile}: {e}. Add this line yourself and rerun: {line}"
        ) from e
    logger.info("Appended to %s: %s", profile, line)
    return True
