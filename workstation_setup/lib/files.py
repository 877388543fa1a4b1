from __future__ import annotations

import logging
from pathlib import Path

from ..errors import ConfigWriteError

logger = logging.getLogger(__name__)


def write_document(path: Path, content: str, *, dry_run: bool = False) -> None:
    """Write a fixed document verbatim, replacing whatever was there."""

    if dry_run:
        logger.info("Would write %s", path)
        return

    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        # newline="" keeps the bytes identical on every platform.
        with path.open("w", encoding="utf-8", newline="") as f:
            f.write(content)
    except OSError as e:
        raise ConfigWriteError(f"Failed to write to {path}: {e}. Check permissions and try again.") from e
    logger.info("Wrote %s", path)
