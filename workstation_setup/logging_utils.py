from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import List, Optional

DEFAULT_LOG_PATH = "~/.local/state/workstation-setup/setup.log"

_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

# Handlers installed by the last configure_logging() call.
_installed: List[logging.Handler] = []


def _open_log_file(path: str) -> Optional[logging.FileHandler]:
    try:
        Path(os.path.dirname(path) or ".").mkdir(parents=True, exist_ok=True)
        return logging.FileHandler(path, encoding="utf-8")
    except OSError:
        return None


def configure_logging(log_path: str = DEFAULT_LOG_PATH, *, verbose: bool = False) -> Optional[str]:
    """Send everything to the log file and a summary to the console.

    The file always gets DEBUG (command stdout/stderr); the console gets INFO
    unless verbose. Falls back to ./workstation-setup.log, then to console only.
    Calling again replaces the handlers from the previous call.

    Returns the log file in use, or None when no file could be opened.
    """

    root = logging.getLogger()
    for h in _installed:
        root.removeHandler(h)
        h.close()
    _installed.clear()

    fmt = logging.Formatter(fmt=_FORMAT, datefmt="%Y-%m-%dT%H:%M:%S%z")
    root.setLevel(logging.DEBUG)

    console = logging.StreamHandler()
    console.setLevel(logging.DEBUG if verbose else logging.INFO)
    console.setFormatter(fmt)
    _installed.append(console)

    requested = os.path.expanduser(log_path)
    chosen: Optional[str] = None
    for candidate in (requested, str(Path.cwd() / "workstation-setup.log")):
        file_handler = _open_log_file(candidate)
        if file_handler is not None:
            file_handler.setLevel(logging.DEBUG)
            file_handler.setFormatter(fmt)
            _installed.append(file_handler)
            chosen = candidate
            break

    for h in _installed:
        root.addHandler(h)

    log = logging.getLogger(__name__)
    if chosen is None:
        log.warning("Cannot open a log file (tried %s); logging to console only", requested)
    elif chosen != requested:
        log.warning("Cannot open %s; logging to %s", requested, chosen)
    else:
        log.debug("Logging to %s", chosen)
    return chosen
