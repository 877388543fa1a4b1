from __future__ import annotations

import os
from typing import Optional

from ..errors import PreconditionError


def ensure_not_root(euid: Optional[int] = None) -> None:
    if euid is None:
        geteuid = getattr(os, "geteuid", None)
        euid = geteuid() if geteuid is not None else -1
    if euid == 0:
        raise PreconditionError(
            "This program must not be run as root. "
            "Run it as a regular user, e.g. 'workstation-setup'."
        )
