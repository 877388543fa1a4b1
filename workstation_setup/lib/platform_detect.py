from __future__ import annotations

import enum
import platform
import sys
from typing import Mapping

from ..errors import PreconditionError


class Platform(str, enum.Enum):
    MACOS = "macOS"
    LINUX = "Linux"


def platform_identifier(environ: Mapping[str, str]) -> str:
    """Bash-style OSTYPE value for the running host.

    OSTYPE is a shell variable and is usually not exported, so fall back to
    sys.platform, spelled the way bash would spell it. Only glibc Linux is
    "linux-gnu"; musl and friends keep a plain "linux".
    """
    ostype = environ.get("OSTYPE")
    if ostype:
        return ostype
    if sys.platform == "linux":
        libc, _ = platform.libc_ver()
        return "linux-gnu" if libc == "glibc" else "linux"
    return sys.platform


def detect_platform(identifier: str) -> Platform:
    if identifier.startswith("darwin"):
        return Platform.MACOS
    if identifier.startswith("linux-gnu"):
        return Platform.LINUX
    raise PreconditionError(f"Unsupported OS: {identifier or '<unknown>'}")


def normalize_arch(machine: str) -> str:
    m = machine.lower()
    return {
        "x86_64": "x86_64",
        "amd64": "x86_64",
        "aarch64": "arm64",
        "arm64": "arm64",
    }.get(m, m)
