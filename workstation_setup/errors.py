from __future__ import annotations

from typing import Sequence


class SetupError(RuntimeError):
    """Fatal error: the run stops and the process exits non-zero."""

    exit_code = 1


class PreconditionError(SetupError):
    pass


class ConfigError(SetupError):
    pass


class ConfigPermissionError(SetupError):
    pass


class ConfigWriteError(SetupError):
    pass


class ExternalCommandError(SetupError):
    def __init__(self, message: str, *, argv: Sequence[str], returncode: int | None) -> None:
        super().__init__(message)
        self.argv = list(argv)
        self.returncode = returncode
