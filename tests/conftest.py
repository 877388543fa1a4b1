"""Shared fixtures: a fake shell instead of real subprocesses, and a fake home."""

from __future__ import annotations

import json
import os
import subprocess
from pathlib import Path
from typing import Callable, Dict, List, Optional, Sequence

import pytest

from workstation_setup.config import SetupConfig
from workstation_setup.context import SetupContext
from workstation_setup.lib import command
from workstation_setup.lib.platform_detect import Platform

Effect = Callable[[List[str], Dict[str, str]], Optional[str]]


def make_executable(path: Path) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text("#!/bin/sh\nexit 0\n", encoding="utf-8")
    path.chmod(0o755)
    return path


class FakeShell:
    """Stands in for subprocess.run and records every argv.

    Rules match on an argv prefix; the most recently added rule wins.
    An effect may touch the filesystem and may return replacement stdout.
    """

    def __init__(self) -> None:
        self.calls: List[List[str]] = []
        self.envs: List[Dict[str, str]] = []
        self._rules: List[tuple] = []

    def on(self, *prefix: str, returncode: int = 0, stdout: str = "", effect: Optional[Effect] = None) -> None:
        self._rules.append((list(prefix), returncode, stdout, effect))

    def missing(self, *prefix: str) -> None:
        self._rules.append((list(prefix), None, "", None))

    def __call__(self, argv: Sequence[str], **kwargs) -> subprocess.CompletedProcess:
        argv = list(argv)
        env = dict(kwargs.get("env") or {})
        self.calls.append(argv)
        self.envs.append(env)

        rc, out = 0, ""
        for prefix, returncode, stdout, effect in reversed(self._rules):
            if argv[: len(prefix)] == prefix:
                if returncode is None:
                    raise FileNotFoundError(2, "No such file or directory", argv[0])
                rc, out = returncode, stdout
                if effect is not None:
                    replaced = effect(argv, env)
                    if replaced is not None:
                        out = replaced
                break

        captured = kwargs.get("stdout") is not None
        return subprocess.CompletedProcess(
            argv,
            rc,
            stdout=out if captured else None,
            stderr="" if captured else None,
        )

    def ran(self, *prefix: str) -> List[List[str]]:
        return [c for c in self.calls if c[: len(prefix)] == list(prefix)]


@pytest.fixture(autouse=True)
def _not_root(monkeypatch: pytest.MonkeyPatch) -> None:
    # CI containers often run as root.
    monkeypatch.setattr(os, "geteuid", lambda: 1000, raising=False)


@pytest.fixture
def shell(monkeypatch: pytest.MonkeyPatch) -> FakeShell:
    fake = FakeShell()
    monkeypatch.setattr(command.subprocess, "run", fake)
    return fake


@pytest.fixture
def home(tmp_path: Path) -> Path:
    h = tmp_path / "home"
    h.mkdir()
    return h


@pytest.fixture
def bin_dir(tmp_path: Path) -> Path:
    d = tmp_path / "bin"
    d.mkdir()
    return d


@pytest.fixture
def environ(home: Path, bin_dir: Path) -> Dict[str, str]:
    return {"HOME": str(home), "PATH": str(bin_dir), "USER": "dev"}


@pytest.fixture
def make_ctx(environ: Dict[str, str]) -> Callable[..., SetupContext]:
    def _make(platform: Platform = Platform.LINUX, config: Optional[dict] = None, **kwargs) -> SetupContext:
        return SetupContext.from_environ(platform, environ, config=SetupConfig(raw=config or {}), **kwargs)

    return _make


def shellenv_effect(brew_prefix: Path) -> Effect:
    """Mimic `eval "$(brew shellenv)"` followed by an environment dump."""

    def _effect(argv: List[str], env: Dict[str, str]) -> str:
        out = dict(env)
        out["HOMEBREW_PREFIX"] = str(brew_prefix)
        out["PATH"] = os.pathsep.join([str(brew_prefix / "bin"), str(brew_prefix / "sbin"), env.get("PATH", "")])
        return json.dumps(out)

    return _effect
