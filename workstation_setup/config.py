from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from .errors import ConfigError

DEFAULT_PACKAGES = ("helix", "fish", "tmux")


@dataclass(frozen=True)
class SetupConfig:
    raw: Dict[str, Any] = field(default_factory=dict)

    def _section(self, name: str) -> Dict[str, Any]:
        section = self.raw.get(name) or {}
        if not isinstance(section, dict):
            raise ConfigError(f"config: {name} must be a mapping")
        return section

    @property
    def network_check_url(self) -> str:
        return str(self._section("network").get("check_url") or "https://github.com")

    @property
    def homebrew_install_url(self) -> str:
        return str(
            self._section("homebrew").get("install_url")
            or "https://raw.githubusercontent.com/Homebrew/install/HEAD/install.sh"
        )

    @property
    def homebrew_prefix(self) -> Optional[str]:
        """Explicit prefix; None means the platform default."""
        prefix = self._section("homebrew").get("prefix")
        return str(prefix) if prefix else None

    @property
    def miniconda_mirror(self) -> str:
        mirror = self._section("miniconda").get("mirror") or "https://mirrors.tuna.tsinghua.edu.cn/anaconda/miniconda"
        return str(mirror).rstrip("/")

    @property
    def miniconda_prefix(self) -> str:
        """Install directory, relative to the user's home unless absolute."""
        return str(self._section("miniconda").get("prefix") or "miniconda")

    @property
    def packages(self) -> List[str]:
        pkgs = self.raw.get("packages")
        if pkgs is None:
            return list(DEFAULT_PACKAGES)
        if not isinstance(pkgs, list):
            raise ConfigError("config: packages must be a list")
        return [str(p).strip() for p in pkgs if str(p).strip()]

    @property
    def pip_mirror_enabled(self) -> bool:
        enabled = self._section("pip_mirror").get("enabled", False)
        if not isinstance(enabled, bool):
            raise ConfigError("config: pip_mirror.enabled must be true or false")
        return enabled

    @property
    def pip_index_url(self) -> str:
        return str(self._section("pip_mirror").get("index_url") or "https://pypi.tuna.tsinghua.edu.cn/simple")

    @property
    def pip_trusted_host(self) -> str:
        return str(self._section("pip_mirror").get("trusted_host") or "pypi.tuna.tsinghua.edu.cn")


def load_setup_config(path: Optional[str]) -> SetupConfig:
    if path is None:
        return SetupConfig()

    p = Path(path).expanduser()
    if not p.exists():
        raise ConfigError(f"Config file not found: {p}")

    if p.suffix.lower() not in {".yaml", ".yml"}:
        raise ConfigError("config must be YAML")

    try:
        raw = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {p}: {e}") from e
    if not isinstance(raw, dict):
        raise ConfigError(f"{p} must contain a mapping/object")

    return SetupConfig(raw=raw)
